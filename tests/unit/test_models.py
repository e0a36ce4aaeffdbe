"""Test pygaschem.core.models module."""

from __future__ import annotations

import pytest

from pygaschem import Mechanism, MechanismParams, ModelParams, Reaction, ReactionTable
from pygaschem.ratelaws import arrhenius


def test_model_params(small_table: ReactionTable) -> None:
    """Check parameters load from defaults, dict and keyword arguments."""
    mech = Mechanism(small_table)
    assert mech.params == {
        "check_finite": True,
        "state_unit": "ppb",
        "include_heterogeneous": False,
        "jacobian_sparse": True,
    }

    mech = Mechanism(small_table, {"state_unit": "molec_cm3"}, check_finite=False)
    assert mech.params["state_unit"] == "molec_cm3"
    assert not mech.params["check_finite"]

    # Keyword arguments override the params dict
    mech = Mechanism(small_table, {"jacobian_sparse": False}, jacobian_sparse=True)
    assert mech.params["jacobian_sparse"]

    params = MechanismParams(state_unit="molec_cm3")
    mech = Mechanism(small_table, params)
    assert mech.params == params.as_dict()


def test_model_params_errors(small_table: ReactionTable) -> None:
    """Check unknown parameters and wrong parameter types are rejected."""
    with pytest.raises(KeyError, match="Unknown parameter 'solver'"):
        Mechanism(small_table, solver="rosenbrock")

    mech = Mechanism(small_table)
    with pytest.raises(KeyError, match="Possible parameters include check_finite"):
        mech.update_params(tolerance=1.0e-3)

    with pytest.raises(TypeError, match="must be of type MechanismParams"):
        Mechanism(small_table, ModelParams())


def test_model_hash(small_table: ReactionTable) -> None:
    """Check the hash depends on the parameters only."""
    mech1 = Mechanism(small_table)
    mech2 = Mechanism(small_table)
    assert mech1.hash == mech2.hash
    assert len(mech1.hash) == 40

    mech2.update_params(state_unit="molec_cm3")
    assert mech1.hash != mech2.hash


def test_model_repr(small_table: ReactionTable) -> None:
    """Check the model representation."""
    out = repr(Mechanism(small_table))
    assert out.startswith("Mechanism model")
    assert "Chemical mechanism" in out
    assert "'state_unit': 'ppb'" in out


def test_mechanism_hash_depends_on_table(small_table: ReactionTable) -> None:
    """Check mechanisms over different tables hash differently."""
    mech = Mechanism(small_table)

    fewer = ReactionTable(small_table.species, small_table.reactions[:3])
    assert Mechanism(fewer).hash != mech.hash

    rxn = Reaction.from_equation("O3 + NO --> NO2 + O2", arrhenius(1.4e-12, 0.0, -1310.0))
    changed = ReactionTable(small_table.species, (rxn, *small_table.reactions[1:]))
    assert Mechanism(changed).hash != mech.hash

    same = ReactionTable(small_table.species, small_table.reactions)
    assert Mechanism(same).hash == mech.hash

"""Test pygaschem.mechanisms.superfast module."""

from __future__ import annotations

import numpy as np
import pytest

from pygaschem import EnvironmentContext, Mechanism, ReactionTable
from pygaschem.mechanisms.superfast import J_VALUES, O1D_SCALE, SPECIES, build_superfast


@pytest.fixture(scope="module")
def superfast_table() -> ReactionTable:
    """Super-Fast reaction table.

    Scoped for the module.
    """
    return build_superfast()


@pytest.fixture()
def env_superfast() -> EnvironmentContext:
    """Daytime conditions at 280 K."""
    return EnvironmentContext(temperature=280.0, number_density=2.7e19, j_values=J_VALUES)


def _label_index(mech: Mechanism, label: str) -> int:
    return [r.label for r in mech.reactions].index(label)


def test_superfast_size(superfast_table: ReactionTable) -> None:
    """Check the number of species and reactions."""
    assert len(superfast_table.species) == 18
    assert len(superfast_table) == 26
    assert [s.name for s in SPECIES if s.fixed] == ["O2", "CH4"]
    assert J_VALUES.size == 6


def test_superfast_rate_coefficients(
    superfast_table: ReactionTable, env_superfast: EnvironmentContext
) -> None:
    """Check selected rate coefficients in number density units."""
    mech = Mechanism(superfast_table, state_unit="molec_cm3")
    k = mech.rate_coefficients(env_superfast)
    assert np.all(np.isfinite(k))
    assert np.all(k > 0.0)

    i = _label_index(mech, "O3 + hv --> O1d + O2")
    assert k[i] == pytest.approx(4.0e-3 * O1D_SCALE)

    i = _label_index(mech, "NO2 + hv --> NO + O3")
    assert k[i] == pytest.approx(0.0149)

    i = _label_index(mech, "NO + O3 --> NO2 + O2")
    assert k[i] == pytest.approx(3.0e-12 * np.exp(-1500.0 / 280.0))

    # Falloff lies below its high pressure limit
    i = _label_index(mech, "NO2 + OH --> HNO3")
    assert 0.0 < k[i] < 2.8e-11

    i = _label_index(mech, "OH + CO --> HO2")
    assert k[i] == 1.5e-13


def test_superfast_rhs(superfast_table: ReactionTable, env_superfast: EnvironmentContext) -> None:
    """Check tendencies at the default state."""
    mech = Mechanism(superfast_table)
    x = mech.state_vector()
    dcdt = mech.rhs(0.0, x, env_superfast)
    assert np.all(np.isfinite(dcdt))

    def tendency(name: str) -> float:
        return dcdt[mech.species_index(name)]

    assert tendency("O2") == 0.0
    assert tendency("CH4") == 0.0

    # NO starts at 0 and is only produced by NO2 photolysis
    assert tendency("NO") == pytest.approx(0.0149 * 10.0)
    assert tendency("HNO3") > 0.0
    assert tendency("SO2") > 0.0
    assert tendency("DMS") < 0.0
    assert tendency("ISOP") < 0.0

    # Isoprene is regenerated by its recycling channel
    i = _label_index(mech, "ISOP + OH --> ISOP + 0.5OH")
    column = mech.stoichiometry[:, i].toarray().ravel()
    assert column[mech.species_index("ISOP")] == 0.0
    assert column[mech.species_index("OH")] == -0.5


def test_superfast_jacobian(
    superfast_table: ReactionTable, env_superfast: EnvironmentContext
) -> None:
    """Check the Jacobian against central differences and its sparsity pattern."""
    mech = Mechanism(superfast_table, jacobian_sparse=False)
    x = mech.state_vector({"NO": 1.0}, env_superfast)
    jac = mech.jacobian(0.0, x, env_superfast)

    fd = np.zeros_like(jac)
    for j in range(x.size):
        h = 1.0e-6 * max(abs(x[j]), 1.0)
        xp = x.copy()
        xm = x.copy()
        xp[j] += h
        xm[j] -= h
        fd[:, j] = (mech.rhs(0.0, xp, env_superfast) - mech.rhs(0.0, xm, env_superfast)) / (2 * h)
    np.testing.assert_allclose(jac, fd, rtol=1e-5, atol=1e-8 * np.abs(fd).max())

    pattern = mech.jac_sparsity().toarray()
    assert np.all(pattern[jac != 0.0] == 1.0)
    np.testing.assert_array_equal(pattern[mech.species_index("O2")], 0.0)
    np.testing.assert_array_equal(pattern[mech.species_index("CH4")], 0.0)

"""Test pygaschem.mechanisms.fullchem module."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from pygaschem import EnvironmentContext, Mechanism, ReactionTable
from pygaschem.mechanisms.fullchem import DEFAULT_PPB, SPECIES, build_fullchem


@pytest.fixture(scope="module")
def gas_table() -> ReactionTable:
    """Full chemistry table without heterogeneous reactions.

    Scoped for the module.
    """
    return build_fullchem()


def test_fullchem_size(gas_table: ReactionTable, fullchem_table: ReactionTable) -> None:
    """Check the number of species and reactions."""
    assert len(SPECIES) == 290
    assert len(DEFAULT_PPB) == 290
    assert gas_table.species_names == [s.name for s in SPECIES]

    assert len(gas_table) == 819
    assert len(fullchem_table) == 914
    assert sum(r.rate_law.name == "PHOTOL" for r in gas_table.reactions) == 157
    assert not any(r.heterogeneous for r in gas_table.reactions)


def test_fullchem_sulfur(gas_table: ReactionTable) -> None:
    """Check the sulfur reactions lead the table with their catalytic divisors."""
    rxn = gas_table[0]
    assert rxn.equation == "SO2 + SALAAL + O3 --> SO4"
    assert rxn.catalytic_divisors == ("SALAAL",)
    assert rxn.order == 2

    divisors = [r for r in gas_table.reactions if r.catalytic_divisors]
    assert len(divisors) == 3


def test_fullchem_mechanism(gas_table: ReactionTable, env: EnvironmentContext) -> None:
    """Check gas phase tendencies are finite at default mixing ratios."""
    mech = Mechanism(gas_table)
    assert len(mech.reactions) == 819
    assert mech.species_index("O3") == gas_table.species_index("O3")

    x = mech.state_vector()
    dcdt = mech.rhs(0.0, x, env)
    assert dcdt.shape == (290,)
    assert np.all(np.isfinite(dcdt))

    k = mech.rate_coefficients(env)
    assert np.all(np.isfinite(k))
    assert np.all(k >= 0.0)


@pytest.mark.parametrize("temperature", [190.0, 230.0, 270.0, 310.0])
def test_fullchem_temperature_range(gas_table: ReactionTable, temperature: float) -> None:
    """Check tendencies stay finite from the tropopause to the surface."""
    env = EnvironmentContext.from_met(temperature, 25000.0 + 250.0 * temperature, 1.0e-3)
    mech = Mechanism(gas_table, state_unit="molec_cm3")
    dcdt = mech.rhs(0.0, mech.state_vector(env=env), env)
    assert np.all(np.isfinite(dcdt))


def test_fullchem_external_rates(gas_table: ReactionTable, env: EnvironmentContext) -> None:
    """Check externally supplied coefficients switch on sulfur chemistry."""
    mech = Mechanism(gas_table)
    x = mech.state_vector({"SO2": 1.0, "O3": 40.0, "SALAAL": 0.1})

    off = mech.rhs(0.0, x, env)
    on_env = dataclasses.replace(env, external_rates={"k_mt1": 1.0e-15})
    on = mech.rhs(0.0, x, on_env)

    i_so4 = mech.species_index("SO4")
    i_salaal = mech.species_index("SALAAL")
    assert on[i_so4] > off[i_so4]
    assert on[i_salaal] == off[i_salaal]


def test_fullchem_heterogeneous(
    fullchem_table: ReactionTable, het_env: EnvironmentContext
) -> None:
    """Check heterogeneous chemistry is finite and can be toggled."""
    mech = Mechanism(fullchem_table)
    assert len(mech.reactions) == 819
    off = mech.rhs(0.0, mech.state_vector(), het_env)

    mech.update_params(include_heterogeneous=True)
    assert len(mech.reactions) == 914
    x = mech.state_vector()
    on = mech.rhs(0.0, x, het_env)
    assert np.all(np.isfinite(on))
    assert not np.array_equal(on, off)

    k = mech.rate_coefficients(het_env, x)
    assert np.all(np.isfinite(k))
    assert np.all(k >= 0.0)


def test_fullchem_jacobian(fullchem_table: ReactionTable, het_env: EnvironmentContext) -> None:
    """Check the Jacobian is finite and within the sparsity pattern."""
    mech = Mechanism(fullchem_table, include_heterogeneous=True)
    x = mech.state_vector()

    jac = mech.jacobian(0.0, x, het_env).toarray()
    assert jac.shape == (290, 290)
    assert np.all(np.isfinite(jac))

    pattern = mech.jac_sparsity().toarray().astype(bool)
    assert not np.any((jac != 0.0) & ~pattern)


def test_fullchem_water_vapor(fullchem_table: ReactionTable, het_env: EnvironmentContext) -> None:
    """Check gas phase and heterogeneous laws read water vapor from the H2O species."""
    mech = Mechanism(fullchem_table, include_heterogeneous=True)
    x = mech.state_vector({"H2O": 1.0e7, "N2O5": 0.1})
    h2o = 1.0e7 * 1.0e-9 * het_env.number_density
    wet = dataclasses.replace(het_env, h2o=h2o)

    k = mech.rate_coefficients(het_env, x)

    # Water vapor of the environment is superseded by the state
    dry = dataclasses.replace(het_env, h2o=0.0)
    np.testing.assert_array_equal(mech.rate_coefficients(dry, x), k)

    i_ho2 = next(
        i for i, r in enumerate(mech.reactions) if r.rate_law.name == "GC_HO2HO2_acac"
    )
    assert k[i_ho2] == pytest.approx(mech.reactions[i_ho2].rate_law(wet))
    assert k[i_ho2] > mech.reactions[i_ho2].rate_law(dry)

    i_n2o5 = next(
        i
        for i, r in enumerate(mech.reactions)
        if r.heterogeneous and r.reactants == (("N2O5", 1.0), ("H2O", 1.0))
    )
    conc = dict(zip(mech.species_names, mech.adapter(het_env).ppb_to_molecule(x).tolist()))
    assert conc["H2O"] == pytest.approx(h2o)
    assert k[i_n2o5] > 0.0
    assert k[i_n2o5] == pytest.approx(mech.reactions[i_n2o5].rate_law(wet, conc))

"""Test pygaschem.core.mechanism module."""

from __future__ import annotations

import numpy as np
import pytest
import scipy.sparse
import xarray as xr

from pygaschem import (
    EnvironmentContext,
    EvaluationError,
    Mechanism,
    Reaction,
    ReactionTable,
    Species,
    UnitAdapter,
)
from pygaschem.ratelaws import arrhenius, constant, external, rate_law

M_AIR = 2.5e19


@rate_law("WATER", order=1, needs_concentrations=True)
def _water(env, conc, scale):
    """First-order law proportional to the water vapor number density."""
    return conc["H2O"] * scale


@rate_law("SELF", order=1, needs_concentrations=True)
def _self_limited(env, conc, scale):
    """First-order law proportional to the number density of species A."""
    return conc["A"] * scale


def _finite_difference(mech, x, env, rel=1.0e-6):
    n = x.size
    out = np.zeros((n, n))
    for j in range(n):
        h = rel * max(abs(x[j]), 1.0)
        xp = x.copy()
        xm = x.copy()
        xp[j] += h
        xm[j] -= h
        out[:, j] = (mech.rhs(0.0, xp, env) - mech.rhs(0.0, xm, env)) / (2.0 * h)
    return out


def _hand_rates(small_table, x, env):
    """Rates of the small table in molecules cm-3 s-1."""
    O3, NO, NO2, O, O2, OH, _ = x
    k = [r.rate_law(env) for r in small_table.reactions]
    return np.array([k[0] * O3 * NO, k[1] * NO2, k[2] * O * O2, k[3] * OH * NO2])


@pytest.fixture()
def x_molec(small_table):
    """State of the small table, [molecules cm-3]."""
    return UnitAdapter(M_AIR).ppb_to_molecule(small_table.defaults())


@pytest.fixture()
def env_small():
    """Daytime conditions for the small table."""
    return EnvironmentContext(
        temperature=298.15, number_density=M_AIR, j_values=np.full(20, 8.0e-3)
    )


def test_rhs_small(small_table, x_molec, env_small):
    """Check tendencies against a hand assembled system."""
    mech = Mechanism(small_table, state_unit="molec_cm3")
    dcdt = mech.rhs(0.0, x_molec, env_small)

    r = _hand_rates(small_table, x_molec, env_small)
    expected = np.array(
        [
            -r[0] + r[2],
            -r[0] + r[1],
            r[0] - r[1] - r[3],
            r[1] - r[2],
            r[0] - r[2],
            -r[3],
            r[3],
        ]
    )
    np.testing.assert_allclose(dcdt, expected, rtol=1e-12)
    np.testing.assert_allclose(mech.reaction_rates(x_molec, env_small), r, rtol=1e-12)

    assert dcdt[mech.species_index("HNO3")] > 0.0
    assert dcdt[mech.species_index("OH")] < 0.0


def test_rhs_conserves_atoms(small_table, x_molec, env_small):
    """Check nitrogen and oxygen atoms are conserved."""
    mech = Mechanism(small_table, state_unit="molec_cm3")
    dcdt = mech.rhs(0.0, x_molec, env_small)

    n_atoms = np.array([0, 1, 1, 0, 0, 0, 1])
    o_atoms = np.array([3, 1, 2, 1, 2, 1, 3])
    scale = np.abs(dcdt).max()
    assert abs(n_atoms @ dcdt) < 1e-12 * scale
    assert abs(o_atoms @ dcdt) < 1e-12 * scale


def test_ppb_consistent_with_molecules(small_table, x_molec, env_small):
    """Check ppb and number density states give the same tendencies."""
    ppb = Mechanism(small_table)
    molec = Mechanism(small_table, state_unit="molec_cm3")
    adapter = UnitAdapter(M_AIR)
    x_ppb = small_table.defaults()

    dcdt_ppb = ppb.rhs(0.0, x_ppb, env_small)
    dcdt_molec = molec.rhs(0.0, x_molec, env_small)
    np.testing.assert_allclose(adapter.ppb_to_molecule(dcdt_ppb), dcdt_molec, rtol=1e-10)

    # Rate coefficients are reported in native units in either case
    np.testing.assert_allclose(
        ppb.rate_coefficients(env_small), molec.rate_coefficients(env_small)
    )


@pytest.mark.parametrize("state_unit", ["ppb", "molec_cm3"])
def test_jacobian_finite_difference(small_table, env_small, state_unit):
    """Check the analytic Jacobian against central differences."""
    mech = Mechanism(small_table, state_unit=state_unit)
    x = mech.state_vector(env=env_small)

    jac = mech.jacobian(0.0, x, env_small)
    assert isinstance(jac, scipy.sparse.csr_matrix)
    assert jac.shape == (7, 7)

    fd = _finite_difference(mech, x, env_small)
    np.testing.assert_allclose(jac.toarray(), fd, rtol=1e-5, atol=1e-8 * np.abs(fd).max())


def test_jacobian_dense_and_sparsity(small_table, x_molec, env_small):
    """Check the dense Jacobian and the sparsity pattern."""
    mech = Mechanism(small_table, state_unit="molec_cm3", jacobian_sparse=False)
    jac = mech.jacobian(0.0, x_molec, env_small)
    assert isinstance(jac, np.ndarray)

    pattern = mech.jac_sparsity()
    assert isinstance(pattern, scipy.sparse.csr_matrix)
    np.testing.assert_array_equal(pattern.toarray() == 1.0, jac != 0.0)

    # d(dOH/dt)/dNO2 = -k3 OH
    k = mech.rate_coefficients(env_small)
    i_oh = mech.species_index("OH")
    i_no2 = mech.species_index("NO2")
    assert jac[i_oh, i_no2] == pytest.approx(-k[3] * x_molec[i_oh])


def test_catalytic_divisor_not_scattered():
    """Check catalytic divisors are neither consumed nor produced."""
    rxn = Reaction.from_equation(
        "SO2 + SALAAL + O3 --> SO4", external("k_mt1", 0.0), catalytic_divisors=["SALAAL"]
    )
    table = ReactionTable(["SO2", "SALAAL", "O3", "SO4"], [rxn])
    mech = Mechanism(table, state_unit="molec_cm3")
    env = EnvironmentContext(
        temperature=280.0, number_density=M_AIR, external_rates={"k_mt1": 1.0e-14}
    )
    x = np.array([1.0e10, 5.0e8, 1.0e12, 0.0])

    dcdt = mech.rhs(0.0, x, env)
    rate = 1.0e-14 * 1.0e10 * 1.0e12
    np.testing.assert_allclose(dcdt, [-rate, 0.0, -rate, rate])

    # Rate does not depend on the divisor
    x[1] *= 10.0
    np.testing.assert_allclose(mech.rhs(0.0, x, env), dcdt)

    # Without a supplied coefficient the reaction is off
    env.external_rates = {}
    np.testing.assert_array_equal(mech.rhs(0.0, x, env), 0.0)


@pytest.mark.parametrize("state_unit", ["ppb", "molec_cm3"])
def test_non_mass_action(state_unit):
    """Check the rate of a non mass action reaction is its coefficient."""
    rxn = Reaction.from_equation("A --> B", constant(5.0), mass_action=False)
    mech = Mechanism(ReactionTable(["A", "B"], [rxn]), state_unit=state_unit)
    env = EnvironmentContext(temperature=280.0, number_density=M_AIR)

    for x in ([1.0, 0.0], [100.0, 3.0]):
        np.testing.assert_allclose(mech.rhs(0.0, x, env), [-5.0, 5.0])

    jac = mech.jacobian(0.0, [1.0, 0.0], env)
    assert jac.nnz == 0


def test_non_finite_rate_coefficient():
    """Check non-finite coefficients raise EvaluationError naming the reaction."""
    rxn = Reaction.from_equation("A --> B", constant(float("nan")), label="bad reaction")
    table = ReactionTable(["A", "B"], [rxn])
    env = EnvironmentContext(temperature=280.0, number_density=M_AIR)

    mech = Mechanism(table)
    with pytest.raises(EvaluationError, match="bad reaction.*CONST"):
        mech.rhs(0.0, [1.0, 0.0], env)

    mech = Mechanism(table, check_finite=False)
    assert np.isnan(mech.rhs(0.0, [1.0, 0.0], env)).all()


def test_negative_coefficient_clamped():
    """Check negative coefficients are clamped to 0."""
    rxn = Reaction.from_equation("A --> B", constant(-1.0))
    mech = Mechanism(ReactionTable(["A", "B"], [rxn]))
    env = EnvironmentContext(temperature=280.0, number_density=M_AIR)
    np.testing.assert_array_equal(mech.rate_coefficients(env), [0.0])
    np.testing.assert_array_equal(mech.rhs(0.0, [1.0, 0.0], env), 0.0)


def test_heterogeneous_toggle(env):
    """Check heterogeneous reactions are evaluated only when enabled."""
    gas = Reaction.from_equation("A --> C", constant(1.0e-3))
    het = Reaction.from_equation("A --> B", _water(1.0e-20), heterogeneous=True)
    table = ReactionTable(["A", "B", "C"], [gas, het])

    mech = Mechanism(table)
    assert len(mech.reactions) == 1
    assert mech.stoichiometry.shape == (3, 1)
    dcdt = mech.rhs(0.0, [2.0, 0.0, 0.0], env)
    np.testing.assert_allclose(dcdt, [-2.0e-3, 0.0, 2.0e-3])

    mech.update_params(include_heterogeneous=True)
    assert len(mech.reactions) == 2
    assert mech.stoichiometry.shape == (3, 2)

    # Water vapor is read from the environment when not a declared species
    k = mech.rate_coefficients(env, [2.0, 0.0, 0.0])
    np.testing.assert_allclose(k, [1.0e-3, env.h2o * 1.0e-20])

    dcdt = mech.rhs(0.0, [2.0, 0.0, 0.0], env)
    np.testing.assert_allclose(dcdt, [-2.0e-3 - 2.0 * 4.0e-3, 2.0 * 4.0e-3, 2.0e-3])

    # Concentration dependent laws need a state
    with pytest.raises(ValueError, match="requires concentrations"):
        mech.rate_coefficients(env)


@pytest.mark.parametrize("state_unit", ["ppb", "molec_cm3"])
def test_concentrations_passed_as_number_density(env, state_unit):
    """Check rate laws read number densities whatever the state unit."""
    rxn = Reaction.from_equation("A --> B", _self_limited(1.0e-12))
    mech = Mechanism(ReactionTable(["A", "B"], [rxn]), state_unit=state_unit)
    x = mech.state_vector({"A": 2.0}, env)

    k = mech.rate_coefficients(env, x)
    assert k[0] == pytest.approx(2.0 * 1.0e-9 * env.number_density * 1.0e-12)

    # Coefficients that read concentrations are held fixed in the Jacobian
    jac = mech.jacobian(0.0, x, env)
    assert jac[0, 0] == pytest.approx(-k[0])


def test_state_vector(small_table, env_small):
    """Check state vectors from defaults and overrides."""
    mech = Mechanism(small_table)
    x = mech.state_vector({"O3": 55.0})
    assert x[mech.species_index("O3")] == 55.0
    assert x[mech.species_index("NO2")] == 2.0

    mech = Mechanism(small_table, state_unit="molec_cm3")
    with pytest.raises(ValueError, match="EnvironmentContext is required"):
        mech.state_vector({"O3": 55.0})
    x = mech.state_vector({"O3": 55.0}, env_small)
    assert x[0] == pytest.approx(55.0e-9 * M_AIR)

    with pytest.raises(KeyError, match="not declared"):
        mech.state_vector({"XYZ": 1.0})


def test_invalid_inputs(small_table, env_small):
    """Check invalid parameters and state shapes."""
    with pytest.raises(ValueError, match="Unknown state_unit 'kg'"):
        Mechanism(small_table, state_unit="kg")

    mech = Mechanism(small_table)
    with pytest.raises(ValueError, match="Expected state vector of shape"):
        mech.rhs(0.0, np.ones(3), env_small)

    with pytest.raises(KeyError, match="not declared"):
        mech.species_index("N2O5")


def test_eval(small_table, env_small):
    """Check evaluation results collected in a dataset."""
    mech = Mechanism(small_table)
    ds = mech.eval({"O3": 60.0}, env_small)
    assert isinstance(ds, xr.Dataset)
    assert ds.attrs["model"] == "mechanism"
    assert list(ds["species"].values) == mech.species_names
    assert ds["tendency"].attrs["units"] == "ppb s-1"
    assert ds["concentration"].sel(species="O3").item() == 60.0
    assert ds["rate"].sizes["reaction"] == 4
    assert list(ds["state_unit_coefficient"].values) == [
        "ppb-1 s-1",
        "s-1",
        "ppb-1 s-1",
        "ppb-1 s-1",
    ]

    x = mech.state_vector({"O3": 60.0})
    np.testing.assert_allclose(ds["tendency"].values, mech.rhs(0.0, x, env_small))
    np.testing.assert_allclose(ds["rate_coefficient"].values, mech.rate_coefficients(env_small))

    # Parameters passed to eval are applied
    x_molec = UnitAdapter(M_AIR).ppb_to_molecule(x)
    ds = mech.eval(x_molec, env_small, state_unit="molec_cm3")
    assert mech.params["state_unit"] == "molec_cm3"
    assert ds["tendency"].attrs["units"] == "molec_cm3 s-1"
    assert ds["state_unit_coefficient"].values[0] == "cm3 molecules-1 s-1"


def test_fixed_species():
    """Check fixed species enter rates but are not scattered into."""
    rxn = Reaction.from_equation("CH4 + OH --> CH3O2 + H2O", arrhenius(2.45e-12, 0.0, -1775.0))
    table = ReactionTable([Species("CH4", 1700.0, fixed=True), "OH", "CH3O2", "H2O"], [rxn])
    mech = Mechanism(table, state_unit="molec_cm3", jacobian_sparse=False)
    env = EnvironmentContext(temperature=280.0, number_density=M_AIR)
    x = np.array([4.25e13, 1.0e6, 0.0, 0.0])

    rate = 2.45e-12 * np.exp(-1775.0 / 280.0) * 4.25e13 * 1.0e6
    dcdt = mech.rhs(0.0, x, env)
    np.testing.assert_allclose(dcdt, [0.0, -rate, rate, rate], rtol=1e-12)

    jac = mech.jacobian(0.0, x, env)
    np.testing.assert_array_equal(jac[0], 0.0)
    assert jac[1, 0] == pytest.approx(-rate / 4.25e13)

"""Test pygaschem.ratelaws.gas and pygaschem.ratelaws.base modules."""

from __future__ import annotations

import math

import numpy as np
import pytest

from pygaschem import EnvironmentContext
from pygaschem.mechanisms.fullchem.gas import GAS_PHASE, SULFUR
from pygaschem.ratelaws import (
    RateLaw,
    arrhenius,
    constant,
    external,
    gas,
    kiir1ltd,
    photolysis,
    rate_law,
)


@pytest.fixture(scope="module")
def grid_env() -> EnvironmentContext:
    """Vectorised context spanning the troposphere and lower stratosphere."""
    T, M = np.meshgrid(np.linspace(180.0, 320.0, 15), np.geomspace(1.0e10, 3.0e19, 19))
    return EnvironmentContext(
        temperature=T.ravel(),
        number_density=M.ravel(),
        j_values=np.full(166, 1.0e-5),
        h2o=1.0e17,
    )


def _random_env(rng: np.random.Generator) -> EnvironmentContext:
    return EnvironmentContext(
        temperature=rng.uniform(180.0, 320.0),
        number_density=10.0 ** rng.uniform(10.0, math.log10(3.0e19)),
    )


@pytest.mark.parametrize("index", range(len(GAS_PHASE)))
def test_gas_phase_finite_non_negative(grid_env: EnvironmentContext, index: int) -> None:
    """Check every gas phase law of the mechanism is finite and non-negative."""
    law, equation = GAS_PHASE[index]
    k = np.broadcast_to(law(grid_env), grid_env.temperature.shape)
    assert np.all(np.isfinite(k)), equation
    assert np.all(k >= 0.0), equation


def test_sulfur_laws_default_to_zero(env: EnvironmentContext) -> None:
    """Check external sulfur rates default to 0 and read supplied values."""
    for law, _, _ in SULFUR:
        assert law(env) == 0.0

    env.external_rates = {"k_mt1": 2.5e-4}
    law, _, divisors = SULFUR[0]
    assert law(env) == 2.5e-4
    assert divisors == ("SALAAL",)


def test_arrhenius_reduced_forms_identical() -> None:
    """Check terms with zero exponents are skipped without changing results."""
    T = np.linspace(180.0, 320.0, 50)
    env = EnvironmentContext(temperature=T, number_density=2.5e19)

    k = arrhenius(3.0e-12, 0.0, -1500.0)(env)
    np.testing.assert_array_equal(k, 3.0e-12 * np.exp(-1500.0 / T))
    k = arrhenius(6.0e-34, 2.4, 0.0)(env)
    np.testing.assert_array_equal(k, 6.0e-34 * (300.0 / T) ** 2.4)
    assert arrhenius(1.8e-12)(env) == 1.8e-12


def test_ho2ho2_scenario() -> None:
    """Check GC_HO2HO2_acac against the closed form."""
    T = 298.15
    M = 2.5e19
    h2o = 4.0e17
    env = EnvironmentContext(temperature=T, number_density=M, h2o=h2o)

    k = gas.gc_ho2ho2_acac(3.00e-13, 460.0, 2.10e-33, 920.0)(env)
    expected = (3.00e-13 * math.exp(460.0 / T) + 2.10e-33 * math.exp(920.0 / T) * M) * (
        1.0 + 1.4e-21 * h2o * math.exp(2200.0 / T)
    )
    assert k == pytest.approx(expected, rel=1e-6)


def test_troe_scenario() -> None:
    """Check a JPL falloff reaction against a hand computed value."""
    T = 250.0
    M = 5.0e18
    env = EnvironmentContext(temperature=T, number_density=M)
    k = gas.gcjplpr_abab(1.8e-30, 3.0, 2.8e-11, 0.0, 0.6)(env)

    k_low = 1.8e-30 * (300.0 / T) ** 3.0 * M
    k_high = 2.8e-11
    ratio = k_low / k_high
    expected = k_low / (1.0 + ratio) * 0.6 ** (1.0 / (1.0 + math.log10(ratio) ** 2))
    assert k == pytest.approx(expected, rel=1e-6)
    assert k == pytest.approx(6.190e-12, rel=1e-3)


@pytest.mark.parametrize("T", [200.0, 250.0, 300.0])
def test_troe_limits(T: float) -> None:
    """Check falloff reduces to the low and high pressure limits."""
    k300 = 300.0 / T
    k_high = 2.8e-11 * k300**1.5

    # Without broadening the limits are reached to within the falloff ratio
    law = gas.gcjplpr_abab(1.8e-30, 3.0, 2.8e-11, 1.5, 1.0)
    low = EnvironmentContext(temperature=T, number_density=1.0e5)
    high = EnvironmentContext(temperature=T, number_density=1.0e25)
    assert law(low) == pytest.approx(1.8e-30 * k300**3.0 * 1.0e5, rel=1e-3)
    assert law(high) == pytest.approx(k_high, rel=1e-3)

    # Broadening decays as 1 / log10(k_low / k_high)^2
    law = gas.gcjplpr_abab(1.8e-30, 3.0, 2.8e-11, 1.5, 0.6)
    assert law(low) == pytest.approx(1.8e-30 * k300**3.0 * 1.0e5, rel=2e-2)
    assert law(high) == pytest.approx(k_high, rel=2e-2)

    mid = EnvironmentContext(temperature=T, number_density=1.0e18)
    assert law(mid) < law(high)
    assert law(mid) > law(low)


def test_equilibrium_backward_rate(rng: np.random.Generator) -> None:
    """Check forward over backward rate recovers the equilibrium constant."""
    forward = gas.gcjplpr_abab(9.7e-29, 5.6, 9.3e-12, 1.5, 0.6)
    backward = gas.gcjpleq_acabab(9.3e-29, 14000.0, 9.7e-29, 5.6, 9.3e-12, 1.5, 0.6)
    for _ in range(20):
        env = _random_env(rng)
        k_eq = 9.3e-29 * math.exp(14000.0 / env.temperature)
        assert forward(env) / backward(env) == pytest.approx(k_eq, rel=1e-9)


def test_ro2no_branches(rng: np.random.Generator) -> None:
    """Check nitrate and alkoxy branches of RO2 + NO sum to the parent rate."""
    for _ in range(20):
        env = _random_env(rng)
        a0 = 10.0 ** rng.uniform(-13.0, -11.0)
        c0 = rng.uniform(-500.0, 500.0)
        n_carbon = rng.uniform(2.0, 10.0)
        parent = a0 * math.exp(c0 / env.temperature)

        k1 = gas.gc_ro2no_a1(a0, c0)(env) + gas.gc_ro2no_b1(a0, c0)(env)
        assert k1 == pytest.approx(parent, rel=1e-9)

        k2 = gas.gc_ro2no_a2(a0, c0, n_carbon)(env) + gas.gc_ro2no_b2(a0, c0, n_carbon)(env)
        assert k2 == pytest.approx(parent, rel=1e-9)

        yield_ = gas.fyrno3(env.temperature, env.number_density, n_carbon)
        assert 0.0 <= yield_ < 1.0


def test_isoprene_branches(rng: np.random.Generator) -> None:
    """Check isoprene + OH and isoprene RO2 + NO branch pairs."""
    for _ in range(20):
        env = _random_env(rng)
        T = env.temperature
        a0 = 10.0 ** rng.uniform(-12.0, -10.0)
        b0 = rng.uniform(0.0, 500.0)
        params = (a0, b0, 0.3, 2.3e-13, 600.0, 1.0e-11, 300.0)
        k = gas.gc_iso1(*params)(env) + gas.gc_iso2(*params)(env)
        assert k == pytest.approx(a0 * math.exp(b0 / T), rel=1e-9)

        nit_params = (a0, b0, 0.1, rng.uniform(5.0, 10.0), 1.0, 0.0)
        k = gas.gc_nit(*nit_params)(env) + gas.gc_alk(*nit_params)(env)
        assert k == pytest.approx(a0 * math.exp(b0 / T), rel=1e-9)


def test_oxygenate_branches(rng: np.random.Generator) -> None:
    """Check GLYC + OH and HAC + OH branch pairs."""
    for _ in range(20):
        env = _random_env(rng)
        a0 = 10.0 ** rng.uniform(-12.0, -10.0)
        c0 = rng.uniform(-200.0, 200.0)

        k = gas.gc_glycoh_a(a0)(env) + gas.gc_glycoh_b(a0)(env)
        assert k == pytest.approx(a0, rel=1e-9)

        k = gas.gc_hacoh_a(a0, c0)(env) + gas.gc_hacoh_b(a0, c0)(env)
        assert k == pytest.approx(a0 * math.exp(c0 / env.temperature), rel=1e-9)


def test_floors() -> None:
    """Check subtractive formulas clamp to 0."""
    env = EnvironmentContext(temperature=300.0, number_density=2.5e19)
    assert gas.arrplus_ade(1.0e-12, -1.0, 1.0e-3)(env) == 0.0
    assert gas.tunplus_abcde(1.0e-12, 0.0, 0.0, -1.0, 1.0e-3)(env) == 0.0
    assert gas.gc_nit(1.0e-12, 0.0, 0.1, 6.0, -1.0, 0.0)(env) == 0.0


def test_photolysis() -> None:
    """Check photolysis laws address j-values from 1."""
    env = EnvironmentContext(temperature=250.0, number_density=1.0e19, j_values=[1.0, 2.0, 3.0])
    assert photolysis(1)(env) == 1.0
    assert photolysis(3, 0.5)(env) == 1.5
    assert photolysis(10)(env) == 0.0
    assert photolysis(2).order == 1

    with pytest.raises(ValueError, match="must be >= 1"):
        photolysis(0)


def test_external(env: EnvironmentContext) -> None:
    """Check externally supplied rates."""
    with pytest.raises(KeyError, match="not supplied"):
        external("k_cld1")(env)
    assert external("k_cld1", 1.0e-5)(env) == 1.0e-5


def test_rate_law_algebra(env: EnvironmentContext) -> None:
    """Check sums and scalar multiples of rate laws."""
    k1 = arrhenius(1.33e-13)
    k2 = arrhenius(3.82e-11, 0.0, -2000.0)

    law = k1 + k2
    assert isinstance(law, RateLaw)
    assert law(env) == pytest.approx(k1(env) + k2(env))
    assert not law.needs_concentrations

    law = 0.82 * k2
    assert law(env) == pytest.approx(0.82 * k2(env))
    assert (k2 * 0.82)(env) == law(env)
    assert law.name == "0.82 * ARR"

    with pytest.raises(ValueError, match="different order"):
        constant(1.0).with_order(1) + constant(1.0).with_order(2)


def test_rate_law_needs_concentrations(env: EnvironmentContext) -> None:
    """Check laws reading concentrations are flagged through composition."""

    @rate_law("LTD", order=2, needs_concentrations=True)
    def limited(env, conc, k_i):
        return kiir1ltd(conc["A"], conc["B"], k_i)

    law = limited(1.0e-3) + constant(0.0)
    assert law.needs_concentrations
    assert law.order == 2
    assert law.unit == "cm3 molecules-1 s-1"
    assert law(env, {"A": 1.0e9, "B": 1.0e10}) == pytest.approx(1.0e-13)

    with pytest.raises(ValueError, match="requires concentrations"):
        law(env)


def test_rate_law_decorator() -> None:
    """Check factories keep the formula and name."""
    law = gas.gcjplpr_aba(6.9e-31, 1.0, 2.6e-11, 0.6)
    assert law.name == "GCJPLPR_aba"
    assert law.params == (6.9e-31, 1.0, 2.6e-11, 0.6)
    assert law.order is None
    assert law.unit is None
    assert callable(gas.gcjplpr_aba.formula)

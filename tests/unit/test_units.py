"""Test pygaschem.physics.units and pygaschem.physics.thermo modules."""

from __future__ import annotations

import numpy as np
import pytest

from pygaschem import UnitAdapter
from pygaschem.physics import constants, thermo, units


def test_number_density():
    """Check number density of air at standard conditions."""
    M = thermo.number_density(288.15, 101325.0)
    assert M == pytest.approx(2.547e19, rel=1e-3)

    # Linear in pressure, inverse in temperature
    assert thermo.number_density(288.15, 50662.5) == pytest.approx(0.5 * M)
    assert thermo.number_density(576.3, 101325.0) == pytest.approx(0.5 * M)


def test_h2o_number_density():
    """Check water vapor number density from specific humidity."""
    n = thermo.h2o_number_density(0.01, 288.15, 101325.0)
    assert n == pytest.approx(4.095e17, rel=1e-3)
    assert thermo.h2o_number_density(0.0, 288.15, 101325.0) == 0.0


def test_e_sat_liquid():
    """Check saturation vapor pressure at the triple point and its growth with T."""
    assert thermo.e_sat_liquid(273.16) == pytest.approx(611.65, rel=2e-3)
    e_sat = thermo.e_sat_liquid(np.array([240.0, 260.0, 280.0, 300.0]))
    assert np.all(np.diff(e_sat) > 0.0)


def test_rh_liquid():
    """Check relative humidity is 100 at the saturation vapor pressure."""
    T = np.array([260.0, 280.0, 300.0])
    p = np.array([50000.0, 80000.0, 101325.0])
    q_sat = thermo.e_sat_liquid(T) / p * constants.epsilon

    np.testing.assert_allclose(thermo.p_vapor(q_sat, p), thermo.e_sat_liquid(T))
    np.testing.assert_allclose(thermo.rh_liquid(q_sat, T, p), 100.0)
    np.testing.assert_allclose(thermo.rh_liquid(0.5 * q_sat, T, p), 50.0)


def test_ppb_molecule(rng):
    """Check `ppb_to_molecule` and `molecule_to_ppb` are bijective."""
    M = rng.uniform(1.0e17, 3.0e19, 1000)
    ppb1 = rng.uniform(0.0, 1000.0, 1000)

    n = units.ppb_to_molecule(ppb1, M)
    ppb2 = units.molecule_to_ppb(n, M)
    np.testing.assert_allclose(ppb1, ppb2, rtol=1e-12)

    # 1 ppb of air at 2.5e19 molecules cm-3
    assert units.ppb_to_molecule(1.0, 2.5e19) == pytest.approx(2.5e10)


def test_unit_adapter_factor():
    """Check conversion factors by kinetic order."""
    adapter = UnitAdapter(2.5e19)
    assert adapter.scale == pytest.approx(2.5e10)

    factors = adapter.factor([0, 1, 2, 3])
    np.testing.assert_allclose(factors, [1.0, 1.0, 2.5e10, 6.25e20])

    # Zero and first order coefficients are left untouched
    assert adapter.to_ppb(1.5e-3, 0) == 1.5e-3
    assert adapter.to_ppb(1.5e-3, 1) == 1.5e-3
    assert adapter.to_ppb(1.0e-12, 2) == pytest.approx(2.5e-2)
    assert adapter.to_ppb(6.0e-34, 3) == pytest.approx(6.0e-34 * 6.25e20)
    assert isinstance(adapter.to_ppb(1.0e-12, 2), float)


def test_unit_adapter_round_trip(rng):
    """Check `to_ppb` and `to_molecule` are inverses."""
    adapter = UnitAdapter(rng.uniform(1.0e17, 3.0e19))
    order = rng.integers(0, 4, 500)
    k = 10.0 ** rng.uniform(-35.0, 0.0, 500)

    k_ppb = adapter.to_ppb(k, order)
    assert isinstance(k_ppb, np.ndarray)
    np.testing.assert_allclose(adapter.to_molecule(k_ppb, order), k, rtol=1e-12)

    conc = rng.uniform(0.0, 100.0, 500)
    np.testing.assert_allclose(
        adapter.molecule_to_ppb(adapter.ppb_to_molecule(conc)), conc, rtol=1e-12
    )


def test_rate_invariant_under_conversion(rng):
    """Check a mass action rate is the same in either basis."""
    M = 2.2e19
    adapter = UnitAdapter(M)
    x = rng.uniform(1.0, 100.0, 3)
    n = adapter.ppb_to_molecule(x)

    # A + B + M --> C, third order coefficient
    k = 6.0e-34
    rate_molecule = k * n[0] * n[1] * n[2]
    rate_ppb = adapter.to_ppb(k, 3) * x[0] * x[1] * x[2]
    assert adapter.ppb_to_molecule(rate_ppb) == pytest.approx(rate_molecule, rel=1e-12)


def test_native_units():
    """Check unit labels exist for every supported order."""
    assert set(units.NATIVE_UNITS) == set(units.PPB_UNITS) == {0, 1, 2, 3}
    assert units.NATIVE_UNITS[2] == "cm3 molecules-1 s-1"
    assert units.PPB_UNITS[2] == "ppb-1 s-1"

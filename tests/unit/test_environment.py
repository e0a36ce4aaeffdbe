"""Test pygaschem.core.environment module."""

from __future__ import annotations

import math

import numpy as np
import pytest

from pygaschem import BuildError, EnvironmentContext, HetChemState
from pygaschem.core.environment import (
    DUST_BINS,
    AerosolType,
    KhetiSla,
    SeaSaltBin,
    cld_params,
)
from pygaschem.physics import constants, thermo


def test_clear_state():
    """Check the default state has no aerosol and no cloud."""
    het = HetChemState.clear()
    assert het.cld_fr == 0.0
    assert het.clear_fr == 1.0
    assert het.x_area.shape == (len(AerosolType),)
    assert np.all(het.x_area == 0.0)
    assert het.kheti_sla.shape == (len(KhetiSla),)
    np.testing.assert_array_equal(het.ph_ssa, [7.0, 7.0])

    # Arrays are read only
    with pytest.raises(ValueError, match="read-only"):
        het.x_area[0] = 1.0


@pytest.mark.parametrize("field", ["x_area", "x_radi", "x_vol", "x_h2o"])
def test_aerosol_array_shape(field):
    """Check aerosol arrays must have one entry per aerosol type."""
    with pytest.raises(BuildError, match=field):
        HetChemState(**{field: np.ones(3)})


def test_other_array_shapes():
    """Check reaction and sea salt arrays are validated."""
    with pytest.raises(BuildError, match="kheti_sla"):
        HetChemState(kheti_sla=np.ones(len(KhetiSla) + 1))
    with pytest.raises(BuildError, match="ph_ssa"):
        HetChemState(ph_ssa=[5.0])
    with pytest.raises(BuildError, match="a_water"):
        HetChemState(a_water=np.ones((2, 2)))


@pytest.mark.parametrize("cld_fr", [-0.1, 1.1])
def test_cloud_fraction_range(cld_fr):
    """Check cloud fractions outside [0, 1] are rejected."""
    with pytest.raises(BuildError, match="cld_fr"):
        HetChemState(cld_fr=cld_fr)
    with pytest.raises(BuildError, match="clear_fr"):
        HetChemState(clear_fr=cld_fr)


def test_accessors():
    """Check accessors take the 1-based enums."""
    n_types = len(AerosolType)
    het = HetChemState(
        x_area=np.arange(1, n_types + 1) * 1.0e-6,
        x_radi=np.arange(1, n_types + 1) * 1.0e-5,
        kheti_sla=np.arange(1, len(KhetiSla) + 1) * 1.0e-3,
        a_water=[0.1, 0.2],
        ph_ssa=[4.0, 6.0],
    )
    assert het.area(AerosolType.DU1) == 1.0e-6
    assert het.area(AerosolType.IIC) == pytest.approx(n_types * 1.0e-6)
    assert het.radius(AerosolType.SUL) == pytest.approx(8.0e-5)
    assert het.area(11) == het.area(AerosolType.SSA)
    assert het.kheti(KhetiSla.HOBr_plus_HBr) == pytest.approx(11.0e-3)
    assert het.sea_salt_water(SeaSaltBin.SS_COARSE) == 0.2
    assert het.sea_salt_ph(SeaSaltBin.SS_FINE) == 4.0
    assert isinstance(het.area(AerosolType.ORC), float)

    assert len(DUST_BINS) == 7
    assert DUST_BINS[-1] is AerosolType.DU7

    with pytest.raises(ValueError):
        het.area(0)


def test_cld_params_no_condensate():
    """Check cloud geometry without condensate."""
    cloud = cld_params(1.0e10, 0.5, 1.0, 0.0, 0.0, 0.0, 280.0, 1.0e15)
    assert cloud["a_liq"] == 0.0
    assert cloud["a_ice"] == 0.0
    assert cloud["r_liq"] == constants.CLDR_CONT
    assert cloud["r_ice"] == constants.CLDR_ICE


def test_cld_params():
    """Check liquid and ice cloud geometry."""
    AD = 1.0e10
    v_air = 1.0e15
    ql = 1.0e-4
    qi = 2.0e-5

    land = cld_params(AD, 0.5, 0.9, 0.1, qi, ql, 250.0, v_air)
    ocean = cld_params(AD, 0.5, 0.1, 0.9, qi, ql, 250.0, v_air)
    assert land["r_liq"] == constants.CLDR_CONT
    assert ocean["r_liq"] == constants.CLDR_MARI

    v_liq = ql * AD / constants.DENS_LIQ / v_air
    assert land["v_liq"] == pytest.approx(v_liq)
    assert land["a_liq"] == pytest.approx(3.0 * v_liq / constants.CLDR_CONT)

    # Heymsfield (2014) warm branch
    r_ice = 0.5 * 308.4 * math.exp(0.0152 * (250.0 + constants.absolute_zero)) / 1.0e4
    assert land["r_ice"] == pytest.approx(r_ice)
    v_ice = qi * AD / constants.DENS_ICE / v_air
    assert land["a_ice"] == pytest.approx(3.0 * v_ice / r_ice * 2.25)

    # Ice radius grows with temperature within each branch
    cold = cld_params(AD, 0.5, 0.9, 0.1, qi, ql, 190.0, v_air)
    colder = cld_params(AD, 0.5, 0.9, 0.1, qi, ql, 180.0, v_air)
    assert colder["r_ice"] < cold["r_ice"]


def test_with_cloud(het_state):
    """Check cloud geometry is applied to a copy."""
    het = het_state.with_cloud(1.0e10, 0.4, 0.9, 0.1, 2.0e-5, 1.0e-4, 270.0)
    assert het.cld_fr == pytest.approx(0.4)
    assert het.clear_fr == pytest.approx(0.6)
    assert het.a_liq > 0.0
    assert het.a_ice > 0.0
    np.testing.assert_array_equal(het.x_area, het_state.x_area)
    assert het_state.cld_fr == 0.3

    # Cloud fraction is clipped to [0, 1]
    het = het_state.with_cloud(1.0e10, 1.5, 0.9, 0.1, 2.0e-5, 1.0e-4, 270.0)
    assert het.cld_fr == 1.0
    assert het.clear_fr == 0.0


def test_environment_j():
    """Check photolysis rates are addressed from 1 with 0 beyond the array."""
    env = EnvironmentContext(temperature=250.0, number_density=1.0e19, j_values=[1.0, 2.0])
    assert isinstance(env.j_values, np.ndarray)
    assert env.j(1) == 1.0
    assert env.j(2) == 2.0
    assert env.j(3) == 0.0
    assert env.j(166) == 0.0
    assert env.k300 == pytest.approx(1.2)

    with pytest.raises(IndexError, match="must be >= 1"):
        env.j(0)


def test_environment_defaults():
    """Check defaults of optional inputs."""
    env = EnvironmentContext(temperature=250.0, number_density=1.0e19)
    assert env.j_values.size == 0
    assert env.j(1) == 0.0
    assert env.het.cld_fr == 0.0
    assert env.h2o == 0.0
    assert env.external_rates == {}

    with pytest.raises(ValueError, match="one dimensional"):
        EnvironmentContext(temperature=250.0, number_density=1.0e19, j_values=np.ones((2, 2)))


def test_environment_from_met():
    """Check a context is built from temperature, pressure and humidity."""
    env = EnvironmentContext.from_met(280.0, 80000.0, 0.005, suncos=0.3)
    assert env.temperature == 280.0
    assert env.number_density == pytest.approx(thermo.number_density(280.0, 80000.0))
    assert env.h2o == pytest.approx(thermo.h2o_number_density(0.005, 280.0, 80000.0))
    assert env.relative_humidity == pytest.approx(thermo.rh_liquid(0.005, 280.0, 80000.0))
    assert 0.0 < env.relative_humidity < 100.0
    assert env.suncos == 0.3

    env = EnvironmentContext.from_met(280.0, 80000.0, 0.005, relative_humidity=42.0)
    assert env.relative_humidity == 42.0

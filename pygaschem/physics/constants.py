"""Physical and chemical constants used by rate laws and unit conversion."""

from __future__ import annotations

# NOTE: Use a decimal point for each float-valued constant. This is important for
# converting to numpy arrays.

# -------
# General
# -------

#: Avogadro constant :math:`[mol^{-1}]`
N_A: float = 6.02214076e23

#: Molar gas constant :math:`[J \ mol^{-1} \ K^{-1}]`
R: float = 8.314462618

#: Molar gas constant in liter atmospheres :math:`[L \ atm \ mol^{-1} \ K^{-1}]`
R_latm: float = 0.08205

#: Boltzmann constant :math:`[J \ K^{-1}]`
k_B: float = 1.380649e-23

#: Absolute zero value :math:`[C]`
absolute_zero: float = -273.15

#: Surface pressure, international standard atmosphere :math:`[Pa]`
p_surface: float = 101325.0

#: Molecular mass of dry air :math:`[kg \ mol^{-1}]`
M_d: float = 28.9647e-3

#: Molecular mass of water :math:`[kg \ mol^{-1}]`
M_v: float = 18.0153e-3

#: Gas constant of dry air :math:`[J \ kg^{-1} \ K^{-1}]`
R_d: float = 287.05

#: Gas constant of water vapour :math:`[J \ kg^{-1} \ K^{-1}]`
R_v: float = 461.51

#: Ratio of gas constant for dry air / gas constant for water vapor
epsilon: float = R_d / R_v

#: Volume mixing ratio of O2 in dry air
x_O2: float = 0.2095

# ------------
# Mixing ratio
# ------------

#: Parts-per-billion per unit mole fraction
ppb: float = 1e-9

# -------------------
# Heterogeneous chem.
# -------------------

#: Conversion from atm to bar
CON_ATM_BAR: float = 1.0 / 1.01325

#: Inverse of the reference temperature 298.15 K :math:`[K^{-1}]`
INV_T298: float = 1.0 / 298.15

#: Critical relative humidity for aqueous aerosol uptake :math:`[\%]`
CRITRH: float = 35.0

#: Minimum lifetime of a reactant under heterogeneous loss :math:`[s]`
HET_MIN_LIFE: float = 1.0e-3

#: Maximum first-order heterogeneous rate :math:`[s^{-1}]`
HET_MIN_RATE: float = 1.0 / HET_MIN_LIFE

#: Cloud residence time used by the entrainment-limited in-cloud uptake :math:`[s]`
tau_cloud: float = 3600.0

#: Default effective radius of continental liquid cloud droplets :math:`[cm]`
CLDR_CONT: float = 6.0e-4

#: Default effective radius of marine liquid cloud droplets :math:`[cm]`
CLDR_MARI: float = 10.0e-4

#: Default effective radius of ice crystals :math:`[cm]`
CLDR_ICE: float = 38.5e-4

#: Density of liquid water :math:`[kg \ cm^{-3}]`
DENS_LIQ: float = 0.001

#: Density of ice :math:`[kg \ cm^{-3}]`
DENS_ICE: float = 0.91e-3

"""Heterogeneous uptake rate laws on aerosol and cloud surfaces.

Each rate law sums first-order loss rates over the surfaces a gas can react
on (clear sky aerosol, stratospheric liquid aerosol, polar stratospheric
cloud and tropospheric liquid and ice cloud). Laws for reactions between a
gas and a second species are converted to a limited second-order coefficient
with :func:`kiir1ltd`, treating the gas as the limiting reagent.

Laws built by factories in this module read the aerosol and cloud state from
``env.het``. Second-order laws additionally read current concentrations,
[:math:`molecules \\ cm^{-3}`], keyed by species name.

References
----------
- :cite:`holmesRoleCloudsTropospheric2019`
- :cite:`wangChlorineChemistryGEOSChem2019`
- :cite:`mcduffieHeterogeneousN2O5Uptake2018`
"""

from __future__ import annotations

import dataclasses
import math
from typing import TYPE_CHECKING

from pygaschem.core.environment import DUST_BINS, AerosolType, KhetiSla, SeaSaltBin
from pygaschem.physics import constants
from pygaschem.ratelaws.base import Concentrations, rate_law
from pygaschem.ratelaws.util import (
    ars_l1k,
    cloud_het,
    four_rt,
    kiir1ltd,
    mean_speed,
    reacto_diff_corr,
    safe_div,
)

if TYPE_CHECKING:
    from pygaschem.core.environment import EnvironmentContext

DU1, DU2, DU3, DU4, DU5, DU6, DU7 = DUST_BINS
SUL = AerosolType.SUL
BKC = AerosolType.BKC
ORC = AerosolType.ORC
SSA = AerosolType.SSA
SSC = AerosolType.SSC
SLA = AerosolType.SLA
IIC = AerosolType.IIC

#: Molar mass of species taking part in heterogeneous reactions, [:math:`g \ mol^{-1}`]
MOLAR_MASS: dict[str, float] = {
    "BrNO3": 141.91,
    "ClNO2": 81.46,
    "ClNO3": 97.46,
    "GLYX": 58.04,
    "H2O": 18.02,
    "HBr": 80.91,
    "HCl": 36.46,
    "HI": 127.91,
    "HMML": 102.09,
    "HO2": 33.01,
    "HOBr": 96.91,
    "HOCl": 52.46,
    "HOI": 143.91,
    "HONIT": 215.1,
    "I2O2": 285.81,
    "I2O3": 301.81,
    "I2O4": 317.81,
    "ICHE": 116.12,
    "IDN": 226.14,
    "IEPOXA": 118.13,
    "IEPOXB": 118.13,
    "IEPOXD": 118.13,
    "IHN1": 147.13,
    "IHN2": 147.13,
    "IHN3": 147.13,
    "IHN4": 147.13,
    "INPB": 163.13,
    "INPD": 163.13,
    "IONO": 172.91,
    "IONO2": 188.91,
    "ITCN": 179.13,
    "ITHN": 181.14,
    "LVOC": 154.19,
    "MCRHN": 149.1,
    "MCRHNB": 149.1,
    "MGLY": 72.07,
    "MONITS": 215.28,
    "MONITU": 215.28,
    "MVKN": 149.1,
    "N2O5": 108.02,
    "NO2": 46.01,
    "NO3": 62.01,
    "NPHEN": 139.11,
    "O3": 48.0,
    "OH": 17.01,
    "PYAC": 88.07,
    "R4N2": 119.12,
}


def sr_mw(species: str) -> float:
    """Square root of the molar mass of ``species``.

    Raises
    ------
    KeyError
        If the molar mass of ``species`` is not tabulated in :data:`MOLAR_MASS`.
    """
    try:
        return math.sqrt(MOLAR_MASS[species])
    except KeyError:
        raise KeyError(f"No molar mass tabulated for species '{species}'") from None


@dataclasses.dataclass(frozen=True)
class HenryConstant:
    """Henry's law solubility :math:`K_0 e^{CR (1/T - 1/298.15)}`."""

    #: Solubility at 298.15 K, [:math:`M \ atm^{-1}`]
    k0: float

    #: Temperature dependence, [:math:`K`]
    cr: float

    def __call__(self, T: float) -> float:
        """Solubility at ``T``, [:math:`M \\ bar^{-1}`]."""
        return self.k0 * constants.CON_ATM_BAR * math.exp(self.cr * (1.0 / T - constants.INV_T298))


HENRY_HOBR = HenryConstant(k0=6.1e3, cr=0.0)
HENRY_HOCL = HenryConstant(k0=6.5e2, cr=5.9e3)


def _bulk_gamma(
    T: float,
    mw: float,
    henry: float,
    d_l: float,
    k_tot: float,
    radius: float,
    inv_alpha: float,
) -> float:
    """Uptake coefficient limited by mass accommodation and bulk reaction.

    Zero if the bulk term vanishes, as for a particle of zero radius.
    """
    l_r = math.sqrt(d_l / k_tot)
    gb = four_rt(T) * henry * l_r * k_tot / mean_speed(mw, T)
    gb *= reacto_diff_corr(radius, l_r)
    if gb <= 0.0:
        return 0.0
    return 1.0 / (inv_alpha + 1.0 / gb)


def _sum_ars(
    env: EnvironmentContext,
    aerosols: tuple[AerosolType, ...],
    gamma: float,
    srmw: float,
    scale: float = 1.0,
) -> float:
    het = env.het
    return sum(
        ars_l1k(scale * het.area(a), het.radius(a), gamma, srmw, env) for a in aerosols
    )


def _fine_chloride(env: EnvironmentContext, gamma: float, srmw: float) -> float:
    """Clear sky uptake on fine chloride-containing aerosol."""
    het = env.het
    return ars_l1k(het.clear_fr * het.acl_area, het.acl_radi, gamma, srmw, env)


def _coarse_sea_salt(env: EnvironmentContext, gamma: float, srmw: float) -> float:
    """Clear sky uptake on coarse sea salt."""
    het = env.het
    return ars_l1k(het.clear_fr * het.area(SSC), het.radius(SSC), gamma, srmw, env)


def _ice(
    env: EnvironmentContext, gamma_ice: float, gamma_nat: float, srmw: float, scale: float = 1.0
) -> float:
    """Uptake on irregular ice cloud, using the NAT value on NAT surfaces."""
    het = env.het
    gamma = gamma_nat if het.nat_surface else gamma_ice
    return ars_l1k(scale * het.area(IIC), het.radius(IIC), gamma, srmw, env)


def _sla(env: EnvironmentContext, reaction: KhetiSla) -> float:
    """Loss on stratospheric liquid aerosol from the precomputed table."""
    return env.het.area(SLA) * env.het.kheti(reaction)


# -----
# BrNO3
# -----


@rate_law("BrNO3uptkByH2O", order=2, needs_concentrations=True)
def brno3_uptk_by_h2o(env: EnvironmentContext, conc: Concentrations) -> float:
    """BrNO3 + H2O on sulfate, sea salt, ice and in tropospheric cloud."""
    het = env.het
    T = env.temperature
    srmw = sr_mw("BrNO3")
    gam_liq = 0.0021 * T - 0.561
    gam_ice = 5.3e-4 * math.exp(1100.0 / T)

    k = _sum_ars(env, (SUL, SSA, SSC), gam_liq, srmw, scale=het.clear_fr)
    k += _sla(env, KhetiSla.BrNO3_plus_H2O)
    k += _ice(env, 0.3, 0.001, srmw, scale=het.clear_fr)
    k += cloud_het(env, srmw, gam_liq, gam_ice, 1.0, 1.0)
    return kiir1ltd(conc["BrNO3"], conc["H2O"], k)


@rate_law("BrNO3uptkByHCl", order=2, needs_concentrations=True)
def brno3_uptk_by_hcl(env: EnvironmentContext, conc: Concentrations) -> float:
    """BrNO3 + HCl in polar stratospheric clouds and on stratospheric sulfate."""
    k = 0.0
    if env.het.strat_box:
        srmw = sr_mw("BrNO3")
        k += _sum_ars(env, (SUL,), 0.9, srmw)
        k += _sla(env, KhetiSla.BrNO3_plus_HCl)
        k += _ice(env, 0.3, 0.3, srmw)
    return kiir1ltd(conc["BrNO3"], conc["HCl"], k)


# -----
# ClNO2
# -----


def gam_clno2(
    T: float, radius: float, ph: float, c_cl: float, c_br: float
) -> tuple[float, float, float]:
    """Uptake coefficient of ClNO2 on aqueous Cl- and Br-.

    Parameters
    ----------
    T : float
        Temperature, [:math:`K`]
    radius : float
        Particle radius, [:math:`cm`]
    ph : float
        pH of the particle, the Cl- path is disabled for pH >= 2
    c_cl, c_br : float
        Cl- and Br- concentrations, [:math:`mol \\ L^{-1}`]

    Returns
    -------
    tuple[float, float, float]
        Uptake coefficient and the Cl- and Br- branching ratios
    """
    inv_alpha = 1.0 / 0.01
    d_l = 1.0e-5
    henry = 4.5e-2 * constants.CON_ATM_BAR

    k_cl = 0.0 if ph >= 2.0 else 1.0e7 * c_cl
    k_br = (1.01e-1 / (henry * henry * d_l)) * c_br
    k_tot = k_cl + k_br
    if k_tot <= 0.0:
        return 0.0, 0.0, 0.0

    gamma = _bulk_gamma(T, MOLAR_MASS["ClNO2"], henry, d_l, k_tot, radius, inv_alpha)
    return gamma, k_cl / k_tot, k_br / k_tot


def _clno2_in_cloud(env: EnvironmentContext, bromide: bool, fraction: float) -> float:
    het = env.het
    if het.strat_box:
        return 0.0
    gamma, branch_cl, branch_br = gam_clno2(
        env.temperature, het.r_liq, het.ph_cloud, het.cl_conc_cld, het.br_conc_cld
    )
    branch = (branch_br if bromide else branch_cl) * fraction
    return cloud_het(env, sr_mw("ClNO2"), gamma, 0.0, branch, 0.0)


@rate_law("ClNO2uptkByBrSALA", order=2, needs_concentrations=True)
def clno2_uptk_by_brsala(env: EnvironmentContext, conc: Concentrations) -> float:
    """ClNO2 + Br- in cloud and on fine sea salt."""
    het = env.het
    k = _clno2_in_cloud(env, True, het.frac_br_cld_a)
    gamma, _, branch_br = gam_clno2(
        env.temperature,
        het.acl_radi,
        het.sea_salt_ph(SeaSaltBin.SS_FINE),
        het.cl_conc_ssa,
        het.br_conc_ssa,
    )
    k += _fine_chloride(env, gamma, sr_mw("ClNO2")) * branch_br
    return kiir1ltd(conc["ClNO2"], conc["BrSALA"], k)


@rate_law("ClNO2uptkByBrSALC", order=2, needs_concentrations=True)
def clno2_uptk_by_brsalc(env: EnvironmentContext, conc: Concentrations) -> float:
    """ClNO2 + Br- in cloud and on coarse sea salt."""
    het = env.het
    k = _clno2_in_cloud(env, True, het.frac_br_cld_c)
    gamma, _, branch_br = gam_clno2(
        env.temperature,
        het.radius(SSC),
        het.sea_salt_ph(SeaSaltBin.SS_COARSE),
        het.cl_conc_ssc,
        het.br_conc_ssc,
    )
    k += _coarse_sea_salt(env, gamma, sr_mw("ClNO2")) * branch_br
    return kiir1ltd(conc["ClNO2"], conc["BrSALC"], k)


@rate_law("ClNO2uptkByHBr", order=2, needs_concentrations=True)
def clno2_uptk_by_hbr(env: EnvironmentContext, conc: Concentrations) -> float:
    """ClNO2 + Br- from dissolved HBr in cloud."""
    k = _clno2_in_cloud(env, True, env.het.frac_br_cld_g)
    return kiir1ltd(conc["ClNO2"], conc["HBr"], k)


@rate_law("ClNO2uptkBySALACL", order=2, needs_concentrations=True)
def clno2_uptk_by_salacl(env: EnvironmentContext, conc: Concentrations) -> float:
    """ClNO2 + Cl- in cloud and on fine sea salt."""
    het = env.het
    k = _clno2_in_cloud(env, False, het.frac_cl_cld_a)
    gamma, branch_cl, _ = gam_clno2(
        env.temperature,
        het.acl_radi,
        het.sea_salt_ph(SeaSaltBin.SS_FINE),
        het.cl_conc_ssa,
        het.br_conc_ssa,
    )
    k += _fine_chloride(env, gamma, sr_mw("ClNO2")) * branch_cl
    return kiir1ltd(conc["ClNO2"], conc["SALACL"], k)


@rate_law("ClNO2uptkBySALCCL", order=2, needs_concentrations=True)
def clno2_uptk_by_salccl(env: EnvironmentContext, conc: Concentrations) -> float:
    """ClNO2 + Cl- from coarse sea salt in cloud."""
    k = _clno2_in_cloud(env, False, env.het.frac_cl_cld_c)
    return kiir1ltd(conc["ClNO2"], conc["SALCCL"], k)


@rate_law("ClNO2uptkByHCl", order=2, needs_concentrations=True)
def clno2_uptk_by_hcl(env: EnvironmentContext, conc: Concentrations) -> float:
    """ClNO2 + Cl- from dissolved HCl in cloud."""
    k = _clno2_in_cloud(env, False, env.het.frac_cl_cld_g)
    return kiir1ltd(conc["ClNO2"], conc["HCl"], k)


# -----
# ClNO3
# -----


def gam_clno3_aer(T: float, c_br: float) -> tuple[float, float]:
    """Uptake coefficient of ClNO3 on aqueous aerosol and its Br- branching ratio."""
    inv_alpha = 1.0 / 0.108
    k_0 = 1.2e5 * 1.2e5
    d_l = 5.0e-6

    k_br = 1.0e12 * c_br
    k_tot = k_0 + k_br
    gb_tot = four_rt(T) * math.sqrt(k_tot * d_l) / mean_speed(MOLAR_MASS["ClNO3"], T)
    gamma = 1.0 / (inv_alpha + 1.0 / gb_tot)
    return gamma, k_br / k_tot


def gam_clno3_ice(env: EnvironmentContext) -> tuple[float, float, float, float]:
    """Uptake coefficient of ClNO3 on ice.

    Returns
    -------
    tuple[float, float, float, float]
        Uptake coefficient and the HCl, HBr and H2O branching ratios
    """
    het = env.het
    T = env.temperature
    g1 = 0.24 * het.hcl_theta
    g2 = 0.56 * het.hbr_theta
    h2o_surf = 1.0e15 - 3.0 * 2.7e14 * het.hno3_theta
    kks = 4.0 * 5.2e-17 * math.exp(2032.0 / T)
    g3 = 1.0 / (2.0 + safe_div(mean_speed(MOLAR_MASS["ClNO3"], T), kks * h2o_surf, 1.0e30))
    gamma = g1 + g2 + g3
    return gamma, safe_div(g1, gamma, 0.0), safe_div(g2, gamma, 0.0), safe_div(g3, gamma, 0.0)


@rate_law("ClNO3uptkByH2O", order=2, needs_concentrations=True)
def clno3_uptk_by_h2o(env: EnvironmentContext, conc: Concentrations) -> float:
    """ClNO3 + H2O on fine aerosol, stratospheric aerosol, ice and in cloud."""
    het = env.het
    srmw = sr_mw("ClNO3")

    gamma, branch_br = gam_clno3_aer(env.temperature, het.br_conc_ssa)
    k = _fine_chloride(env, gamma, srmw) * (1.0 - branch_br) * (1.0 - het.frac_salacl)
    k += _sla(env, KhetiSla.ClNO3_plus_H2O)
    k += _ice(env, 0.3, 0.004, srmw)

    if not het.strat_box:
        gamma, branch_br = gam_clno3_aer(env.temperature, het.br_conc_cld)
        gamma_ice, _, _, branch_ice = gam_clno3_ice(env)
        k += cloud_het(env, srmw, gamma, gamma_ice, 1.0 - branch_br, branch_ice)

    return kiir1ltd(conc["ClNO3"], conc["H2O"], k)


@rate_law("ClNO3uptkByHCl", order=2, needs_concentrations=True)
def clno3_uptk_by_hcl(env: EnvironmentContext, conc: Concentrations) -> float:
    """ClNO3 + HCl in the stratosphere and on tropospheric ice cloud."""
    srmw = sr_mw("ClNO3")
    if env.het.strat_box:
        k = _sum_ars(env, (SUL,), 0.1e-4, srmw)
        k += _sla(env, KhetiSla.ClNO3_plus_HCl)
        k += _ice(env, 0.3, 0.2, srmw)
    else:
        gamma_ice, branch_ice, _, _ = gam_clno3_ice(env)
        k = cloud_het(env, srmw, 0.0, gamma_ice, 0.0, branch_ice)
    return kiir1ltd(conc["ClNO3"], conc["HCl"], k)


@rate_law("ClNO3uptkByHBr", order=2, needs_concentrations=True)
def clno3_uptk_by_hbr(env: EnvironmentContext, conc: Concentrations) -> float:
    """ClNO3 + HBr in the stratosphere and in tropospheric cloud."""
    het = env.het
    srmw = sr_mw("ClNO3")
    if het.strat_box:
        k = _sla(env, KhetiSla.ClNO3_plus_HBr)
        k += _ice(env, 0.3, 0.3, srmw)
    else:
        gamma, branch_br = gam_clno3_aer(env.temperature, het.br_conc_cld)
        gamma_ice, _, branch_ice, _ = gam_clno3_ice(env)
        k = cloud_het(env, srmw, gamma, gamma_ice, branch_br * het.frac_br_cld_g, branch_ice)
    return kiir1ltd(conc["ClNO3"], conc["HBr"], k)


def _clno3_br_in_cloud(env: EnvironmentContext, fraction: float) -> float:
    het = env.het
    if het.strat_box:
        return 0.0
    gamma, branch_br = gam_clno3_aer(env.temperature, het.br_conc_cld)
    return cloud_het(env, sr_mw("ClNO3"), gamma, 0.0, branch_br * fraction, 0.0)


@rate_law("ClNO3uptkByBrSALA", order=2, needs_concentrations=True)
def clno3_uptk_by_brsala(env: EnvironmentContext, conc: Concentrations) -> float:
    """ClNO3 + Br- in cloud and on fine sea salt."""
    het = env.het
    k = _clno3_br_in_cloud(env, het.frac_br_cld_a)
    gamma, branch_br = gam_clno3_aer(env.temperature, het.br_conc_ssa)
    k += _fine_chloride(env, gamma, sr_mw("ClNO3")) * branch_br
    return kiir1ltd(conc["ClNO3"], conc["BrSALA"], k)


@rate_law("ClNO3uptkByBrSALC", order=2, needs_concentrations=True)
def clno3_uptk_by_brsalc(env: EnvironmentContext, conc: Concentrations) -> float:
    """ClNO3 + Br- in cloud and on coarse sea salt."""
    het = env.het
    k = _clno3_br_in_cloud(env, het.frac_br_cld_c)
    gamma, branch_br = gam_clno3_aer(env.temperature, het.br_conc_ssc)
    k += _coarse_sea_salt(env, gamma, sr_mw("ClNO3")) * branch_br
    return kiir1ltd(conc["ClNO3"], conc["BrSALC"], k)


@rate_law("ClNO3uptkBySALACL", order=2, needs_concentrations=True)
def clno3_uptk_by_salacl(env: EnvironmentContext, conc: Concentrations) -> float:
    """ClNO3 + Cl- on fine sea salt."""
    het = env.het
    gamma, branch_br = gam_clno3_aer(env.temperature, het.br_conc_ssa)
    branch = (1.0 - branch_br) * het.frac_salacl
    k = _fine_chloride(env, gamma, sr_mw("ClNO3")) * branch
    return kiir1ltd(conc["ClNO3"], conc["SALACL"], k)


@rate_law("ClNO3uptkBySALCCL", order=2, needs_concentrations=True)
def clno3_uptk_by_salccl(env: EnvironmentContext, conc: Concentrations) -> float:
    """ClNO3 + Cl- on coarse sea salt."""
    gamma, branch_br = gam_clno3_aer(env.temperature, env.het.br_conc_ssc)
    k = _coarse_sea_salt(env, gamma, sr_mw("ClNO3")) * (1.0 - branch_br)
    return kiir1ltd(conc["ClNO3"], conc["SALCCL"], k)


# --------
# HBr, HO2
# --------


def _hbr_gamma(T: float) -> float:
    return 1.3e-8 * math.exp(4290.0 / T)


@rate_law("HBrUptkBySALA", order=1)
def hbr_uptk_by_sala(env: EnvironmentContext) -> float:
    """HBr uptake on fine sea salt."""
    return _fine_chloride(env, _hbr_gamma(env.temperature), sr_mw("HBr"))


@rate_law("HBrUptkBySALC", order=1)
def hbr_uptk_by_salc(env: EnvironmentContext) -> float:
    """HBr uptake on coarse sea salt."""
    return _coarse_sea_salt(env, _hbr_gamma(env.temperature), sr_mw("HBr"))


@rate_law("HO2uptk1stOrd", order=1)
def ho2_uptk_1st_ord(env: EnvironmentContext) -> float:
    """First-order HO2 uptake on dust, sulfate, carbon and sea salt."""
    aerosols = (*DUST_BINS, SUL, BKC, ORC, SSA, SSC)
    return _sum_ars(env, aerosols, env.het.gamma_ho2, sr_mw("HO2"))


# ----
# HOBr
# ----


def br2_yield(br_over_cl: float) -> float:
    """Yield of Br2 from HOBr uptake as a function of the Br- / Cl- ratio.

    Returns 0 for non-positive ratios, otherwise
    :math:`0.41 \\log_{10}(r) + 2.25` clamped to [0, 0.9].
    """
    if br_over_cl <= 0.0:
        return 0.0
    y = 0.41 * math.log10(br_over_cl) + 2.25
    return max(min(y, 0.9), 0.0)


def _clamped_hplus(c_hp: float) -> tuple[float, float]:
    return max(min(c_hp, 1.0e-6), 1.0e-9), max(min(c_hp, 1.0e-2), 1.0e-6)


def gam_hobr_aer(T: float, radius: float, c_hp: float, c_cl: float, c_br: float) -> float:
    """Uptake coefficient of HOBr on acidic sea salt aerosol.

    Parameters
    ----------
    T : float
        Temperature, [:math:`K`]
    radius : float
        Particle radius, [:math:`cm`]
    c_hp, c_cl, c_br : float
        H+, Cl- and Br- concentrations, [:math:`mol \\ L^{-1}`]

    Returns
    -------
    float
        Uptake coefficient
    """
    c_hp1, c_hp2 = _clamped_hplus(c_hp)
    k_tot = 2.3e10 * c_cl * c_hp1 + 1.6e10 * c_br * c_hp2
    if k_tot <= 0.0:
        return 0.0
    return _bulk_gamma(T, MOLAR_MASS["HOBr"], HENRY_HOBR(T), 1.4e-5, k_tot, radius, 1.0 / 0.6)


@dataclasses.dataclass(frozen=True)
class HOBrCloudUptake:
    """Uptake coefficient of HOBr in liquid cloud and its component rates, [:math:`s^{-1}`]."""

    gamma: float
    k_tot: float
    k_cl: float
    k_br: float
    k_hso3: float
    k_so3: float


def gam_hobr_cld(env: EnvironmentContext) -> HOBrCloudUptake:
    """Uptake coefficient of HOBr in liquid cloud with Cl-, Br- and S(IV) pathways."""
    het = env.het
    T = env.temperature
    c_hp1, c_hp2 = _clamped_hplus(het.h_conc_lcl)
    k_cl = 2.3e10 * het.cl_conc_cld * c_hp1
    k_br = 1.6e10 * het.br_conc_cld * c_hp2
    k_hso3 = 2.6e7 * het.hso3_aq
    k_so3 = 5.0e9 * het.so3_aq
    k_tot = k_cl + k_br + k_hso3 + k_so3

    gamma = 0.0
    if k_tot > 0.0:
        gamma = _bulk_gamma(
            T, MOLAR_MASS["HOBr"], HENRY_HOBR(T), 1.4e-5, k_tot, het.r_liq, 1.0 / 0.6
        )
    return HOBrCloudUptake(gamma, k_tot, k_cl, k_br, k_hso3, k_so3)


def gam_hobr_ice(env: EnvironmentContext) -> tuple[float, float, float]:
    """Uptake coefficient of HOBr on ice and its HCl and HBr branching ratios."""
    het = env.het
    gamma_hcl = het.hcl_theta * 0.25
    gamma_hbr = het.hbr_theta * 4.8e-4 * math.exp(1240.0 / env.temperature)
    gamma = gamma_hcl + gamma_hbr
    if gamma <= 0.0:
        return gamma, 0.0, 0.0
    return gamma, gamma_hcl / gamma, gamma_hbr / gamma


def _hobr_halide_branch(cld: HOBrCloudUptake, br_over_cl: float, bromide: bool) -> float:
    """Fraction of HOBr cloud uptake forming Br2 (``bromide``) or BrCl."""
    branch_0 = safe_div(cld.k_cl + cld.k_br, cld.k_tot, 0.0)
    return branch_0 * _br2_or_brcl(br_over_cl, bromide)


def _br2_or_brcl(br_over_cl: float, bromide: bool) -> float:
    if br_over_cl <= 5.0e-4:
        y = br2_yield(br_over_cl)
        return y if bromide else 1.0 - y
    return 0.9 if bromide else 0.1


def _hobr_on_sea_salt(env: EnvironmentContext, coarse: bool, bromide: bool) -> float:
    """Clear sky HOBr uptake on acidic sea salt."""
    het = env.het
    T = env.temperature
    srmw = sr_mw("HOBr")
    if coarse:
        if not het.ssc_is_acid:
            return 0.0
        gamma = gam_hobr_aer(T, het.radius(SSC), het.h_conc_ssc, het.cl_conc_ssc, het.br_conc_ssc)
        return _coarse_sea_salt(env, gamma, srmw) * _br2_or_brcl(het.br_over_cl_ssc, bromide)

    if not het.ssa_is_acid:
        return 0.0
    gamma = gam_hobr_aer(T, het.acl_radi, het.h_conc_ssa, het.cl_conc_ssa, het.br_conc_ssa)
    return _fine_chloride(env, gamma, srmw) * _br2_or_brcl(het.br_over_cl_ssa, bromide)


def _hobr_in_cloud(env: EnvironmentContext, bromide: bool, fraction: float) -> float:
    het = env.het
    if het.strat_box:
        return 0.0
    cld = gam_hobr_cld(env)
    branch = _hobr_halide_branch(cld, het.br_over_cl_cld, bromide) * fraction
    return cloud_het(env, sr_mw("HOBr"), cld.gamma, 0.0, branch, 0.0)


@rate_law("HOBrUptkByHBr", order=2, needs_concentrations=True)
def hobr_uptk_by_hbr(env: EnvironmentContext, conc: Concentrations) -> float:
    """HOBr + HBr in the stratosphere and in tropospheric cloud."""
    het = env.het
    srmw = sr_mw("HOBr")
    if het.strat_box:
        k = _sum_ars(env, (SUL,), 0.25, srmw)
        k += _sla(env, KhetiSla.HOBr_plus_HBr)
        k += _ice(env, 0.3, 0.001, srmw)
    else:
        cld = gam_hobr_cld(env)
        br_liq = _hobr_halide_branch(cld, het.br_over_cl_cld, True) * het.frac_br_cld_g
        gamma_ice, _, br_ice = gam_hobr_ice(env)
        k = cloud_het(env, srmw, cld.gamma, gamma_ice, br_liq, br_ice)
    return kiir1ltd(conc["HOBr"], conc["HBr"], k)


@rate_law("HOBrUptkByHCl", order=2, needs_concentrations=True)
def hobr_uptk_by_hcl(env: EnvironmentContext, conc: Concentrations) -> float:
    """HOBr + HCl in the stratosphere and in tropospheric cloud."""
    het = env.het
    srmw = sr_mw("HOBr")
    if het.strat_box:
        k = _sum_ars(env, (SUL,), 0.2, srmw)
        k += _sla(env, KhetiSla.HOBr_plus_HCl)
        k += _ice(env, 0.3, 0.1, srmw)
    else:
        cld = gam_hobr_cld(env)
        br_liq = _hobr_halide_branch(cld, het.br_over_cl_cld, False) * het.frac_cl_cld_g
        gamma_ice, br_ice, _ = gam_hobr_ice(env)
        k = cloud_het(env, srmw, cld.gamma, gamma_ice, br_liq, br_ice)
    return kiir1ltd(conc["HOBr"], conc["HCl"], k)


@rate_law("HOBrUptkByBrSALA", order=2, needs_concentrations=True)
def hobr_uptk_by_brsala(env: EnvironmentContext, conc: Concentrations) -> float:
    """HOBr + Br- in cloud and on acidic fine sea salt."""
    k = _hobr_in_cloud(env, True, env.het.frac_br_cld_a)
    k += _hobr_on_sea_salt(env, coarse=False, bromide=True)
    return kiir1ltd(conc["HOBr"], conc["BrSALA"], k)


@rate_law("HOBrUptkByBrSALC", order=2, needs_concentrations=True)
def hobr_uptk_by_brsalc(env: EnvironmentContext, conc: Concentrations) -> float:
    """HOBr + Br- in cloud and on acidic coarse sea salt."""
    k = _hobr_in_cloud(env, True, env.het.frac_br_cld_c)
    k += _hobr_on_sea_salt(env, coarse=True, bromide=True)
    return kiir1ltd(conc["HOBr"], conc["BrSALC"], k)


@rate_law("HOBrUptkBySALACL", order=2, needs_concentrations=True)
def hobr_uptk_by_salacl(env: EnvironmentContext, conc: Concentrations) -> float:
    """HOBr + Cl- in cloud and on acidic fine sea salt."""
    k = _hobr_in_cloud(env, False, env.het.frac_cl_cld_a)
    k += _hobr_on_sea_salt(env, coarse=False, bromide=False)
    return kiir1ltd(conc["HOBr"], conc["SALACL"], k)


@rate_law("HOBrUptkBySALCCL", order=2, needs_concentrations=True)
def hobr_uptk_by_salccl(env: EnvironmentContext, conc: Concentrations) -> float:
    """HOBr + Cl- in cloud and on acidic coarse sea salt."""
    k = _hobr_in_cloud(env, False, env.het.frac_cl_cld_c)
    k += _hobr_on_sea_salt(env, coarse=True, bromide=False)
    return kiir1ltd(conc["HOBr"], conc["SALCCL"], k)


def _hobr_siv(env: EnvironmentContext, conc: Concentrations, sulfite: bool) -> float:
    het = env.het
    k = 0.0
    if not het.strat_box:
        cld = gam_hobr_cld(env)
        br_liq = safe_div(cld.k_so3 if sulfite else cld.k_hso3, cld.k_tot, 0.0)
        k = cloud_het(env, sr_mw("HOBr"), cld.gamma, 0.0, br_liq, 0.0)
    ratio = het.so3mm if sulfite else het.hso3m
    return kiir1ltd(conc["HOBr"], conc["SO2"], k) * ratio


@rate_law("HOBrUptkByHSO3m", order=2, needs_concentrations=True)
def hobr_uptk_by_hso3m(env: EnvironmentContext, conc: Concentrations) -> float:
    """HOBr + HSO3- in cloud, expressed per molecule of gas-phase SO2."""
    return _hobr_siv(env, conc, sulfite=False)


@rate_law("HOBrUptkBySO3mm", order=2, needs_concentrations=True)
def hobr_uptk_by_so3mm(env: EnvironmentContext, conc: Concentrations) -> float:
    """HOBr + SO3-- in cloud, expressed per molecule of gas-phase SO2."""
    return _hobr_siv(env, conc, sulfite=True)


# ----
# HOCl
# ----


def gam_hocl_cld(env: EnvironmentContext) -> tuple[float, float, float]:
    """Uptake coefficient of HOCl in liquid cloud and its Cl- and S(IV) branching ratios."""
    het = env.het
    k_cl = 1.5e4 * het.h_conc_lcl * het.cl_conc_cld
    k_so3 = 2.8e5 * het.tso3_aq
    k_tot = k_cl + k_so3
    if k_tot <= 0.0:
        return 0.0, 0.0, 0.0

    T = env.temperature
    gamma = _bulk_gamma(T, MOLAR_MASS["HOCl"], HENRY_HOCL(T), 2.0e-5, k_tot, het.r_liq, 1.0 / 0.8)
    return gamma, k_cl / k_tot, k_so3 / k_tot


def gam_hocl_aer(T: float, radius: float, c_hp: float, c_cl: float) -> float:
    """Uptake coefficient of HOCl on acidic sea salt aerosol.

    The termolecular rate constant :math:`1.5 \\times 10^4 \\ M^{-2} s^{-1}` is
    applied to the H+ and Cl- concentrations, [:math:`mol \\ L^{-1}`].
    """
    k_ter = 1.5e4
    k_tot = k_ter * c_hp * c_cl
    if c_cl <= 0.0 or k_tot <= 0.0:
        return 0.0
    return _bulk_gamma(T, MOLAR_MASS["HOCl"], HENRY_HOCL(T), 2.0e-5, k_tot, radius, 1.0 / 0.8)


def _hocl_in_cloud(env: EnvironmentContext, fraction: float, sulfur: bool = False) -> float:
    het = env.het
    if het.strat_box:
        return 0.0
    gamma, branch_cl, branch_so3 = gam_hocl_cld(env)
    branch = (branch_so3 if sulfur else branch_cl) * fraction
    return cloud_het(env, sr_mw("HOCl"), gamma, 0.0, branch, 0.0)


@rate_law("HOClUptkByHCl", order=2, needs_concentrations=True)
def hocl_uptk_by_hcl(env: EnvironmentContext, conc: Concentrations) -> float:
    """HOCl + HCl in the stratosphere and in tropospheric cloud."""
    het = env.het
    srmw = sr_mw("HOCl")
    if het.strat_box:
        k = _sum_ars(env, (SUL,), 0.8, srmw)
        k += _sla(env, KhetiSla.HOCl_plus_HCl)
        k += _ice(env, 0.2, 0.1, srmw)
    else:
        gamma, branch_cl, _ = gam_hocl_cld(env)
        gamma_ice = 0.22 * het.hcl_theta
        k = cloud_het(env, srmw, gamma, gamma_ice, branch_cl * het.frac_cl_cld_g, 1.0)
    return kiir1ltd(conc["HOCl"], conc["HCl"], k)


@rate_law("HOClUptkByHBr", order=2, needs_concentrations=True)
def hocl_uptk_by_hbr(env: EnvironmentContext, conc: Concentrations) -> float:
    """HOCl + HBr in the stratosphere."""
    k = 0.0
    if env.het.strat_box:
        srmw = sr_mw("HOCl")
        k += _sum_ars(env, (SUL,), 0.8, srmw)
        k += _sla(env, KhetiSla.HOCl_plus_HBr)
        k += _ice(env, 0.3, 0.3, srmw)
    return kiir1ltd(conc["HOCl"], conc["HBr"], k)


@rate_law("HOClUptkBySALACL", order=2, needs_concentrations=True)
def hocl_uptk_by_salacl(env: EnvironmentContext, conc: Concentrations) -> float:
    """HOCl + Cl- in cloud and on acidic fine sea salt."""
    het = env.het
    k = _hocl_in_cloud(env, het.frac_cl_cld_a)
    if het.ssa_is_acid:
        gamma = gam_hocl_aer(env.temperature, het.acl_radi, het.h_conc_ssa, het.cl_conc_ssa)
        k += _fine_chloride(env, gamma, sr_mw("HOCl"))
    return kiir1ltd(conc["HOCl"], conc["SALACL"], k)


@rate_law("HOClUptkBySALCCL", order=2, needs_concentrations=True)
def hocl_uptk_by_salccl(env: EnvironmentContext, conc: Concentrations) -> float:
    """HOCl + Cl- in cloud and on acidic coarse sea salt."""
    het = env.het
    k = _hocl_in_cloud(env, het.frac_cl_cld_c)
    if het.ssc_is_acid:
        gamma = gam_hocl_aer(env.temperature, het.radius(SSC), het.h_conc_ssc, het.cl_conc_ssc)
        k += _coarse_sea_salt(env, gamma, sr_mw("HOCl"))
    return kiir1ltd(conc["HOCl"], conc["SALCCL"], k)


@rate_law("HOClUptkByHSO3m", order=2, needs_concentrations=True)
def hocl_uptk_by_hso3m(env: EnvironmentContext, conc: Concentrations) -> float:
    """HOCl + HSO3- in cloud, expressed per molecule of gas-phase SO2."""
    k = _hocl_in_cloud(env, env.het.frac_hso3_aq, sulfur=True)
    return kiir1ltd(conc["HOCl"], conc["SO2"], k) * env.het.hso3m


@rate_law("HOClUptkBySO3mm", order=2, needs_concentrations=True)
def hocl_uptk_by_so3mm(env: EnvironmentContext, conc: Concentrations) -> float:
    """HOCl + SO3-- in cloud, expressed per molecule of gas-phase SO2."""
    k = _hocl_in_cloud(env, env.het.frac_so3_aq, sulfur=True)
    return kiir1ltd(conc["HOCl"], conc["SO2"], k) * env.het.so3mm


# ------
# Iodine
# ------


@rate_law("IuptkBySulf1stOrd", order=1)
def iuptk_by_sulf_1st_ord(env: EnvironmentContext, srmw: float, gamma: float) -> float:
    """Iodine species uptake on tropospheric and stratospheric sulfate."""
    return _sum_ars(env, (SUL, SLA), gamma, srmw)


@rate_law("IuptkBySALA1stOrd", order=1)
def iuptk_by_sala_1st_ord(env: EnvironmentContext, srmw: float, gamma: float) -> float:
    """Iodine species uptake on fine sea salt."""
    return _sum_ars(env, (SSA,), gamma, srmw)


@rate_law("IuptkByAlkSALA1stOrd", order=1)
def iuptk_by_alk_sala_1st_ord(env: EnvironmentContext, srmw: float, gamma: float) -> float:
    """Iodine species uptake on alkaline fine sea salt."""
    if not env.het.ssa_is_alk:
        return 0.0
    return _sum_ars(env, (SSA,), gamma, srmw)


@rate_law("IuptkBySALC1stOrd", order=1)
def iuptk_by_salc_1st_ord(env: EnvironmentContext, srmw: float, gamma: float) -> float:
    """Iodine species uptake on coarse sea salt."""
    return _sum_ars(env, (SSC,), gamma, srmw)


@rate_law("IuptkByAlkSALC1stOrd", order=1)
def iuptk_by_alk_salc_1st_ord(env: EnvironmentContext, srmw: float, gamma: float) -> float:
    """Iodine species uptake on alkaline coarse sea salt."""
    if not env.het.ssc_is_alk:
        return 0.0
    return _sum_ars(env, (SSC,), gamma, srmw)


def _ibrkdn(
    env: EnvironmentContext,
    conc: Concentrations,
    species: str,
    gamma: float,
    coarse: bool,
    educt: str,
    fraction: float,
) -> float:
    het = env.het
    acid = het.ssc_is_acid if coarse else het.ssa_is_acid
    if not acid:
        return 0.0
    k = fraction * _sum_ars(env, (SSC if coarse else SSA,), gamma, sr_mw(species))
    return kiir1ltd(conc[species], conc[educt], k)


@rate_law("IbrkdnByAcidBrSALA", order=2, needs_concentrations=True)
def ibrkdn_by_acid_brsala(
    env: EnvironmentContext, conc: Concentrations, species: str, gamma: float
) -> float:
    """Breakdown of an iodine species on acidic fine sea salt forming IBr."""
    return _ibrkdn(env, conc, species, gamma, False, "BrSALA", 0.15)


@rate_law("IbrkdnByAcidBrSALC", order=2, needs_concentrations=True)
def ibrkdn_by_acid_brsalc(
    env: EnvironmentContext, conc: Concentrations, species: str, gamma: float
) -> float:
    """Breakdown of an iodine species on acidic coarse sea salt forming IBr."""
    return _ibrkdn(env, conc, species, gamma, True, "BrSALC", 0.15)


@rate_law("IbrkdnByAcidSALACl", order=2, needs_concentrations=True)
def ibrkdn_by_acid_salacl(
    env: EnvironmentContext, conc: Concentrations, species: str, gamma: float
) -> float:
    """Breakdown of an iodine species on acidic fine sea salt forming ICl."""
    return _ibrkdn(env, conc, species, gamma, False, "SALACL", 0.85)


@rate_law("IbrkdnByAcidSALCCl", order=2, needs_concentrations=True)
def ibrkdn_by_acid_salccl(
    env: EnvironmentContext, conc: Concentrations, species: str, gamma: float
) -> float:
    """Breakdown of an iodine species on acidic coarse sea salt forming ICl."""
    return _ibrkdn(env, conc, species, gamma, True, "SALCCL", 0.85)


@rate_law("IONO2uptkByH2O", order=2, needs_concentrations=True)
def iono2_uptk_by_h2o(env: EnvironmentContext, conc: Concentrations) -> float:
    """IONO2 + H2O on sulfate, alkaline sea salt, ice and in cloud."""
    het = env.het
    srmw = sr_mw("IONO2")
    clear = het.clear_fr

    gamma = max(0.0021 * env.temperature - 0.561, 0.0)
    k = _sum_ars(env, (SUL,), gamma, srmw, scale=clear)
    if het.ssa_is_alk:
        k += _sum_ars(env, (SSA,), 0.01, srmw, scale=clear)
    if het.ssc_is_alk:
        k += _sum_ars(env, (SSC,), 0.01, srmw, scale=clear)
    k += _sla(env, KhetiSla.BrNO3_plus_H2O)
    k += _ice(env, 0.3, 0.001, srmw, scale=clear)
    k += cloud_het(env, srmw, 0.01, 0.01, 1.0, 1.0)
    return kiir1ltd(conc["IONO2"], conc["H2O"], k)


# ----
# N2O5
# ----


def clno2_bt(cl: float, h2o: float) -> float:
    """ClNO2 yield from N2O5 uptake (Bertram and Thornton, 2009).

    Parameters
    ----------
    cl : float
        Aerosol chloride molarity, [:math:`mol \\ L^{-1}`]
    h2o : float
        Aerosol water molarity, [:math:`mol \\ L^{-1}`]

    Returns
    -------
    float
        Yield in [0, 1]
    """
    k2k3 = 1.0 / 4.5e2
    if h2o < 0.1:
        return 1.0 if cl > 1.0e-3 else 0.0
    return 1.0 / (1.0 + k2k3 * safe_div(h2o, cl, 1.0e30))


@dataclasses.dataclass(frozen=True)
class N2O5Uptake:
    """N2O5 uptake on coated particles."""

    #: Uptake coefficient
    gamma: float

    #: ClNO2 yield
    y_clno2: float

    #: Particle radius, [:math:`cm`]
    radius: float

    #: Particle surface area density, [:math:`cm^{2} \ cm^{-3}`]
    area: float


def n2o5_inorg_org(
    env: EnvironmentContext,
    vol_inorg: float,
    vol_org: float,
    h2o_inorg: float,
    h2o_org: float,
    r_core: float,
    nit: float,
    cl: float,
) -> N2O5Uptake:
    """N2O5 uptake on an inorganic core with an organic coating.

    Core uptake follows :cite:`bertramToward2009` and the organic coating
    resistance :cite:`antillaOrganic2006` as combined by
    :cite:`mcduffieHeterogeneousN2O5Uptake2018`.

    Parameters
    ----------
    env : EnvironmentContext
        Evaluation context
    vol_inorg, vol_org : float
        Inorganic and organic volume densities, [:math:`cm^{3} \\ cm^{-3}`]
    h2o_inorg, h2o_org : float
        Aerosol water volume in the inorganic and organic fractions, [:math:`cm^{3} \\ cm^{-3}`]
    r_core : float
        Core radius, [:math:`cm`]
    nit, cl : float
        Aerosol nitrate and chloride, [:math:`molecules \\ cm^{-3}`]

    Returns
    -------
    N2O5Uptake
    """
    kh = 5.1e1
    k3k2b = 4.0e-2
    beta = 1.15e6
    delta = 1.3e-1
    haq = 5.0e3
    daq = 1.0e-9

    vol_total = vol_inorg + vol_org
    h2o_total = h2o_inorg + h2o_org
    if vol_total <= 0.0:
        return N2O5Uptake(0.0, 0.0, r_core, 0.0)

    vol_ratio_dry = safe_div(max(vol_inorg - h2o_inorg, 0.0), max(vol_total - h2o_total, 0.0), 0.0)
    rp = safe_div(r_core, vol_ratio_dry ** (1.0 / 3.0), r_core)
    if rp <= 0.0:
        return N2O5Uptake(0.0, 0.0, rp, 0.0)
    coat = rp - r_core

    T = env.temperature
    # m s-1
    speed = mean_speed(MOLAR_MASS["N2O5"], T) / 100.0

    m_h2o = h2o_total / 18.0 / vol_total * 1000.0
    m_nit = nit / vol_total / constants.N_A * 1000.0
    m_cl = cl / vol_total / constants.N_A * 1000.0

    het = env.het
    oc_ratio = ((het.omoc_poa + het.omoc_opoa) / 2.0 - 1.17) / 1.29
    eps = 1.5e-1 * oc_ratio + 1.6e-3 * env.relative_humidity

    gamma_coat = 0.0
    if coat > 0.0:
        gamma_coat = (four_rt(T) * 1.0e-3 * eps * haq * daq * r_core / 100.0) / (
            speed * coat / 100.0 * rp / 100.0
        )

    area_total = 3.0 * vol_total / rp

    if m_h2o < 0.1:
        gamma_core = 0.005
    else:
        speed *= 100.0
        a = min((4.0 * vol_total) / (speed * area_total) * kh, 3.2e-8)
        if delta * m_h2o < 1.0e-2:
            k2f = beta * (delta * m_h2o)
        else:
            k2f = beta * (1.0 - math.exp(-delta * m_h2o))
        gamma_core = a * k2f * (1.0 - 1.0 / (1.0 + safe_div(k3k2b * m_h2o, m_nit, 1.0e30)))

    if gamma_coat <= 0.0:
        gamma = gamma_core
    elif gamma_core <= 0.0:
        gamma = 0.0
    else:
        gamma = 1.0 / (1.0 / gamma_core + 1.0 / gamma_coat)

    return N2O5Uptake(gamma, clno2_bt(m_cl, m_h2o), rp, area_total)


def _n2o5_fine(env: EnvironmentContext, conc: Concentrations) -> N2O5Uptake:
    het = env.het
    return n2o5_inorg_org(
        env,
        het.acl_vol,
        het.volume(ORC),
        het.water(SUL),
        het.water(ORC),
        het.acl_radi,
        conc["NIT"],
        conc["SALACL"],
    )


def _n2o5_coarse(env: EnvironmentContext, conc: Concentrations) -> N2O5Uptake:
    het = env.het
    return n2o5_inorg_org(
        env,
        het.volume(SSC),
        0.0,
        het.water(SSC),
        0.0,
        het.radius(SSC),
        conc["NITs"],
        conc["SALCCL"],
    )


@rate_law("N2O5uptkByH2O", order=2, needs_concentrations=True)
def n2o5_uptk_by_h2o(env: EnvironmentContext, conc: Concentrations) -> float:
    """N2O5 hydrolysis on dust, coated fine aerosol, black carbon, sea salt and ice."""
    het = env.het
    clear = het.clear_fr
    srmw = sr_mw("N2O5")

    k = _sum_ars(env, DUST_BINS, 0.02, srmw, scale=clear)

    fine = _n2o5_fine(env, conc)
    ktmp = ars_l1k(clear * fine.area, fine.radius, fine.gamma, srmw, env)
    k += ktmp - ktmp * fine.y_clno2 * 0.25

    k += _sum_ars(env, (BKC,), 0.005, srmw, scale=clear)

    coarse = _n2o5_coarse(env, conc)
    ktmp = ars_l1k(clear * coarse.area, coarse.radius, coarse.gamma, srmw, env)
    k += ktmp - ktmp * coarse.y_clno2

    k += _sla(env, KhetiSla.N2O5_plus_H2O)
    k += _ice(env, 0.02, 4.0e-4, srmw, scale=clear)
    return kiir1ltd(conc["N2O5"], conc["H2O"], k)


@rate_law("N2O5uptkBySALACl", order=2, needs_concentrations=True)
def n2o5_uptk_by_salacl(env: EnvironmentContext, conc: Concentrations) -> float:
    """N2O5 + Cl- on fine aerosol forming ClNO2."""
    fine = _n2o5_fine(env, conc)
    k = ars_l1k(env.het.clear_fr * fine.area, fine.radius, fine.gamma, sr_mw("N2O5"), env)
    k *= fine.y_clno2 * 0.25
    return kiir1ltd(conc["N2O5"], conc["SALACL"], k)


@rate_law("N2O5uptkBySALCCl", order=2, needs_concentrations=True)
def n2o5_uptk_by_salccl(env: EnvironmentContext, conc: Concentrations) -> float:
    """N2O5 + Cl- on coarse sea salt forming ClNO2."""
    coarse = _n2o5_coarse(env, conc)
    k = ars_l1k(env.het.clear_fr * coarse.area, coarse.radius, coarse.gamma, sr_mw("N2O5"), env)
    k *= coarse.y_clno2
    return kiir1ltd(conc["N2O5"], conc["SALCCL"], k)


@rate_law("N2O5uptkByCloud", order=1)
def n2o5_uptk_by_cloud(env: EnvironmentContext) -> float:
    """N2O5 hydrolysis in tropospheric liquid and ice cloud."""
    T = env.temperature
    gamma = 0.03 / 0.019 * math.exp(-25.5265 + 9283.76 / T - 851801.0 / (T * T))
    return cloud_het(env, sr_mw("N2O5"), gamma, 0.02, 1.0, 1.0)


@rate_law("N2O5uptkByStratHCl", order=2, needs_concentrations=True)
def n2o5_uptk_by_strat_hcl(env: EnvironmentContext, conc: Concentrations) -> float:
    """N2O5 + HCl on stratospheric aerosol and polar stratospheric clouds."""
    k = 0.0
    if env.het.strat_box:
        k += _sla(env, KhetiSla.N2O5_plus_HCl)
        k += _ice(env, 0.03, 0.003, sr_mw("N2O5"))
    return kiir1ltd(conc["N2O5"], conc["HCl"], k)


# --------
# NO2, NO3
# --------


@rate_law("NO2uptk1stOrdAndCloud", order=1)
def no2_uptk_1st_ord_and_cloud(env: EnvironmentContext) -> float:
    """First-order NO2 uptake on all aerosol types and liquid cloud."""
    het = env.het
    srmw = sr_mw("NO2")
    rh = env.relative_humidity

    k = _sum_ars(env, DUST_BINS, 1.0e-8, srmw)
    k += _sum_ars(env, (SUL,), 5.0e-6, srmw)
    k += _sum_ars(env, (BKC,), 1.0e-4, srmw)
    k += _sum_ars(env, (ORC,), 1.0e-6, srmw)

    if rh < 40.0:
        gamma = 1.0e-8
    elif rh > 70.0:
        gamma = 1.0e-4
    else:
        gamma = 1.0e-8 + (1.0e-4 - 1.0e-8) * (rh - 40.0) / 30.0
    k += _sum_ars(env, (SSA, SSC), gamma, srmw)

    k += het.area(SLA) * 1.0e-4
    k += _sum_ars(env, (IIC,), 1.0e-4, srmw)
    k += cloud_het(env, srmw, 1.0e-8, 0.0, 1.0, 0.0)
    return k


def gam_no3(T: float, area: float, radius: float, water: float, c_x: float) -> float:
    """Uptake coefficient of NO3 on sea salt by reaction with Cl- and water.

    Parameters
    ----------
    T : float
        Temperature, [:math:`K`]
    area : float
        Surface area density, [:math:`cm^{2} \\ cm^{-3}`]
    radius : float
        Particle radius, [:math:`cm`]
    water : float
        Aerosol water, [:math:`g \\ cm^{-3}`] scaled by 1e12
    c_x : float
        Cl- concentration, [:math:`mol \\ L^{-1}`]

    Returns
    -------
    float
        Uptake coefficient
    """
    inv_alpha = 1.0 / 1.3e-2
    # L cm-3 air
    vol = area * radius * 1.0e-3 / 3.0
    water_c = safe_div(water / 18.0e12, vol, 0.0)
    k_tot = 2.76e6 * c_x + 23.0 * water_c
    if k_tot <= 0.0:
        return 0.0
    henry = 0.6 * constants.CON_ATM_BAR
    return _bulk_gamma(T, MOLAR_MASS["NO3"], henry, 1.0e-5, k_tot, radius, inv_alpha)


@rate_law("NO3uptk1stOrdAndCloud", order=1)
def no3_uptk_1st_ord_and_cloud(env: EnvironmentContext) -> float:
    """First-order NO3 uptake on aerosol, ice and cloud."""
    het = env.het
    srmw = sr_mw("NO3")

    k = _sum_ars(env, DUST_BINS, 0.01, srmw)
    k += _sum_ars(env, (BKC,), 2.0e-4 if env.relative_humidity < 50.0 else 1.0e-3, srmw)
    k += _sum_ars(env, (ORC,), 0.005, srmw)
    k += het.area(SLA) * 0.1
    k += _sum_ars(env, (IIC,), 0.1, srmw)
    k += cloud_het(env, srmw, 0.002, 0.001, 1.0, 1.0)
    return k


@rate_law("NO3hypsisClonSALA", order=1)
def no3_hypsis_cl_on_sala(env: EnvironmentContext) -> float:
    """NO3 hydrolysis and reaction with Cl- on fine sea salt."""
    het = env.het
    gamma = 0.01 * gam_no3(
        env.temperature,
        het.acl_area,
        het.acl_radi,
        het.sea_salt_water(SeaSaltBin.SS_FINE),
        het.cl_conc_ssa,
    )
    return _fine_chloride(env, gamma, sr_mw("NO3"))


@rate_law("NO3hypsisClonSALC", order=1)
def no3_hypsis_cl_on_salc(env: EnvironmentContext) -> float:
    """NO3 hydrolysis and reaction with Cl- on coarse sea salt."""
    het = env.het
    gamma = 0.01 * gam_no3(
        env.temperature,
        het.area(SSC),
        het.radius(SSC),
        het.sea_salt_water(SeaSaltBin.SS_COARSE),
        het.cl_conc_ssc,
    )
    return _coarse_sea_salt(env, gamma, sr_mw("NO3"))


# -------
# O3 + Br
# -------


def gamma_o3_br(T: float, radius: float, c_br: float, c_o3: float) -> float:
    """Uptake coefficient of O3 by reaction with aqueous Br-.

    Sums a Langmuir-Hinshelwood surface term and a bulk reacto-diffusive term.

    Parameters
    ----------
    T : float
        Temperature, [:math:`K`]
    radius : float
        Particle radius, [:math:`cm`]
    c_br : float
        Br- concentration, [:math:`mol \\ L^{-1}`]
    c_o3 : float
        Gas-phase O3, [:math:`molecules \\ cm^{-3}`]

    Returns
    -------
    float
        Uptake coefficient
    """
    if c_br <= 0.0:
        return 0.0

    henry = 1.1e-2 * constants.CON_ATM_BAR * math.exp(2300.0 * (1.0 / T - constants.INV_T298))
    cavg = mean_speed(MOLAR_MASS["O3"], T)

    n_max = 3.0e14
    k_lang_c = 1.0e-13
    k_s = 1.0e-16
    c_br_surf = min(3.41e14 * c_br, n_max)
    gs = (4.0 * k_s * c_br_surf * k_lang_c * n_max) / (cavg * (1.0 + k_lang_c * c_o3))

    k_b = 6.3e8 * math.exp(-4.45e3 / T)
    d_l = 8.9e-6
    l_r = math.sqrt(d_l / (k_b * c_br))
    gb = four_rt(T) * henry * l_r * k_b * c_br / cavg
    gb *= reacto_diff_corr(radius, l_r)
    return gb + gs


def _o3_in_trop_cloud(env: EnvironmentContext, conc: Concentrations, fraction: float) -> float:
    het = env.het
    if het.strat_box:
        return 0.0
    gamma = gamma_o3_br(env.temperature, het.r_liq, het.br_conc_cld, conc["O3"])
    return cloud_het(env, sr_mw("O3"), gamma, 0.0, fraction, 0.0)


@rate_law("O3uptkByHBr", order=2, needs_concentrations=True)
def o3_uptk_by_hbr(env: EnvironmentContext, conc: Concentrations) -> float:
    """O3 + Br- from dissolved HBr in tropospheric cloud."""
    k = _o3_in_trop_cloud(env, conc, env.het.frac_br_cld_g)
    return kiir1ltd(conc["O3"], conc["HBr"], k)


@rate_law("O3uptkByBrSALA", order=2, needs_concentrations=True)
def o3_uptk_by_brsala(env: EnvironmentContext, conc: Concentrations) -> float:
    """O3 + Br- in cloud and on acidic fine sea salt."""
    het = env.het
    k = _o3_in_trop_cloud(env, conc, het.frac_br_cld_a)
    if het.ssa_is_acid:
        gamma = gamma_o3_br(env.temperature, het.acl_radi, het.br_conc_ssa, conc["O3"])
        k += _fine_chloride(env, gamma, sr_mw("O3"))
    return kiir1ltd(conc["O3"], conc["BrSALA"], k)


@rate_law("O3uptkByBrSALC", order=2, needs_concentrations=True)
def o3_uptk_by_brsalc(env: EnvironmentContext, conc: Concentrations) -> float:
    """O3 + Br- in cloud and on acidic coarse sea salt."""
    het = env.het
    k = _o3_in_trop_cloud(env, conc, het.frac_br_cld_c)
    if het.ssc_is_acid:
        gamma = gamma_o3_br(env.temperature, het.radius(SSC), het.br_conc_ssc, conc["O3"])
        k += _coarse_sea_salt(env, gamma, sr_mw("O3"))
    return kiir1ltd(conc["O3"], conc["BrSALC"], k)


# -----------
# OH + Cl-
# -----------


@rate_law("OHuptkBySALACl", order=2, needs_concentrations=True)
def oh_uptk_by_salacl(env: EnvironmentContext, conc: Concentrations) -> float:
    """OH + Cl- on fine sea salt."""
    het = env.het
    gamma = 0.04 * het.cl_conc_ssa
    k = ars_l1k(het.acl_area, het.acl_radi, gamma, sr_mw("OH"), env)
    return kiir1ltd(conc["OH"], conc["SALACL"], k)


@rate_law("OHuptkBySALCCl", order=2, needs_concentrations=True)
def oh_uptk_by_salccl(env: EnvironmentContext, conc: Concentrations) -> float:
    """OH + Cl- on coarse sea salt."""
    het = env.het
    gamma = 0.04 * het.cl_conc_ssc
    k = ars_l1k(het.area(SSC), het.radius(SSC), gamma, sr_mw("OH"), env)
    return kiir1ltd(conc["OH"], conc["SALCCL"], k)


# --------------------
# Organic aerosol SOA
# --------------------


@rate_law("GLYXuptk1stOrd", order=1)
def glyx_uptk_1st_ord(env: EnvironmentContext, srmw: float) -> float:
    """Glyoxal uptake on wet sulfate, faster in daylight."""
    if env.relative_humidity < constants.CRITRH:
        return 0.0
    gamma = 4.4e-3 if env.suncos > 0.0 else 8.0e-6
    return _sum_ars(env, (SUL,), gamma, srmw)


def epox_uptk_gamma(env: EnvironmentContext, srmw: float) -> float:
    """Uptake coefficient of isoprene epoxides on acidic sulfate.

    Follows the resistor model of :cite:`maraisAqueousPhaseMechanismSecondary2016`
    with acid catalysed, nucleophile and bisulfate pathways.
    """
    diff_std = 1.0e-1
    ma_coeff = 1.0e-1
    k_hplus = 3.6e-2
    k_nuc = 2.0e-4
    k_hso4 = 7.3e-4
    hstar_epox = 1.7e7

    het = env.het
    area = het.area(SUL)
    radius = het.radius(SUL)
    aer_vol = area * radius / 3.0
    xmms = math.sqrt(2.117e8 * env.temperature / (srmw * srmw))

    k_part = (
        k_hplus * het.h_plus
        + k_nuc * het.h_plus * (het.no3_molal + het.so4_molal)
        + k_hso4 * het.hso4_molal
    )
    if k_part < 1.0e-8:
        return 0.0

    val1 = radius * xmms / (4.0 * diff_std)
    val2 = 1.0 / ma_coeff
    val3 = 0.0
    if area > 0.0 and xmms > 0.0:
        val_tmp = four_rt(env.temperature) * aer_vol * hstar_epox * k_part / (area * xmms)
        if val_tmp > 0.0:
            val3 = 1.0 / val_tmp

    return max(1.0 / (val1 + val2 + val3), 0.0)


@rate_law("IEPOXuptk1stOrd", order=1)
def iepox_uptk_1st_ord(env: EnvironmentContext, srmw: float, do_scale: bool) -> float:
    """Epoxide uptake on wet sulfate.

    With ``do_scale`` the uptake coefficient is reduced 30 fold in strongly
    acidic aerosol.
    """
    if env.relative_humidity < constants.CRITRH:
        return 0.0
    gamma = epox_uptk_gamma(env, srmw)
    if do_scale and env.het.h_plus > 8.0e-5:
        gamma /= 30.0
    return _sum_ars(env, (SUL,), gamma, srmw)


@rate_law("MGLYuptk1stOrd", order=1)
def mgly_uptk_1st_ord(env: EnvironmentContext, srmw: float) -> float:
    """Methylglyoxal uptake on wet sulfate."""
    if env.relative_humidity < constants.CRITRH:
        return 0.0
    return _sum_ars(env, (SUL,), 3.6e-7, srmw)


@rate_law("VOCuptk1stOrd", order=1)
def voc_uptk_1st_ord(env: EnvironmentContext, srmw: float, gamma: float) -> float:
    """Uptake of low volatility organics and organic nitrates on wet aerosol and ice."""
    if env.relative_humidity < constants.CRITRH:
        return 0.0
    k = _sum_ars(env, (SUL, BKC, ORC, SSA, SSC), gamma, srmw)
    k += env.het.area(SLA) * gamma
    k += _sum_ars(env, (IIC,), gamma, srmw)
    return k

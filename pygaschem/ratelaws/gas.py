"""Gas phase rate law families.

Formulas follow the GEOS-Chem KPP rate law library. Family names encode which
Arrhenius terms are evaluated: ``GCARR_ac`` takes the ``a`` and ``c``
parameters and never evaluates :math:`(300/T)^b`. All formulas accept scalar
or :class:`numpy.ndarray` temperature and number density.

References
----------
- :cite:`burkholderChemicalKineticsPhotochemical2019`
- :cite:`atkinsonEvaluatedKineticPhotochemical2004`
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from pygaschem.physics import constants
from pygaschem.ratelaws.base import RateLaw, rate_law
from pygaschem.utils.types import ArrayScalarLike

if TYPE_CHECKING:
    from pygaschem.core.environment import EnvironmentContext


# ---------
# Arrhenius
# ---------


@rate_law("ARR")
def arrhenius(
    env: EnvironmentContext, a0: float, b0: float = 0.0, c0: float = 0.0
) -> ArrayScalarLike:
    r"""Arrhenius law :math:`k = a_0 e^{c_0 / T} (300 / T)^{b_0}`.

    Terms with ``b0 == 0`` or ``c0 == 0`` are not evaluated, so results are
    identical to the reduced forms ``GCARR_ab`` and ``GCARR_ac``.
    """
    T = env.temperature
    k = a0
    if c0 != 0.0:
        k = k * np.exp(c0 / T)
    if b0 != 0.0:
        k = k * (300.0 / T) ** b0
    return k


@rate_law("ARR_M")
def arrhenius_m(
    env: EnvironmentContext, a0: float, b0: float = 0.0, c0: float = 0.0
) -> ArrayScalarLike:
    """Arrhenius law multiplied by the number density of air, for termolecular reactions."""
    return arrhenius.formula(env, a0, b0, c0) * env.number_density


@rate_law("ARRPLUS_ade")
def arrplus_ade(env: EnvironmentContext, a0: float, d0: float, e0: float) -> ArrayScalarLike:
    """Modified Arrhenius law :math:`k = a_0 (d_0 + T e_0)`, floored at 0."""
    k = a0 * (d0 + env.temperature * e0)
    return np.maximum(k, 0.0)


@rate_law("ARRPLUS_abde")
def arrplus_abde(
    env: EnvironmentContext, a0: float, b0: float, d0: float, e0: float
) -> ArrayScalarLike:
    """Modified Arrhenius law :math:`k = a_0 (d_0 + T e_0) e^{-b_0 / T}`, floored at 0."""
    T = env.temperature
    k = a0 * (d0 + T * e0) * np.exp(-b0 / T)
    return np.maximum(k, 0.0)


@rate_law("TUNPLUS_abcde")
def tunplus_abcde(
    env: EnvironmentContext, a0: float, b0: float, c0: float, d0: float, e0: float
) -> ArrayScalarLike:
    """Tunneling corrected unimolecular rate, used for the IHOO1 and IHOO4 H-shifts."""
    T = env.temperature
    k = a0 * (d0 + T * e0)
    k = k * np.exp(b0 / T) * np.exp(c0 / T**3)
    return np.maximum(k, 0.0)


# --------------------
# Isoprene + OH, RO2
# --------------------


def _iso_fraction(
    T: ArrayScalarLike, c0: float, d0: float, e0: float, f0: float, g0: float
) -> ArrayScalarLike:
    k0 = d0 * np.exp(e0 / T) * np.exp(1.0e8 / T**3)
    k1 = f0 * np.exp(g0 / T)
    return c0 * k0 / (k0 + k1)


@rate_law("GC_ISO1")
def gc_iso1(
    env: EnvironmentContext,
    a0: float,
    b0: float,
    c0: float,
    d0: float,
    e0: float,
    f0: float,
    g0: float,
) -> ArrayScalarLike:
    """ISOP + OH branch forming IHOO1 and IHOO4."""
    T = env.temperature
    return a0 * np.exp(b0 / T) * (1.0 - _iso_fraction(T, c0, d0, e0, f0, g0))


@rate_law("GC_ISO2")
def gc_iso2(
    env: EnvironmentContext,
    a0: float,
    b0: float,
    c0: float,
    d0: float,
    e0: float,
    f0: float,
    g0: float,
) -> ArrayScalarLike:
    """ISOP + OH branch with prompt HPALD formation. Complements :func:`gc_iso1`."""
    T = env.temperature
    return a0 * np.exp(b0 / T) * _iso_fraction(T, c0, d0, e0, f0, g0)


@rate_law("GC_EPO_a")
def gc_epo_a(env: EnvironmentContext, a1: float, e1: float, m1: float) -> ArrayScalarLike:
    """Epoxide formation from hydroxy hydroperoxides (RIPA + OH and similar)."""
    k1 = 1.0 / (m1 * env.number_density + 1.0)
    return a1 * np.exp(e1 / env.temperature) * k1


def _pan_falloff(k0: ArrayScalarLike, k1: ArrayScalarLike, cf: float) -> ArrayScalarLike:
    kr = k0 / k1
    nc = 0.75 - 1.27 * np.log10(cf)
    f = 10.0 ** (np.log10(cf) / (1.0 + (np.log10(kr) / nc) ** 2))
    return k0 * k1 * f / (k0 + k1)


@rate_law("GC_PAN_abab")
def gc_pan_abab(
    env: EnvironmentContext, a0: float, b0: float, a1: float, b1: float, cf: float
) -> ArrayScalarLike:
    """IUPAC falloff for PAN formation and decomposition, exponential form."""
    T = env.temperature
    k0 = a0 * np.exp(b0 / T) * env.number_density
    k1 = a1 * np.exp(b1 / T)
    return _pan_falloff(k0, k1, cf)


@rate_law("GC_PAN_acac")
def gc_pan_acac(
    env: EnvironmentContext, a0: float, c0: float, a1: float, c1: float, cf: float
) -> ArrayScalarLike:
    """IUPAC falloff for PAN formation and decomposition, power law form."""
    t_over_300 = env.temperature / 300.0
    k0 = a0 * t_over_300**c0 * env.number_density
    k1 = a1 * t_over_300**c1
    return _pan_falloff(k0, k1, cf)


def _nitrate_k2(T: ArrayScalarLike, M: ArrayScalarLike, n: float) -> ArrayScalarLike:
    k0 = 2.0e-22 * np.exp(n) * M
    k1 = k0 / (4.3e-1 * (T / 298.0) ** (-8))
    return (k0 / (1.0 + k1)) * 4.1e-1 ** (1.0 / (1.0 + np.log10(k1) ** 2))


@rate_law("GC_NIT")
def gc_nit(
    env: EnvironmentContext, a0: float, b0: float, c0: float, n: float, x0: float, y0: float
) -> ArrayScalarLike:
    """Nitrate forming branch of isoprene RO2 + NO, floored at 0."""
    T = env.temperature
    k2 = _nitrate_k2(T, env.number_density, n)
    k3 = k2 / (k2 + c0)
    k = a0 * (x0 - T * y0) * np.exp(b0 / T) * k3
    return np.maximum(k, 0.0)


@rate_law("GC_ALK")
def gc_alk(
    env: EnvironmentContext, a0: float, b0: float, c0: float, n: float, x0: float, y0: float
) -> ArrayScalarLike:
    """Alkoxy forming branch of isoprene RO2 + NO, floored at 0."""
    T = env.temperature
    k2 = _nitrate_k2(T, env.number_density, n)
    k3 = c0 / (k2 + c0)
    k = a0 * (x0 - T * y0) * np.exp(b0 / T) * k3
    return np.maximum(k, 0.0)


# ---------------------
# Reaction specific laws
# ---------------------


@rate_law("GC_HO2HO2_acac")
def gc_ho2ho2_acac(
    env: EnvironmentContext, a0: float, c0: float, a1: float, c1: float
) -> ArrayScalarLike:
    r"""HO2 + HO2 = H2O2 + O2, including the pressure and water vapor enhancement.

    .. math::

        k = (a_0 e^{c_0/T} + a_1 e^{c_1/T} M) (1 + 1.4 \times 10^{-21} [H_2O] e^{2200/T})
    """
    T = env.temperature
    k0 = a0 * np.exp(c0 / T)
    k1 = a1 * np.exp(c1 / T)
    return (k0 + k1 * env.number_density) * (1.0 + 1.4e-21 * env.h2o * np.exp(2200.0 / T))


@rate_law("GC_TBRANCH_1_acac")
def gc_tbranch_1_acac(
    env: EnvironmentContext, a0: float, c0: float, a1: float, c1: float
) -> ArrayScalarLike:
    """Temperature dependent branching ratio."""
    T = env.temperature
    k0 = a0 * np.exp(c0 / T)
    k1 = a1 * np.exp(c1 / T)
    return k0 / (1.0 + k1)


@rate_law("GC_TBRANCH_2_acabc")
def gc_tbranch_2_acabc(
    env: EnvironmentContext, a0: float, c0: float, a1: float, b1: float, c1: float
) -> ArrayScalarLike:
    """Temperature dependent branching ratio with a power law term."""
    T = env.temperature
    k0 = a0 * np.exp(c0 / T)
    k1 = a1 * np.exp(c1 / T) * (300.0 / T) ** b1
    return k0 / (1.0 + k1)


@rate_law("GC_RO2HO2_aca")
def gc_ro2ho2_aca(env: EnvironmentContext, a0: float, c0: float, a1: float) -> ArrayScalarLike:
    """Carbon number dependence of RO2 + HO2, ``a1`` is the number of carbons."""
    k = a0 * np.exp(c0 / env.temperature)
    return k * (1.0 - np.exp(-0.245 * a1))


@rate_law("GC_DMSOH_acac")
def gc_dmsoh_acac(
    env: EnvironmentContext, a0: float, c0: float, a1: float, c1: float
) -> ArrayScalarLike:
    """DMS + OH addition channel, proportional to O2."""
    T = env.temperature
    k0 = a0 * np.exp(c0 / T)
    k1 = a1 * np.exp(c1 / T)
    return (k0 * env.number_density * constants.x_O2) / (1.0 + k1 * constants.x_O2)


@rate_law("GC_GLYXNO3_ac")
def gc_glyxno3_ac(env: EnvironmentContext, a0: float, c0: float) -> ArrayScalarLike:
    """GLYX + NO3 = HNO3 + HO2 + 2CO."""
    o2 = env.number_density * constants.x_O2
    k = a0 * np.exp(c0 / env.temperature)
    return k * (o2 + 3.5e18) / (2.0 * o2 + 3.5e18)


@rate_law("GC_OHHNO3_acacac")
def gc_ohhno3_acacac(
    env: EnvironmentContext, a0: float, c0: float, a1: float, c1: float, a2: float, c2: float
) -> ArrayScalarLike:
    """OH + HNO3, :math:`k = k_0 + k_3 M / (1 + k_3 M / k_2)`."""
    T = env.temperature
    k0 = a0 * np.exp(c0 / T)
    k1 = a1 * np.exp(c1 / T)
    k2 = env.number_density * (a2 * np.exp(c2 / T))
    return k0 + k2 / (1.0 + k2 / k1)


def _glyc_frac(T: ArrayScalarLike) -> ArrayScalarLike:
    return np.maximum(1.0 - 11.0729 * np.exp(-T / 73.0), 0.0)


@rate_law("GC_GLYCOH_A_a")
def gc_glycoh_a(env: EnvironmentContext, a0: float) -> ArrayScalarLike:
    """GLYC + OH, the branch forming CH2O, CO and GLYX."""
    return a0 * _glyc_frac(env.temperature)


@rate_law("GC_GLYCOH_B_a")
def gc_glycoh_b(env: EnvironmentContext, a0: float) -> ArrayScalarLike:
    """GLYC + OH, the branch forming HCOOH. Complements :func:`gc_glycoh_a`."""
    return a0 * (1.0 - _glyc_frac(env.temperature))


def _hac_frac(T: ArrayScalarLike) -> ArrayScalarLike:
    return np.maximum(1.0 - 23.7 * np.exp(-T / 60.0), 0.0)


@rate_law("GC_HACOH_A_ac")
def gc_hacoh_a(env: EnvironmentContext, a0: float, c0: float) -> ArrayScalarLike:
    """HAC + OH = MGLY + HO2."""
    T = env.temperature
    return a0 * np.exp(c0 / T) * _hac_frac(T)


@rate_law("GC_HACOH_B_ac")
def gc_hacoh_b(env: EnvironmentContext, a0: float, c0: float) -> ArrayScalarLike:
    """HAC + OH, the fragmentation branch. Complements :func:`gc_hacoh_a`."""
    T = env.temperature
    return a0 * np.exp(c0 / T) * (1.0 - _hac_frac(T))


def _jpl_falloff(rlow: ArrayScalarLike, rhigh: ArrayScalarLike, fv: float) -> ArrayScalarLike:
    xyrat = rlow / rhigh
    blog = np.log10(xyrat)
    fexp = 1.0 / (1.0 + blog * blog)
    return rlow * fv**fexp / (1.0 + xyrat)


@rate_law("GC_OHCO_a")
def gc_ohco_a(env: EnvironmentContext, a0: float) -> ArrayScalarLike:
    """OH + CO = HO2 + CO2, the sum of the association and chemical activation channels.

    ``a0`` is kept for signature compatibility with the mechanism tables and
    is not used.
    """
    k300 = 300.0 / env.temperature
    M = env.number_density

    klo1 = 5.9e-33 * k300
    khi1 = 1.1e-12 * k300 ** (-1.3)
    kco1 = _jpl_falloff(klo1 * M, khi1, 0.6)

    klo2 = 1.5e-13
    khi2 = 2.1e09 * k300 ** (-6.1)
    xyrat2 = klo2 * M / khi2
    blog2 = np.log10(xyrat2)
    fexp2 = 1.0 / (1.0 + blog2 * blog2)
    kco2 = klo2 * 0.6**fexp2 / (1.0 + xyrat2)
    return kco1 + kco2


# -------------------
# RO2 + NO branching
# -------------------

#: Methyl nitrate yield of MO2 + NO
FYRNO3_C1 = 3.0e-4


@rate_law("GC_RO2NO_A1_ac")
def gc_ro2no_a1(env: EnvironmentContext, a0: float, c0: float) -> ArrayScalarLike:
    """Nitrate branch of MO2 + NO."""
    return a0 * np.exp(c0 / env.temperature) * FYRNO3_C1


@rate_law("GC_RO2NO_B1_ac")
def gc_ro2no_b1(env: EnvironmentContext, a0: float, c0: float) -> ArrayScalarLike:
    """Alkoxy branch of MO2 + NO."""
    return a0 * np.exp(c0 / env.temperature) * (1.0 - FYRNO3_C1)


def fyrno3(T: ArrayScalarLike, M: ArrayScalarLike, n_carbon: float) -> ArrayScalarLike:
    """Alkyl nitrate yield of RO2 + NO for an RO2 with ``n_carbon`` carbons.

    Parameters
    ----------
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    M : ArrayScalarLike
        Number density of air, [:math:`molecules \\ cm^{-3}`]
    n_carbon : float
        Number of carbon atoms, greater than 1

    Returns
    -------
    ArrayScalarLike
        Yield in [0, 1)
    """
    xxyn = 1.94e-22 * np.exp(0.97 * n_carbon) * M
    yyyn = 0.826 * (300.0 / T) ** 8.1
    aaa = np.log10(xxyn / yyyn)
    zzyn = 1.0 / (1.0 + aaa * aaa)
    rarb = (xxyn / (1.0 + xxyn / yyyn)) * 0.411**zzyn
    return rarb / (1.0 + rarb)


@rate_law("GC_RO2NO_A2_aca")
def gc_ro2no_a2(env: EnvironmentContext, a0: float, c0: float, a1: float) -> ArrayScalarLike:
    """Nitrate branch of RO2 + NO for RO2 with ``a1`` > 1 carbons."""
    k0 = a0 * np.exp(c0 / env.temperature)
    return k0 * fyrno3(env.temperature, env.number_density, a1)


@rate_law("GC_RO2NO_B2_aca")
def gc_ro2no_b2(env: EnvironmentContext, a0: float, c0: float, a1: float) -> ArrayScalarLike:
    """Alkoxy branch of RO2 + NO for RO2 with ``a1`` > 1 carbons."""
    k0 = a0 * np.exp(c0 / env.temperature)
    return k0 * (1.0 - fyrno3(env.temperature, env.number_density, a1))


# -----------------------------
# JPL third body falloff laws
# -----------------------------


@rate_law("GCJPLPR_aa")
def gcjplpr_aa(env: EnvironmentContext, a1: float, a2: float, fv: float) -> ArrayScalarLike:
    """Temperature independent third body falloff."""
    return _jpl_falloff(a1 * env.number_density, a2, fv)


@rate_law("GCJPLPR_aba")
def gcjplpr_aba(
    env: EnvironmentContext, a1: float, b1: float, a2: float, fv: float
) -> ArrayScalarLike:
    """Third body falloff with a temperature independent high pressure limit."""
    rlow = a1 * (300.0 / env.temperature) ** b1 * env.number_density
    return _jpl_falloff(rlow, a2, fv)


@rate_law("GCJPLPR_abab")
def gcjplpr_abab(
    env: EnvironmentContext, a1: float, b1: float, a2: float, b2: float, fv: float
) -> ArrayScalarLike:
    r"""Third body falloff with power law limits.

    .. math::

        k_{low} = a_1 (300/T)^{b_1} M, \quad k_{high} = a_2 (300/T)^{b_2}

        k = \frac{k_{low}}{1 + k_{low}/k_{high}} f_v^{1 / (1 + \log_{10}(k_{low}/k_{high})^2)}
    """
    k300 = 300.0 / env.temperature
    rlow = a1 * k300**b1 * env.number_density
    rhigh = a2 * k300**b2
    return _jpl_falloff(rlow, rhigh, fv)


@rate_law("GCJPLPR_abcabc")
def gcjplpr_abcabc(
    env: EnvironmentContext,
    a1: float,
    b1: float,
    c1: float,
    a2: float,
    b2: float,
    c2: float,
    fv: float,
) -> ArrayScalarLike:
    """Third body falloff with full Arrhenius limits."""
    T = env.temperature
    k300 = 300.0 / T
    rlow = a1 * k300**b1 * np.exp(c1 / T) * env.number_density
    rhigh = a2 * k300**b2 * np.exp(c2 / T)
    return _jpl_falloff(rlow, rhigh, fv)


@rate_law("GCJPLEQ_acabab")
def gcjpleq_acabab(
    env: EnvironmentContext,
    a0: float,
    c0: float,
    a1: float,
    b1: float,
    a2: float,
    b2: float,
    fv: float,
) -> ArrayScalarLike:
    """Thermal decomposition rate from a forward falloff rate and an equilibrium constant.

    ``a0`` and ``c0`` parametrize the equilibrium constant, the remaining
    parameters the forward rate as in :func:`gcjplpr_abab`.
    """
    k_eq = a0 * np.exp(c0 / env.temperature)
    return gcjplpr_abab.formula(env, a1, b1, a2, b2, fv) / k_eq


# ---------------
# Supplied rates
# ---------------


@rate_law("CONST")
def constant(env: EnvironmentContext, k: float) -> float:
    """Temperature and pressure independent rate coefficient."""
    return k


def _photolysis(env: EnvironmentContext, index: int, scale: float) -> float:
    return scale * env.j(index)


def photolysis(index: int, scale: float = 1.0) -> RateLaw:
    """Photolysis rate read from ``env.j_values``.

    Parameters
    ----------
    index : int
        1-based index into the j-value array
    scale : float
        Multiplier applied to the j-value, such as a branching ratio

    Returns
    -------
    RateLaw
        First order rate law
    """
    if index < 1:
        raise ValueError(f"Photolysis index must be >= 1, got {index}")
    return RateLaw("PHOTOL", _photolysis, (int(index), float(scale)), order=1)


def _external(env: EnvironmentContext, name: str, default: float | None) -> float:
    try:
        return env.external_rates[name]
    except KeyError:
        if default is None:
            raise KeyError(f"External rate '{name}' not supplied in EnvironmentContext") from None
        return default


def external(name: str, default: float | None = None) -> RateLaw:
    """Rate coefficient computed by a coupled component and read from ``env.external_rates``.

    Parameters
    ----------
    name : str
        Key into ``env.external_rates``
    default : float | None
        Value used if the key is missing. If None, a missing key raises ``KeyError``.

    Returns
    -------
    RateLaw
    """
    return RateLaw(f"EXT[{name}]", _external, (name, default))

"""Numerical helpers shared by the heterogeneous rate laws.

All functions here operate on python floats. Every division that could fail
returns a documented fallback value instead of propagating ``nan`` or ``inf``.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pygaschem.physics import constants

if TYPE_CHECKING:
    from pygaschem.core.environment import EnvironmentContext


# --------------------
# Safe numerical ops.
# --------------------


def _exponent(x: float) -> int:
    """Return the base 2 exponent of ``x`` with mantissa in [0.5, 1)."""
    return math.frexp(x)[1]


def safe_div(num: float, denom: float, alt: float) -> float:
    """Divide ``num`` by ``denom`` unless the quotient would overflow or underflow.

    Parameters
    ----------
    num : float
        Numerator
    denom : float
        Denominator
    alt : float
        Value returned on overflow or division by zero

    Returns
    -------
    float
        ``num / denom``, ``alt`` on overflow or zero ``denom``, or 0 on underflow.
    """
    ediff = _exponent(num) - _exponent(denom)
    if ediff > 1023 or denom == 0.0:
        return alt
    if ediff < -1020:
        return 0.0
    return num / denom


def is_safe_div(num: float, denom: float) -> bool:
    """Return True if ``num / denom`` can be computed without overflow or underflow."""
    ediff = _exponent(num) - _exponent(denom)
    return not (ediff < -1020 or ediff > 1023 or denom == 0.0)


def is_safe_exp(x: float) -> bool:
    """Return True if ``exp(x)`` is representable in double precision."""
    return abs(x) < 709.0


def safe_exp(x: float, alt: float) -> float:
    """Return ``exp(x)``, or ``alt`` if the result is not representable."""
    if is_safe_exp(x):
        return math.exp(x)
    return alt


def coth(x: float) -> float:
    """Hyperbolic cotangent, :math:`(1 + e^{-2x}) / (1 - e^{-2x})`."""
    y = math.exp(-2.0 * x)
    return (1.0 + y) / (1.0 - y)


def reacto_diff_corr(radius: float, length: float) -> float:
    """Reacto-diffusive correction factor for aqueous uptake.

    Parameters
    ----------
    radius : float
        Particle radius, [:math:`cm`]
    length : float
        Reacto-diffusive length scale, [:math:`cm`]

    Returns
    -------
    float
        :math:`coth(x) - 1/x` for :math:`x = radius / length`. Approaches
        1 for large ``x`` and ``x / 3`` as ``x`` goes to 0.
    """
    x = radius / length
    if x > 1000.0:
        return 1.0
    if x < 0.1:
        return x / 3.0
    return coth(x) - 1.0 / x


# -----------------
# Uptake kinetics
# -----------------


def ars_l1k(
    area: float, radius: float, gamma: float, sr_mw: float, env: EnvironmentContext
) -> float:
    r"""Calculate the first-order loss rate of a gas on an aerosol surface.

    Combines gas-phase diffusion and surface accommodation in series.

    Parameters
    ----------
    area : float
        Surface area density, [:math:`cm^{2} \ cm^{-3}`]
    radius : float
        Effective radius, [:math:`cm`]
    gamma : float
        Reactive uptake coefficient, [:math:`1`]
    sr_mw : float
        Square root of the gas molar mass, [:math:`\sqrt{g \ mol^{-1}}`]
    env : EnvironmentContext
        Temperature and number density of the evaluation

    Returns
    -------
    float
        Loss rate, [:math:`s^{-1}`]. Zero if ``gamma`` or ``radius`` is negligible.
    """
    if gamma < 1.0e-30 or radius < 1.0e-30:
        return 0.0

    sr_temp = math.sqrt(env.temperature)
    dfkg = (9.45e17 / env.number_density) * sr_temp * math.sqrt(3.472e-2 + 1.0 / (sr_mw * sr_mw))
    return area / (radius / dfkg + 2.749064e-4 * sr_mw / (gamma * sr_temp))


def kiir1ltd(conc_gas: float, conc_educt: float, k_i: float) -> float:
    r"""Convert a first-order uptake rate to a limited second-order rate coefficient.

    The gas-phase species is assumed to be limiting and the educt abundant.
    Loss rates implying a lifetime shorter than :data:`constants.HET_MIN_LIFE`
    for either reactant are capped.

    Parameters
    ----------
    conc_gas : float
        Concentration of the gas-phase reactant, [:math:`molecules \ cm^{-3}`]
    conc_educt : float
        Concentration of the educt, [:math:`molecules \ cm^{-3}`]
    k_i : float
        First-order loss rate of the gas-phase reactant, [:math:`s^{-1}`]

    Returns
    -------
    float
        Second-order rate coefficient, [:math:`cm^{3} \ molecules^{-1} \ s^{-1}`].
        Exactly 0 if either concentration is 0.
    """
    if conc_educt < 1.0:
        return 0.0
    if not is_safe_div(conc_gas * k_i, conc_educt):
        return 0.0

    k_i_educt = k_i * conc_gas / conc_educt
    k_ii = k_i / conc_educt

    if k_i > 0.0:
        life_a = safe_div(1.0, k_i, 0.0)
        life_b = safe_div(1.0, k_i_educt, 0.0)
        if life_a < life_b and life_a < constants.HET_MIN_LIFE:
            k_ii = safe_div(constants.HET_MIN_RATE, conc_educt, 0.0)
        elif life_b < constants.HET_MIN_LIFE:
            k_ii = safe_div(constants.HET_MIN_RATE, conc_gas, 0.0)

    return k_ii


def cloud_het(
    env: EnvironmentContext,
    sr_mw: float,
    gam_liq: float,
    gam_ice: float,
    br_liq: float,
    br_ice: float,
) -> float:
    r"""Calculate the grid-average loss frequency of a gas on clouds.

    Uses the exact entrainment limited uptake expression of
    :cite:`holmesRoleCloudsTropospheric2019` for a partially cloudy cell,
    treating liquid and ice clouds. The branch ratios select the fraction of
    the reactant consumed by the reaction of interest.

    Parameters
    ----------
    env : EnvironmentContext
        Evaluation context, cloud state is read from ``env.het``
    sr_mw : float
        Square root of the gas molar mass
    gam_liq, gam_ice : float
        Reaction probability on liquid and ice, [:math:`1`]
    br_liq, br_ice : float
        Fraction of the reactant consumed in the liquid and ice branches

    Returns
    -------
    float
        Grid-average loss frequency, [:math:`s^{-1}`]
    """
    het = env.het
    if het.cld_fr < 1.0e-4 or het.a_liq + het.a_ice <= 0.0:
        return 0.0

    k_i = 0.0
    k_ib = 0.0

    if br_liq > 0.0:
        area = safe_div(het.a_liq, het.cld_fr, 0.0)
        if area > 0.0:
            ktmp = ars_l1k(area, het.r_liq, gam_liq, sr_mw, env)
            k_i += ktmp
            k_ib += ktmp * br_liq

    if br_ice > 0.0:
        area = safe_div(het.a_ice, het.cld_fr, 0.0)
        if area > 0.0:
            ktmp = ars_l1k(area, het.r_ice, gam_ice, sr_mw, env)
            k_i += ktmp
            k_ib += ktmp * br_ice

    branch = safe_div(k_ib, k_i, 0.0)
    if not branch > 0.0:
        return 0.0

    # Ratio of in-cloud heterogeneous loss to detrainment
    kk = k_i * constants.tau_cloud

    # Ratio of volume inside to outside cloud
    ff = min(safe_div(het.cld_fr, het.clear_fr, 1.0e30), 1.0e30)

    # Ratio of mass inside to outside cloud
    xx = (ff - kk - 1.0) / 2.0 + math.sqrt(
        1.0 + ff * ff + kk * kk + 2.0 * ff + 2.0 * kk - 2.0 * ff * kk
    ) / 2.0
    xx = max(xx, 0.0)

    # xx / (1 + xx) written as 1 / (1 + 1 / xx) with 1 / xx bounded
    k_het = k_i / (1.0 + safe_div(1.0, xx, 1.0e30))
    return k_het * branch


# ----------------------
# Gas kinetic quantities
# ----------------------


def mean_speed(mw: float, T: float) -> float:
    r"""Mean molecular speed of a gas.

    Parameters
    ----------
    mw : float
        Molar mass, [:math:`g \ mol^{-1}`]
    T : float
        Temperature, [:math:`K`]

    Returns
    -------
    float
        Mean molecular speed, [:math:`cm \ s^{-1}`]
    """
    return math.sqrt(8.0 * constants.R * T / (math.pi * mw * 1.0e-3)) * 100.0


def four_rt(T: float) -> float:
    r"""Return :math:`4 R T` with :math:`R` in [:math:`L \ atm \ mol^{-1} \ K^{-1}`]."""
    return 4.0 * constants.R_latm * T

"""Test pygaschem.ratelaws.het and pygaschem.ratelaws.util modules."""

from __future__ import annotations

import dataclasses
import math

import numpy as np
import pytest

from pygaschem import EnvironmentContext, ReactionTable
from pygaschem.mechanisms.fullchem import DEFAULT_PPB, SPECIES
from pygaschem.mechanisms.fullchem.het import het_table
from pygaschem.physics import constants
from pygaschem.ratelaws import ars_l1k, cloud_het, het, kiir1ltd, safe_div
from pygaschem.ratelaws.util import reacto_diff_corr, safe_exp

HET_TABLE = het_table()


@pytest.fixture()
def conc(het_env: EnvironmentContext) -> dict[str, float]:
    """Concentrations of every species, [molecules cm-3], with a small floor."""
    M = het_env.number_density
    out = {s.name: max(DEFAULT_PPB[s.name], 1.0e-3) * 1.0e-9 * M for s in SPECIES}
    out["H2O"] = het_env.h2o
    return out


def test_het_table_size() -> None:
    """Check the heterogeneous table has one entry per reaction."""
    assert len(HET_TABLE) == 95
    equations = [equation for _, equation in HET_TABLE]
    assert len(set(equations)) == len(equations)


@pytest.mark.parametrize("strat", [False, True])
@pytest.mark.parametrize("index", range(len(HET_TABLE)))
def test_het_finite_non_negative(
    het_env: EnvironmentContext, conc: dict[str, float], index: int, strat: bool
) -> None:
    """Check every heterogeneous law is finite and non-negative with aerosol and cloud."""
    if strat:
        het_env.het = dataclasses.replace(het_env.het, strat_box=True, nat_surface=True)

    law, equation = HET_TABLE[index]
    k = law(het_env, conc)
    assert math.isfinite(k), equation
    assert k >= 0.0, equation


@pytest.mark.parametrize("index", range(len(HET_TABLE)))
def test_het_zero_without_surfaces(
    env: EnvironmentContext, conc: dict[str, float], index: int
) -> None:
    """Check clear conditions give no heterogeneous loss."""
    assert env.het.cld_fr == 0.0
    law, equation = HET_TABLE[index]
    assert law(env, conc) == 0.0, equation


def test_het_first_order_positive(het_env: EnvironmentContext) -> None:
    """Check first-order uptake is active with populated surfaces."""
    assert het.ho2_uptk_1st_ord()(het_env) > 0.0
    assert het.no2_uptk_1st_ord_and_cloud()(het_env) > 0.0
    assert het.no3_uptk_1st_ord_and_cloud()(het_env) > 0.0
    assert het.n2o5_uptk_by_cloud()(het_env) > 0.0
    assert het.glyx_uptk_1st_ord(het.sr_mw("GLYX"))(het_env) > 0.0

    # Glyoxal uptake is slower in the dark
    dark = dataclasses.replace(het_env, suncos=-0.5)
    law = het.glyx_uptk_1st_ord(het.sr_mw("GLYX"))
    assert law(dark) < law(het_env)

    # No uptake on dry aerosol
    dry = dataclasses.replace(het_env, relative_humidity=10.0)
    assert law(dry) == 0.0
    assert het.voc_uptk_1st_ord(het.sr_mw("LVOC"), 1.0)(dry) == 0.0


def test_het_laws_in_table_have_order() -> None:
    """Check heterogeneous laws carry a fixed kinetic order."""
    for law, equation in HET_TABLE:
        assert law.order in (1, 2), equation
        assert law.needs_concentrations == (law.order == 2), equation


def test_mechanism_reads_het_order(fullchem_table: ReactionTable) -> None:
    """Check heterogeneous reactions in the table are flagged."""
    het_reactions = [r for r in fullchem_table.reactions if r.heterogeneous]
    assert len(het_reactions) == len(HET_TABLE)
    for reaction in het_reactions:
        assert reaction.order == reaction.rate_law.order


def test_kiir1ltd() -> None:
    """Check conversion of first-order uptake to a limited second-order rate."""
    assert kiir1ltd(1.0e9, 1.0e10, 1.0e-3) == pytest.approx(1.0e-13)

    # Zero reactants
    assert kiir1ltd(0.0, 1.0e10, 1.0e-3) == 0.0
    assert kiir1ltd(1.0e9, 0.0, 1.0e-3) == 0.0
    assert kiir1ltd(0.0, 0.0, 1.0e-3) == 0.0
    assert kiir1ltd(1.0e9, 1.0e10, 0.0) == 0.0

    # Lifetime of the gas shorter than the minimum
    k = kiir1ltd(1.0e9, 1.0e10, 1.0e4)
    assert k == pytest.approx(constants.HET_MIN_RATE / 1.0e10)


def test_safe_div() -> None:
    """Check fallbacks of safe division."""
    assert safe_div(6.0, 3.0, 0.0) == 2.0
    assert safe_div(1.0, 0.0, 5.0) == 5.0
    assert safe_div(1.0e300, 1.0e-300, 7.0) == 7.0
    assert safe_div(1.0e-300, 1.0e300, 7.0) == 0.0

    assert safe_exp(1.0, 0.0) == pytest.approx(math.e)
    assert safe_exp(1000.0, -1.0) == -1.0


def test_reacto_diff_corr() -> None:
    """Check limits of the reacto-diffusive correction."""
    assert reacto_diff_corr(1.0e4, 1.0) == 1.0
    assert reacto_diff_corr(0.03, 1.0) == pytest.approx(0.01)
    assert reacto_diff_corr(0.0, 1.0) == 0.0

    x = 1.0
    expected = math.cosh(x) / math.sinh(x) - 1.0 / x
    assert reacto_diff_corr(x, 1.0) == pytest.approx(expected)

    # Monotone across the switch points
    xs = np.geomspace(1.0e-3, 1.0e4, 200)
    values = [reacto_diff_corr(x, 1.0) for x in xs]
    assert np.all(np.diff(values) >= -1.0e-3)


def test_br2_yield() -> None:
    """Check the Br2 yield is clamped to [0, 0.9]."""
    assert het.br2_yield(0.0) == 0.0
    assert het.br2_yield(-1.0) == 0.0
    assert het.br2_yield(1.0) == 0.9
    assert het.br2_yield(1.0e-6) == 0.0
    assert het.br2_yield(1.0e-4) == pytest.approx(0.41 * -4.0 + 2.25)


def test_sr_mw() -> None:
    """Check molar mass lookup."""
    assert het.sr_mw("O3") == pytest.approx(math.sqrt(48.0))
    with pytest.raises(KeyError, match="No molar mass tabulated"):
        het.sr_mw("XYZ")


def test_ars_l1k(env: EnvironmentContext) -> None:
    """Check first-order uptake on an aerosol surface."""
    srmw = het.sr_mw("N2O5")
    assert ars_l1k(1.0e-6, 1.0e-5, 0.0, srmw, env) == 0.0
    assert ars_l1k(1.0e-6, 0.0, 0.1, srmw, env) == 0.0

    gammas = [1.0e-4, 1.0e-3, 1.0e-2, 1.0e-1, 1.0]
    k = [ars_l1k(1.0e-6, 1.0e-5, g, srmw, env) for g in gammas]
    assert np.all(np.diff(k) > 0.0)

    # Free molecular limit for small gamma, k = gamma * area * v / 4
    speed = math.sqrt(8.0 * constants.R * env.temperature / (math.pi * 108.02e-3)) * 100.0
    assert k[0] == pytest.approx(1.0e-4 * 1.0e-6 * speed / 4.0, rel=2e-2)


def test_cloud_het(het_env: EnvironmentContext, env: EnvironmentContext) -> None:
    """Check entrainment limited uptake on cloud."""
    srmw = het.sr_mw("N2O5")
    assert cloud_het(env, srmw, 0.1, 0.1, 1.0, 1.0) == 0.0

    k = cloud_het(het_env, srmw, 0.1, 0.1, 1.0, 1.0)
    assert k > 0.0

    # Halving the branch ratio halves the loss
    assert cloud_het(het_env, srmw, 0.1, 0.1, 0.5, 0.5) == pytest.approx(0.5 * k)

    # Entrainment limited by the in-cloud to clear-sky volume ratio
    assert k < 1.0 / constants.tau_cloud * het_env.het.cld_fr / het_env.het.clear_fr * 10.0


@pytest.mark.parametrize("strat", [False, True])
@pytest.mark.parametrize("M", [1.0e10, 1.0e15, 3.0e19])
@pytest.mark.parametrize("T", [180.0, 230.0, 280.0, 320.0])
def test_het_finite_non_negative_over_grid(
    het_env: EnvironmentContext, T: float, M: float, strat: bool
) -> None:
    """Check every heterogeneous law stays finite and non-negative across T and M."""
    env = dataclasses.replace(het_env, temperature=T, number_density=M)
    if strat:
        env.het = dataclasses.replace(env.het, strat_box=True, nat_surface=True)

    conc = {s.name: max(DEFAULT_PPB[s.name], 1.0e-3) * 1.0e-9 * M for s in SPECIES}
    conc["H2O"] = env.h2o

    for law, equation in HET_TABLE:
        k = law(env, conc)
        assert math.isfinite(k), equation
        assert k >= 0.0, equation


def test_iodine_uptake_on_alkaline_sea_salt(
    het_env: EnvironmentContext, env: EnvironmentContext
) -> None:
    """Check iodine uptake on alkaline sea salt follows the alkalinity flags."""
    srmw = het.sr_mw("HOI")
    fine = het.iuptk_by_alk_sala_1st_ord(srmw, 0.01)
    coarse = het.iuptk_by_alk_salc_1st_ord(srmw, 0.01)
    assert fine.order == coarse.order == 1

    # Alkaline sea salt takes up as much as sea salt of either acidity
    assert fine(het_env) == pytest.approx(het.iuptk_by_sala_1st_ord(srmw, 0.01)(het_env))
    assert coarse(het_env) == pytest.approx(het.iuptk_by_salc_1st_ord(srmw, 0.01)(het_env))
    assert fine(het_env) > 0.0
    assert coarse(het_env) > 0.0

    acidic = dataclasses.replace(
        het_env, het=dataclasses.replace(het_env.het, ssa_is_alk=False, ssc_is_alk=False)
    )
    assert fine(acidic) == 0.0
    assert coarse(acidic) == 0.0

    # No surfaces in clear air
    assert fine(env) == 0.0
    assert coarse(env) == 0.0

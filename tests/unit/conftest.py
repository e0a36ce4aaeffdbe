"""Shared fixtures for the unit tests."""

from __future__ import annotations

import numpy as np
import pytest

from pygaschem import EnvironmentContext, HetChemState, Reaction, ReactionTable, Species
from pygaschem.core.environment import AerosolType, KhetiSla, SeaSaltBin
from pygaschem.mechanisms.fullchem import build_fullchem
from pygaschem.ratelaws import arrhenius, photolysis
from pygaschem.ratelaws.gas import arrhenius_m, gcjplpr_abab


@pytest.fixture(scope="module")
def rng() -> np.random.Generator:
    """Get random number generator."""
    return np.random.default_rng(12345)


@pytest.fixture()
def env() -> EnvironmentContext:
    """Mid-latitude boundary layer conditions without aerosol."""
    return EnvironmentContext(
        temperature=298.15,
        number_density=2.5e19,
        relative_humidity=50.0,
        j_values=np.full(166, 1.0e-5),
        h2o=4.0e17,
        suncos=0.5,
    )


@pytest.fixture(scope="module")
def het_state() -> HetChemState:
    """Aerosol and cloud state with every surface populated.

    Scoped for the module.

    Returns
    -------
    HetChemState
    """
    n_types = len(AerosolType)
    return HetChemState(
        ssa_is_acid=True,
        ssc_is_acid=True,
        ssa_is_alk=True,
        ssc_is_alk=True,
        cld_fr=0.3,
        clear_fr=0.7,
        a_liq=1.0e-4,
        a_ice=5.0e-5,
        v_air=1.0e15,
        v_liq=2.0e-8,
        v_ice=1.0e-8,
        x_area=np.full(n_types, 1.0e-6),
        x_radi=np.full(n_types, 1.0e-5),
        x_vol=np.full(n_types, 3.0e-12),
        x_h2o=np.full(n_types, 1.0e-12),
        kheti_sla=np.full(len(KhetiSla), 1.0e-3),
        acl_area=1.0e-6,
        acl_radi=1.0e-5,
        acl_vol=3.0e-12,
        a_water=np.full(len(SeaSaltBin), 1.0),
        cl_conc_ssa=0.5,
        cl_conc_ssc=0.5,
        cl_conc_cld=1.0e-4,
        br_conc_ssa=1.0e-3,
        br_conc_ssc=1.0e-3,
        br_conc_cld=1.0e-6,
        h_conc_ssa=1.0e-4,
        h_conc_ssc=1.0e-5,
        h_conc_lcl=1.0e-5,
        hso3_aq=1.0e-6,
        so3_aq=1.0e-8,
        tso3_aq=1.0e-6,
        hso3m=0.1,
        so3mm=0.01,
        ph_cloud=4.5,
        ph_ssa=np.array([1.5, 5.0]),
        br_over_cl_ssa=2.0e-3,
        br_over_cl_ssc=2.0e-4,
        br_over_cl_cld=1.0e-4,
        frac_br_cld_a=0.3,
        frac_br_cld_c=0.3,
        frac_br_cld_g=0.4,
        frac_cl_cld_a=0.3,
        frac_cl_cld_c=0.3,
        frac_cl_cld_g=0.4,
        frac_salacl=0.5,
        frac_hso3_aq=0.9,
        frac_so3_aq=0.1,
        hcl_theta=0.1,
        hbr_theta=0.01,
        hno3_theta=0.05,
        h_plus=1.0e-4,
        no3_molal=1.0,
        so4_molal=2.0,
        hso4_molal=0.5,
    )


@pytest.fixture()
def het_env(het_state: HetChemState) -> EnvironmentContext:
    """Humid conditions with populated aerosol and cloud."""
    return EnvironmentContext(
        temperature=280.0,
        number_density=2.2e19,
        relative_humidity=80.0,
        j_values=np.full(166, 1.0e-5),
        het=het_state,
        h2o=3.0e17,
        suncos=0.5,
    )


@pytest.fixture()
def small_table() -> ReactionTable:
    """Small ozone photochemistry table with a termolecular reaction.

    Returns
    -------
    ReactionTable
    """
    species = [
        Species("O3", 40.0),
        Species("NO", 1.0),
        Species("NO2", 2.0),
        Species("O", 1.0e-8),
        Species("O2", 2.1e8),
        Species("OH", 1.0e-4),
        Species("HNO3", 0.5),
    ]
    reactions = [
        Reaction.from_equation("O3 + NO --> NO2 + O2", arrhenius(3.0e-12, 0.0, -1500.0)),
        Reaction.from_equation("NO2 + hv --> NO + O", photolysis(11)),
        Reaction.from_equation("O + O2 --> O3", arrhenius_m(6.0e-34, 2.4)),
        Reaction.from_equation(
            "OH + NO2 --> HNO3", gcjplpr_abab(1.8e-30, 3.0, 2.8e-11, 0.0, 0.6)
        ),
    ]
    return ReactionTable(species, reactions)


@pytest.fixture(scope="module")
def fullchem_table() -> ReactionTable:
    """Full chemistry table including heterogeneous reactions.

    Scoped for the module.
    """
    return build_fullchem(include_heterogeneous=True)

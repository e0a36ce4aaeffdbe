"""Per-evaluation physical inputs consumed by rate laws.

:class:`EnvironmentContext` bundles the thermodynamic state of one grid cell
with photolysis rates and a :class:`HetChemState` describing aerosol and
cloud surfaces. Both are supplied by the caller every evaluation and are read
only from the perspective of a rate law.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import math
from collections.abc import Mapping
from typing import Any

import numpy as np
import numpy.typing as npt

from pygaschem.core.exceptions import BuildError
from pygaschem.physics import constants, thermo

logger = logging.getLogger(__name__)


class AerosolType(enum.IntEnum):
    """Aerosol and cloud surface types, numbered from 1."""

    #: Mineral dust, effective radius 0.151 um
    DU1 = 1
    #: Mineral dust, effective radius 0.253 um
    DU2 = 2
    #: Mineral dust, effective radius 0.402 um
    DU3 = 3
    #: Mineral dust, effective radius 0.818 um
    DU4 = 4
    #: Mineral dust, effective radius 1.491 um
    DU5 = 5
    #: Mineral dust, effective radius 2.417 um
    DU6 = 6
    #: Mineral dust, effective radius 3.721 um
    DU7 = 7
    #: Tropospheric sulfate
    SUL = 8
    #: Black carbon
    BKC = 9
    #: Organic carbon
    ORC = 10
    #: Accumulation mode sea salt
    SSA = 11
    #: Coarse mode sea salt
    SSC = 12
    #: Stratospheric sulfate liquid aerosol
    SLA = 13
    #: Irregular ice cloud
    IIC = 14


#: Mineral dust bins
DUST_BINS: tuple[AerosolType, ...] = tuple(AerosolType(i) for i in range(1, 8))


class KhetiSla(enum.IntEnum):
    """Reactions with precomputed rates on stratospheric liquid aerosol."""

    N2O5_plus_H2O = 1
    N2O5_plus_HCl = 2
    ClNO3_plus_H2O = 3
    ClNO3_plus_HCl = 4
    ClNO3_plus_HBr = 5
    BrNO3_plus_H2O = 6
    BrNO3_plus_HCl = 7
    HOCl_plus_HCl = 8
    HOCl_plus_HBr = 9
    HOBr_plus_HCl = 10
    HOBr_plus_HBr = 11


class SeaSaltBin(enum.IntEnum):
    """Sea salt size bins."""

    SS_FINE = 1
    SS_COARSE = 2


def _fixed_array(name: str, value: npt.ArrayLike | None, size: int) -> npt.NDArray[np.float64]:
    if value is None:
        return np.zeros(size)

    arr = np.asarray(value, dtype=float)
    if arr.shape != (size,):
        msg = f"HetChemState field '{name}' must have shape ({size},), got {arr.shape}"
        raise BuildError(msg)

    arr = arr.copy()
    arr.flags.writeable = False
    return arr


@dataclasses.dataclass(frozen=True)
class HetChemState:
    """Aerosol and cloud state consumed by heterogeneous rate laws.

    Array fields indexed by :class:`AerosolType` hold one entry per type,
    ``kheti_sla`` holds one entry per :class:`KhetiSla` reaction and the sea salt
    fields one entry per :class:`SeaSaltBin`. Use the accessor methods rather
    than indexing arrays directly; they take the 1-based enums.

    Raises
    ------
    BuildError
        If an array field does not have the expected length.
    """

    # -----
    # Flags
    # -----

    #: Grid cell is in the stratosphere
    strat_box: bool = False

    #: Ice cloud surface is nitric acid trihydrate
    nat_surface: bool = False

    #: Fine sea salt is acidic
    ssa_is_acid: bool = False

    #: Coarse sea salt is acidic
    ssc_is_acid: bool = False

    #: Fine sea salt is alkaline
    ssa_is_alk: bool = False

    #: Coarse sea salt is alkaline
    ssc_is_alk: bool = False

    # -----
    # Cloud
    # -----

    #: Cloud fraction
    cld_fr: float = 0.0

    #: Clear sky fraction
    clear_fr: float = 1.0

    #: Liquid cloud surface area density [:math:`cm^{2} \ cm^{-3}`]
    a_liq: float = 0.0

    #: Ice cloud surface area density [:math:`cm^{2} \ cm^{-3}`]
    a_ice: float = 0.0

    #: Liquid cloud droplet effective radius [:math:`cm`]
    r_liq: float = constants.CLDR_CONT

    #: Ice crystal effective radius [:math:`cm`]
    r_ice: float = constants.CLDR_ICE

    #: Volume of the grid cell [:math:`cm^{3}`]
    v_air: float = 1.0

    #: Liquid cloud volume density [:math:`cm^{3} \ cm^{-3}`]
    v_liq: float = 0.0

    #: Ice cloud volume density [:math:`cm^{3} \ cm^{-3}`]
    v_ice: float = 0.0

    # --------
    # Aerosols
    # --------

    #: Surface area density per aerosol type [:math:`cm^{2} \ cm^{-3}`]
    x_area: npt.ArrayLike | None = None

    #: Effective radius per aerosol type [:math:`cm`]
    x_radi: npt.ArrayLike | None = None

    #: Volume density per aerosol type [:math:`cm^{3} \ cm^{-3}`]
    x_vol: npt.ArrayLike | None = None

    #: Aerosol water volume density per aerosol type [:math:`cm^{3} \ cm^{-3}`]
    x_h2o: npt.ArrayLike | None = None

    #: Rate coefficients on stratospheric liquid aerosol [:math:`cm \ s^{-1}`]
    kheti_sla: npt.ArrayLike | None = None

    #: Surface area density of fine chloride-containing aerosol [:math:`cm^{2} \ cm^{-3}`]
    acl_area: float = 0.0

    #: Effective radius of fine chloride-containing aerosol [:math:`cm`]
    acl_radi: float = 0.0

    #: Volume density of fine chloride-containing aerosol [:math:`cm^{3} \ cm^{-3}`]
    acl_vol: float = 0.0

    #: Sea salt aerosol water per bin [:math:`g \ cm^{-3}`]
    a_water: npt.ArrayLike | None = None

    # ----------------------
    # Aqueous concentrations
    # ----------------------

    #: Cl- concentration in fine sea salt [:math:`mol \ L^{-1}`]
    cl_conc_ssa: float = 0.0

    #: Cl- concentration in coarse sea salt [:math:`mol \ L^{-1}`]
    cl_conc_ssc: float = 0.0

    #: Cl- concentration in cloud [:math:`mol \ L^{-1}`]
    cl_conc_cld: float = 0.0

    #: Br- concentration in fine sea salt [:math:`mol \ L^{-1}`]
    br_conc_ssa: float = 0.0

    #: Br- concentration in coarse sea salt [:math:`mol \ L^{-1}`]
    br_conc_ssc: float = 0.0

    #: Br- concentration in cloud [:math:`mol \ L^{-1}`]
    br_conc_cld: float = 0.0

    #: H+ concentration in fine sea salt [:math:`mol \ L^{-1}`]
    h_conc_ssa: float = 0.0

    #: H+ concentration in coarse sea salt [:math:`mol \ L^{-1}`]
    h_conc_ssc: float = 0.0

    #: H+ concentration in liquid cloud [:math:`mol \ L^{-1}`]
    h_conc_lcl: float = 0.0

    #: Aqueous HSO3- in cloud [:math:`mol \ L^{-1}`]
    hso3_aq: float = 0.0

    #: Aqueous SO3-- in cloud [:math:`mol \ L^{-1}`]
    so3_aq: float = 0.0

    #: Total aqueous S(IV) in cloud [:math:`mol \ L^{-1}`]
    tso3_aq: float = 0.0

    #: Ratio of HSO3- to gas-phase SO2
    hso3m: float = 0.0

    #: Ratio of SO3-- to gas-phase SO2
    so3mm: float = 0.0

    #: Cloud pH
    ph_cloud: float = 7.0

    #: Sea salt pH per bin
    ph_ssa: npt.ArrayLike | None = None

    #: Br- / Cl- ratio in fine sea salt
    br_over_cl_ssa: float = 0.0

    #: Br- / Cl- ratio in coarse sea salt
    br_over_cl_ssc: float = 0.0

    #: Br- / Cl- ratio in cloud
    br_over_cl_cld: float = 0.0

    # ---------
    # Fractions
    # ---------

    #: Fraction of cloud Br- from fine sea salt
    frac_br_cld_a: float = 0.0

    #: Fraction of cloud Br- from coarse sea salt
    frac_br_cld_c: float = 0.0

    #: Fraction of cloud Br- from gas-phase HBr
    frac_br_cld_g: float = 0.0

    #: Fraction of cloud Cl- from fine sea salt
    frac_cl_cld_a: float = 0.0

    #: Fraction of cloud Cl- from coarse sea salt
    frac_cl_cld_c: float = 0.0

    #: Fraction of cloud Cl- from gas-phase HCl
    frac_cl_cld_g: float = 0.0

    #: Fraction of fine aerosol chloride from sea salt
    frac_salacl: float = 0.0

    #: Fraction of aqueous S(IV) as HSO3-
    frac_hso3_aq: float = 0.0

    #: Fraction of aqueous S(IV) as SO3--
    frac_so3_aq: float = 0.0

    # -------------
    # Ice coverages
    # -------------

    #: HCl surface coverage on ice
    hcl_theta: float = 0.0

    #: HBr surface coverage on ice
    hbr_theta: float = 0.0

    #: HNO3 surface coverage on ice
    hno3_theta: float = 0.0

    # -----
    # Other
    # -----

    #: HO2 uptake coefficient
    gamma_ho2: float = 0.2

    #: Proton activity of sulfate aerosol [:math:`mol \ kg^{-1}`]
    h_plus: float = 0.0

    #: Nitrate molality of sulfate aerosol [:math:`mol \ kg^{-1}`]
    no3_molal: float = 0.0

    #: Sulfate molality of sulfate aerosol [:math:`mol \ kg^{-1}`]
    so4_molal: float = 0.0

    #: Bisulfate molality of sulfate aerosol [:math:`mol \ kg^{-1}`]
    hso4_molal: float = 0.0

    #: Organic mass to organic carbon ratio, primary
    omoc_poa: float = 1.4

    #: Organic mass to organic carbon ratio, oxidized primary
    omoc_opoa: float = 2.1

    def __post_init__(self) -> None:
        n_types = len(AerosolType)
        for name in ("x_area", "x_radi", "x_vol", "x_h2o"):
            object.__setattr__(self, name, _fixed_array(name, getattr(self, name), n_types))
        object.__setattr__(
            self, "kheti_sla", _fixed_array("kheti_sla", self.kheti_sla, len(KhetiSla))
        )
        n_bins = len(SeaSaltBin)
        object.__setattr__(self, "a_water", _fixed_array("a_water", self.a_water, n_bins))
        if self.ph_ssa is None:
            object.__setattr__(self, "ph_ssa", np.full(n_bins, 7.0))
        object.__setattr__(self, "ph_ssa", _fixed_array("ph_ssa", self.ph_ssa, n_bins))

        for name in ("cld_fr", "clear_fr"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                msg = f"HetChemState field '{name}' must lie in [0, 1], got {value}"
                raise BuildError(msg)

    # ---------
    # Accessors
    # ---------

    def area(self, aerosol: AerosolType | int) -> float:
        """Surface area density of ``aerosol``, [:math:`cm^{2} \\ cm^{-3}`]."""
        return float(self.x_area[AerosolType(aerosol) - 1])  # type: ignore[index]

    def radius(self, aerosol: AerosolType | int) -> float:
        """Effective radius of ``aerosol``, [:math:`cm`]."""
        return float(self.x_radi[AerosolType(aerosol) - 1])  # type: ignore[index]

    def volume(self, aerosol: AerosolType | int) -> float:
        """Volume density of ``aerosol``, [:math:`cm^{3} \\ cm^{-3}`]."""
        return float(self.x_vol[AerosolType(aerosol) - 1])  # type: ignore[index]

    def water(self, aerosol: AerosolType | int) -> float:
        """Aerosol water volume density of ``aerosol``, [:math:`cm^{3} \\ cm^{-3}`]."""
        return float(self.x_h2o[AerosolType(aerosol) - 1])  # type: ignore[index]

    def kheti(self, reaction: KhetiSla | int) -> float:
        """Rate coefficient of ``reaction`` on stratospheric liquid aerosol."""
        return float(self.kheti_sla[KhetiSla(reaction) - 1])  # type: ignore[index]

    def sea_salt_water(self, size_bin: SeaSaltBin | int) -> float:
        """Sea salt aerosol water in ``size_bin``."""
        return float(self.a_water[SeaSaltBin(size_bin) - 1])  # type: ignore[index]

    def sea_salt_ph(self, size_bin: SeaSaltBin | int) -> float:
        """Sea salt pH in ``size_bin``."""
        return float(self.ph_ssa[SeaSaltBin(size_bin) - 1])  # type: ignore[index]

    # ------------
    # Constructors
    # ------------

    @classmethod
    def clear(cls) -> HetChemState:
        """Return a state with no aerosol and no cloud."""
        return cls()

    def with_cloud(
        self,
        AD: float,
        CLDF: float,
        FRLAND: float,
        FROCEAN: float,
        QI: float,
        QL: float,
        T: float,
    ) -> HetChemState:
        """Return a copy with cloud geometry computed by :func:`cld_params`.

        See :func:`cld_params` for the parameters.
        """
        cloud = cld_params(AD, CLDF, FRLAND, FROCEAN, QI, QL, T, self.v_air)
        clear_fr = 1.0 - min(max(CLDF, 0.0), 1.0)
        return dataclasses.replace(self, cld_fr=1.0 - clear_fr, clear_fr=clear_fr, **cloud)


def cld_params(
    AD: float,
    CLDF: float,
    FRLAND: float,
    FROCEAN: float,
    QI: float,
    QL: float,
    T: float,
    v_air: float,
) -> dict[str, float]:
    r"""Compute liquid and ice cloud geometry of a grid cell.

    Liquid droplets are spheres with a fixed continental or marine radius. Ice
    crystal effective radius follows the temperature dependent relationships of
    :cite:`heymsfieldRelationshipsIceWater2014` and the ice surface area is 9
    times the cross-sectional area :cite:`schmittTotalSurfaceArea2005`.

    Parameters
    ----------
    AD : float
        Air mass of the grid cell, [:math:`kg`]
    CLDF : float
        Cloud fraction
    FRLAND : float
        Land fraction
    FROCEAN : float
        Ocean fraction
    QI : float
        Ice mixing ratio, [:math:`kg \ kg^{-1}`]
    QL : float
        Liquid mixing ratio, [:math:`kg \ kg^{-1}`]
    T : float
        Temperature, [:math:`K`]
    v_air : float
        Volume of the grid cell, [:math:`cm^{3}`]

    Returns
    -------
    dict[str, float]
        Values for ``r_liq``, ``r_ice``, ``a_liq``, ``a_ice``, ``v_liq`` and ``v_ice``.
    """
    if QL + QI <= 0.0 or CLDF <= 0.0:
        return {
            "r_liq": constants.CLDR_CONT,
            "r_ice": constants.CLDR_ICE,
            "a_liq": 0.0,
            "v_liq": 0.0,
            "a_ice": 0.0,
            "v_ice": 0.0,
        }

    r_liq = constants.CLDR_CONT if FRLAND > FROCEAN else constants.CLDR_MARI

    # Condensate volume [cm3(condensate) cm-3(air)]
    v_liq = QL * AD / constants.DENS_LIQ / v_air
    v_ice = QI * AD / constants.DENS_ICE / v_air
    a_liq = 3.0 * v_liq / r_liq

    # Heymsfield (2014) ice size parameters
    if T < 202.0:
        alpha, beta = 83.3, 0.0184
    elif T < 217.0:
        alpha, beta = 9.1744e4, 0.117
    else:
        alpha, beta = 308.4, 0.0152

    r_ice = 0.5 * alpha * math.exp(beta * (T + constants.absolute_zero)) / 1.0e4
    a_ice = 3.0 * v_ice / r_ice * 2.25

    return {
        "r_liq": r_liq,
        "r_ice": r_ice,
        "a_liq": a_liq,
        "v_liq": v_liq,
        "a_ice": a_ice,
        "v_ice": v_ice,
    }


@dataclasses.dataclass
class EnvironmentContext:
    """Physical inputs for one evaluation of a mechanism.

    Parameters
    ----------
    temperature : float
        Air temperature, [:math:`K`]
    number_density : float
        Number density of air, [:math:`molecules \\ cm^{-3}`]
    relative_humidity : float
        Relative humidity, [:math:`\\%`]
    j_values : npt.ArrayLike
        Photolysis rates, [:math:`s^{-1}`], addressed by photolysis index starting at 1
    het : HetChemState
        Aerosol and cloud state. Defaults to :meth:`HetChemState.clear`.
    h2o : float
        Water vapor number density, [:math:`molecules \\ cm^{-3}`]
    suncos : float
        Cosine of the solar zenith angle
    external_rates : Mapping[str, float]
        Rate coefficients computed by coupled components, by name
    """

    temperature: float
    number_density: float
    relative_humidity: float = 0.0
    j_values: npt.ArrayLike = dataclasses.field(default_factory=lambda: np.zeros(0))
    het: HetChemState = dataclasses.field(default_factory=HetChemState.clear)
    h2o: float = 0.0
    suncos: float = 0.0
    external_rates: Mapping[str, float] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        self.j_values = np.asarray(self.j_values, dtype=float)
        if self.j_values.ndim != 1:
            msg = f"j_values must be one dimensional, got shape {self.j_values.shape}"
            raise ValueError(msg)

    @property
    def k300(self) -> float:
        """Ratio :math:`300 / T`."""
        return 300.0 / self.temperature

    def j(self, index: int) -> float:
        """Photolysis rate with 1-based ``index``, [:math:`s^{-1}`].

        Indices beyond the supplied array evaluate to 0 (no photolysis).
        """
        if index < 1:
            raise IndexError(f"Photolysis index must be >= 1, got {index}")
        if index > self.j_values.size:
            return 0.0
        return float(self.j_values[index - 1])

    @classmethod
    def from_met(
        cls,
        T: float,
        p: float,
        q: float,
        **kwargs: Any,
    ) -> EnvironmentContext:
        """Build a context from temperature, pressure and specific humidity.

        Parameters
        ----------
        T : float
            Temperature, [:math:`K`]
        p : float
            Pressure, [:math:`Pa`]
        q : float
            Specific humidity, [:math:`kg \\ kg^{-1}`]
        **kwargs : Any
            Remaining :class:`EnvironmentContext` fields

        Returns
        -------
        EnvironmentContext
        """
        kwargs.setdefault("relative_humidity", float(thermo.rh_liquid(q, T, p)))
        return cls(
            temperature=T,
            number_density=float(thermo.number_density(T, p)),
            h2o=float(thermo.h2o_number_density(q, T, p)),
            **kwargs,
        )

"""Super-Fast chemical mechanism.

A reduced representation of background tropospheric ozone chemistry with
16 transported species. See table S2 of

    Brown-Steiner, B., Selin, N. E., Prinn, R. G., Tilmes, S., Emmons, L.,
    Lamarque, J.-F. and Cameron-Smith, P. (2018). Evaluating simplified
    chemical mechanisms within present-day simulations of the Community Earth
    System Model version 1.2 with CAM4 (CESM1.2 CAM-chem): MOZART-4 vs.
    Reduced Hydrocarbon vs. Super-Fast chemistry. Geosci. Model Dev., 11.

Molecular oxygen and methane are held at their default mixing ratios.

Examples
--------
>>> from pygaschem.mechanisms.superfast import build_superfast
>>> table = build_superfast()
>>> len(table.species), len(table)
(18, 26)
"""

from __future__ import annotations

import logging

import numpy as np

from pygaschem.core.reaction import Reaction, ReactionTable, Species
from pygaschem.ratelaws.gas import arrhenius, constant, gcjplpr_abab, photolysis

logger = logging.getLogger(__name__)

#: Species in state vector order
SPECIES: tuple[Species, ...] = (
    Species("O3", 10.0, "Ozone"),
    Species("O1d", 1.0e-5, "Excited atomic oxygen"),
    Species("OH", 10.0, "Hydroxyl radical"),
    Species("HO2", 10.0, "Hydroperoxyl radical"),
    Species("H2O", 450.0, "Water vapor"),
    Species("NO", 0.0, "Nitric oxide"),
    Species("NO2", 10.0, "Nitrogen dioxide"),
    Species("CH3O2", 0.01, "Methylperoxy radical"),
    Species("CH2O", 0.15, "Formaldehyde"),
    Species("CO", 275.0, "Carbon monoxide"),
    Species("CH3OOH", 1.6, "Methyl hydroperoxide"),
    Species("DMS", 50.0, "Dimethyl sulfide"),
    Species("SO2", 2.0, "Sulfur dioxide"),
    Species("ISOP", 0.15, "Isoprene"),
    Species("H2O2", 2.34, "Hydrogen peroxide"),
    Species("HNO3", 10.0, "Nitric acid"),
    Species("O2", 2.1e8, "Molecular oxygen", fixed=True),
    Species("CH4", 1700.0, "Methane", fixed=True),
)

#: Photolysis frequencies by 1-based index, [:math:`s^{-1}`].
#: Order is jO31D, jH2O2, jNO2, jCH2Oa, jCH2Ob, jCH3OOH.
J_VALUES: np.ndarray = np.array([4.0e-3, 1.0097e-5, 0.0149, 1.4e-4, 1.4e-4, 8.9573e-6])

#: The O(1D) channel of ozone photolysis is scaled down from jO31D
O1D_SCALE = 1.0e-21

#: Bimolecular reactions: equation, pre-exponential factor and activation term
_ARRHENIUS: tuple[tuple[str, float, float], ...] = (
    ("O3 + OH --> HO2 + O2", 1.7e-12, -940.0),
    ("HO2 + O3 --> 2O2 + OH", 1.0e-14, -490.0),
    ("HO2 + OH --> H2O + O2", 4.8e-11, 250.0),
    ("NO + O3 --> NO2 + O2", 3.0e-12, -1500.0),
    ("HO2 + NO --> NO2 + OH", 3.5e-12, 250.0),
    ("CH4 + OH --> CH3O2 + H2O", 2.45e-12, -1775.0),
    ("CH2O + OH --> CO + H2O + HO2", 5.5e-12, 125.0),
    ("CH3O2 + HO2 --> CH3OOH + O2", 4.1e-13, 750.0),
    ("CH3OOH + OH --> CH3O2 + H2O", 2.7e-12, 200.0),
    ("CH3O2 + NO --> CH2O + HO2 + NO2", 2.8e-12, 300.0),
    ("2CH3O2 --> 2CH2O + 0.8HO2", 9.5e-14, 390.0),
    ("DMS + OH --> SO2", 1.1e-11, -240.0),
    ("ISOP + OH --> 2CH3O2", 2.7e-11, 390.0),
    ("ISOP + OH --> ISOP + 0.5OH", 2.7e-11, 390.0),
    ("ISOP + O3 --> 0.87CH2O + 1.86CH3O2 + 0.06HO2 + 0.05CO", 5.59e-15, -1814.0),
    ("O1d + H2O --> 2OH", 1.45e-10, 89.0),
    ("2HO2 --> H2O2 + O2", 3.0e-13, 460.0),
)

#: Photolysis reactions: 1-based j-value index and equation
_PHOTOLYSIS: tuple[tuple[int, str], ...] = (
    (2, "H2O2 + hv --> 2OH"),
    (3, "NO2 + hv --> NO + O3"),
    (4, "CH2O + hv --> CO + 2HO2"),
    (5, "CH2O + hv --> CO"),
    (6, "CH3OOH + hv --> CH2O + HO2 + OH"),
)


def build_superfast() -> ReactionTable:
    """Build the reaction table of the Super-Fast mechanism.

    Photolysis reactions read :attr:`EnvironmentContext.j_values` in the
    order of :data:`J_VALUES`.

    Returns
    -------
    ReactionTable
        Validated table in state vector order of :data:`SPECIES`
    """
    reactions = [Reaction.from_equation(eq, arrhenius(a0, 0.0, c0)) for eq, a0, c0 in _ARRHENIUS]
    reactions.append(
        Reaction.from_equation("NO2 + OH --> HNO3", gcjplpr_abab(1.8e-30, 3.0, 2.8e-11, 0.0, 0.6))
    )
    reactions.append(Reaction.from_equation("O3 + hv --> O1d + O2", photolysis(1, O1D_SCALE)))
    reactions.extend(Reaction.from_equation(eq, photolysis(i)) for i, eq in _PHOTOLYSIS)
    reactions.append(Reaction.from_equation("OH + H2O2 --> H2O + HO2", constant(1.8e-12)))
    reactions.append(Reaction.from_equation("OH + CO --> HO2", constant(1.5e-13)))

    table = ReactionTable(SPECIES, reactions)
    logger.debug("Built Super-Fast mechanism: %s", table)
    return table


__all__ = ["J_VALUES", "O1D_SCALE", "SPECIES", "build_superfast"]

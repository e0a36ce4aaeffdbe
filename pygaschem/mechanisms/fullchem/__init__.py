"""GEOS-Chem full chemistry mechanism.

The mechanism combines gas phase, sulfur, photolysis and (optionally)
heterogeneous reactions over a fixed set of species.

Examples
--------
>>> from pygaschem.mechanisms.fullchem import build_fullchem
>>> table = build_fullchem()
>>> len(table.species)
290
"""

from __future__ import annotations

import logging

from pygaschem.core.reaction import ReactionTable
from pygaschem.mechanisms.fullchem.gas import gas_phase_reactions
from pygaschem.mechanisms.fullchem.het import heterogeneous_reactions
from pygaschem.mechanisms.fullchem.photolysis import photolysis_reactions
from pygaschem.mechanisms.fullchem.species import DEFAULT_PPB, SPECIES

logger = logging.getLogger(__name__)


def build_fullchem(include_heterogeneous: bool = False) -> ReactionTable:
    """Build the reaction table of the full chemistry mechanism.

    Parameters
    ----------
    include_heterogeneous : bool, optional
        Include heterogeneous reactions on aerosol and cloud surfaces. These
        rate laws read :attr:`EnvironmentContext.het`. Defaults to False.

    Returns
    -------
    ReactionTable
        Validated table in state vector order of :data:`SPECIES`
    """
    reactions = gas_phase_reactions()
    reactions.extend(photolysis_reactions())
    if include_heterogeneous:
        reactions.extend(heterogeneous_reactions())

    table = ReactionTable(SPECIES, reactions)
    logger.debug("Built full chemistry mechanism: %s", table)
    return table


__all__ = ["DEFAULT_PPB", "SPECIES", "build_fullchem"]

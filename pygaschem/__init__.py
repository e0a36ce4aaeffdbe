"""
``pygaschem`` public API.

Copyright 2024 The pygaschem developers

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from __future__ import annotations

import logging
from importlib import metadata

from pygaschem.core.environment import EnvironmentContext, HetChemState
from pygaschem.core.exceptions import BuildError, ChemistryError, EvaluationError
from pygaschem.core.mechanism import Mechanism, MechanismParams
from pygaschem.core.models import Model, ModelParams
from pygaschem.core.reaction import Reaction, ReactionTable, Species
from pygaschem.mechanisms.fullchem import build_fullchem
from pygaschem.mechanisms.superfast import build_superfast
from pygaschem.physics.units import UnitAdapter
from pygaschem.ratelaws.base import RateLaw

__version__ = metadata.version("pygaschem")
__license__ = "Apache-2.0"

log = logging.getLogger(__name__)


__all__ = [
    "BuildError",
    "ChemistryError",
    "EnvironmentContext",
    "EvaluationError",
    "HetChemState",
    "Mechanism",
    "MechanismParams",
    "Model",
    "ModelParams",
    "RateLaw",
    "Reaction",
    "ReactionTable",
    "Species",
    "UnitAdapter",
    "build_fullchem",
    "build_superfast",
]

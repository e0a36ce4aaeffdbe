"""Rate coefficient formulas for gas phase and heterogeneous reactions."""

from pygaschem.ratelaws import gas, het
from pygaschem.ratelaws.base import Concentrations, RateLaw, rate_law
from pygaschem.ratelaws.gas import arrhenius, constant, external, photolysis
from pygaschem.ratelaws.util import ars_l1k, cloud_het, kiir1ltd, safe_div

__all__ = [
    "Concentrations",
    "RateLaw",
    "ars_l1k",
    "arrhenius",
    "cloud_het",
    "constant",
    "external",
    "gas",
    "het",
    "kiir1ltd",
    "photolysis",
    "rate_law",
    "safe_div",
]

"""Species and reaction declarations."""

from __future__ import annotations

import dataclasses
import logging
import math
import re
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Union, overload

import numpy as np
import numpy.typing as npt
import pandas as pd

from pygaschem.core.exceptions import BuildError
from pygaschem.physics.units import NATIVE_UNITS
from pygaschem.ratelaws.base import RateLaw

logger = logging.getLogger(__name__)

#: Stoichiometry input: species names, (name, coefficient) pairs or a mapping
StoichiometryLike = Union[Mapping[str, float], Iterable[Union[str, tuple[str, float]]]]

#: Pseudo-species marking photolysis in mechanism equations
PHOTON = "hv"

_TERM = re.compile(r"^(?P<coeff>\d*\.?\d+(?:[eE][+-]?\d+)?)?\s*(?P<name>[A-Za-z][A-Za-z0-9_]*)$")


@dataclasses.dataclass(frozen=True)
class Species:
    """A chemical species of the mechanism."""

    #: Unique name used in reaction equations
    name: str

    #: Default mixing ratio, [:math:`ppb`]
    default: float = 0.0

    #: Free text description
    description: str = ""

    #: Hold the species at its value. Its concentration enters reaction
    #: rates but no tendency is computed for it.
    fixed: bool = False

    def __post_init__(self) -> None:
        if not self.name or not isinstance(self.name, str):
            raise BuildError(f"Species name must be a non-empty string, got {self.name!r}")


def _normalize(side: StoichiometryLike | None, equation: str) -> tuple[tuple[str, float], ...]:
    """Merge repeated species and validate coefficients."""
    if side is None:
        return ()
    items = side.items() if isinstance(side, Mapping) else side

    merged: dict[str, float] = {}
    for item in items:
        name, coeff = (item, 1.0) if isinstance(item, str) else item
        coeff = float(coeff)
        if not math.isfinite(coeff) or coeff <= 0.0:
            msg = f"Reaction '{equation}' has invalid coefficient {coeff} for species '{name}'"
            raise BuildError(msg)
        merged[name] = merged.get(name, 0.0) + coeff
    return tuple(merged.items())


def parse_side(expr: str) -> tuple[tuple[str, float], ...]:
    """Parse one side of a mechanism equation such as ``"0.5CH2O + 2.000HO2"``.

    The photon pseudo-species ``hv`` is dropped.

    Raises
    ------
    BuildError
        If a term cannot be parsed
    """
    terms: list[tuple[str, float]] = []
    for raw in expr.split("+"):
        term = raw.strip()
        if not term:
            continue
        match = _TERM.match(term)
        if match is None:
            raise BuildError(f"Cannot parse stoichiometric term '{term}' in '{expr}'")
        name = match["name"]
        if name == PHOTON:
            continue
        coeff = float(match["coeff"]) if match["coeff"] else 1.0
        terms.append((name, coeff))
    return tuple(terms)


@dataclasses.dataclass(frozen=True)
class Reaction:
    """A reaction bound to its rate law.

    Parameters
    ----------
    reactants, products : StoichiometryLike
        Species names, ``(name, coefficient)`` pairs or a mapping of name to
        coefficient. Repeated species are merged.
    rate_law : RateLaw
        Rate coefficient of the reaction
    catalytic_divisors : tuple[str, ...]
        Reactants whose concentration divides the rate coefficient. Each
        cancels one power of the species in the mass action rate, and the
        species is neither consumed nor produced by the reaction.
    label : str
        Human readable label, defaults to the equation
    heterogeneous : bool
        Reaction takes place on aerosol or cloud surfaces
    mass_action : bool
        If False, the reaction rate is the rate coefficient itself
        [:math:`molecules \\ cm^{-3} \\ s^{-1}`] and reactant concentrations
        are not multiplied in.
    """

    reactants: tuple[tuple[str, float], ...]
    products: tuple[tuple[str, float], ...]
    rate_law: RateLaw
    catalytic_divisors: tuple[str, ...] = ()
    label: str = ""
    heterogeneous: bool = False
    mass_action: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.rate_law, RateLaw):
            raise BuildError(f"Reaction rate law must be a RateLaw, got {type(self.rate_law)}")

        equation = self.label or "<unnamed reaction>"
        reactants = _normalize(self.reactants, equation)
        products = _normalize(self.products, equation)
        if not reactants:
            raise BuildError(f"Reaction '{equation}' has no reactants")

        divisors = tuple(self.catalytic_divisors)
        names = dict(reactants)
        for name in divisors:
            if name not in names:
                msg = f"Catalytic divisor '{name}' of reaction '{equation}' is not a reactant"
                raise BuildError(msg)
        if len(set(divisors)) != len(divisors):
            raise BuildError(f"Reaction '{equation}' repeats a catalytic divisor")

        object.__setattr__(self, "reactants", reactants)
        object.__setattr__(self, "products", products)
        object.__setattr__(self, "catalytic_divisors", divisors)
        if not self.label:
            object.__setattr__(self, "label", self.equation)

    @classmethod
    def from_equation(
        cls,
        equation: str,
        rate_law: RateLaw,
        catalytic_divisors: Sequence[str] = (),
        label: str = "",
        heterogeneous: bool = False,
        mass_action: bool = True,
    ) -> Reaction:
        """Build a reaction from an equation string.

        Parameters
        ----------
        equation : str
            Equation in the form ``"A + B --> 0.5C + D"``. A photon ``hv`` on
            the reactant side is ignored.
        rate_law : RateLaw
            Rate coefficient of the reaction
        catalytic_divisors : Sequence[str]
            See :class:`Reaction`
        label : str
            Label of the reaction, defaults to ``equation``
        heterogeneous : bool
            See :class:`Reaction`
        mass_action : bool
            See :class:`Reaction`

        Returns
        -------
        Reaction

        Raises
        ------
        BuildError
            If the equation is malformed

        Examples
        --------
        >>> from pygaschem.ratelaws import arrhenius
        >>> rxn = Reaction.from_equation("O3 + NO --> NO2 + O2", arrhenius(3.0e-12, 0.0, -1500.0))
        >>> rxn.reactants
        (('O3', 1.0), ('NO', 1.0))
        >>> rxn.order
        2
        """
        lhs, sep, rhs = equation.partition("-->")
        if not sep:
            raise BuildError(f"Equation '{equation}' is missing '-->'")
        return cls(
            reactants=parse_side(lhs),
            products=parse_side(rhs),
            rate_law=rate_law,
            catalytic_divisors=tuple(catalytic_divisors),
            label=label or equation.strip(),
            heterogeneous=heterogeneous,
            mass_action=mass_action,
        )

    @property
    def equation(self) -> str:
        """Equation string of the reaction."""

        def fmt(side: tuple[tuple[str, float], ...]) -> str:
            return " + ".join(n if c == 1.0 else f"{c:g}{n}" for n, c in side)

        return f"{fmt(self.reactants)} --> {fmt(self.products)}"

    @property
    def species(self) -> set[str]:
        """Names of all species referenced by the reaction."""
        return {n for n, _ in self.reactants} | {n for n, _ in self.products}

    @property
    def order(self) -> int:
        """Kinetic order of the rate coefficient.

        Sum of the reactant coefficients less one for each catalytic divisor.
        Reactions that are not mass action are zero order.
        """
        if not self.mass_action:
            return 0
        return int(round(sum(c for _, c in self.reactants))) - len(self.catalytic_divisors)

    @property
    def rate_powers(self) -> tuple[tuple[str, float], ...]:
        """Concentration powers entering the mass action rate."""
        if not self.mass_action:
            return ()
        out = []
        for name, coeff in self.reactants:
            power = coeff - 1.0 if name in self.catalytic_divisors else coeff
            if power > 0.0:
                out.append((name, power))
        return tuple(out)

    @property
    def net_stoichiometry(self) -> dict[str, float]:
        """Signed coefficients scattered into the species tendencies.

        Catalytic divisors are left out.
        """
        net: dict[str, float] = {}
        for name, coeff in self.reactants:
            if name not in self.catalytic_divisors:
                net[name] = net.get(name, 0.0) - coeff
        for name, coeff in self.products:
            if name not in self.catalytic_divisors:
                net[name] = net.get(name, 0.0) + coeff
        return net


class ReactionTable:
    """Validated collection of species and the reactions between them.

    Parameters
    ----------
    species : Sequence[Species | str]
        Declared species, in state vector order
    reactions : Iterable[Reaction]
        Reactions of the mechanism

    Raises
    ------
    BuildError
        If species names repeat, a reaction references an undeclared species
        or a rate law has a fixed order inconsistent with its reaction.
    """

    __slots__ = ("_index", "reactions", "species")

    #: Declared species, in state vector order
    species: tuple[Species, ...]

    #: Reactions, in evaluation order
    reactions: tuple[Reaction, ...]

    def __init__(self, species: Sequence[Species | str], reactions: Iterable[Reaction]) -> None:
        self.species = tuple(s if isinstance(s, Species) else Species(s) for s in species)
        self.reactions = tuple(reactions)

        self._index: dict[str, int] = {}
        for i, s in enumerate(self.species):
            if s.name in self._index:
                raise BuildError(f"Species '{s.name}' is declared more than once")
            self._index[s.name] = i

        for rxn in self.reactions:
            self._validate(rxn)

        unused = set(self._index).difference(*(r.species for r in self.reactions))
        if unused and self.reactions:
            logger.debug("%d declared species take part in no reaction", len(unused))

    def _validate(self, rxn: Reaction) -> None:
        missing = sorted(rxn.species - self._index.keys())
        if missing:
            msg = f"Reaction '{rxn.label}' references undeclared species: {', '.join(missing)}"
            raise BuildError(msg)

        law_order = rxn.rate_law.order
        if law_order is not None and rxn.mass_action and law_order != rxn.order:
            msg = (
                f"Rate law '{rxn.rate_law.name}' of order {law_order} is attached to "
                f"reaction '{rxn.label}' of order {rxn.order}"
            )
            raise BuildError(msg)

    def __len__(self) -> int:
        return len(self.reactions)

    def __iter__(self) -> Iterator[Reaction]:
        return iter(self.reactions)

    @overload
    def __getitem__(self, key: int) -> Reaction: ...

    @overload
    def __getitem__(self, key: slice) -> tuple[Reaction, ...]: ...

    def __getitem__(self, key: int | slice) -> Reaction | tuple[Reaction, ...]:
        return self.reactions[key]

    def __repr__(self) -> str:
        return f"ReactionTable [{len(self.species)} species, {len(self.reactions)} reactions]"

    @property
    def species_names(self) -> list[str]:
        """Names of the declared species, in state vector order."""
        return [s.name for s in self.species]

    def species_index(self, name: str) -> int:
        """Position of species ``name`` in the state vector.

        Raises
        ------
        KeyError
            If ``name`` is not declared
        """
        try:
            return self._index[name]
        except KeyError:
            raise KeyError(f"Species '{name}' is not declared in the reaction table") from None

    def defaults(self) -> npt.NDArray[np.float64]:
        """Default mixing ratios of the declared species, [:math:`ppb`]."""
        return np.array([s.default for s in self.species], dtype=float)

    def select(self, heterogeneous: bool | None = None) -> ReactionTable:
        """Return the table restricted to a subset of reactions.

        Parameters
        ----------
        heterogeneous : bool | None
            If True, keep only heterogeneous reactions. If False, keep only
            gas phase and photolysis reactions. If None, keep all reactions.

        Returns
        -------
        ReactionTable
            Table with the same species and the selected reactions
        """
        if heterogeneous is None:
            reactions = self.reactions
        else:
            reactions = tuple(r for r in self.reactions if r.heterogeneous is heterogeneous)
        return ReactionTable(self.species, reactions)

    def to_dataframe(self) -> pd.DataFrame:
        """Summarize the reactions as a :class:`pandas.DataFrame`.

        Returns
        -------
        pd.DataFrame
            One row per reaction with the equation, rate law, kinetic order,
            native unit and flags.
        """
        records = [
            {
                "label": r.label,
                "equation": r.equation,
                "rate_law": r.rate_law.name,
                "order": r.order,
                "unit": NATIVE_UNITS.get(r.order),
                "catalytic_divisors": ",".join(r.catalytic_divisors),
                "heterogeneous": r.heterogeneous,
                "mass_action": r.mass_action,
            }
            for r in self.reactions
        ]
        columns = [
            "label",
            "equation",
            "rate_law",
            "order",
            "unit",
            "catalytic_divisors",
            "heterogeneous",
            "mass_action",
        ]
        return pd.DataFrame.from_records(records, columns=columns)

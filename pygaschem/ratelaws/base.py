"""Rate law value objects."""

from __future__ import annotations

import dataclasses
import functools
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from pygaschem.physics.units import NATIVE_UNITS

if TYPE_CHECKING:
    from pygaschem.core.environment import EnvironmentContext

#: Concentrations by species name, [:math:`molecules \ cm^{-3}`]
Concentrations = Mapping[str, float]


@dataclasses.dataclass(frozen=True)
class RateLaw:
    """Named rate coefficient formula bound to its parameters.

    Parameters
    ----------
    name : str
        Family name, such as ``"GCARR_ac"``
    func : Callable
        Formula called as ``func(env, *params)``, or ``func(env, conc, *params)``
        when ``needs_concentrations`` is True.
    params : tuple[Any, ...]
        Bound parameters
    order : int | None
        Kinetic order the coefficient is expressed for. If None, the order is
        taken from the reaction the law is attached to.
    needs_concentrations : bool
        The formula reads current concentrations

    Notes
    -----
    Laws are closed under addition and scalar multiplication, so composite
    coefficients such as ``k1 + k2`` or ``0.5 * k`` are themselves laws.
    """

    name: str
    func: Callable[..., float] = dataclasses.field(repr=False)
    params: tuple[Any, ...] = ()
    order: int | None = None
    needs_concentrations: bool = False

    def __call__(self, env: EnvironmentContext, conc: Concentrations | None = None) -> float:
        """Evaluate the rate coefficient.

        Parameters
        ----------
        env : EnvironmentContext
            Physical inputs of the evaluation
        conc : Concentrations | None
            Current concentrations, required if :attr:`needs_concentrations`

        Returns
        -------
        float
            Rate coefficient in the native units of :attr:`order`
        """
        if self.needs_concentrations:
            if conc is None:
                raise ValueError(f"Rate law '{self.name}' requires concentrations")
            return self.func(env, conc, *self.params)
        return self.func(env, *self.params)

    @property
    def unit(self) -> str | None:
        """Native unit of the coefficient, or None if the order is not yet known."""
        if self.order is None:
            return None
        return NATIVE_UNITS[self.order]

    def with_order(self, order: int) -> RateLaw:
        """Return a copy with :attr:`order` set."""
        return dataclasses.replace(self, order=order)

    def __add__(self, other: RateLaw) -> RateLaw:
        if not isinstance(other, RateLaw):
            return NotImplemented
        if self.order is not None and other.order is not None and self.order != other.order:
            msg = (
                f"Cannot add rate laws of different order: "
                f"'{self.name}' ({self.order}) and '{other.name}' ({other.order})"
            )
            raise ValueError(msg)
        order = self.order if self.order is not None else other.order
        needs = self.needs_concentrations or other.needs_concentrations
        return RateLaw(
            name=f"{self.name} + {other.name}",
            func=_sum if needs else _sum_env,
            params=(self, other),
            order=order,
            needs_concentrations=needs,
        )

    def __mul__(self, factor: float) -> RateLaw:
        if isinstance(factor, RateLaw) or not isinstance(factor, (int, float)):
            return NotImplemented
        return RateLaw(
            name=f"{factor:g} * {self.name}",
            func=_scaled if self.needs_concentrations else _scaled_env,
            params=(float(factor), self),
            order=self.order,
            needs_concentrations=self.needs_concentrations,
        )

    __rmul__ = __mul__


def _sum(env: EnvironmentContext, conc: Concentrations | None, *laws: RateLaw) -> float:
    return sum(law(env, conc) for law in laws)


def _sum_env(env: EnvironmentContext, *laws: RateLaw) -> float:
    return sum(law(env) for law in laws)


def _scaled(
    env: EnvironmentContext, conc: Concentrations | None, factor: float, law: RateLaw
) -> float:
    return factor * law(env, conc)


def _scaled_env(env: EnvironmentContext, factor: float, law: RateLaw) -> float:
    return factor * law(env)


def rate_law(
    name: str | None = None,
    order: int | None = None,
    needs_concentrations: bool = False,
) -> Callable[[Callable[..., float]], Callable[..., RateLaw]]:
    """Turn a formula into a factory of :class:`RateLaw` objects.

    The decorated function keeps its formula under the ``formula`` attribute.

    Parameters
    ----------
    name : str | None
        Family name, defaults to the function name
    order : int | None
        Fixed kinetic order of the law
    needs_concentrations : bool
        The formula reads current concentrations

    Examples
    --------
    >>> @rate_law("ARR")
    ... def arr(env, a0):
    ...     return a0
    >>> arr(1.0e-12).name
    'ARR'
    """

    def decorator(func: Callable[..., float]) -> Callable[..., RateLaw]:
        law_name = name or func.__name__

        @functools.wraps(func)
        def factory(*params: Any) -> RateLaw:
            return RateLaw(
                name=law_name,
                func=func,
                params=params,
                order=order,
                needs_concentrations=needs_concentrations,
            )

        factory.formula = func  # type: ignore[attr-defined]
        return factory

    return decorator

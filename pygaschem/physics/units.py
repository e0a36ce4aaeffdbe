"""Unit conversion support between number density and mixing ratio bases."""

from __future__ import annotations

import dataclasses

import numpy as np
import numpy.typing as npt

from pygaschem.physics import constants
from pygaschem.utils.types import ArrayScalarLike

#: Native unit of a rate coefficient, keyed by kinetic order
NATIVE_UNITS: dict[int, str] = {
    0: "molecules cm-3 s-1",
    1: "s-1",
    2: "cm3 molecules-1 s-1",
    3: "cm6 molecules-2 s-1",
}

#: Mixing ratio unit of a rate coefficient, keyed by kinetic order
PPB_UNITS: dict[int, str] = {
    0: "ppb s-1",
    1: "s-1",
    2: "ppb-1 s-1",
    3: "ppb-2 s-1",
}


def ppb_to_molecule(ppb: ArrayScalarLike, M: ArrayScalarLike) -> ArrayScalarLike:
    r"""Convert a mixing ratio to a number density.

    Parameters
    ----------
    ppb : ArrayScalarLike
        Mixing ratio, [:math:`ppb`]
    M : ArrayScalarLike
        Number density of air, [:math:`molecules \ cm^{-3}`]

    Returns
    -------
    ArrayScalarLike
        Number density, [:math:`molecules \ cm^{-3}`]
    """
    return ppb * (M * constants.ppb)


def molecule_to_ppb(n: ArrayScalarLike, M: ArrayScalarLike) -> ArrayScalarLike:
    r"""Convert a number density to a mixing ratio.

    Parameters
    ----------
    n : ArrayScalarLike
        Number density, [:math:`molecules \ cm^{-3}`]
    M : ArrayScalarLike
        Number density of air, [:math:`molecules \ cm^{-3}`]

    Returns
    -------
    ArrayScalarLike
        Mixing ratio, [:math:`ppb`]
    """
    return n / (M * constants.ppb)


def conversion_exponent(order: npt.ArrayLike) -> npt.NDArray[np.int64]:
    """Return the power of the ppb scale factor applied to a coefficient of ``order``.

    A coefficient of kinetic order ``n >= 1`` carries ``n - 1`` factors of the
    number density per ppb. Zero order coefficients are taken to be already
    expressed in the state unit and are not converted.
    """
    order = np.asarray(order, dtype=int)
    return np.where(order > 0, order - 1, 0).astype(np.int64)


@dataclasses.dataclass(frozen=True)
class UnitAdapter:
    r"""Convert rate coefficients between molecule and mixing ratio bases.

    A species at mixing ratio :math:`x` [:math:`ppb`] has number density
    :math:`n = x \cdot M \cdot 10^{-9}`. Substituting into a mass action rate
    law of order :math:`n` gives a mixing ratio coefficient
    :math:`k_{ppb} = k \cdot (M \cdot 10^{-9})^{n - 1}`.

    Parameters
    ----------
    number_density : float
        Number density of air, [:math:`molecules \ cm^{-3}`]
    """

    number_density: float

    @property
    def scale(self) -> float:
        """Number density of one ppb, [:math:`molecules \\ cm^{-3} \\ ppb^{-1}`]."""
        return self.number_density * constants.ppb

    def factor(self, order: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Return the multiplicative factor taking a molecule basis coefficient to ppb basis.

        Parameters
        ----------
        order : npt.ArrayLike
            Kinetic order(s) of the coefficient(s)

        Returns
        -------
        npt.NDArray[np.float64]
            Conversion factor(s)
        """
        return np.power(self.scale, conversion_exponent(order).astype(float))

    def to_ppb(self, k: ArrayScalarLike, order: npt.ArrayLike) -> ArrayScalarLike:
        """Convert rate coefficient(s) ``k`` from molecule basis to ppb basis.

        Parameters
        ----------
        k : ArrayScalarLike
            Rate coefficient(s) in their native unit, see :data:`NATIVE_UNITS`
        order : npt.ArrayLike
            Kinetic order(s) of ``k``

        Returns
        -------
        ArrayScalarLike
            Rate coefficient(s) in mixing ratio basis, see :data:`PPB_UNITS`
        """
        out = k * self.factor(order)
        if np.ndim(out) == 0:
            return float(out)
        return out

    def to_molecule(self, k: ArrayScalarLike, order: npt.ArrayLike) -> ArrayScalarLike:
        """Convert rate coefficient(s) ``k`` from ppb basis to molecule basis.

        This is the inverse of :meth:`to_ppb`.
        """
        out = k / self.factor(order)
        if np.ndim(out) == 0:
            return float(out)
        return out

    def ppb_to_molecule(self, conc: ArrayScalarLike) -> ArrayScalarLike:
        """Convert concentrations from ppb to :math:`molecules \\ cm^{-3}`."""
        return conc * self.scale

    def molecule_to_ppb(self, conc: ArrayScalarLike) -> ArrayScalarLike:
        """Convert concentrations from :math:`molecules \\ cm^{-3}` to ppb."""
        return conc / self.scale

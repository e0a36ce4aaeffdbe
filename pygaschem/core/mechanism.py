"""Assemble reaction tables into ODE right-hand sides and Jacobians."""

from __future__ import annotations

import dataclasses
import hashlib
import json
import logging
from collections.abc import Mapping
from typing import Any

import numpy as np
import numpy.typing as npt
import scipy.sparse
import xarray as xr

from pygaschem.core.environment import EnvironmentContext
from pygaschem.core.exceptions import EvaluationError
from pygaschem.core.models import Model, ModelParams
from pygaschem.core.reaction import Reaction, ReactionTable
from pygaschem.physics.units import NATIVE_UNITS, PPB_UNITS, UnitAdapter

logger = logging.getLogger(__name__)

#: Supported state vector units
STATE_UNITS = ("ppb", "molec_cm3")


@dataclasses.dataclass
class MechanismParams(ModelParams):
    """Default parameters of :class:`Mechanism`."""

    #: Unit of the state vector, "ppb" mixing ratio or "molec_cm3" number density
    state_unit: str = "ppb"

    #: Include heterogeneous reactions of the table
    include_heterogeneous: bool = False

    #: Return the Jacobian as a :class:`scipy.sparse.csr_matrix`. If False,
    #: a dense array is returned.
    jacobian_sparse: bool = True


class Mechanism(Model):
    """Chemical mechanism assembled from a :class:`ReactionTable`.

    The mechanism evaluates one rate coefficient per reaction, forms mass
    action reaction rates and scatters signed stoichiometric contributions
    into the species tendencies. The result is the right-hand side
    :math:`dC/dt` of the chemistry ODE system, ready for an external stiff
    integrator.

    Parameters
    ----------
    table : ReactionTable
        Species and reactions of the mechanism
    params : MechanismParams | dict[str, Any] | None
        Override default parameters
    **params_kwargs : Any
        Override parameters with keyword arguments

    Examples
    --------
    >>> from pygaschem import EnvironmentContext, Mechanism, Reaction, ReactionTable
    >>> from pygaschem.ratelaws import arrhenius
    >>> rxn = Reaction.from_equation("O3 + NO --> NO2 + O2", arrhenius(3.0e-12, 0.0, -1500.0))
    >>> table = ReactionTable(["O3", "NO", "NO2", "O2"], [rxn])
    >>> mech = Mechanism(table)
    >>> env = EnvironmentContext(temperature=298.15, number_density=2.5e19)
    >>> dcdt = mech.rhs(0.0, [40.0, 1.0, 0.0, 2.1e8], env)
    >>> bool(dcdt[0] < 0.0 and dcdt[2] > 0.0)
    True
    """

    name = "mechanism"
    long_name = "Chemical mechanism"
    default_params = MechanismParams

    #: Complete reaction table, including disabled reactions
    table: ReactionTable

    #: Reactions currently evaluated
    active: ReactionTable

    def __init__(
        self,
        table: ReactionTable,
        params: MechanismParams | dict[str, Any] | None = None,
        **params_kwargs: Any,
    ) -> None:
        self.table = table
        super().__init__(params, **params_kwargs)

    def update_params(self, params: dict[str, Any] | None = None, **params_kwargs: Any) -> None:
        """Update parameters and rebuild the active reaction set."""
        super().update_params(params, **params_kwargs)
        if self.params["state_unit"] not in STATE_UNITS:
            msg = f"Unknown state_unit '{self.params['state_unit']}', expected one of {STATE_UNITS}"
            raise ValueError(msg)
        self._build()

    # -----
    # Build
    # -----

    def _build(self) -> None:
        heterogeneous = None if self.params["include_heterogeneous"] else False
        self.active = self.table.select(heterogeneous=heterogeneous)
        reactions = self.active.reactions

        n_spc = len(self.table.species)
        n_rxn = len(reactions)

        self._orders = np.array([r.order for r in reactions], dtype=np.int64)
        self._needs_conc = any(r.rate_law.needs_concentrations for r in reactions)
        self._i_h2o = self.table.species_index("H2O") if "H2O" in self.species_names else None

        # Mass action slots, padded with -1
        powers = [r.rate_powers for r in reactions]
        width = max((len(p) for p in powers), default=0)
        self._slot_spc = np.full((n_rxn, width), -1, dtype=np.int64)
        self._slot_pow = np.zeros((n_rxn, width), dtype=float)
        for i, rate_powers in enumerate(powers):
            for j, (name, power) in enumerate(rate_powers):
                self._slot_spc[i, j] = self.table.species_index(name)
                self._slot_pow[i, j] = power
        self._slot_mask = self._slot_spc >= 0

        # Fixed species keep their value, no tendency is scattered into them
        fixed = {s.name for s in self.table.species if s.fixed}

        rows: list[int] = []
        cols: list[int] = []
        vals: list[float] = []
        for j, rxn in enumerate(reactions):
            for name, coeff in rxn.net_stoichiometry.items():
                if coeff != 0.0 and name not in fixed:
                    rows.append(self.table.species_index(name))
                    cols.append(j)
                    vals.append(coeff)
        self._stoich = scipy.sparse.csr_matrix((vals, (rows, cols)), shape=(n_spc, n_rxn))

        logger.debug(
            "Built mechanism with %d species and %d of %d reactions (heterogeneous %s)",
            n_spc,
            n_rxn,
            len(self.table),
            "on" if self.params["include_heterogeneous"] else "off",
        )

    # ----------
    # Properties
    # ----------

    @property
    def species_names(self) -> list[str]:
        """Names of the species, in state vector order."""
        return self.table.species_names

    @property
    def reactions(self) -> tuple[Reaction, ...]:
        """Reactions currently evaluated."""
        return self.active.reactions

    @property
    def stoichiometry(self) -> scipy.sparse.csr_matrix:
        """Net stoichiometric matrix, shape ``(n_species, n_reactions)``."""
        return self._stoich

    @property
    def hash(self) -> str:
        """Generate a unique hash for the parameters and the reaction table.

        Returns
        -------
        str
            Unique hash for model instance (sha1)
        """
        signature = {
            "species": [[s.name, s.fixed] for s in self.table.species],
            "reactions": [
                [r.label, r.rate_law.name, [repr(p) for p in r.rate_law.params]]
                for r in self.table.reactions
            ],
        }
        table = json.dumps(signature, sort_keys=True)
        return hashlib.sha1(bytes(super().hash + table, "utf-8")).hexdigest()

    def species_index(self, name: str) -> int:
        """Position of species ``name`` in the state vector.

        External components can use the index to add source terms to the
        output of :meth:`rhs`.

        Raises
        ------
        KeyError
            If ``name`` is not a species of the mechanism
        """
        return self.table.species_index(name)

    # ---------
    # Utilities
    # ---------

    def adapter(self, env: EnvironmentContext) -> UnitAdapter:
        """Unit adapter for the number density of ``env``."""
        return UnitAdapter(env.number_density)

    def state_vector(
        self, values: Mapping[str, float] | None = None, env: EnvironmentContext | None = None
    ) -> npt.NDArray[np.float64]:
        """Build a state vector from species defaults and overrides.

        Parameters
        ----------
        values : Mapping[str, float] | None
            Mixing ratios by species name, [:math:`ppb`]. Species not given
            take their declared default.
        env : EnvironmentContext | None
            Required if the state unit is "molec_cm3"

        Returns
        -------
        npt.NDArray[np.float64]
            State vector in the state unit
        """
        x = self.table.defaults()
        for name, value in (values or {}).items():
            x[self.species_index(name)] = value

        if self.params["state_unit"] == "ppb":
            return x
        if env is None:
            raise ValueError("An EnvironmentContext is required for a molec_cm3 state vector")
        return self.adapter(env).ppb_to_molecule(x)

    def _as_state(self, conc: npt.ArrayLike) -> npt.NDArray[np.float64]:
        x = np.asarray(conc, dtype=float)
        if x.shape != (len(self.table.species),):
            msg = f"Expected state vector of shape ({len(self.table.species)},), got {x.shape}"
            raise ValueError(msg)
        return x

    def _number_densities(
        self, conc: npt.NDArray[np.float64], env: EnvironmentContext
    ) -> npt.NDArray[np.float64]:
        if self.params["state_unit"] == "ppb":
            return self.adapter(env).ppb_to_molecule(conc)
        return conc

    def _with_state_water(
        self, conc: npt.NDArray[np.float64], env: EnvironmentContext
    ) -> EnvironmentContext:
        """Copy of ``env`` whose water vapor is the H2O species of the state.

        Returns ``env`` unchanged if H2O is not a species of the mechanism.
        """
        if self._i_h2o is None:
            return env
        h2o = float(self._number_densities(conc, env)[self._i_h2o])
        return dataclasses.replace(env, h2o=h2o)

    def _concentrations(
        self, conc: npt.NDArray[np.float64], env: EnvironmentContext
    ) -> dict[str, float]:
        """Species number densities keyed by name, as read by rate laws."""
        out = dict(zip(self.species_names, self._number_densities(conc, env).tolist()))
        out.setdefault("H2O", float(env.h2o))
        return out

    def _raise_non_finite(self, values: npt.NDArray[np.float64], what: str) -> None:
        i = int(np.flatnonzero(~np.isfinite(values))[0])
        rxn = self.reactions[i]
        msg = (
            f"{what} of reaction {i} '{rxn.label}' (rate law '{rxn.rate_law.name}') "
            f"evaluated to {values[i]}"
        )
        raise EvaluationError(msg)

    # ----------
    # Evaluation
    # ----------

    def rate_coefficients(
        self, env: EnvironmentContext, conc: npt.ArrayLike | None = None
    ) -> npt.NDArray[np.float64]:
        """Evaluate the rate coefficient of every active reaction.

        Parameters
        ----------
        env : EnvironmentContext
            Physical inputs of the evaluation
        conc : npt.ArrayLike | None
            State vector in the state unit. Required if any active rate law
            reads concentrations. If H2O is a species of the mechanism, its
            value in ``conc`` replaces :attr:`EnvironmentContext.h2o` so that
            every rate law sees the same water vapor.

        Returns
        -------
        npt.NDArray[np.float64]
            Rate coefficients in their native units, see
            :data:`pygaschem.physics.units.NATIVE_UNITS`. Negative values
            are clamped to 0.

        Raises
        ------
        EvaluationError
            If :attr:`params` ``check_finite`` is True and a coefficient is not finite
        """
        mapping = None
        if conc is not None:
            x = self._as_state(conc)
            env = self._with_state_water(x, env)
            if self._needs_conc:
                mapping = self._concentrations(x, env)

        k = np.fromiter(
            (r.rate_law(env, mapping) for r in self.reactions),
            dtype=float,
            count=len(self.reactions),
        )
        if self.params["check_finite"] and not np.all(np.isfinite(k)):
            self._raise_non_finite(k, "Rate coefficient")
        return np.maximum(k, 0.0)

    def _state_coefficients(
        self, env: EnvironmentContext, conc: npt.NDArray[np.float64]
    ) -> npt.NDArray[np.float64]:
        k = self.rate_coefficients(env, conc)
        if self.params["state_unit"] == "ppb":
            k = self.adapter(env).to_ppb(k, self._orders)
        return np.asarray(k, dtype=float)

    def _terms(self, conc: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        base = conc[np.where(self._slot_mask, self._slot_spc, 0)]
        return np.where(self._slot_mask, base**self._slot_pow, 1.0)

    def reaction_rates(
        self, conc: npt.ArrayLike, env: EnvironmentContext
    ) -> npt.NDArray[np.float64]:
        """Evaluate the rate of every active reaction.

        Parameters
        ----------
        conc : npt.ArrayLike
            State vector in the state unit
        env : EnvironmentContext
            Physical inputs of the evaluation

        Returns
        -------
        npt.NDArray[np.float64]
            Reaction rates in state unit per second
        """
        x = self._as_state(conc)
        k = self._state_coefficients(env, x)
        return k * self._terms(x).prod(axis=1)

    def rhs(
        self, t: float, conc: npt.ArrayLike, env: EnvironmentContext
    ) -> npt.NDArray[np.float64]:
        """Evaluate the chemical tendencies :math:`dC/dt`.

        Parameters
        ----------
        t : float
            Time, [:math:`s`]. The chemistry is autonomous, ``t`` is accepted
            for integrator compatibility.
        conc : npt.ArrayLike
            State vector in the state unit
        env : EnvironmentContext
            Physical inputs of the evaluation

        Returns
        -------
        npt.NDArray[np.float64]
            Tendency of every species, in state unit per second

        Raises
        ------
        EvaluationError
            If a rate coefficient or reaction rate is not finite
        """
        rates = self.reaction_rates(conc, env)
        if self.params["check_finite"] and not np.all(np.isfinite(rates)):
            self._raise_non_finite(rates, "Reaction rate")
        return self._stoich @ rates

    def jacobian(
        self, t: float, conc: npt.ArrayLike, env: EnvironmentContext
    ) -> scipy.sparse.csr_matrix | npt.NDArray[np.float64]:
        """Evaluate the Jacobian :math:`\\partial (dC/dt) / \\partial C`.

        Rate coefficients that read concentrations are held fixed.

        Parameters
        ----------
        t : float
            Time, [:math:`s`]
        conc : npt.ArrayLike
            State vector in the state unit
        env : EnvironmentContext
            Physical inputs of the evaluation

        Returns
        -------
        scipy.sparse.csr_matrix | npt.NDArray[np.float64]
            Jacobian of shape ``(n_species, n_species)``. Dense if
            :attr:`params` ``jacobian_sparse`` is False.
        """
        x = self._as_state(conc)
        k = self._state_coefficients(env, x)
        terms = self._terms(x)

        safe_spc = np.where(self._slot_mask, self._slot_spc, 0)
        dterms = np.where(
            self._slot_mask, self._slot_pow * x[safe_spc] ** (self._slot_pow - 1.0), 0.0
        )

        drate = np.zeros_like(terms)
        for j in range(terms.shape[1]):
            others = np.delete(terms, j, axis=1).prod(axis=1)
            drate[:, j] = k * dterms[:, j] * others

        rows = np.nonzero(self._slot_mask)[0]
        shape = (len(self.reactions), len(self.table.species))
        d = scipy.sparse.csr_matrix(
            (drate[self._slot_mask], (rows, self._slot_spc[self._slot_mask])), shape=shape
        )
        jac = (self._stoich @ d).tocsr()

        if self.params["jacobian_sparse"]:
            return jac
        return jac.toarray()

    def jac_sparsity(self) -> scipy.sparse.csr_matrix:
        """Sparsity pattern of :meth:`jacobian`.

        Returns
        -------
        scipy.sparse.csr_matrix
            Matrix of ones at the structurally non-zero entries
        """
        rows = np.nonzero(self._slot_mask)[0]
        shape = (len(self.reactions), len(self.table.species))
        pattern = scipy.sparse.csr_matrix(
            (np.ones(rows.size), (rows, self._slot_spc[self._slot_mask])), shape=shape
        )
        jac = (abs(self._stoich) @ pattern).tocsr()
        jac.data[:] = 1.0
        return jac

    def eval(  # type: ignore[override]
        self,
        conc: npt.ArrayLike | Mapping[str, float],
        env: EnvironmentContext,
        t: float = 0.0,
        **params: Any,
    ) -> xr.Dataset:
        """Evaluate the mechanism and collect the results in a dataset.

        Parameters
        ----------
        conc : npt.ArrayLike | Mapping[str, float]
            State vector in the state unit, or mixing ratios by species name
            passed to :meth:`state_vector`
        env : EnvironmentContext
            Physical inputs of the evaluation
        t : float
            Time, [:math:`s`]
        **params : Any
            Overwrite model parameters before evaluation

        Returns
        -------
        xr.Dataset
            Dataset with variables ``tendency`` along ``species`` and
            ``rate`` and ``rate_coefficient`` along ``reaction``
        """
        if params:
            self.update_params(params)

        x = self.state_vector(conc, env) if isinstance(conc, Mapping) else self._as_state(conc)
        unit = self.params["state_unit"]
        k = self.rate_coefficients(env, x)
        rates = self.reaction_rates(x, env)
        dcdt = self.rhs(t, x, env)

        units = PPB_UNITS if unit == "ppb" else NATIVE_UNITS
        return xr.Dataset(
            data_vars={
                "concentration": ("species", x, {"units": unit}),
                "tendency": ("species", dcdt, {"units": f"{unit} s-1"}),
                "rate": ("reaction", rates, {"units": f"{unit} s-1"}),
                "rate_coefficient": ("reaction", k, {"long_name": "native unit rate coefficient"}),
            },
            coords={
                "species": [[s.name, s.fixed] for s in self.table.species],
                "reaction": np.arange(len(self.reactions)),
                "label": ("reaction", [r.label for r in self.reactions]),
                "order": ("reaction", self._orders),
                "rate_law": ("reaction", [r.rate_law.name for r in self.reactions]),
                "state_unit_coefficient": (
                    "reaction",
                    [units.get(int(o), "") for o in self._orders],
                ),
            },
            attrs={
                "model": self.name,
                "long_name": self.long_name,
                "temperature": env.temperature,
                "number_density": env.number_density,
                "time": t,
            },
        )

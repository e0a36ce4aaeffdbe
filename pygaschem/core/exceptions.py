"""Custom exceptions raised while building and evaluating mechanisms."""


class ChemistryError(Exception):
    """Base class for all chemistry exceptions."""


class BuildError(ChemistryError):
    """Mechanism definition is malformed.

    Raised at construction time for undeclared species, inconsistent
    stoichiometry or heterogeneous state arrays of the wrong length.
    """


class EvaluationError(ChemistryError):
    """A rate coefficient or tendency evaluated to a non-finite value."""

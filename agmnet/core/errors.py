"""
Exceptions raised while generating a social graph.

All of them derive from AGMError so callers can catch the whole family.
Failures coming from networkx or from a user supplied random stream are not
wrapped and propagate unchanged.
"""


class AGMError(Exception):
    """Base class for all agmnet errors."""


class ConfigurationError(AGMError, ValueError):
    """Invalid generation parameter (coefficient, scale, random stream, ...)."""


class StructuralAssumptionViolation(AGMError, ValueError):
    """The affiliation graph has an edge that does not run member -> community."""


class InvalidWeightError(AGMError, ValueError):
    """A membership weight is negative, infinite, NaN or not a number."""


class GenerationInterrupted(AGMError, RuntimeError):
    """Raised when the caller's stop hook asks generation to abort.

    The partially built social graph is discarded.
    """

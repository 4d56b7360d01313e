"""Exception hierarchy for the costing engine."""

from __future__ import annotations


class CostingError(Exception):
    """Base class for every error raised by the costing engine."""


class RequestValidationError(CostingError, ValueError):
    """The request is malformed: wrong asset name or invalid components."""


class PreconditionError(CostingError, ValueError):
    """A calculator-specific input is missing or invalid."""


class RateLookupError(CostingError, LookupError):
    """A blend rate, effort-hours entry or location calendar is missing."""


class CalculatorNotFoundError(CostingError, KeyError):
    """No calculator is registered for the requested asset name."""

    def __str__(self) -> str:
        # KeyError wraps its message in quotes
        return str(self.args[0]) if self.args else ""

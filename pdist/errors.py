"""Error types raised by pdist.

Each error also derives from the matching builtin so callers that only
catch ``ValueError`` / ``RuntimeError`` keep working.
"""
from __future__ import annotations


class PdistError(Exception):
    """Base class for all pdist errors."""


class InvalidArgument(PdistError, ValueError):
    """A required argument is missing or unusable (e.g. no calculator)."""


class InvalidParameter(PdistError, ValueError):
    """A distribution parameter is out of range (e.g. lam <= 0)."""


class DomainError(PdistError, ValueError):
    """An evaluation point or probability is outside the valid domain."""


class NumericalError(PdistError, RuntimeError):
    """An iterative computation failed to converge."""

"""Exception types raised by pathrelax."""

from __future__ import annotations


class PathRelaxError(Exception):
    """Base class for all package-specific errors."""


class InvalidWeightError(PathRelaxError, ValueError):
    """Raised when a consulted edge weight is negative, missing or not a number."""


class MisuseError(PathRelaxError, RuntimeError):
    """Raised when the priority queue contract is violated.

    Seeing this from a shortest-path run means an internal defect, not bad
    input.
    """


__all__ = [
    "PathRelaxError",
    "InvalidWeightError",
    "MisuseError",
]

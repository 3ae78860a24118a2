"""Error kinds raised by the coverage engine."""

from __future__ import annotations


class CoverageError(ValueError):
    """Base class for every error the engine surfaces to its caller."""


class InvalidDimensionError(CoverageError):
    """A building, obstacle or grid dimension is non-positive or out of range."""


class InfeasibleLinkBudgetError(CoverageError):
    """The link budget leaves no usable coverage radius."""


class UnresolvedReferenceError(CoverageError):
    """An identifier (material, floor, technology, band) does not resolve."""

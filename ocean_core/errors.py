"""Error types raised by the analytics core.

All errors derive from ``ValueError`` so callers that already guard against
bad input with ``except ValueError`` keep working.
"""

from __future__ import annotations


class OceanAnalysisError(ValueError):
    """Base class for every error raised by ``ocean_core``."""


class InvalidInputError(OceanAnalysisError):
    """A required structure is missing or a trait value is out of domain."""


class EmptyInputError(InvalidInputError):
    """A statistical or aggregation operation received zero values."""

"""Culture classification from collective trait means.

Rules are evaluated in order; the first rule whose predicate holds decides
the culture type. When none fires the group is labelled ``balanced``.
All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, Field

from ocean_core.trait_types import TraitVector


CultureType = Literal["innovation", "performance", "collaborative", "adaptive", "balanced"]


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class CultureClassification(BaseModel):
    """Culture label plus its fixed description."""

    culture_type: CultureType
    description: str = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------
CULTURE_DESCRIPTIONS = MappingProxyType({
    "innovation": "Highly creative and experimental culture that embraces change and new ideas",
    "performance": "Results-driven culture focused on high standards and achievement",
    "collaborative": "Team-oriented culture emphasizing cooperation and shared decision-making",
    "adaptive": "Flexible culture that readily adjusts to changing circumstances and opportunities",
    "balanced": "Balanced organizational culture",
})

_CULTURE_RULES: tuple[tuple[CultureType, Callable[[TraitVector], bool]], ...] = (
    ("innovation", lambda t: t.openness > 3.5 and t.extraversion >= 3.0),
    ("performance", lambda t: t.conscientiousness > 3.5),
    ("collaborative", lambda t: t.agreeableness > 3.5),
    ("adaptive", lambda t: t.openness > 3.0 and t.extraversion > 3.0),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def determine_culture_type(mean_traits: TraitVector) -> CultureType:
    """Return the first matching culture type, or ``balanced``."""
    for culture_type, predicate in _CULTURE_RULES:
        if predicate(mean_traits):
            return culture_type
    return "balanced"


def describe_culture(culture_type: str) -> str:
    """Look up the description of *culture_type* (unknown → balanced)."""
    return CULTURE_DESCRIPTIONS.get(culture_type, CULTURE_DESCRIPTIONS["balanced"])


def classify_culture(mean_traits: TraitVector) -> CultureClassification:
    """Classify *mean_traits* into a culture type with description."""
    culture_type = determine_culture_type(mean_traits)
    return CultureClassification(
        culture_type=culture_type,
        description=describe_culture(culture_type),
    )

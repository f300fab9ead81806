"""Organizational health indicators from collective trait means."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ocean_core.engine.composite import clamp_percentage
from ocean_core.trait_types import TRAIT_MAX, TraitVector


class HealthMetrics(BaseModel):
    """Organizational health indicators, each a percentage."""

    psychological_safety: float = Field(ge=0.0, le=100.0)
    innovation_climate: float = Field(ge=0.0, le=100.0)
    resilience: float = Field(ge=0.0, le=100.0)
    performance_culture: float = Field(ge=0.0, le=100.0)


def _n(value: float) -> float:
    return value / TRAIT_MAX


def _stability(neuroticism: float) -> float:
    return (TRAIT_MAX - neuroticism) / TRAIT_MAX


def assess_health_metrics(traits: TraitVector) -> HealthMetrics:
    """Weighted trait blends for the four organizational health indicators."""
    return HealthMetrics(
        psychological_safety=clamp_percentage(
            _n(traits.agreeableness) * 0.4
            + _stability(traits.neuroticism) * 0.35
            + _n(traits.openness) * 0.25
        ),
        innovation_climate=clamp_percentage(
            _n(traits.openness) * 0.5
            + _n(traits.extraversion) * 0.3
            + _n(traits.agreeableness) * 0.2
        ),
        resilience=clamp_percentage(
            _stability(traits.neuroticism) * 0.45
            + _n(traits.openness) * 0.30
            + _n(traits.conscientiousness) * 0.25
        ),
        performance_culture=clamp_percentage(
            _n(traits.conscientiousness) * 0.45
            + _n(traits.extraversion) * 0.30
            + _stability(traits.neuroticism) * 0.25
        ),
    )

"""Composite dynamics scores derived from a collective profile.

Each composite is a fixed weighted linear combination of normalised trait
means (divided by 5) and, for several composites, a diversity term.
Every score is scaled to a percentage and clamped to [0, 100].
All functions are *pure*.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ocean_core.trait_types import TRAIT_MAX, CollectiveProfile


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class CompositeScores(BaseModel):
    """The six composite dynamics scores, each a percentage."""

    cohesion_index: float = Field(ge=0.0, le=100.0)
    innovation_potential: float = Field(ge=0.0, le=100.0)
    conflict_probability: float = Field(ge=0.0, le=100.0)
    adaptability_score: float = Field(ge=0.0, le=100.0)
    performance_capability: float = Field(ge=0.0, le=100.0)
    communication_effectiveness: float = Field(ge=0.0, le=100.0)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def clamp_percentage(fraction: float) -> float:
    """Clamp a [0, 1] blend (which may overshoot) and scale it to [0, 100]."""
    return max(0.0, min(1.0, fraction)) * 100.0


def _norm(value: float) -> float:
    return value / TRAIT_MAX


def _inverse_norm(value: float) -> float:
    return (TRAIT_MAX - value) / TRAIT_MAX


# ---------------------------------------------------------------------------
# Individual composites
# ---------------------------------------------------------------------------
def cohesion_index(collective: CollectiveProfile) -> float:
    """Low agreeableness / neuroticism variance plus outgoing members."""
    m, d = collective.mean_traits, collective.trait_diversity
    return clamp_percentage(
        (1 - d.agreeableness / 2) * 0.4
        + (1 - d.neuroticism / 2) * 0.4
        + _norm(m.extraversion) * 0.2
    )


def innovation_potential(collective: CollectiveProfile) -> float:
    """High openness, some openness diversity (saturating at 1.5), communication."""
    m, d = collective.mean_traits, collective.trait_diversity
    return clamp_percentage(
        _norm(m.openness) * 0.5
        + min(d.openness / 1.5, 1.0) * 0.3
        + _norm(m.extraversion) * 0.2
    )


def conflict_probability(collective: CollectiveProfile) -> float:
    """Low / uneven agreeableness and high / uneven neuroticism."""
    m, d = collective.mean_traits, collective.trait_diversity
    return clamp_percentage(
        _inverse_norm(m.agreeableness) * 0.3
        + (d.agreeableness / 2) * 0.3
        + _norm(m.neuroticism) * 0.2
        + (d.neuroticism / 2) * 0.2
    )


def adaptability_score(collective: CollectiveProfile) -> float:
    m = collective.mean_traits
    return clamp_percentage(
        _norm(m.openness) * 0.5
        + _inverse_norm(m.neuroticism) * 0.3
        + _norm(m.extraversion) * 0.2
    )


def performance_capability(collective: CollectiveProfile) -> float:
    """High, aligned conscientiousness with low neuroticism."""
    m, d = collective.mean_traits, collective.trait_diversity
    return clamp_percentage(
        _norm(m.conscientiousness) * 0.5
        + (1 - d.conscientiousness / 2) * 0.3
        + _inverse_norm(m.neuroticism) * 0.2
    )


def communication_effectiveness(collective: CollectiveProfile) -> float:
    m = collective.mean_traits
    return clamp_percentage(
        _norm(m.extraversion) * 0.4
        + _norm(m.agreeableness) * 0.4
        + _norm(m.openness) * 0.2
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def calculate_composite_scores(collective: CollectiveProfile) -> CompositeScores:
    """Compute all six composite scores for *collective*."""
    return CompositeScores(
        cohesion_index=cohesion_index(collective),
        innovation_potential=innovation_potential(collective),
        conflict_probability=conflict_probability(collective),
        adaptability_score=adaptability_score(collective),
        performance_capability=performance_capability(collective),
        communication_effectiveness=communication_effectiveness(collective),
    )


def interpret_dynamics(scores: CompositeScores) -> list[str]:
    """Short textual readings of the notable composite bands."""
    notes: list[str] = []

    if scores.cohesion_index > 80:
        notes.append("Excellent collaboration capability")
    elif scores.cohesion_index < 50:
        notes.append("Collaboration challenges likely")

    if scores.innovation_potential > 75:
        notes.append("Strong innovation potential")
    elif scores.innovation_potential < 40:
        notes.append("Limited innovation capability")

    if scores.conflict_probability > 60:
        notes.append("High risk of team conflicts")
    elif scores.conflict_probability < 30:
        notes.append("Low conflict risk, harmonious team")

    return notes

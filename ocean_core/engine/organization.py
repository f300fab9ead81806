"""Organizational profile builder.

Aggregates a population of individual trait profiles into a collective
profile, then derives culture type, emergent properties, health metrics,
composite scores, risk factors and recommendations. An optional interaction matrix refines
the emergent properties with influence-weighted traits.

All functions are *pure*.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np
from pydantic import BaseModel, Field

from ocean_core.engine.composite import CompositeScores, calculate_composite_scores, clamp_percentage
from ocean_core.engine.culture import CultureType, classify_culture
from ocean_core.engine.diversity import (
    build_collective_profile,
    calculate_trait_ranges,
)
from ocean_core.engine.health import HealthMetrics, assess_health_metrics
from ocean_core.engine.recommendations import (
    Recommendation,
    RecommendationPlan,
    generate_culture_recommendations,
    generate_recommendation_plan,
)
from ocean_core.engine.risks import RiskFactor, identify_risk_factors
from ocean_core.errors import InvalidInputError
from ocean_core.trait_types import (
    TRAIT_MAX,
    TRAIT_NAMES,
    CollectiveProfile,
    ProfileInput,
    TraitDiversity,
    TraitProfile,
    TraitVector,
    coerce_profiles,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class EmergentProperties(BaseModel):
    """Properties that emerge from the group beyond individual traits."""

    collective_intelligence: float = Field(ge=0.0, le=100.0)
    team_cohesion: float = Field(ge=0.0, le=100.0)
    adaptive_capacity: float = Field(ge=0.0, le=100.0)
    execution_capability: float = Field(ge=0.0, le=100.0)
    interaction_aware: bool = False
    centrality_weights: list[float] = Field(default_factory=list)
    influence_weighted_traits: TraitVector | None = None


class OrganizationalProfile(BaseModel):
    """Full organizational OCEAN profile."""

    collective_traits: TraitVector
    trait_diversity: TraitDiversity
    sample_size: int = Field(ge=1)
    culture_type: CultureType
    culture_description: str
    emergent_properties: EmergentProperties
    health_metrics: HealthMetrics
    composite_scores: CompositeScores
    risk_factors: list[RiskFactor] = Field(default_factory=list)
    recommendations: RecommendationPlan = Field(default_factory=RecommendationPlan)
    culture_recommendations: list[Recommendation] = Field(default_factory=list)

    @property
    def collective(self) -> CollectiveProfile:
        return CollectiveProfile(
            mean_traits=self.collective_traits,
            trait_diversity=self.trait_diversity,
            sample_size=self.sample_size,
        )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _n(value: float) -> float:
    return value / TRAIT_MAX


def _stability(neuroticism: float) -> float:
    return (TRAIT_MAX - neuroticism) / TRAIT_MAX



def centrality_weights(matrix: Any, size: int) -> list[float]:
    """Normalised degree centrality of each member in *matrix*.

    Degrades to uniform weights when the matrix carries no interactions.

    Raises:
        InvalidInputError: If the matrix is not ``size``×``size``, or holds
            negative or non-finite entries.
    """
    try:
        arr = np.asarray(matrix, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError("interaction_matrix must be a numeric square matrix") from exc
    if arr.shape != (size, size):
        raise InvalidInputError(
            f"interaction_matrix must be {size}x{size}, got shape {arr.shape}"
        )
    if not np.all(np.isfinite(arr)) or np.any(arr < 0):
        raise InvalidInputError("interaction_matrix entries must be finite and non-negative")

    degree = arr.sum(axis=1)
    total = float(degree.sum())
    if total <= 0:
        logger.debug("Interaction matrix is empty, falling back to uniform weights")
        return [1.0 / size] * size
    return [float(w) for w in degree / total]


def _weighted_traits(profiles: Sequence[TraitProfile], weights: list[float]) -> TraitVector:
    w = np.asarray(weights, dtype=float)
    return TraitVector(**{
        t: float(np.dot(w, [p.get(t) for p in profiles])) for t in TRAIT_NAMES
    })


def calculate_emergent_properties(
    traits: TraitVector,
    diversity: TraitDiversity,
) -> EmergentProperties:
    """Emergent group properties from collective traits and diversity."""
    return EmergentProperties(
        collective_intelligence=clamp_percentage(
            _n(traits.openness) * 0.4
            + _n(diversity.openness) * 0.3
            + _n(traits.conscientiousness) * 0.3
        ),
        team_cohesion=clamp_percentage(
            _n(traits.agreeableness) * 0.5
            + _stability(diversity.agreeableness) * 0.3
            + _n(traits.extraversion) * 0.2
        ),
        adaptive_capacity=clamp_percentage(
            _n(traits.openness) * 0.4
            + _n(diversity.extraversion) * 0.3
            + _stability(traits.neuroticism) * 0.3
        ),
        execution_capability=clamp_percentage(
            _n(traits.conscientiousness) * 0.5
            + _stability(diversity.conscientiousness) * 0.3
            + _stability(traits.neuroticism) * 0.2
        ),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def build_organizational_profile(
    individual_profiles: Sequence[ProfileInput],
    interaction_matrix: Any | None = None,
) -> OrganizationalProfile:
    """Build the full organizational profile for *individual_profiles*.

    Args:
        individual_profiles: Non-empty list of trait profiles (models or dicts).
        interaction_matrix: Optional N×N non-negative matrix of who interacts
            with whom; refines the emergent properties when supplied.

    Raises:
        EmptyInputError: If *individual_profiles* is empty.
        InvalidInputError: If the input is malformed or out of domain.
    """
    profiles = coerce_profiles(individual_profiles, label="individual_profiles")
    collective = build_collective_profile(profiles)
    traits, diversity = collective.mean_traits, collective.trait_diversity

    culture = classify_culture(traits)
    emergent = calculate_emergent_properties(traits, diversity)
    if interaction_matrix is not None:
        weights = centrality_weights(interaction_matrix, len(profiles))
        emergent = emergent.model_copy(update={
            "interaction_aware": True,
            "centrality_weights": weights,
            "influence_weighted_traits": _weighted_traits(profiles, weights),
        })

    health = assess_health_metrics(traits)
    scores = calculate_composite_scores(collective)
    profile = OrganizationalProfile(
        collective_traits=traits,
        trait_diversity=diversity,
        sample_size=collective.sample_size,
        culture_type=culture.culture_type,
        culture_description=culture.description,
        emergent_properties=emergent,
        health_metrics=health,
        composite_scores=scores,
        risk_factors=identify_risk_factors(
            collective, calculate_trait_ranges(profiles), scale="organization",
        ),
        recommendations=generate_recommendation_plan(scores, diversity),
        culture_recommendations=generate_culture_recommendations(health, traits),
    )
    logger.debug(
        "Built organizational profile: sample_size=%d culture=%s risks=%d recommendations=%d",
        profile.sample_size, profile.culture_type, len(profile.risk_factors),
        len(profile.recommendations.all()) + len(profile.culture_recommendations),
    )
    return profile

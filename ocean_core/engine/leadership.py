"""Leadership profile derived from an executive's trait scores.

Leadership-style shares, influence tactic preferences, predicted team
outcomes and stress response. Emotional stability is the neuroticism score
reflected on the 1–5 scale.
All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, Field

from ocean_core.trait_types import TRAIT_MAX, TRAIT_MIN, ProfileInput, TraitVector, coerce_trait_vector


# ---------------------------------------------------------------------------
# Coefficient tables
# ---------------------------------------------------------------------------
def _frozen(table: dict[str, dict[str, float]]) -> Mapping[str, Mapping[str, float]]:
    return MappingProxyType({k: MappingProxyType(v) for k, v in table.items()})


# "stability" refers to emotional stability, not a raw trait
LEADERSHIP_STYLE_COEFFICIENTS: Mapping[str, Mapping[str, float]] = _frozen({
    "transformational": {"openness": 0.35, "extraversion": 0.35, "stability": 0.30},
    "transactional": {"conscientiousness": 0.50, "agreeableness": 0.30, "extraversion": 0.20},
    "servant": {"agreeableness": 0.45, "conscientiousness": 0.30, "stability": 0.25},
    "authentic": {"openness": 0.30, "agreeableness": 0.35, "stability": 0.35},
    "adaptive": {"openness": 0.40, "extraversion": 0.30, "stability": 0.30},
})

# negative weights score the inverse of the trait
INFLUENCE_TACTIC_MAPPING: Mapping[str, Mapping[str, float]] = _frozen({
    "inspirational_appeals": {"extraversion": 0.90, "openness": 0.70, "agreeableness": 0.55},
    "rational_persuasion": {"conscientiousness": 0.85, "openness": 0.55},
    "consultation": {"agreeableness": 0.90, "extraversion": 0.65},
    "ingratiation": {"agreeableness": 0.75, "extraversion": 0.60},
    "exchange": {"conscientiousness": 0.60, "extraversion": 0.50},
    "personal_appeals": {"agreeableness": 0.70, "extraversion": 0.80},
    "coalition": {"extraversion": 0.75, "agreeableness": 0.85},
    "legitimating": {"conscientiousness": 0.80, "agreeableness": 0.40},
    "pressure": {"extraversion": 0.70, "agreeableness": -0.40, "conscientiousness": 0.65},
})

TEAM_OUTCOME_COEFFICIENTS: Mapping[str, Mapping[str, float]] = _frozen({
    "engagement": {"extraversion": 0.30, "agreeableness": 0.35, "stability": 0.35},
    "innovation": {"openness": 0.50, "extraversion": 0.25, "stability": 0.25},
    "performance": {"conscientiousness": 0.45, "extraversion": 0.30, "stability": 0.25},
    "cohesion": {"agreeableness": 0.40, "stability": 0.35, "extraversion": 0.25},
})

_COPING_STRATEGIES: tuple[tuple[str, str], ...] = (
    ("conscientiousness", "Structured problem-solving"),
    ("extraversion", "Social support seeking"),
    ("openness", "Creative reframing"),
    ("stability", "Emotional regulation"),
    ("agreeableness", "Collaborative solutions"),
)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class StressResponse(BaseModel):
    resilience_score: float = Field(ge=0.0, le=100.0)
    recovery_speed: Literal["rapid", "moderate", "slow"]
    team_impact: Literal["stabilizing", "energizing", "calming", "variable"]
    coping_strategies: list[str] = Field(default_factory=list)


class LeadershipProfile(BaseModel):
    """Leadership tendencies of one executive."""

    traits: TraitVector
    emotional_stability: float = Field(ge=TRAIT_MIN, le=TRAIT_MAX)
    leadership_styles: dict[str, float]
    influence_tactics: dict[str, float]
    team_outcomes: dict[str, float]
    stress_response: StressResponse


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _scores(traits: TraitVector, stability: float) -> dict[str, float]:
    values = traits.as_dict()
    values["stability"] = stability
    return values


def _leadership_styles(values: dict[str, float]) -> dict[str, float]:
    raw = {
        style: sum(values[k] * w for k, w in coeffs.items())
        for style, coeffs in LEADERSHIP_STYLE_COEFFICIENTS.items()
    }
    total = sum(raw.values())
    return {style: score / total * 100 for style, score in raw.items()}


def _influence_tactics(values: dict[str, float]) -> dict[str, float]:
    result: dict[str, float] = {}
    for tactic, mapping in INFLUENCE_TACTIC_MAPPING.items():
        score = 0.0
        weight_sum = 0.0
        for trait, w in mapping.items():
            v = values[trait] if w >= 0 else TRAIT_MAX - values[trait]
            score += v * abs(w)
            weight_sum += abs(w)
        # weighted mean on the 0–5 scale → percentage
        result[tactic] = score / weight_sum * 20
    return result


def _team_outcomes(values: dict[str, float]) -> dict[str, float]:
    return {
        outcome: sum(values[k] * w for k, w in coeffs.items()) / TRAIT_MAX * 100
        for outcome, coeffs in TEAM_OUTCOME_COEFFICIENTS.items()
    }


def _stress_response(values: dict[str, float]) -> StressResponse:
    stability = values["stability"]
    resilience = min(100.0, (
        stability * 0.45
        + values["conscientiousness"] * 0.30
        + values["openness"] * 0.15
        + values["extraversion"] * 0.10
    ) / TRAIT_MAX * 100)

    if resilience > 70:
        recovery = "rapid"
    elif resilience > 40:
        recovery = "moderate"
    else:
        recovery = "slow"

    if stability > 3.5 and values["agreeableness"] > 3.5:
        impact = "stabilizing"
    elif values["extraversion"] > 4 and stability > 3:
        impact = "energizing"
    elif values["agreeableness"] > 4 and values["conscientiousness"] > 3.5:
        impact = "calming"
    else:
        impact = "variable"

    return StressResponse(
        resilience_score=resilience,
        recovery_speed=recovery,
        team_impact=impact,
        coping_strategies=[label for key, label in _COPING_STRATEGIES if values[key] > 3.5],
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def build_leadership_profile(executive: ProfileInput) -> LeadershipProfile:
    """Derive leadership tendencies from *executive*'s trait scores."""
    traits = coerce_trait_vector(executive, label="executive")
    stability = TRAIT_MAX + TRAIT_MIN - traits.neuroticism
    values = _scores(traits, stability)

    return LeadershipProfile(
        traits=traits,
        emotional_stability=stability,
        leadership_styles=_leadership_styles(values),
        influence_tactics=_influence_tactics(values),
        team_outcomes=_team_outcomes(values),
        stress_response=_stress_response(values),
    )

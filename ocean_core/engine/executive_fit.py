"""Executive ↔ organization fit scoring and succession planning.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field

from ocean_core.engine.statistics import mean, std_dev
from ocean_core.errors import EmptyInputError, InvalidInputError
from ocean_core.trait_types import (
    TRAIT_MAX,
    TRAIT_MIN,
    TRAIT_NAMES,
    ProfileInput,
    TraitVector,
    coerce_trait_vector,
)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class ComplementaryFit(BaseModel):
    """How an executive complements (rather than mirrors) the organization."""

    leadership_gap_fill: float = Field(ge=0.0, le=1.0)
    diversity_contribution: float = Field(ge=0.0, le=1.0)
    balance_potential: float = Field(ge=0.0, le=1.0)


class ExecutiveOrgFit(BaseModel):
    """Executive-organization fit result."""

    trait_alignment: dict[str, float]
    complementary_fit: ComplementaryFit
    overall_fit_score: float = Field(ge=0.0, le=1.0)
    recommendations: list[str] = Field(default_factory=list)


class ExecutiveAlignmentSummary(BaseModel):
    average_fit: float = Field(ge=0.0, le=1.0)
    executive_count: int = Field(ge=1)
    description: str


class SuccessionPlan(BaseModel):
    """Ideal successor profile and the development needed to reach it."""

    ideal_profile: TraitVector
    critical_traits: list[str] = Field(default_factory=list)
    development_paths: dict[str, list[str]]
    timeline_months: int = Field(ge=0)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
LOW_ALIGNMENT = 0.6
# moderate differences add perspective, large ones clash
_DIVERSITY_BAND = (1.0, 2.5)

DEVELOPMENT_PATHS = MappingProxyType({
    "openness": (
        "Cross-functional project leadership",
        "Innovation workshop facilitation",
        "Strategic partnership development",
        "Emerging technology exploration",
    ),
    "conscientiousness": (
        "Process improvement initiatives",
        "Quality management certification",
        "Project management leadership",
        "Operational excellence programs",
    ),
    "extraversion": (
        "Public speaking engagements",
        "Network leadership roles",
        "Team building facilitation",
        "Executive coaching practice",
    ),
    "agreeableness": (
        "Conflict resolution training",
        "Collaborative leadership programs",
        "Mentoring relationships",
        "Cross-cultural team experiences",
    ),
    "neuroticism": (
        "Stress management coaching",
        "Mindfulness practice",
        "Crisis simulation training",
        "Executive resilience programs",
    ),
})

_SUCCESSION_WEIGHTS = MappingProxyType(
    {"org": 0.3, "future": 0.4, "continuity": 0.2, "improvement": 0.1}
)
_DEFAULT_FUTURE_TARGET = 3.5
_CRITICAL_GAP = 1.5
_MONTHS_PER_POINT = 12


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def calculate_trait_balance(traits: TraitVector) -> float:
    """1 for a perfectly flat profile, lower as traits spread apart."""
    return 1 - std_dev(list(traits.as_dict().values())) / 2.5


def calculate_complementary_fit(executive: TraitVector, org: TraitVector) -> ComplementaryFit:
    gap_fill = 0.0
    if org.openness < 3.0 and executive.openness > 4.0:
        gap_fill += 0.25
    if org.conscientiousness < 3.5 and executive.conscientiousness > 4.0:
        gap_fill += 0.25
    if org.extraversion < 3.0 and executive.extraversion > 4.0:
        gap_fill += 0.25
    if org.neuroticism > 3.5 and executive.neuroticism < 2.5:
        gap_fill += 0.25

    low, high = _DIVERSITY_BAND
    diversity = sum(
        0.2 for t in TRAIT_NAMES if low < abs(executive.get(t) - org.get(t)) < high
    )

    balance = 0.8 if calculate_trait_balance(executive) > calculate_trait_balance(org) else 0.5

    return ComplementaryFit(
        leadership_gap_fill=min(gap_fill, 1.0),
        diversity_contribution=min(diversity, 1.0),
        balance_potential=balance,
    )


def _fit_recommendations(
    executive: TraitVector,
    org: TraitVector,
    alignment: Mapping[str, float],
    complementary: ComplementaryFit,
) -> list[str]:
    recs: list[str] = []
    for trait, fit in alignment.items():
        if fit >= LOW_ALIGNMENT:
            continue
        if executive.get(trait) > org.get(trait):
            recs.append(
                f"High {trait} may clash with organizational culture. "
                "Focus on gradual culture shift or adjust leadership style."
            )
        else:
            recs.append(
                f"Lower {trait} than organization norm. "
                f"Develop {trait}-related competencies or leverage team strengths."
            )

    if complementary.leadership_gap_fill > 0.6:
        recs.append(
            "Strong potential to fill organizational capability gaps. "
            "Leverage unique strengths to drive positive change."
        )
    if complementary.diversity_contribution > 0.7:
        recs.append(
            "Valuable diversity of perspective. "
            "Use different viewpoint to challenge groupthink and drive innovation."
        )
    if complementary.balance_potential > 0.7:
        recs.append(
            "Well-balanced profile can stabilize organizational extremes. "
            "Act as a moderating influence in decision-making."
        )
    return recs


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def score_executive_fit(executive: ProfileInput, org_traits: Any) -> ExecutiveOrgFit:
    """Compare an executive's traits with the organization's mean traits.

    Per trait, alignment is ``1 - |executive - org| / 5``; the overall fit
    score is the mean alignment over the five traits.

    Args:
        executive: The executive's trait profile.
        org_traits: Organization mean traits (a trait record, a mapping, or a
            ``CollectiveProfile``).

    Raises:
        InvalidInputError: If either side is missing a trait or out of domain.
    """
    exec_vec = coerce_trait_vector(executive, label="executive")
    org_vec = coerce_trait_vector(org_traits, label="org_traits")

    alignment = {
        t: 1 - abs(exec_vec.get(t) - org_vec.get(t)) / TRAIT_MAX for t in TRAIT_NAMES
    }
    complementary = calculate_complementary_fit(exec_vec, org_vec)

    return ExecutiveOrgFit(
        trait_alignment=alignment,
        complementary_fit=complementary,
        overall_fit_score=mean(list(alignment.values())),
        recommendations=_fit_recommendations(exec_vec, org_vec, alignment, complementary),
    )


def describe_alignment(avg_fit: float) -> str:
    if avg_fit > 0.8:
        return "Excellent alignment between leadership and organizational culture"
    if avg_fit > 0.6:
        return "Good leadership-culture fit with some areas for improvement"
    if avg_fit > 0.4:
        return "Moderate alignment requiring attention to leadership development or culture change"
    return "Low alignment indicating significant leadership-culture mismatch"


def summarize_executive_alignment(fits: Sequence[ExecutiveOrgFit]) -> ExecutiveAlignmentSummary:
    """Average fit across several executives.

    Raises:
        EmptyInputError: If *fits* is empty.
    """
    if not fits:
        raise EmptyInputError("no executive fits to summarize")
    avg = mean([f.overall_fit_score for f in fits])
    return ExecutiveAlignmentSummary(
        average_fit=avg,
        executive_count=len(fits),
        description=describe_alignment(avg),
    )


def plan_succession(
    current_executive: ProfileInput,
    org_traits: Any,
    future_needs: Mapping[str, float] | None = None,
) -> SuccessionPlan:
    """Ideal successor profile blending org fit, future needs and continuity.

    Args:
        current_executive: Trait profile of the incumbent.
        org_traits: Organization mean traits.
        future_needs: Optional trait → required level (1–5) for the role.

    Raises:
        InvalidInputError: If *future_needs* names an unknown trait or a
            non-numeric level or a level outside [1, 5].
    """
    current = coerce_trait_vector(current_executive, label="current_executive")
    org = coerce_trait_vector(org_traits, label="org_traits")
    needs = dict(future_needs or {})
    for trait, level in needs.items():
        if trait not in TRAIT_NAMES:
            raise InvalidInputError(f"future_needs: unknown trait {trait!r}")
        if isinstance(level, bool) or not isinstance(level, (int, float)):
            raise InvalidInputError(
                f"future_needs: {trait} level must be a number, got {type(level).__name__}"
            )
        if not TRAIT_MIN <= level <= TRAIT_MAX:
            raise InvalidInputError(f"future_needs: {trait} level {level} outside [1, 5]")

    w = _SUCCESSION_WEIGHTS
    ideal: dict[str, float] = {}
    for t in TRAIT_NAMES:
        value = current.get(t)
        if t == "neuroticism":
            improvement = max(value - 0.5, TRAIT_MIN)
        elif t == "agreeableness":
            improvement = 3.5
        else:
            improvement = min(value + 0.5, TRAIT_MAX)
        # continuity regresses the incumbent toward the scale midpoint
        continuity = value * 0.7 + 1.05
        ideal[t] = (
            org.get(t) * w["org"]
            + needs.get(t, _DEFAULT_FUTURE_TARGET) * w["future"]
            + continuity * w["continuity"]
            + improvement * w["improvement"]
        )

    critical = [t for t, level in needs.items() if abs(level - current.get(t)) > _CRITICAL_GAP]
    max_gap = max(abs(ideal[t] - current.get(t)) for t in TRAIT_NAMES)

    return SuccessionPlan(
        ideal_profile=TraitVector(**ideal),
        critical_traits=critical,
        development_paths={t: list(paths) for t, paths in DEVELOPMENT_PATHS.items()},
        timeline_months=round(max_gap * _MONTHS_PER_POINT),
    )

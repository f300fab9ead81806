"""Team composition analysis.

Mean traits, diversity, role fit, dynamics predictions, risks and
strengths for one team, plus the trait target for the next hire and
the recommendations that follow from the dynamics predictions.
All functions are *pure*.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType
from typing import Literal, NamedTuple

from pydantic import BaseModel, Field

from ocean_core.engine.composite import CompositeScores, calculate_composite_scores
from ocean_core.engine.diversity import build_collective_profile, calculate_trait_ranges
from ocean_core.engine.recommendations import (
    Recommendation,
    RecommendationPlan,
    generate_recommendation_plan,
    generate_team_recommendations,
)
from ocean_core.engine.risks import RiskFactor, identify_risk_factors
from ocean_core.engine.statistics import mean
from ocean_core.trait_types import (
    DEFAULT_ROLE,
    ROLE_PROFILES,
    TRAIT_MAX,
    TRAIT_NAMES,
    CollectiveProfile,
    ProfileInput,
    RoleAssignmentsInput,
    TraitDiversity,
    TraitName,
    TraitProfile,
    TraitVector,
    coerce_profiles,
    coerce_role_assignments,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
GapPriority = Literal["high", "medium"]


class MemberRoleFit(BaseModel):
    """Personality-role alignment of a single member."""

    member_index: int = Field(ge=0)
    role: str
    score: float = Field(ge=0.0, le=1.0)


class TeamStrength(BaseModel):
    area: str
    score: float
    description: str


class TraitGap(BaseModel):
    """A trait the next hire should bring to close a team gap."""

    trait: TraitName
    target: float = Field(ge=1.0, le=5.0)
    priority: GapPriority
    reason: Literal["mean", "diversity"] = "mean"


class OptimalAdditions(BaseModel):
    """Target trait profile for the next hire plus the gaps behind it."""

    target_profile: TraitVector
    gaps: list[TraitGap] = Field(default_factory=list)


class TeamComposition(BaseModel):
    """Full team composition analysis."""

    mean_traits: TraitVector
    trait_diversity: TraitDiversity
    team_size: int = Field(ge=1)
    role_fit_scores: dict[str, float] = Field(default_factory=dict)
    member_role_fits: list[MemberRoleFit] = Field(default_factory=list)
    dynamic_predictions: CompositeScores
    risk_factors: list[RiskFactor] = Field(default_factory=list)
    strengths: list[TeamStrength] = Field(default_factory=list)
    optimal_additions: OptimalAdditions
    recommendations: RecommendationPlan = Field(default_factory=RecommendationPlan)
    optimization_recommendations: list[Recommendation] = Field(default_factory=list)

    @property
    def collective(self) -> CollectiveProfile:
        return CollectiveProfile(
            mean_traits=self.mean_traits,
            trait_diversity=self.trait_diversity,
            sample_size=self.team_size,
        )


# ---------------------------------------------------------------------------
# Role fit
# ---------------------------------------------------------------------------
def calculate_role_fit(profile: TraitProfile, ideal: TraitVector) -> float:
    """Mean per-trait closeness of *profile* to *ideal*, in [0, 1]."""
    closeness = [
        1 - abs(profile.get(t) - ideal.get(t)) / TRAIT_MAX for t in TRAIT_NAMES
    ]
    return max(0.0, min(1.0, mean(closeness)))


def assess_role_fit(
    profiles: Sequence[TraitProfile],
    role_assignments: RoleAssignmentsInput | None,
    role_profiles: Mapping[str, TraitVector] | None = None,
) -> tuple[dict[str, float], list[MemberRoleFit]]:
    """Per-member and per-role fit. Unknown roles are scored against ``leader``."""
    targets = ROLE_PROFILES if role_profiles is None else role_profiles
    fallback = targets.get(DEFAULT_ROLE, ROLE_PROFILES[DEFAULT_ROLE])

    member_fits: list[MemberRoleFit] = []
    for ra in coerce_role_assignments(role_assignments, len(profiles)):
        ideal = targets.get(ra.role, fallback)
        member_fits.append(MemberRoleFit(
            member_index=ra.member_index,
            role=ra.role,
            score=calculate_role_fit(profiles[ra.member_index], ideal),
        ))

    by_role: dict[str, list[float]] = {}
    for fit in member_fits:
        by_role.setdefault(fit.role, []).append(fit.score)
    return {role: mean(scores) for role, scores in by_role.items()}, member_fits


def interpret_role_fits(role_fit_scores: Mapping[str, float]) -> str:
    if not role_fit_scores:
        return "No role assignments supplied"
    avg_fit = mean(list(role_fit_scores.values()))
    if avg_fit > 0.8:
        return "Excellent role-personality alignment across the team"
    if avg_fit > 0.6:
        return "Good role fit with some optimization opportunities"
    return "Significant role-personality misalignment requiring attention"


# ---------------------------------------------------------------------------
# Strengths
# ---------------------------------------------------------------------------
class _StrengthRule(NamedTuple):
    area: str
    description: str
    score: Callable[[CompositeScores, TraitVector], float]
    threshold: float


_STRENGTH_RULES: tuple[_StrengthRule, ...] = (
    _StrengthRule(
        "Collaboration", "Team works exceptionally well together",
        lambda s, m: s.cohesion_index, 75.0,
    ),
    _StrengthRule(
        "Innovation", "Strong capacity for creative problem-solving",
        lambda s, m: s.innovation_potential, 70.0,
    ),
    _StrengthRule(
        "Execution", "Highly reliable delivery and performance",
        lambda s, m: s.performance_capability, 80.0,
    ),
    _StrengthRule(
        "Organization", "Excellent planning and organizational skills",
        lambda s, m: m.conscientiousness * 20, 80.0,
    ),
    _StrengthRule(
        "Team Harmony", "Supportive and cooperative team environment",
        lambda s, m: m.agreeableness * 20, 80.0,
    ),
)


def identify_team_strengths(scores: CompositeScores, mean_traits: TraitVector) -> list[TeamStrength]:
    """Areas where the team scores above the strength threshold."""
    strengths: list[TeamStrength] = []
    for rule in _STRENGTH_RULES:
        value = rule.score(scores, mean_traits)
        if value > rule.threshold:
            strengths.append(TeamStrength(area=rule.area, score=value, description=rule.description))
    return strengths


# ---------------------------------------------------------------------------
# Optimal additions
# ---------------------------------------------------------------------------
class _GapRule(NamedTuple):
    trait: TraitName
    target: float
    priority: GapPriority
    predicate: Callable[[TraitVector], bool]


_MEAN_GAP_RULES: tuple[_GapRule, ...] = (
    _GapRule("openness", 4.0, "high", lambda m: m.openness < 3.2),
    _GapRule("conscientiousness", 4.2, "high", lambda m: m.conscientiousness < 3.5),
    _GapRule("extraversion", 3.5, "medium", lambda m: m.extraversion < 2.8),
    _GapRule("agreeableness", 3.8, "high", lambda m: m.agreeableness < 3.0),
    _GapRule("neuroticism", 2.5, "high", lambda m: m.neuroticism > 3.5),
)

LOW_OPENNESS_DIVERSITY = 0.8
INNOVATION_TARGET = 70.0
_DIVERSITY_OPENNESS_TARGET = 5.0

# value a hire should bring on traits without a gap
DEFAULT_TARGETS: Mapping[str, float] = MappingProxyType({
    "openness": 3.8,
    "conscientiousness": 3.8,
    "extraversion": 3.8,
    "agreeableness": 3.8,
    "neuroticism": 2.5,
})


def _optimal_additions(
    m: TraitVector,
    diversity: TraitDiversity,
    scores: CompositeScores,
) -> OptimalAdditions:
    gaps: list[TraitGap] = [
        TraitGap(trait=rule.trait, target=rule.target, priority=rule.priority)
        for rule in _MEAN_GAP_RULES
        if rule.predicate(m)
    ]

    if (
        diversity.openness < LOW_OPENNESS_DIVERSITY
        and scores.innovation_potential < INNOVATION_TARGET
    ):
        gaps.append(TraitGap(
            trait="openness",
            target=_DIVERSITY_OPENNESS_TARGET,
            priority="medium",
            reason="diversity",
        ))

    targets = dict(DEFAULT_TARGETS)
    for gap in gaps:
        # later gaps on the same trait win, as with the diversity push on openness
        targets[gap.trait] = gap.target

    return OptimalAdditions(target_profile=TraitVector(**targets), gaps=gaps)


def identify_optimal_additions(composition: TeamComposition) -> OptimalAdditions:
    """Trait target for the next hire, closing the team's largest gaps."""
    return _optimal_additions(
        composition.mean_traits,
        composition.trait_diversity,
        composition.dynamic_predictions,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def analyze_team_composition(
    member_profiles: Sequence[ProfileInput],
    role_assignments: RoleAssignmentsInput | None = None,
    role_profiles: Mapping[str, TraitVector] | None = None,
) -> TeamComposition:
    """Analyse a team's personality composition.

    Args:
        member_profiles: Non-empty list of member trait profiles.
        role_assignments: Optional member→role assignments; a list of
            ``RoleAssignment`` (or dicts) or an ``{index: role}`` mapping.
        role_profiles: Optional ideal trait targets per role; defaults to
            ``ROLE_PROFILES``.

    Raises:
        EmptyInputError: If *member_profiles* is empty.
        InvalidInputError: If the input is malformed or out of domain.
    """
    profiles = coerce_profiles(member_profiles, label="member_profiles")
    collective = build_collective_profile(profiles)
    scores = calculate_composite_scores(collective)
    role_fit_scores, member_fits = assess_role_fit(profiles, role_assignments, role_profiles)

    composition = TeamComposition(
        mean_traits=collective.mean_traits,
        trait_diversity=collective.trait_diversity,
        team_size=collective.sample_size,
        role_fit_scores=role_fit_scores,
        member_role_fits=member_fits,
        dynamic_predictions=scores,
        risk_factors=identify_risk_factors(collective, calculate_trait_ranges(profiles)),
        strengths=identify_team_strengths(scores, collective.mean_traits),
        optimal_additions=_optimal_additions(
            collective.mean_traits, collective.trait_diversity, scores,
        ),
        recommendations=generate_recommendation_plan(scores, collective.trait_diversity),
        optimization_recommendations=generate_team_recommendations(scores),
    )
    logger.debug(
        "Analysed team composition: size=%d roles=%d risks=%d gaps=%d",
        composition.team_size, len(role_fit_scores), len(composition.risk_factors),
        len(composition.optimal_additions.gaps),
    )
    return composition

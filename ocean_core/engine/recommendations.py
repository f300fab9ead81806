"""Improvement recommendation generator.

Rule tables map threshold violations on composite scores, health metrics or
raw trait means to recommendations. Every rule is evaluated independently.
All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, Literal, NamedTuple

from pydantic import BaseModel, Field

from ocean_core.engine.composite import CompositeScores
from ocean_core.engine.health import HealthMetrics
from ocean_core.trait_types import TraitDiversity, TraitVector


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
Priority = Literal["high", "medium", "low"]
Horizon = Literal["immediate", "short_term", "long_term"]

PRIORITY_ORDER: Mapping[str, int] = MappingProxyType({"high": 0, "medium": 1, "low": 2})


class Recommendation(BaseModel):
    """A single improvement action."""

    area: str
    priority: Priority
    description: str
    initiatives: list[str] = Field(default_factory=list)
    target_traits: list[str] = Field(default_factory=list)
    horizon: Horizon | None = None
    rationale: str = ""
    expected_outcome: str = ""


class RecommendationPlan(BaseModel):
    """Recommendations bucketed by urgency."""

    immediate: list[Recommendation] = Field(default_factory=list)
    short_term: list[Recommendation] = Field(default_factory=list)
    long_term: list[Recommendation] = Field(default_factory=list)

    def all(self) -> list[Recommendation]:
        """Every recommendation, most urgent bucket first."""
        return [*self.immediate, *self.short_term, *self.long_term]


class _Rule(NamedTuple):
    predicate: Callable[..., bool]
    recommendation: Recommendation


def _fire(rules: tuple[_Rule, ...], *args: Any) -> list[Recommendation]:
    recs = [rule.recommendation.model_copy(deep=True) for rule in rules if rule.predicate(*args)]
    return sorted(recs, key=lambda r: PRIORITY_ORDER[r.priority])


# ---------------------------------------------------------------------------
# Plan rules (composite scores + diversity → bucketed actions)
# ---------------------------------------------------------------------------
CRITICAL_CONFLICT = 60.0
CRITICAL_COHESION = 50.0
LOW_INNOVATION = 60.0
LOW_PERFORMANCE = 70.0
LOW_OPENNESS_DIVERSITY = 0.8

_PLAN_RULES: tuple[_Rule, ...] = (
    _Rule(
        lambda s, d: s.conflict_probability > CRITICAL_CONFLICT,
        Recommendation(
            area="Conflict Management",
            priority="high",
            description="Conduct team dynamics workshop",
            target_traits=["agreeableness", "neuroticism"],
            horizon="immediate",
            rationale="High conflict probability requires immediate attention",
            expected_outcome="Reduced tension and improved communication",
        ),
    ),
    _Rule(
        lambda s, d: s.cohesion_index < CRITICAL_COHESION,
        Recommendation(
            area="Team Cohesion",
            priority="high",
            description="Implement daily standups and check-ins",
            target_traits=["agreeableness", "extraversion"],
            horizon="immediate",
            rationale="Low cohesion needs immediate relationship building",
            expected_outcome="Increased team connection and alignment",
        ),
    ),
    _Rule(
        lambda s, d: s.innovation_potential < LOW_INNOVATION,
        Recommendation(
            area="Innovation",
            priority="medium",
            description="Launch innovation challenge or hackathon",
            target_traits=["openness"],
            horizon="short_term",
            rationale="Team needs structured innovation opportunities",
            expected_outcome="Enhanced creative thinking and collaboration",
        ),
    ),
    _Rule(
        lambda s, d: s.performance_capability < LOW_PERFORMANCE,
        Recommendation(
            area="Execution",
            priority="medium",
            description="Implement performance management system",
            target_traits=["conscientiousness"],
            horizon="short_term",
            rationale="Team lacks consistent execution standards",
            expected_outcome="Improved delivery reliability and quality",
        ),
    ),
    _Rule(
        lambda s, d: True,
        Recommendation(
            area="Team Composition",
            priority="low",
            description="Consider strategic team composition changes",
            horizon="long_term",
            rationale="Optimize personality mix for team goals",
            expected_outcome="Enhanced overall team effectiveness",
        ),
    ),
    _Rule(
        lambda s, d: d.openness < LOW_OPENNESS_DIVERSITY,
        Recommendation(
            area="Cognitive Diversity",
            priority="medium",
            description="Recruit high-openness team members",
            target_traits=["openness"],
            horizon="long_term",
            rationale="Increase cognitive diversity and adaptability",
            expected_outcome="Better innovation and change management",
        ),
    ),
)


# ---------------------------------------------------------------------------
# Team optimisation rules (composite scores → flat list)
# ---------------------------------------------------------------------------
_TEAM_RULES: tuple[_Rule, ...] = (
    _Rule(
        lambda s: s.cohesion_index < 70,
        Recommendation(
            area="Team Collaboration",
            priority="high",
            description="Enhance team collaboration and cooperation",
            initiatives=[
                "Implement regular team building activities",
                "Establish clear communication protocols",
                "Create shared goals and success metrics",
                "Provide conflict resolution training",
            ],
            target_traits=["agreeableness", "extraversion"],
        ),
    ),
    _Rule(
        lambda s: s.innovation_potential < 65,
        Recommendation(
            area="Innovation Capability",
            priority="medium",
            description="Boost team's innovation and creative problem-solving",
            initiatives=[
                "Introduce brainstorming and ideation sessions",
                "Encourage diverse perspective sharing",
                "Implement innovation time allocation",
                "Bring in external viewpoints and expertise",
            ],
            target_traits=["openness"],
        ),
    ),
    _Rule(
        lambda s: s.performance_capability < 75,
        Recommendation(
            area="Execution Excellence",
            priority="high",
            description="Improve team's ability to deliver consistent results",
            initiatives=[
                "Establish clear processes and standards",
                "Implement project management tools",
                "Create accountability systems",
                "Provide organization and planning training",
            ],
            target_traits=["conscientiousness"],
        ),
    ),
    _Rule(
        lambda s: s.conflict_probability > 40,
        Recommendation(
            area="Conflict Prevention",
            priority="high",
            description="Reduce potential for team conflicts and tensions",
            initiatives=[
                "Establish team norms and expectations",
                "Provide emotional intelligence training",
                "Create structured decision-making processes",
                "Implement regular team retrospectives",
            ],
            target_traits=["agreeableness", "neuroticism"],
        ),
    ),
)


# ---------------------------------------------------------------------------
# Culture rules (health metrics + trait means → flat list)
# ---------------------------------------------------------------------------
_CULTURE_RULES: tuple[_Rule, ...] = (
    _Rule(
        lambda h, t: h.innovation_climate < 60,
        Recommendation(
            area="Innovation Climate",
            priority="high",
            description="Enhance organizational support for innovation and creative thinking",
            initiatives=[
                "Innovation time allocation programs",
                "Cross-functional collaboration initiatives",
                "Idea generation and evaluation processes",
                "Risk tolerance development workshops",
            ],
            target_traits=["openness", "extraversion"],
        ),
    ),
    _Rule(
        lambda h, t: h.psychological_safety < 70,
        Recommendation(
            area="Psychological Safety",
            priority="high",
            description="Create environment where team members feel safe to express ideas and concerns",
            initiatives=[
                "Leadership vulnerability training",
                "Conflict resolution skill development",
                "Open communication protocols",
                "Error learning and growth mindset programs",
            ],
            target_traits=["agreeableness", "neuroticism"],
        ),
    ),
    _Rule(
        lambda h, t: h.performance_culture < 65,
        Recommendation(
            area="Performance Excellence",
            priority="medium",
            description="Strengthen focus on high standards and achievement",
            initiatives=[
                "Goal setting and tracking systems",
                "Performance feedback mechanisms",
                "Recognition and reward programs",
                "Continuous improvement processes",
            ],
            target_traits=["conscientiousness", "extraversion"],
        ),
    ),
    _Rule(
        lambda h, t: t.openness < 3.0,
        Recommendation(
            area="Innovation Capacity",
            priority="medium",
            description="Increase organizational openness to new ideas and approaches",
            initiatives=[
                "Diverse hiring practices",
                "External innovation partnerships",
                "Change management training",
                "Creative problem-solving workshops",
            ],
            target_traits=["openness"],
        ),
    ),
    _Rule(
        lambda h, t: t.agreeableness < 3.2,
        Recommendation(
            area="Collaboration Enhancement",
            priority="medium",
            description="Foster more collaborative and supportive team dynamics",
            initiatives=[
                "Team building activities",
                "Collaborative decision-making training",
                "Mentorship programs",
                "Cross-team project assignments",
            ],
            target_traits=["agreeableness", "extraversion"],
        ),
    ),
)

_HEALTH_RULES: tuple[tuple[Callable[[HealthMetrics], bool], str], ...] = (
    (lambda h: h.psychological_safety < 70,
     "Implement psychological safety workshops and open communication training"),
    (lambda h: h.innovation_climate < 60,
     "Create innovation time and idea-sharing platforms"),
    (lambda h: h.resilience < 65,
     "Develop organizational resilience through stress management and adaptability training"),
    (lambda h: h.performance_culture < 70,
     "Strengthen performance culture through goal clarity and recognition systems"),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def generate_recommendation_plan(
    scores: CompositeScores,
    diversity: TraitDiversity,
) -> RecommendationPlan:
    """Bucket actions into immediate, short-term and long-term horizons."""
    plan = RecommendationPlan()
    for rec in _fire(_PLAN_RULES, scores, diversity):
        getattr(plan, rec.horizon).append(rec)
    return plan


def generate_team_recommendations(scores: CompositeScores) -> list[Recommendation]:
    """Team optimisation recommendations, sorted priority desc."""
    return _fire(_TEAM_RULES, scores)


def generate_culture_recommendations(
    health: HealthMetrics,
    traits: TraitVector,
) -> list[Recommendation]:
    """Culture development recommendations from health metrics and trait means."""
    return _fire(_CULTURE_RULES, health, traits)


def generate_health_recommendations(health: HealthMetrics) -> list[str]:
    return [text for predicate, text in _HEALTH_RULES if predicate(health)]

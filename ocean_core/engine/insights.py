"""Narrative insights assembled from organizational and team analyses."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field

from ocean_core.engine.composite import interpret_dynamics
from ocean_core.engine.diversity import average_diversity, describe_diversity
from ocean_core.engine.executive_fit import ExecutiveOrgFit, summarize_executive_alignment
from ocean_core.engine.organization import OrganizationalProfile
from ocean_core.engine.recommendations import generate_health_recommendations
from ocean_core.engine.risks import assess_overall_risk_severity
from ocean_core.engine.team import TeamComposition, interpret_role_fits
from ocean_core.trait_types import TRAIT_MAX, TRAIT_MIN


class Insight(BaseModel):
    """A titled observation with supporting numbers."""

    type: str
    title: str
    description: str
    metrics: dict[str, float] = Field(default_factory=dict)
    notes: list[str] = Field(default_factory=list)
    details: dict[str, Any] = Field(default_factory=dict)


def generate_organizational_insights(
    profile: OrganizationalProfile,
    executive_fits: Sequence[ExecutiveOrgFit] = (),
) -> list[Insight]:
    """Culture, health, emergent, diversity and leadership-alignment insights."""
    traits = profile.collective_traits
    insights = [
        Insight(
            type="culture_type",
            title=f"Organizational Culture: {profile.culture_type}",
            description=profile.culture_description,
            metrics={
                "openness": traits.openness,
                "conscientiousness": traits.conscientiousness,
                "extraversion": traits.extraversion,
                "agreeableness": traits.agreeableness,
                "stability": TRAIT_MAX + TRAIT_MIN - traits.neuroticism,
            },
        ),
        Insight(
            type="health_metrics",
            title="Organizational Health Overview",
            description="Key indicators of organizational psychological and performance health",
            metrics=profile.health_metrics.model_dump(),
            notes=generate_health_recommendations(profile.health_metrics),
        ),
        Insight(
            type="emergent_properties",
            title="Collective Intelligence & Capabilities",
            description="Properties that emerge from team interactions beyond individual traits",
            metrics=profile.emergent_properties.model_dump(
                include={
                    "collective_intelligence",
                    "team_cohesion",
                    "adaptive_capacity",
                    "execution_capability",
                },
            ),
        ),
    ]

    avg = average_diversity(profile.trait_diversity)
    insights.append(Insight(
        type="diversity_analysis",
        title="Personality Diversity Profile",
        description=describe_diversity(avg),
        metrics={"average": avg, **profile.trait_diversity.as_dict()},
    ))

    if executive_fits:
        summary = summarize_executive_alignment(executive_fits)
        top = sorted(executive_fits, key=lambda f: f.overall_fit_score, reverse=True)[:3]
        insights.append(Insight(
            type="executive_alignment",
            title="Leadership-Culture Alignment",
            description=summary.description,
            metrics={"average_fit": summary.average_fit, "executive_count": summary.executive_count},
            details={"top_fits": [f.model_dump() for f in top]},
        ))

    return insights


def generate_team_insights(composition: TeamComposition) -> list[Insight]:
    """Dynamics, diversity, role-fit and risk insights for a team."""
    avg = average_diversity(composition.trait_diversity)
    insights = [
        Insight(
            type="team_dynamics",
            title="Team Dynamics Overview",
            description="Predicted team performance across key dimensions",
            metrics=composition.dynamic_predictions.model_dump(),
            notes=interpret_dynamics(composition.dynamic_predictions),
        ),
        Insight(
            type="diversity_profile",
            title="Personality Diversity Analysis",
            description=f"Average diversity index: {avg:.2f}",
            metrics=composition.trait_diversity.as_dict(),
            notes=[describe_diversity(avg)],
        ),
    ]

    if composition.role_fit_scores:
        insights.append(Insight(
            type="role_alignment",
            title="Role-Personality Fit Analysis",
            description="How well team members' personalities align with their roles",
            metrics=dict(composition.role_fit_scores),
            notes=[interpret_role_fits(composition.role_fit_scores)],
        ))

    if composition.risk_factors:
        insights.append(Insight(
            type="risk_assessment",
            title="Team Risk Factors",
            description="Potential challenges based on personality composition",
            notes=[r.description for r in composition.risk_factors],
            details={
                "severity": assess_overall_risk_severity(composition.risk_factors),
                "risks": [r.model_dump() for r in composition.risk_factors],
            },
        ))

    return insights

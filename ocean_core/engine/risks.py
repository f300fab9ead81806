"""Risk identification rules for team and organizational profiles.

Each rule is evaluated independently; several may fire for one profile.
All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Literal, NamedTuple

from pydantic import BaseModel

from ocean_core.trait_types import CollectiveProfile, TraitVector


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
Severity = Literal["high", "medium", "low"]
Scale = Literal["team", "organization"]
OverallSeverity = Literal["critical", "high", "medium", "low"]

SEVERITY_ORDER: Mapping[str, int] = MappingProxyType({"high": 0, "medium": 1, "low": 2})


class RiskFactor(BaseModel):
    """A single flagged condition predicted to cause dysfunction."""

    type: str
    severity: Severity
    description: str


# ---------------------------------------------------------------------------
# Thresholds
# ---------------------------------------------------------------------------
MIN_TEAM_SIZE = 3
MAX_TEAM_SIZE = 12
HIGH_NEUROTICISM = 3.5
LOW_AGREEABLENESS = 2.5
LOW_CONSCIENTIOUSNESS = 2.8
AGREEABLENESS_VARIANCE = 1.5
CONSCIENTIOUSNESS_VARIANCE = 1.8
# half of the 1–5 scale separating the extremes of the group
POLARIZED_RANGE = 2.0


class _Rule(NamedTuple):
    type: str
    severity: Severity
    description: str
    predicate: Callable[[CollectiveProfile], bool]


class _SpreadRule(NamedTuple):
    type: str
    severity: Severity
    description: str
    predicate: Callable[[CollectiveProfile, TraitVector], bool]


# applied at team scale only
_SIZE_RULES: tuple[_Rule, ...] = (
    _Rule(
        "team_size", "medium",
        "Small team size may limit perspective diversity and resilience",
        lambda c: c.sample_size < MIN_TEAM_SIZE,
    ),
    _Rule(
        "team_size", "high",
        "Large team size may reduce coordination and communication effectiveness",
        lambda c: c.sample_size > MAX_TEAM_SIZE,
    ),
)

_RULES: tuple[_Rule, ...] = (
    _Rule(
        "emotional_instability", "high",
        "High team neuroticism may lead to stress cascades and poor decision-making",
        lambda c: c.mean_traits.neuroticism > HIGH_NEUROTICISM,
    ),
    _Rule(
        "low_cooperation", "high",
        "Low team agreeableness may result in frequent conflicts and poor collaboration",
        lambda c: c.mean_traits.agreeableness < LOW_AGREEABLENESS,
    ),
    _Rule(
        "execution_risk", "medium",
        "Low team conscientiousness may lead to missed deadlines and quality issues",
        lambda c: c.mean_traits.conscientiousness < LOW_CONSCIENTIOUSNESS,
    ),
    _Rule(
        "cooperation_variance", "medium",
        "High variance in agreeableness may create subgroups and coordination challenges",
        lambda c: c.trait_diversity.agreeableness > AGREEABLENESS_VARIANCE,
    ),
    _Rule(
        "standards_variance", "medium",
        "High variance in conscientiousness may create conflicts over work standards",
        lambda c: c.trait_diversity.conscientiousness > CONSCIENTIOUSNESS_VARIANCE,
    ),
)

# Polarisation: the group spans the scale on a trait although the overall
# variance stays under the threshold. Only fires when the variance rule did not.
_SPREAD_RULES: tuple[_SpreadRule, ...] = (
    _SpreadRule(
        "cooperation_variance", "low",
        "Agreeableness spans a wide range across members; watch for emerging subgroups",
        lambda c, r: (
            r.agreeableness >= POLARIZED_RANGE
            and c.trait_diversity.agreeableness <= AGREEABLENESS_VARIANCE
        ),
    ),
    _SpreadRule(
        "standards_variance", "low",
        "Conscientiousness spans a wide range across members; align on shared work standards",
        lambda c, r: (
            r.conscientiousness >= POLARIZED_RANGE
            and c.trait_diversity.conscientiousness <= CONSCIENTIOUSNESS_VARIANCE
        ),
    ),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def identify_risk_factors(
    collective: CollectiveProfile,
    trait_ranges: TraitVector | None = None,
    scale: Scale = "team",
) -> list[RiskFactor]:
    """Return the risk factors for *collective*, sorted severity desc.

    Args:
        collective: Aggregated group profile.
        trait_ranges: Optional per-trait spread (max − min); enables the
            polarisation rules.
        scale: ``"team"`` applies the team size bounds; ``"organization"``
            skips them.
    """
    rules = (*_SIZE_RULES, *_RULES) if scale == "team" else _RULES
    risks = [
        RiskFactor(type=rule.type, severity=rule.severity, description=rule.description)
        for rule in rules
        if rule.predicate(collective)
    ]
    if trait_ranges is not None:
        risks.extend(
            RiskFactor(type=rule.type, severity=rule.severity, description=rule.description)
            for rule in _SPREAD_RULES
            if rule.predicate(collective, trait_ranges)
        )
    return sorted(risks, key=lambda r: SEVERITY_ORDER[r.severity])


def assess_overall_risk_severity(risks: list[RiskFactor]) -> OverallSeverity:
    """Collapse a risk list into one overall severity level."""
    high = sum(1 for r in risks if r.severity == "high")
    medium = sum(1 for r in risks if r.severity == "medium")

    if high > 2:
        return "critical"
    if high > 0 or medium > 3:
        return "high"
    if medium > 0:
        return "medium"
    return "low"

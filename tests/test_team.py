"""Tests for ocean_core/engine/team.py."""

import pytest

from ocean_core import EmptyInputError, InvalidInputError, analyze_team_composition, identify_optimal_additions
from ocean_core.engine.team import DEFAULT_TARGETS, calculate_role_fit, interpret_role_fits
from ocean_core.trait_types import ROLE_PROFILES, RoleAssignment, TraitProfile, TraitVector


def _p(o=3.0, c=3.0, e=3.0, a=3.0, n=3.0) -> dict:
    return {
        "openness": o,
        "conscientiousness": c,
        "extraversion": e,
        "agreeableness": a,
        "neuroticism": n,
    }


LEADER_LIKE = _p(o=3.5, c=4.0, e=4.0, a=3.5, n=2.0)


class TestAnalyzeTeamComposition:
    def test_without_roles(self):
        comp = analyze_team_composition([_p()] * 3)
        assert comp.team_size == 3
        assert comp.role_fit_scores == {}
        assert comp.member_role_fits == []
        assert comp.risk_factors == []

    def test_dynamic_predictions(self):
        comp = analyze_team_composition([_p()] * 3)
        assert comp.dynamic_predictions.cohesion_index == pytest.approx(92.0)

    def test_strengths(self):
        comp = analyze_team_composition([_p()] * 3)
        assert [s.area for s in comp.strengths] == ["Collaboration"]

    def test_perfect_role_fit(self):
        comp = analyze_team_composition([LEADER_LIKE, _p(), _p()], {0: "leader"})
        assert comp.role_fit_scores == {"leader": pytest.approx(1.0)}

    def test_role_fit_is_mean_per_role(self):
        comp = analyze_team_composition(
            [LEADER_LIKE, _p(), _p()],
            [RoleAssignment(member_index=0, role="leader"), RoleAssignment(member_index=1, role="leader")],
        )
        fits = [f.score for f in comp.member_role_fits]
        assert comp.role_fit_scores["leader"] == pytest.approx(sum(fits) / 2)
        assert 0.0 <= comp.role_fit_scores["leader"] <= 1.0

    def test_unknown_role_scored_against_leader(self):
        comp = analyze_team_composition([LEADER_LIKE, _p(), _p()], {0: "intern"})
        assert comp.role_fit_scores["intern"] == pytest.approx(1.0)

    def test_custom_role_profiles(self):
        targets = {"leader": TraitVector(**_p())}
        comp = analyze_team_composition([_p()] * 3, {1: "leader"}, role_profiles=targets)
        assert comp.role_fit_scores["leader"] == pytest.approx(1.0)

    def test_role_index_out_of_range(self):
        with pytest.raises(InvalidInputError):
            analyze_team_composition([_p()] * 3, {3: "leader"})

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError):
            analyze_team_composition([])

    def test_single_member(self):
        comp = analyze_team_composition([_p(o=4.4)])
        assert all(v == 0.0 for v in comp.trait_diversity.as_dict().values())
        assert [r.type for r in comp.risk_factors] == ["team_size"]


class TestRoleFit:
    def test_max_mismatch(self):
        profile = TraitProfile(**_p(1.0, 1.0, 1.0, 1.0, 5.0))
        ideal = TraitVector(**_p(5.0, 5.0, 5.0, 5.0, 1.0))
        assert calculate_role_fit(profile, ideal) == pytest.approx(0.2)

    def test_default_targets_fit(self):
        assert calculate_role_fit(TraitProfile(**LEADER_LIKE), ROLE_PROFILES["leader"]) == 1.0

    @pytest.mark.parametrize(
        "scores,fragment",
        [
            ({}, "No role"),
            ({"leader": 0.9}, "Excellent"),
            ({"leader": 0.7}, "Good"),
            ({"leader": 0.5}, "Significant"),
        ],
    )
    def test_interpretation(self, scores, fragment):
        assert fragment in interpret_role_fits(scores)


class TestOptimalAdditions:
    def test_neutral_team_gaps(self):
        additions = identify_optimal_additions(analyze_team_composition([_p()] * 3))
        gaps = [(g.trait, g.target, g.priority, g.reason) for g in additions.gaps]
        assert gaps == [
            ("openness", 4.0, "high", "mean"),
            ("conscientiousness", 4.2, "high", "mean"),
            ("openness", 5.0, "medium", "diversity"),
        ]
        target = additions.target_profile
        assert target.openness == 5.0
        assert target.conscientiousness == 4.2
        assert target.extraversion == 3.8
        assert target.agreeableness == 3.8
        assert target.neuroticism == 2.5

    def test_strained_team(self):
        comp = analyze_team_composition([_p(o=3.5, c=4.0, e=2.5, a=2.5, n=4.0)] * 3)
        gaps = {g.trait: g for g in identify_optimal_additions(comp).gaps}
        assert gaps["extraversion"].priority == "medium"
        assert gaps["agreeableness"].target == 3.8
        assert gaps["neuroticism"].target == 2.5
        assert "conscientiousness" not in gaps

    def test_strong_team_has_no_gaps(self):
        members = [_p(o=4.5, c=4.2, e=4.0, a=4.0, n=2.0), _p(o=2.5, c=4.0, e=3.6, a=3.8, n=2.2)]
        additions = identify_optimal_additions(analyze_team_composition(members))
        assert additions.gaps == []
        assert additions.target_profile.openness == 3.8


class TestAttachedOutputs:
    def test_optimal_additions_attached(self):
        comp = analyze_team_composition([_p()] * 3)
        assert comp.optimal_additions == identify_optimal_additions(comp)
        assert comp.optimal_additions.target_profile.conscientiousness == 4.2

    def test_recommendation_plan_attached(self):
        comp = analyze_team_composition([_p()] * 3)
        # neutral team: innovation 42, performance 68
        assert [r.area for r in comp.recommendations.short_term] == ["Innovation", "Execution"]
        assert comp.recommendations.immediate == []
        assert "Recruit high-openness team members" in [r.description for r in comp.recommendations.long_term]

    def test_optimization_recommendations_attached(self):
        comp = analyze_team_composition([_p()] * 3)
        assert [(r.area, r.priority) for r in comp.optimization_recommendations] == [
            ("Execution Excellence", "high"),
            ("Innovation Capability", "medium"),
        ]

    def test_strong_team_has_only_structural_plan(self):
        members = [_p(o=4.5, c=4.2, e=4.0, a=4.0, n=2.0), _p(o=2.5, c=4.0, e=3.6, a=3.8, n=2.2)]
        comp = analyze_team_composition(members)
        assert comp.optimal_additions.gaps == []
        assert comp.recommendations.immediate == []


class TestDefaultTargets:
    def test_immutable(self):
        with pytest.raises(TypeError):
            DEFAULT_TARGETS["openness"] = 5.0

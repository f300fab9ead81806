"""Tests for ocean_core/engine/organization.py."""

import logging

import pytest

from ocean_core import EmptyInputError, InvalidInputError, build_organizational_profile
from ocean_core.engine.health import assess_health_metrics
from ocean_core.engine.organization import calculate_emergent_properties, centrality_weights
from ocean_core.trait_types import TRAIT_NAMES, TraitDiversity, TraitVector


def _p(o=3.0, c=3.0, e=3.0, a=3.0, n=3.0) -> dict:
    return {
        "openness": o,
        "conscientiousness": c,
        "extraversion": e,
        "agreeableness": a,
        "neuroticism": n,
    }


SCENARIO = [
    _p(o=4, c=4, e=3, a=4, n=2),
    _p(o=3, c=3, e=3, a=3, n=3),
    _p(o=5, c=2, e=4, a=2, n=4),
]


class TestEndToEndScenario:
    @pytest.fixture
    def profile(self):
        return build_organizational_profile(SCENARIO)

    def test_sample_size_and_mean(self, profile):
        assert profile.sample_size == 3
        assert profile.collective_traits.openness == pytest.approx(4.0)

    def test_diversity_is_population_variance(self, profile):
        assert profile.trait_diversity.conscientiousness == pytest.approx(0.6667, abs=1e-4)
        assert profile.trait_diversity.agreeableness == pytest.approx(0.6667, abs=1e-4)

    def test_spread_risk_reported(self, profile):
        types = {r.type for r in profile.risk_factors}
        assert types & {"cooperation_variance", "standards_variance"}

    def test_culture(self, profile):
        assert profile.culture_type == "innovation"
        assert profile.culture_description

    def test_no_interaction_matrix(self, profile):
        assert profile.emergent_properties.interaction_aware is False
        assert profile.emergent_properties.influence_weighted_traits is None

    def test_json_serialisable(self, profile):
        data = profile.model_dump(mode="json")
        assert data["sample_size"] == 3
        assert set(data["composite_scores"]) == {
            "cohesion_index",
            "innovation_potential",
            "conflict_probability",
            "adaptability_score",
            "performance_capability",
            "communication_effectiveness",
        }

    def test_collective_property(self, profile):
        assert profile.collective.sample_size == 3

    def test_logs_debug_summary(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="ocean_core.engine.organization"):
            build_organizational_profile(SCENARIO)
        assert "culture=innovation" in caplog.text


class TestInputErrors:
    def test_empty_raises(self):
        with pytest.raises(EmptyInputError):
            build_organizational_profile([])

    def test_missing_raises(self):
        with pytest.raises(InvalidInputError):
            build_organizational_profile(None)

    def test_out_of_domain_rejected(self):
        with pytest.raises(InvalidInputError):
            build_organizational_profile([_p(), _p(o=5.2)])


class TestInteractionMatrix:
    def test_weighted_traits(self):
        matrix = [[0, 1, 1], [1, 0, 0], [1, 0, 0]]
        profile = build_organizational_profile(SCENARIO, interaction_matrix=matrix)
        emergent = profile.emergent_properties
        assert emergent.interaction_aware is True
        assert emergent.centrality_weights == pytest.approx([0.5, 0.25, 0.25])
        assert emergent.influence_weighted_traits.openness == pytest.approx(4.0)
        assert emergent.influence_weighted_traits.conscientiousness == pytest.approx(3.25)

    def test_collective_means_unweighted(self):
        matrix = [[0, 5, 0], [5, 0, 0], [0, 0, 0]]
        profile = build_organizational_profile(SCENARIO, interaction_matrix=matrix)
        assert profile.collective_traits.openness == pytest.approx(4.0)

    def test_zero_matrix_is_uniform(self):
        weights = centrality_weights([[0, 0], [0, 0]], 2)
        assert weights == [0.5, 0.5]

    def test_wrong_shape(self):
        with pytest.raises(InvalidInputError, match="3x3"):
            build_organizational_profile(SCENARIO, interaction_matrix=[[0, 1], [1, 0]])

    def test_negative_entry(self):
        with pytest.raises(InvalidInputError):
            centrality_weights([[0, -1], [1, 0]], 2)

    def test_non_numeric(self):
        with pytest.raises(InvalidInputError):
            centrality_weights([["a", "b"], ["c", "d"]], 2)

    def test_nan_entry(self):
        with pytest.raises(InvalidInputError):
            centrality_weights([[0, float("nan")], [1, 0]], 2)


class TestHealthAndEmergent:
    def test_healthy_population(self):
        health = assess_health_metrics(TraitVector(**_p(o=4, c=4, e=4, a=4, n=2)))
        assert health.psychological_safety == pytest.approx(73.0)
        assert health.innovation_climate == pytest.approx(80.0)
        assert health.performance_culture == pytest.approx(75.0)

    def test_emergent_bounds(self):
        diversity = TraitDiversity(**{t: 4.0 for t in TRAIT_NAMES})
        for level in (1.0, 5.0):
            emergent = calculate_emergent_properties(
                TraitVector(**{t: level for t in TRAIT_NAMES}), diversity
            )
            for key in ("collective_intelligence", "team_cohesion", "adaptive_capacity", "execution_capability"):
                assert 0.0 <= getattr(emergent, key) <= 100.0


class TestAttachedRecommendations:
    def test_profile_carries_plan(self):
        profile = build_organizational_profile(SCENARIO)
        assert profile.recommendations.all()
        assert [r.area for r in profile.recommendations.long_term][-1] == "Team Composition"

    def test_struggling_org_carries_culture_recommendations(self):
        profile = build_organizational_profile([_p(o=2, c=2, e=2, a=2, n=4)] * 4)
        areas = [r.area for r in profile.culture_recommendations]
        assert "Psychological Safety" in areas
        assert "Collaboration Enhancement" in areas
        assert [r.area for r in profile.recommendations.short_term][0] == "Innovation"

    def test_healthy_org_has_no_culture_recommendations(self):
        profile = build_organizational_profile([_p(o=4, c=4, e=4, a=4, n=2)] * 4)
        assert profile.culture_recommendations == []

    def test_recommendations_serialise(self):
        data = build_organizational_profile(SCENARIO).model_dump(mode="json")
        assert set(data["recommendations"]) == {"immediate", "short_term", "long_term"}
        assert isinstance(data["culture_recommendations"], list)


class TestOrganizationScale:
    def test_large_organization_has_no_team_size_risk(self):
        profile = build_organizational_profile([_p()] * 50)
        assert "team_size" not in {r.type for r in profile.risk_factors}

    def test_small_organization_has_no_team_size_risk(self):
        profile = build_organizational_profile([_p()])
        assert profile.risk_factors == []


class TestStrictTraitValues:
    def test_numeric_string_rejected(self):
        members = [_p(), {**_p(), "openness": "4"}]
        with pytest.raises(InvalidInputError):
            build_organizational_profile(members)

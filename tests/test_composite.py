"""Tests for ocean_core/engine/composite.py."""

import pytest

from ocean_core.engine.composite import (
    CompositeScores,
    calculate_composite_scores,
    clamp_percentage,
    interpret_dynamics,
)
from ocean_core.engine.diversity import build_collective_profile
from ocean_core.profile_generator import generate_population_scenarios


def _p(o=3.0, c=3.0, e=3.0, a=3.0, n=3.0) -> dict:
    return {
        "openness": o,
        "conscientiousness": c,
        "extraversion": e,
        "agreeableness": a,
        "neuroticism": n,
    }


class TestClamp:
    def test_negative_clamped(self):
        assert clamp_percentage(-0.2) == 0.0

    def test_overshoot_clamped(self):
        assert clamp_percentage(1.3) == 100.0

    def test_scaled(self):
        assert clamp_percentage(0.42) == pytest.approx(42.0)


class TestCompositeFormulas:
    @pytest.fixture
    def neutral(self):
        return calculate_composite_scores(build_collective_profile([_p()]))

    def test_cohesion(self, neutral):
        assert neutral.cohesion_index == pytest.approx(92.0)

    def test_innovation(self, neutral):
        assert neutral.innovation_potential == pytest.approx(42.0)

    def test_conflict(self, neutral):
        assert neutral.conflict_probability == pytest.approx(24.0)

    def test_adaptability(self, neutral):
        assert neutral.adaptability_score == pytest.approx(54.0)

    def test_performance(self, neutral):
        assert neutral.performance_capability == pytest.approx(68.0)

    def test_communication(self, neutral):
        assert neutral.communication_effectiveness == pytest.approx(60.0)

    def test_openness_diversity_saturates(self):
        # openness variance 4.0, far above the 1.5 saturation point
        scores = calculate_composite_scores(build_collective_profile([_p(o=1.0), _p(o=5.0)]))
        # 0.6*0.5 + 1.0*0.3 + 0.6*0.2
        assert scores.innovation_potential == pytest.approx(72.0)

    def test_polarised_agreeableness_clamps_cohesion(self):
        scores = calculate_composite_scores(
            build_collective_profile([_p(a=1.0, n=1.0, e=1.0), _p(a=5.0, n=5.0, e=1.0)])
        )
        assert scores.cohesion_index == 0.0


class TestBounds:
    def test_scores_within_bounds_for_all_scenarios(self):
        for scenario in generate_population_scenarios(size=10).values():
            collective = build_collective_profile(scenario.profiles)
            for value in calculate_composite_scores(collective).model_dump().values():
                assert 0.0 <= value <= 100.0
            for value in collective.mean_traits.as_dict().values():
                assert 1.0 <= value <= 5.0

    @pytest.mark.parametrize("level", [1.0, 5.0])
    def test_extreme_profiles(self, level):
        collective = build_collective_profile([_p(level, level, level, level, level)])
        for value in calculate_composite_scores(collective).model_dump().values():
            assert 0.0 <= value <= 100.0


class TestInterpretDynamics:
    def _scores(self, **kw):
        base = dict(
            cohesion_index=60.0,
            innovation_potential=60.0,
            conflict_probability=45.0,
            adaptability_score=50.0,
            performance_capability=50.0,
            communication_effectiveness=50.0,
        )
        base.update(kw)
        return CompositeScores(**base)

    def test_middle_band_is_silent(self):
        assert interpret_dynamics(self._scores()) == []

    def test_notable_bands(self):
        notes = interpret_dynamics(
            self._scores(cohesion_index=85, innovation_potential=30, conflict_probability=70)
        )
        assert notes == [
            "Excellent collaboration capability",
            "Limited innovation capability",
            "High risk of team conflicts",
        ]

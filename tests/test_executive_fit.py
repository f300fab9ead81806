"""Tests for ocean_core/engine/executive_fit.py."""

import pytest

from ocean_core import InvalidInputError, build_organizational_profile, score_executive_fit
from ocean_core.engine.executive_fit import (
    DEVELOPMENT_PATHS,
    calculate_complementary_fit,
    calculate_trait_balance,
    describe_alignment,
    plan_succession,
    summarize_executive_alignment,
)
from ocean_core.errors import EmptyInputError
from ocean_core.trait_types import TraitVector


def _p(o=3.0, c=3.0, e=3.0, a=3.0, n=3.0) -> dict:
    return {
        "openness": o,
        "conscientiousness": c,
        "extraversion": e,
        "agreeableness": a,
        "neuroticism": n,
    }


class TestScoreExecutiveFit:
    def test_identical_profile_is_perfect_fit(self):
        p = _p(o=4.1, c=2.7, e=3.3, a=4.9, n=1.6)
        fit = score_executive_fit(p, p)
        assert fit.overall_fit_score == 1.0
        assert all(v == 1.0 for v in fit.trait_alignment.values())

    def test_alignment_formula(self):
        fit = score_executive_fit(_p(o=5.0), _p(o=2.0))
        assert fit.trait_alignment["openness"] == pytest.approx(0.4)
        assert fit.overall_fit_score == pytest.approx((0.4 + 4) / 5)

    def test_clash_recommendation(self):
        fit = score_executive_fit(_p(o=5.0), _p(o=2.0))
        assert any(r.startswith("High openness may clash") for r in fit.recommendations)

    def test_lower_trait_recommendation(self):
        fit = score_executive_fit(_p(c=1.5), _p(c=4.5))
        assert any(r.startswith("Lower conscientiousness") for r in fit.recommendations)

    def test_accepts_collective_profile(self):
        org = build_organizational_profile([_p(), _p()])
        fit = score_executive_fit(_p(), org.collective)
        assert fit.overall_fit_score == 1.0

    def test_out_of_domain_org_traits(self):
        with pytest.raises(InvalidInputError, match="org_traits"):
            score_executive_fit(_p(), _p(n=0.0))

    def test_missing_trait(self):
        partial = _p()
        del partial["openness"]
        with pytest.raises(InvalidInputError, match="executive"):
            score_executive_fit(partial, _p())


class TestComplementaryFit:
    def test_gap_fill(self):
        fit = calculate_complementary_fit(
            TraitVector(**_p(o=4.5, c=4.5, e=4.5, n=2.0)),
            TraitVector(**_p(o=2.5, c=3.0, e=2.5, n=4.0)),
        )
        assert fit.leadership_gap_fill == pytest.approx(1.0)

    def test_diversity_band(self):
        # differences of 1.5 fall inside the (1.0, 2.5) band
        fit = calculate_complementary_fit(TraitVector(**_p(o=4.5, c=4.5)), TraitVector(**_p()))
        assert fit.diversity_contribution == pytest.approx(0.4)

    def test_balance(self):
        flat = TraitVector(**_p())
        spiky = TraitVector(**_p(o=5.0, n=1.0))
        assert calculate_trait_balance(flat) == pytest.approx(1.0)
        assert calculate_complementary_fit(flat, spiky).balance_potential == 0.8
        assert calculate_complementary_fit(spiky, flat).balance_potential == 0.5


class TestAlignmentSummary:
    def test_summary(self):
        fits = [score_executive_fit(_p(), _p()), score_executive_fit(_p(o=5.0), _p(o=2.0))]
        summary = summarize_executive_alignment(fits)
        assert summary.executive_count == 2
        assert summary.average_fit == pytest.approx((1.0 + 0.88) / 2)
        assert summary.description.startswith("Excellent")

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            summarize_executive_alignment([])

    @pytest.mark.parametrize(
        "avg,fragment",
        [(0.9, "Excellent"), (0.7, "Good"), (0.5, "Moderate"), (0.2, "Low")],
    )
    def test_describe(self, avg, fragment):
        assert describe_alignment(avg).startswith(fragment)


class TestSuccessionPlan:
    def test_neutral_plan(self):
        plan = plan_succession(_p(), _p())
        assert plan.ideal_profile.openness == pytest.approx(3.28)
        assert plan.ideal_profile.neuroticism == pytest.approx(3.18)
        assert plan.critical_traits == []
        assert plan.timeline_months == 3
        assert set(plan.development_paths) == set(DEVELOPMENT_PATHS)

    def test_critical_traits(self):
        plan = plan_succession(_p(o=2.0), _p(), future_needs={"openness": 4.0, "extraversion": 3.5})
        assert plan.critical_traits == ["openness"]

    def test_unknown_trait(self):
        with pytest.raises(InvalidInputError):
            plan_succession(_p(), _p(), future_needs={"agility": 4.0})

    def test_level_out_of_domain(self):
        with pytest.raises(InvalidInputError):
            plan_succession(_p(), _p(), future_needs={"openness": 6.0})

    @pytest.mark.parametrize("level", ["high", None, True, [4.0]])
    def test_non_numeric_level(self, level):
        with pytest.raises(InvalidInputError, match="must be a number"):
            plan_succession(_p(), _p(), future_needs={"openness": level})

    def test_integer_level_accepted(self):
        plan = plan_succession(_p(o=2.0), _p(), future_needs={"openness": 4})
        assert plan.critical_traits == ["openness"]

"""Synthetic trait profile populations.

Seeded generators for demo data and scenario comparisons. Scores are drawn
from a normal distribution around a per-trait centre and clipped to the
1–5 assessment domain.
"""

from __future__ import annotations

import random
from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, Field

from ocean_core.trait_types import TRAIT_MAX, TRAIT_MIN, TRAIT_NAMES, TraitProfile


# ---------------------------------------------------------------------------
# Scenario centres
# ---------------------------------------------------------------------------
SCENARIO_CENTRES: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "innovative": MappingProxyType({
        "openness": 4.3, "conscientiousness": 3.0, "extraversion": 3.8,
        "agreeableness": 3.4, "neuroticism": 2.4,
    }),
    "disciplined": MappingProxyType({
        "openness": 2.9, "conscientiousness": 4.3, "extraversion": 3.0,
        "agreeableness": 3.3, "neuroticism": 2.3,
    }),
    "harmonious": MappingProxyType({
        "openness": 3.2, "conscientiousness": 3.4, "extraversion": 3.3,
        "agreeableness": 4.3, "neuroticism": 2.2,
    }),
    "strained": MappingProxyType({
        "openness": 2.8, "conscientiousness": 2.6, "extraversion": 2.7,
        "agreeableness": 2.3, "neuroticism": 3.9,
    }),
})

_NEUTRAL_CENTRE: Mapping[str, float] = MappingProxyType({t: 3.0 for t in TRAIT_NAMES})


class PopulationScenario(BaseModel):
    """A named synthetic population."""

    scenario_id: str
    profiles: list[TraitProfile] = Field(min_length=1)


def _draw(rng: random.Random, centre: float, spread: float) -> float:
    value = rng.gauss(centre, spread)
    return round(max(TRAIT_MIN, min(TRAIT_MAX, value)), 1)


def generate_profiles(
    n: int,
    centre: Mapping[str, float] | None = None,
    spread: float = 0.6,
    seed: int | None = 42,
) -> list[TraitProfile]:
    """Generate *n* profiles scattered around *centre*.

    Args:
        n: Number of profiles (≥ 1).
        centre: Per-trait mean; traits not given default to 3.0.
        spread: Standard deviation of the draw.
        seed: Random seed for reproducibility.

    Raises:
        ValueError: If *n* < 1 or *spread* < 0.
    """
    if n < 1:
        raise ValueError(f"Need at least 1 profile, got {n}")
    if spread < 0:
        raise ValueError("spread must be non-negative")

    rng = random.Random(seed)
    means = {**_NEUTRAL_CENTRE, **(centre or {})}
    return [
        TraitProfile(**{t: _draw(rng, means[t], spread) for t in TRAIT_NAMES})
        for _ in range(n)
    ]


def generate_population_scenarios(
    size: int = 8,
    spread: float = 0.6,
    seed: int | None = 42,
) -> dict[str, PopulationScenario]:
    """One population per entry of ``SCENARIO_CENTRES``."""
    rng = random.Random(seed)
    result: dict[str, PopulationScenario] = {}
    for scenario_id, centre in SCENARIO_CENTRES.items():
        result[scenario_id] = PopulationScenario(
            scenario_id=scenario_id,
            profiles=generate_profiles(size, centre, spread, seed=rng.randrange(2**32)),
        )
    return result

"""Group aggregation: mean traits, per-trait diversity and spread.

Diversity is the population variance of each trait across the group,
computed independently per trait (no covariance).
All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Sequence

from ocean_core.engine.statistics import mean, value_range, variance
from ocean_core.trait_types import (
    TRAIT_MAX,
    TRAIT_MIN,
    TRAIT_NAMES,
    CollectiveProfile,
    ProfileInput,
    TraitDiversity,
    TraitProfile,
    TraitVector,
    coerce_profiles,
)


# ---------------------------------------------------------------------------
# Diversity bands (average variance → interpretation)
# ---------------------------------------------------------------------------
_DIVERSITY_BANDS: tuple[tuple[float, str], ...] = (
    (1.2, "High personality diversity providing rich perspective mix but may require more coordination"),
    (0.8, "Optimal personality diversity balancing different perspectives with team cohesion"),
    (0.5, "Moderate personality diversity with good team alignment but limited perspective range"),
)
_LOW_DIVERSITY = "Low personality diversity indicating strong alignment but potential groupthink risk"


def _trait_columns(profiles: Sequence[TraitProfile]) -> dict[str, list[float]]:
    return {t: [p.get(t) for p in profiles] for t in TRAIT_NAMES}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def calculate_mean_traits(profiles: Sequence[ProfileInput]) -> TraitVector:
    """Per-trait arithmetic mean of *profiles*.

    Raises:
        EmptyInputError: If *profiles* is empty.
    """
    columns = _trait_columns(coerce_profiles(profiles))
    # float summation noise must not push a mean past the trait domain
    return TraitVector(**{
        t: min(TRAIT_MAX, max(TRAIT_MIN, mean(values))) for t, values in columns.items()
    })


def calculate_trait_diversity(profiles: Sequence[ProfileInput]) -> TraitDiversity:
    """Per-trait population variance of *profiles*.

    A single profile yields zero diversity on every trait.

    Raises:
        EmptyInputError: If *profiles* is empty.
    """
    columns = _trait_columns(coerce_profiles(profiles))
    return TraitDiversity(**{t: variance(values) for t, values in columns.items()})


def calculate_trait_ranges(profiles: Sequence[ProfileInput]) -> TraitVector:
    """Per-trait spread (max − min) of *profiles*."""
    columns = _trait_columns(coerce_profiles(profiles))
    return TraitVector(**{t: value_range(values) for t, values in columns.items()})


def build_collective_profile(profiles: Sequence[ProfileInput]) -> CollectiveProfile:
    """Aggregate *profiles* into mean traits, diversity and sample size."""
    validated = coerce_profiles(profiles)
    return CollectiveProfile(
        mean_traits=calculate_mean_traits(validated),
        trait_diversity=calculate_trait_diversity(validated),
        sample_size=len(validated),
    )


def average_diversity(diversity: TraitDiversity) -> float:
    """Mean of the five per-trait diversity indices."""
    return mean(list(diversity.as_dict().values()))


def describe_diversity(avg_diversity: float) -> str:
    """Human-readable interpretation of an average diversity index."""
    for threshold, text in _DIVERSITY_BANDS:
        if avg_diversity > threshold:
            return text
    return _LOW_DIVERSITY

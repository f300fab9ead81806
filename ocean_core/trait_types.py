"""Trait data model for OCEAN team and organization analytics.

Defines the five-trait profile (each scored 1–5), the derived mean / diversity
records, role assignments, and the default role target profiles.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ocean_core.errors import EmptyInputError, InvalidInputError


# ---------------------------------------------------------------------------
# Trait names & domain
# ---------------------------------------------------------------------------
TraitName = Literal[
    "openness",
    "conscientiousness",
    "extraversion",
    "agreeableness",
    "neuroticism",
]

TRAIT_NAMES: tuple[TraitName, ...] = (
    "openness",
    "conscientiousness",
    "extraversion",
    "agreeableness",
    "neuroticism",
)

TRAIT_MIN = 1.0
TRAIT_MAX = 5.0


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class _TraitRecord(BaseModel):
    """Shared helpers for every five-trait record."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    def get(self, trait: str) -> float:
        """Return the value of *trait*."""
        return getattr(self, trait)

    def as_dict(self) -> dict[str, float]:
        """Return ``{trait: value}`` in canonical trait order."""
        return {t: getattr(self, t) for t in TRAIT_NAMES}


class TraitProfile(_TraitRecord):
    """One individual's assessed trait scores, each in [1, 5]."""

    # numbers only: "4" is rejected, not coerced
    model_config = ConfigDict(strict=True)

    openness: float = Field(ge=TRAIT_MIN, le=TRAIT_MAX)
    conscientiousness: float = Field(ge=TRAIT_MIN, le=TRAIT_MAX)
    extraversion: float = Field(ge=TRAIT_MIN, le=TRAIT_MAX)
    agreeableness: float = Field(ge=TRAIT_MIN, le=TRAIT_MAX)
    neuroticism: float = Field(ge=TRAIT_MIN, le=TRAIT_MAX)


class TraitVector(_TraitRecord):
    """Unconstrained five-trait record (means, targets, ranges)."""

    openness: float
    conscientiousness: float
    extraversion: float
    agreeableness: float
    neuroticism: float


class TraitDiversity(_TraitRecord):
    """Per-trait population variance across a group."""

    openness: float = Field(ge=0.0)
    conscientiousness: float = Field(ge=0.0)
    extraversion: float = Field(ge=0.0)
    agreeableness: float = Field(ge=0.0)
    neuroticism: float = Field(ge=0.0)


class CollectiveProfile(BaseModel):
    """Aggregate of a group of trait profiles."""

    model_config = ConfigDict(frozen=True)

    mean_traits: TraitVector
    trait_diversity: TraitDiversity
    sample_size: int = Field(ge=1)


class RoleAssignment(BaseModel):
    """Maps a member (by position in the profile list) to a role name."""

    member_index: int = Field(ge=0)
    role: str = Field(..., min_length=1)


ProfileInput = Union[TraitProfile, Mapping[str, Any]]
RoleAssignmentsInput = Union[Sequence[RoleAssignment], Mapping[int, str]]


# ---------------------------------------------------------------------------
# Default role targets
# ---------------------------------------------------------------------------
DEFAULT_ROLE = "leader"

ROLE_PROFILES: Mapping[str, TraitVector] = MappingProxyType({
    "leader": TraitVector(
        openness=3.5,
        conscientiousness=4.0,
        extraversion=4.0,
        agreeableness=3.5,
        neuroticism=2.0,
    ),
    "analyst": TraitVector(
        openness=3.5,
        conscientiousness=4.5,
        extraversion=2.5,
        agreeableness=3.0,
        neuroticism=2.5,
    ),
    "creative": TraitVector(
        openness=4.5,
        conscientiousness=3.0,
        extraversion=3.5,
        agreeableness=3.5,
        neuroticism=3.0,
    ),
})


# ---------------------------------------------------------------------------
# Input coercion
# ---------------------------------------------------------------------------
def coerce_profile(value: Any, position: int | None = None) -> TraitProfile:
    """Convert *value* into a validated ``TraitProfile``.

    Accepts a ``TraitProfile``, any five-trait record, or a mapping with the
    five trait keys (extra keys are ignored).

    Raises:
        InvalidInputError: If a trait is missing or outside [1, 5].
    """
    if isinstance(value, TraitProfile):
        return value
    where = f"profile #{position}" if position is not None else "profile"
    if isinstance(value, _TraitRecord):
        value = value.as_dict()
    if not isinstance(value, Mapping):
        raise InvalidInputError(f"{where} must be a mapping of trait scores, got {type(value).__name__}")
    try:
        return TraitProfile.model_validate(dict(value))
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
        raise InvalidInputError(f"{where} is invalid ({fields}): traits must lie in [1, 5]") from exc


def coerce_profiles(profiles: Any, label: str = "profiles") -> list[TraitProfile]:
    """Validate a non-empty list of profiles.

    Raises:
        InvalidInputError: If *profiles* is not a list-like of profiles.
        EmptyInputError: If *profiles* is empty.
    """
    if profiles is None or isinstance(profiles, (str, bytes, Mapping)) or not isinstance(profiles, Sequence):
        raise InvalidInputError(f"{label} must be a list of trait profiles")
    if len(profiles) == 0:
        raise EmptyInputError(f"{label} must not be empty")
    return [coerce_profile(p, position=i) for i, p in enumerate(profiles)]


def coerce_trait_vector(value: Any, label: str = "traits") -> TraitVector:
    """Convert a profile, collective profile or mapping into a ``TraitVector``.

    The values are checked against the [1, 5] trait domain.
    """
    if isinstance(value, CollectiveProfile):
        value = value.mean_traits
    try:
        profile = coerce_profile(value)
    except InvalidInputError as exc:
        raise InvalidInputError(f"{label}: {exc}") from exc
    return TraitVector(**profile.as_dict())


def coerce_role_assignments(assignments: Any, team_size: int) -> list[RoleAssignment]:
    """Normalise role assignments given as models, dicts or an index→role map."""
    if assignments is None:
        return []
    if isinstance(assignments, Mapping):
        items: list[Any] = [
            {"member_index": idx, "role": role} for idx, role in assignments.items()
        ]
    elif isinstance(assignments, Sequence) and not isinstance(assignments, (str, bytes)):
        items = list(assignments)
    else:
        raise InvalidInputError("role_assignments must be a list or an index→role mapping")

    result: list[RoleAssignment] = []
    for item in items:
        try:
            ra = item if isinstance(item, RoleAssignment) else RoleAssignment.model_validate(item)
        except (ValidationError, TypeError, ValueError) as exc:
            raise InvalidInputError(f"invalid role assignment: {item!r}") from exc
        if ra.member_index >= team_size:
            raise InvalidInputError(
                f"role assignment refers to member {ra.member_index}, team has {team_size} members"
            )
        result.append(ra)
    return result

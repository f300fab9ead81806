"""OCEAN personality analytics for teams and organizations."""

from .engine.executive_fit import score_executive_fit
from .engine.organization import build_organizational_profile
from .engine.team import analyze_team_composition, identify_optimal_additions
from .errors import EmptyInputError, InvalidInputError, OceanAnalysisError
from .trait_types import TraitProfile

__all__ = [
    "EmptyInputError",
    "InvalidInputError",
    "OceanAnalysisError",
    "TraitProfile",
    "analyze_team_composition",
    "build_organizational_profile",
    "identify_optimal_additions",
    "score_executive_fit",
]

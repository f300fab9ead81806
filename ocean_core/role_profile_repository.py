"""Repository for role target profiles (JSON file)."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
import threading

from pydantic import ValidationError

from ocean_core.trait_types import ROLE_PROFILES, TraitProfile, TraitVector

logger = logging.getLogger(__name__)


_DEFAULT_PATH = "role_profiles.json"
ENV_PATH_VAR = "OCEAN_ROLE_PROFILES_PATH"


def default_role_profiles_path() -> str:
    """Path from ``OCEAN_ROLE_PROFILES_PATH``, else ``role_profiles.json``."""
    return os.getenv(ENV_PATH_VAR, "") or _DEFAULT_PATH


class RoleProfileRepository:
    """Thread-safe persistence layer for role → ideal trait profile targets."""

    def __init__(self, config_path: str | None = None) -> None:
        self._path = Path(config_path or default_role_profiles_path())
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def load_role_profiles(self) -> dict[str, TraitVector]:
        """Load targets from JSON. Returns the built-in defaults when no file exists."""
        with self._lock:
            return self._load_unlocked()

    def save_role_profiles(self, profiles: dict[str, TraitVector]) -> None:
        """Persist *profiles* to JSON file (atomic write)."""
        with self._lock:
            self._atomic_write(profiles)
        logger.info("Saved %d role profiles to %s", len(profiles), self._path)

    def set_role_profile(self, role: str, target: TraitVector) -> None:
        """Add or replace the target for *role*."""
        if not role:
            raise ValueError("role must not be empty")
        self._parse(target.as_dict())
        with self._lock:
            profiles = self._load_unlocked()
            profiles[role] = target
            self._atomic_write(profiles)
        logger.info("Stored role profile %r in %s", role, self._path)

    def delete_role_profile(self, role: str) -> bool:
        """Remove *role*. Returns ``False`` if it was not stored."""
        with self._lock:
            profiles = self._load_unlocked()
            if role not in profiles:
                return False
            del profiles[role]
            self._atomic_write(profiles)
        logger.info("Deleted role profile %r from %s", role, self._path)
        return True

    def reset(self) -> None:
        """Remove the file so the built-in defaults apply again."""
        with self._lock:
            if self._path.exists():
                self._path.unlink()

    # ------------------------------------------------------------------
    # Internals (caller holds the lock)
    # ------------------------------------------------------------------
    def _load_unlocked(self) -> dict[str, TraitVector]:
        if not self._path.exists():
            logger.info("No role profile file at %s, using defaults", self._path)
            return dict(ROLE_PROFILES)
        try:
            with open(self._path) as fh:
                data = json.load(fh)
            return {role: self._parse(values) for role, values in data["roles"].items()}
        except Exception as exc:
            raise ValueError(f"Failed to load role profiles: {exc}") from exc

    @staticmethod
    def _parse(values: dict[str, float]) -> TraitVector:
        # targets share the assessment domain
        try:
            return TraitVector(**TraitProfile(**values).as_dict())
        except ValidationError as exc:
            raise ValueError(f"invalid role target: {exc.error_count()} error(s)") from exc

    def _atomic_write(self, profiles: dict[str, TraitVector]) -> None:
        tmp = self._path.with_suffix(".tmp")
        payload = {
            "version": "1.0",
            "roles": {role: target.as_dict() for role, target in profiles.items()},
        }
        try:
            with open(tmp, "w") as fh:
                json.dump(payload, fh, indent=2, ensure_ascii=False)
            tmp.replace(self._path)
        except Exception as exc:
            if tmp.exists():
                tmp.unlink()
            raise ValueError(f"Failed to save role profiles: {exc}") from exc

"""Internal shared constants and helpers for trigramid."""

from __future__ import annotations

import os

#: Penalty for a profile trigram that does not occur in the text at all.
MAX_TRIGRAM_DISTANCE: int = 300

#: Ceiling applied to the summed distance between a text and one profile.
MAX_TOTAL_DISTANCE: int = 90_000

#: Maximum number of ranked trigrams kept per language profile.
MAX_PROFILE_SIZE: int = 300

#: Confidence at or above which :meth:`Info.is_reliable` returns True.
RELIABLE_CONFIDENCE_THRESHOLD: float = 0.9

#: Environment variable naming an alternate profiles file.
PROFILES_ENV_VAR: str = "TRIGRAMID_PROFILES"


def _profiles_path_from_env() -> str | None:
    """Return the profiles path configured in the environment, if any."""
    return os.environ.get(PROFILES_ENV_VAR) or None


def _validate_confidence(confidence: float) -> None:
    """Raise ValueError if *confidence* is not a number in [0.0, 1.0]."""
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
        msg = f"confidence must be a number, got {type(confidence).__name__}"
        raise ValueError(msg)
    if not 0.0 <= confidence <= 1.0:
        msg = f"confidence must be between 0.0 and 1.0, got {confidence!r}"
        raise ValueError(msg)

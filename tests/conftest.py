"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from trigramid._utils import PROFILES_ENV_VAR
from trigramid.pipeline import ConfidenceFn
from trigramid.profiles import _reset_cache

# One tiny profile per script; every script must be covered for the file to load.
SMALL_PROFILES = (
    "# test profiles\n"
    "latin\teng\tabc|bca|cab\n"
    "latin\tfra\txyz|yzx|zxy\n"
    "cyrillic\trus\tабв|бвг\n"
    "arabic\tara\tابت\n"
    "devanagari\thin\tकखग\n"
    "hebrew\theb\tאבג\n"
)


@pytest.fixture
def small_profiles(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the default profile loader at SMALL_PROFILES for one test."""
    path = tmp_path / "profiles.tsv"
    path.write_text(SMALL_PROFILES, encoding="utf-8")
    monkeypatch.setenv(PROFILES_ENV_VAR, str(path))
    _reset_cache()
    yield path
    _reset_cache()


def constant_confidence(value: float) -> ConfidenceFn:
    """Return a confidence function that ignores its inputs."""

    def confidence_fn(best: float, second: float, trigrams_count: int) -> float:
        return value

    return confidence_fn

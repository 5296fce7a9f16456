"""Language profile loading and per-script profile selection.

Profiles are read once from the bundled ``profiles.tsv`` (or the file named
by the ``TRIGRAMID_PROFILES`` environment variable) and shared read-only
by every query afterwards.
"""

from __future__ import annotations

import dataclasses
import importlib.resources
import logging
import threading
from pathlib import Path

from trigramid._utils import MAX_PROFILE_SIZE, _profiles_path_from_env
from trigramid.enums import LANG_SCRIPTS, Lang, Script

logger = logging.getLogger(__name__)

_PROFILE_CACHE: dict[Script, tuple[LangProfile, ...]] | None = None
_PROFILE_CACHE_LOCK = threading.Lock()
# Flat index: language -> profile, built alongside the group cache.
_LANG_INDEX: dict[Lang, LangProfile] | None = None

_FIELD_SEP = "\t"
_TRIGRAM_SEP = "|"


@dataclasses.dataclass(frozen=True, slots=True)
class LangProfile:
    """Ranked reference trigrams for one language.

    ``trigrams[i]`` is the trigram of rank ``i``; rank 0 is the most
    frequent trigram in the reference corpus.
    """

    lang: Lang
    trigrams: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.trigrams)


def parse_profiles(content: str) -> dict[Script, tuple[LangProfile, ...]]:
    """Parse profile data in the ``profiles.tsv`` format.

    Each non-comment line is ``script<TAB>lang<TAB>tri|tri|...`` with
    trigrams listed from rank 0 upwards.  Languages keep the order of their
    lines within a script; that order breaks ties between equal scores.

    :param content: The decoded file content.
    :returns: A dict mapping every :class:`Script` to its profile group.
    :raises ValueError: If the data is malformed or does not cover every
        script.
    """
    groups: dict[Script, list[LangProfile]] = {}
    seen: set[Lang] = set()

    for lineno, line in enumerate(content.splitlines(), start=1):
        if not line.strip() or line.startswith("#"):
            continue
        fields = line.split(_FIELD_SEP)
        if len(fields) != 3:
            msg = f"corrupt profiles: line {lineno}: expected 3 fields, got {len(fields)}"
            raise ValueError(msg)
        script_name, code, raw_trigrams = fields

        try:
            script = Script(script_name)
        except ValueError:
            msg = f"corrupt profiles: line {lineno}: unknown script {script_name!r}"
            raise ValueError(msg) from None
        lang = Lang.from_code(code)
        if lang is None:
            msg = f"corrupt profiles: line {lineno}: unknown language {code!r}"
            raise ValueError(msg)
        if LANG_SCRIPTS[lang] is not script:
            msg = (
                f"corrupt profiles: line {lineno}: {lang.code} is not written "
                f"in {script.value}"
            )
            raise ValueError(msg)
        if lang in seen:
            msg = f"corrupt profiles: line {lineno}: duplicate language {lang.code}"
            raise ValueError(msg)
        seen.add(lang)

        trigrams = tuple(raw_trigrams.split(_TRIGRAM_SEP)) if raw_trigrams else ()
        _validate_trigrams(lang, trigrams, lineno)
        groups.setdefault(script, []).append(LangProfile(lang, trigrams))

    missing = [script.value for script in Script if script not in groups]
    if missing:
        msg = f"corrupt profiles: no profiles for script(s) {', '.join(missing)}"
        raise ValueError(msg)

    return {script: tuple(profiles) for script, profiles in groups.items()}


def _validate_trigrams(lang: Lang, trigrams: tuple[str, ...], lineno: int) -> None:
    """Check that ranks are dense: every entry is a distinct 3-char trigram."""
    if not trigrams:
        msg = f"corrupt profiles: line {lineno}: {lang.code} has no trigrams"
        raise ValueError(msg)
    if len(trigrams) > MAX_PROFILE_SIZE:
        msg = (
            f"corrupt profiles: line {lineno}: {lang.code} has {len(trigrams)} "
            f"trigrams, limit is {MAX_PROFILE_SIZE}"
        )
        raise ValueError(msg)
    for rank, trigram in enumerate(trigrams):
        if len(trigram) != 3:
            msg = (
                f"corrupt profiles: line {lineno}: {lang.code} rank {rank} "
                f"is not a trigram: {trigram!r}"
            )
            raise ValueError(msg)
    if len(set(trigrams)) != len(trigrams):
        msg = f"corrupt profiles: line {lineno}: {lang.code} has duplicate trigrams"
        raise ValueError(msg)


def _read_profiles(path: str | Path | None) -> str:
    try:
        if path is None:
            ref = importlib.resources.files("trigramid.profiles").joinpath(
                "profiles.tsv"
            )
            return ref.read_text(encoding="utf-8")
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"corrupt profiles: {e}"
        raise ValueError(msg) from e


def load_profiles(
    path: str | Path | None = None,
) -> dict[Script, tuple[LangProfile, ...]]:
    """Load all language profiles, grouped by script.

    Without *path*, profiles come from the ``TRIGRAMID_PROFILES`` file if
    that variable is set, otherwise from the bundled ``profiles.tsv``; the
    result is cached for the lifetime of the process.  An explicit *path* is
    always read fresh and never cached.

    :param path: Optional profiles file to read instead of the default.
    :returns: A dict mapping every :class:`Script` to its profile group.
    :raises ValueError: If the profile data is corrupt.
    """
    global _PROFILE_CACHE, _LANG_INDEX  # noqa: PLW0603
    if path is not None:
        return parse_profiles(_read_profiles(path))
    if _PROFILE_CACHE is not None:
        return _PROFILE_CACHE

    with _PROFILE_CACHE_LOCK:
        if _PROFILE_CACHE is not None:
            return _PROFILE_CACHE
        source = _profiles_path_from_env()
        groups = parse_profiles(_read_profiles(source))
        _LANG_INDEX = {
            profile.lang: profile for group in groups.values() for profile in group
        }
        logger.debug(
            "loaded %d language profiles in %d scripts from %s",
            len(_LANG_INDEX),
            len(groups),
            source or "bundled profiles.tsv",
        )
        _PROFILE_CACHE = groups
        return groups


def select_profile_group(script: Script) -> tuple[LangProfile, ...]:
    """Return the candidate profiles for *script*, in their static order.

    Every :class:`Script` is guaranteed a group by :func:`parse_profiles`.
    """
    return load_profiles()[script]


def get_profile(lang: Lang) -> LangProfile | None:
    """Return the loaded profile for *lang*, or None if it has none."""
    load_profiles()
    if _LANG_INDEX is None:
        return None
    return _LANG_INDEX.get(lang)


def _reset_cache() -> None:
    """Drop the cached profiles so the next load re-reads them."""
    global _PROFILE_CACHE, _LANG_INDEX  # noqa: PLW0603
    with _PROFILE_CACHE_LOCK:
        _PROFILE_CACHE = None
        _LANG_INDEX = None

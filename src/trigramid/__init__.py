"""Trigram rank-distance language identification."""

from __future__ import annotations

from trigramid.allowlist import AllowList
from trigramid.detector import Detector
from trigramid.enums import Lang, Script
from trigramid.pipeline import ConfidenceFn, Info, RawOutcome
from trigramid.pipeline import orchestrator
from trigramid.text import Text, as_text

__version__ = "0.1.0"
__all__ = [
    "AllowList",
    "ConfidenceFn",
    "Detector",
    "Info",
    "Lang",
    "RawOutcome",
    "Script",
    "Text",
    "detect",
    "raw_detect",
]


def detect(
    text: str | Text,
    script: Script,
    confidence_fn: ConfidenceFn,
    allow_list: AllowList | None = None,
) -> Info | None:
    """Detect the language of already-lowercased *text*.

    :param text: The text, as a ``str`` or a :class:`Text`.
    :param script: The writing system the text was classified into.
    :param confidence_fn: Computes the confidence from the two best scores
        and the text's trigram count when there is more than one candidate.
    :param allow_list: Languages eligible for the result.  Defaults to all.
    :returns: The best :class:`Info`, or None when the allow-list rejects
        every language of *script*.
    """
    return orchestrator.detect(
        as_text(text), script, confidence_fn, _resolve_allow_list(allow_list)
    )


def raw_detect(
    text: str | Text,
    script: Script,
    allow_list: AllowList | None = None,
) -> RawOutcome:
    """Score every allowed language of *script* against *text*.

    :returns: A :class:`RawOutcome` with the text's trigram count and every
        candidate's score, best first.
    """
    return orchestrator.raw_detect(
        as_text(text), script, _resolve_allow_list(allow_list)
    )


def _resolve_allow_list(allow_list: AllowList | None) -> AllowList:
    return allow_list if allow_list is not None else AllowList.all()

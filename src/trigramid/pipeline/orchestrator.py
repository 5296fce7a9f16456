"""Pipeline orchestrator: profile selection, scoring and result assembly."""

from __future__ import annotations

import logging

from trigramid.allowlist import AllowList
from trigramid.enums import Script
from trigramid.pipeline import (
    SINGLE_CANDIDATE_CONFIDENCE,
    ConfidenceFn,
    Info,
    RawOutcome,
)
from trigramid.pipeline.scoring import calculate_scores_in_profiles
from trigramid.profiles import select_profile_group
from trigramid.text import Text

logger = logging.getLogger(__name__)

_ALLOW_ALL = AllowList.all()


def raw_detect(
    text: Text, script: Script, allow_list: AllowList = _ALLOW_ALL
) -> RawOutcome:
    """Score every allowed language written in *script* against *text*."""
    profiles = select_profile_group(script)
    return calculate_scores_in_profiles(text, allow_list, profiles)


def assemble(
    raw_outcome: RawOutcome, script: Script, confidence_fn: ConfidenceFn
) -> Info | None:
    """Build the final result from a :class:`RawOutcome`.

    :param raw_outcome: Scores best-first plus the text's trigram count.
    :param script: The script the candidates were drawn from.
    :param confidence_fn: Called with ``(best_score, second_score,
        trigrams_count)`` when there are at least two candidates.
    :returns: The best language with its confidence, or None when no
        language survived the allow-list.
    """
    scores = raw_outcome.lang_scores
    if not scores:
        return None

    lang, best_score = scores[0]
    if len(scores) == 1:
        confidence = SINGLE_CANDIDATE_CONFIDENCE
    else:
        second_score = scores[1][1]
        confidence = confidence_fn(best_score, second_score, raw_outcome.trigrams_count)
        logger.debug(
            "%s score = %s, runner-up %s score = %s, confidence = %s",
            lang.code,
            best_score,
            scores[1][0].code,
            second_score,
            confidence,
        )
    return Info(script=script, lang=lang, confidence=confidence)


def detect(
    text: Text,
    script: Script,
    confidence_fn: ConfidenceFn,
    allow_list: AllowList = _ALLOW_ALL,
) -> Info | None:
    """Detect the most probable language of *text* among *script*'s languages."""
    return assemble(raw_detect(text, script, allow_list), script, confidence_fn)

"""Score every allowed language of a script group against a text."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from trigramid.allowlist import AllowList
from trigramid.enums import Lang
from trigramid.pipeline import RawOutcome
from trigramid.pipeline.distance import calculate_distance, distance_to_score
from trigramid.profiles import LangProfile
from trigramid.text import Text
from trigramid.trigrams import rank_trigrams

logger = logging.getLogger(__name__)


def calculate_scores_in_profiles(
    text: Text,
    allow_list: AllowList,
    profiles: Iterable[LangProfile],
) -> RawOutcome:
    """Rank the allowed *profiles* by distance to *text*.

    Languages rejected by *allow_list* are skipped before any distance is
    computed.  The sort is stable, so languages at equal distance keep the
    order in which *profiles* lists them.

    :param text: The input text.
    :param allow_list: Languages eligible for the result.
    :param profiles: Candidate profiles, usually one script group.
    :returns: A :class:`RawOutcome` with scores best-first.
    """
    ranking = rank_trigrams(text.lowercase())

    distances: list[tuple[Lang, int]] = []
    for profile in profiles:
        if not allow_list.is_allowed(profile.lang):
            continue
        distances.append((profile.lang, calculate_distance(profile.trigrams, ranking)))

    distances.sort(key=lambda item: item[1])

    if logger.isEnabledFor(logging.DEBUG):
        for lang, distance in distances:
            logger.debug("%s distance = %d", lang.code, distance)

    return RawOutcome(
        trigrams_count=len(ranking),
        lang_scores=tuple(
            (lang, distance_to_score(distance)) for lang, distance in distances
        ),
    )

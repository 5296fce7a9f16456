"""Rank distance between a text and a language profile."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from trigramid._utils import MAX_TOTAL_DISTANCE, MAX_TRIGRAM_DISTANCE


def calculate_distance(
    profile_trigrams: Sequence[str], text_ranking: Mapping[str, int]
) -> int:
    """Sum the rank differences between a profile and a text ranking.

    A profile trigram at rank ``i`` found at rank ``n`` in the text costs
    ``|n - i|``; a trigram absent from the text costs
    ``MAX_TRIGRAM_DISTANCE``.  The total is clamped to
    ``MAX_TOTAL_DISTANCE``.

    :param profile_trigrams: The language's trigrams, rank 0 first.
    :param text_ranking: Trigram -> rank mapping for the input text.
    :returns: A distance in ``[0, MAX_TOTAL_DISTANCE]``.
    """
    total = 0
    _get = text_ranking.get
    for rank, trigram in enumerate(profile_trigrams):
        text_rank = _get(trigram)
        if text_rank is None:
            total += MAX_TRIGRAM_DISTANCE
        else:
            total += abs(text_rank - rank)
        if total >= MAX_TOTAL_DISTANCE:
            return MAX_TOTAL_DISTANCE
    return total


def distance_to_score(distance: int) -> float:
    """Convert a clamped distance to a similarity score.

    Lower distance gives a higher score; ``MAX_TOTAL_DISTANCE`` scores 0.
    """
    return (MAX_TOTAL_DISTANCE - distance) / MAX_TRIGRAM_DISTANCE

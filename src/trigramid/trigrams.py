"""Trigram extraction and ranking.

A trigram is a plain 3-character ``str``.  Characters that are neither
letters nor combining marks act as word separators and are replaced by a
single space before the window slides over the text.
"""

from __future__ import annotations

import unicodedata

_SEPARATOR = " "


def _is_separator(ch: str) -> bool:
    """Return True if *ch* splits words (anything but a letter or a mark)."""
    return unicodedata.category(ch)[0] not in "LM"


def _normalize_chars(text: str) -> list[str]:
    return [_SEPARATOR if _is_separator(ch) else ch for ch in text]


def count_trigrams(text: str) -> dict[str, int]:
    """Count the trigrams of *text* in first-occurrence order.

    Windows centred on a separator that touches another separator are
    skipped, so runs of punctuation and whitespace produce no trigrams.

    :param text: Lowercase text.
    :returns: A dict mapping each trigram to its number of occurrences.
        Insertion order is the order in which trigrams first appear.
    """
    chars = _normalize_chars(text)
    counts: dict[str, int] = {}
    _get = counts.get
    for i in range(len(chars) - 2):
        c1, c2, c3 = chars[i], chars[i + 1], chars[i + 2]
        if c2 == _SEPARATOR and (c1 == _SEPARATOR or c3 == _SEPARATOR):
            continue
        trigram = c1 + c2 + c3
        counts[trigram] = _get(trigram, 0) + 1
    return counts


def rank_trigrams(text: str) -> dict[str, int]:
    """Rank the trigrams of *text* by descending frequency.

    Rank 0 is the most frequent trigram.  Trigrams with equal counts keep
    the order in which they first occur in the text, so the result is
    fully deterministic.  Text shorter than three characters yields an
    empty ranking.

    :param text: Lowercase text.
    :returns: A dict mapping trigram to its dense, 0-based rank.
    """
    counts = count_trigrams(text)
    # sorted() is stable, so equal counts stay in first-occurrence order.
    ordered = sorted(counts, key=lambda trigram: -counts[trigram])
    return {trigram: rank for rank, trigram in enumerate(ordered)}

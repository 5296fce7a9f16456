"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable

from trigramid._utils import RELIABLE_CONFIDENCE_THRESHOLD, _validate_confidence
from trigramid.enums import Lang, Script

#: Confidence reported when only one language survives the allow-list.
SINGLE_CANDIDATE_CONFIDENCE: float = 1.0

#: ``(best_score, second_score, trigrams_count) -> confidence in [0, 1]``.
ConfidenceFn = Callable[[float, float, int], float]

#: Best-first ``(language, score)`` pairs.
LangScores = tuple[tuple[Lang, float], ...]


@dataclasses.dataclass(frozen=True, slots=True)
class RawOutcome:
    """Every candidate's score before a confidence is attached.

    ``lang_scores`` is ordered best match first and holds each allowed
    language of the script group exactly once.
    """

    trigrams_count: int
    lang_scores: LangScores

    def best(self) -> tuple[Lang, float] | None:
        """Return the top ``(language, score)`` pair, or None if empty."""
        return self.lang_scores[0] if self.lang_scores else None


@dataclasses.dataclass(frozen=True, slots=True)
class Info:
    """A single language detection result.

    The best-ranked language is always reported, however low the
    confidence; callers decide what is too uncertain to use.
    """

    script: Script
    lang: Lang
    confidence: float

    def __post_init__(self) -> None:
        _validate_confidence(self.confidence)

    def is_reliable(self) -> bool:
        """Return True if the confidence reaches the reliability threshold."""
        return self.confidence >= RELIABLE_CONFIDENCE_THRESHOLD

    def to_dict(self) -> dict[str, str | float]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'script'``, ``'lang'``, and ``'confidence'`` keys.
        """
        return {
            "script": self.script.value,
            "lang": self.lang.code,
            "confidence": self.confidence,
        }

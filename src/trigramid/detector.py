"""Detector: reusable language detection with fixed configuration."""

from __future__ import annotations

from trigramid.allowlist import AllowList
from trigramid.enums import Script
from trigramid.pipeline import ConfidenceFn, Info, RawOutcome
from trigramid.pipeline import orchestrator
from trigramid.text import Text, as_text


class Detector:
    """Language detector bound to one confidence function and allow-list.

    A detector holds no per-query state, so a single instance may be shared
    between threads.
    """

    def __init__(
        self,
        confidence_fn: ConfidenceFn,
        allow_list: AllowList | None = None,
    ) -> None:
        """Initialize the detector.

        :param confidence_fn: Called with ``(best_score, second_score,
            trigrams_count)`` and must return a value in ``[0.0, 1.0]``.
        :param allow_list: Languages eligible for detection.  Defaults to
            :meth:`AllowList.all`.
        """
        if not callable(confidence_fn):
            msg = "confidence_fn must be callable"
            raise TypeError(msg)
        self._confidence_fn = confidence_fn
        self._allow_list = allow_list if allow_list is not None else AllowList.all()

    @property
    def allow_list(self) -> AllowList:
        """The languages this detector may report."""
        return self._allow_list

    def detect(self, text: str | Text, script: Script) -> Info | None:
        """Return the best language of *text*, or None if none is allowed."""
        return orchestrator.detect(
            as_text(text), script, self._confidence_fn, self._allow_list
        )

    def raw_detect(self, text: str | Text, script: Script) -> RawOutcome:
        """Return every allowed candidate's score for *text*."""
        return orchestrator.raw_detect(as_text(text), script, self._allow_list)

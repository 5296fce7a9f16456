"""Input text wrapper with a cached lowercase form."""

from __future__ import annotations


class Text:
    """A piece of text submitted for detection.

    The lowercase form is computed on first use and reused by every later
    stage, so a :class:`Text` can be passed to several detectors without
    lowercasing it again.
    """

    __slots__ = ("_lowercase", "original")

    def __init__(self, original: str) -> None:
        self.original = original
        self._lowercase: str | None = None

    def lowercase(self) -> str:
        """Return the lowercase form of the text."""
        if self._lowercase is None:
            self._lowercase = self.original.lower()
        return self._lowercase

    def __len__(self) -> int:
        return len(self.original)

    def __repr__(self) -> str:
        return f"Text({self.original!r})"


def as_text(text: str | Text) -> Text:
    """Wrap a plain string in :class:`Text`; pass :class:`Text` through."""
    return text if isinstance(text, Text) else Text(text)

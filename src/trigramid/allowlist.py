"""Allow-list restricting which languages may be detected."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from trigramid.enums import Lang


@dataclasses.dataclass(frozen=True, slots=True)
class AllowList:
    """Membership predicate over :class:`Lang`.

    ``allowed`` of ``None`` means every language is eligible; ``denied`` is
    subtracted afterwards.  Use the :meth:`all`, :meth:`only` and
    :meth:`excluding` constructors rather than the raw fields.
    """

    allowed: frozenset[Lang] | None = None
    denied: frozenset[Lang] = frozenset()

    @classmethod
    def all(cls) -> AllowList:
        """Allow every language."""
        return cls()

    @classmethod
    def only(cls, langs: Iterable[Lang]) -> AllowList:
        """Allow exactly *langs*.  An empty iterable allows nothing."""
        return cls(allowed=frozenset(langs))

    @classmethod
    def excluding(cls, langs: Iterable[Lang]) -> AllowList:
        """Allow every language except *langs*."""
        return cls(denied=frozenset(langs))

    def is_allowed(self, lang: Lang) -> bool:
        """Return True if *lang* may appear in detection results."""
        if lang in self.denied:
            return False
        return self.allowed is None or lang in self.allowed

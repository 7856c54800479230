"""
Base lexicons: the set of known base forms for one part of speech.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from ..data.errors import MalformedResourceError

logger = logging.getLogger(__name__)


class BaseLexicon:
    """
    Base forms with an inherited POS. A line may carry its own POS
    ('people NNS'), which then wins over the lexicon default.
    """

    def __init__(self, pos: str, forms: Iterable[str] = ()):
        self.pos = pos
        self._entries = MappingProxyType({form.lower(): None for form in forms})

    @classmethod
    def from_lines(cls, pos: str, lines: Iterable[str], resource: Optional[str] = None) -> "BaseLexicon":
        entries = {}
        for line_no, line in enumerate(lines, 1):
            fields = line.split()
            if not fields:
                continue
            if len(fields) > 2:
                raise MalformedResourceError("expected 'form [POS]'", resource, line_no)
            entries[fields[0].lower()] = fields[1] if len(fields) == 2 else None

        lexicon = cls(pos)
        lexicon._entries = MappingProxyType(entries)
        logger.debug(f"📖 Base lexicon {pos}: {len(entries)} forms")
        return lexicon

    def __contains__(self, form: object) -> bool:
        return form in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def pos_of(self, form: str) -> Optional[str]:
        """Lexicon-resolved POS of form: its own tag, else the lexicon default. None if unknown."""
        if form not in self._entries:
            return None
        return self._entries[form] or self.pos

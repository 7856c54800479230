"""
Affix Matching Engine
---------------------
An engine is an ordered list of affix matchers. Each matcher owns one
inflectional affix, an optional POS gate and an ordered replacer chain.
The first replacer candidate that exists in the base lexicon wins; matcher
order is the only priority, there is no scoring.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Collection, Optional, Sequence, Tuple

from .lexicon import BaseLexicon
from .morpheme import Morpheme
from .replacers import AffixReplacer

MorphemePair = Tuple[Morpheme, Morpheme]


@dataclass(frozen=True)
class AffixMatcher:
    affix_form: str
    affix_pos: str
    original_pos: Optional[re.Pattern] = None
    replacers: Tuple[AffixReplacer, ...] = ()

    def matches_original_pos(self, pos: str) -> bool:
        """A matcher without a gate applies to every tag."""
        return self.original_pos is None or self.original_pos.search(pos) is not None

    def get_morphemes(self, lexicon: Collection[str], form: str, base_pos: str) -> Optional[MorphemePair]:
        """
        Returns (base, affix) for the first candidate found in lexicon, else None.

        Args:
            lexicon: base forms; a BaseLexicon also resolves the base POS
            form: the word-form in lower-case
            base_pos: POS used when the lexicon cannot resolve one
        """
        for replacer in self.replacers:
            candidate = replacer(form)
            if candidate is None or candidate not in lexicon:
                continue
            pos = lexicon.pos_of(candidate) if isinstance(lexicon, BaseLexicon) else None
            return Morpheme(candidate, pos or base_pos), Morpheme(self.affix_form, self.affix_pos)
        return None


class AffixEngine:
    def __init__(self, base_pos: str, matchers: Sequence[AffixMatcher]):
        self.base_pos = base_pos
        self.matchers: Tuple[AffixMatcher, ...] = tuple(matchers)

    def decompose(self, form: str, pos: str, lexicon: Collection[str]) -> Optional[MorphemePair]:
        for matcher in self.matchers:
            if not matcher.matches_original_pos(pos):
                continue
            morphemes = matcher.get_morphemes(lexicon, form, self.base_pos)
            if morphemes is not None:
                return morphemes
        return None

    def __len__(self) -> int:
        return len(self.matchers)

"""
English Lemmatizer
------------------
(form, POS) → lemma. Lemma normalizations run first (abbreviations, URLs,
ordinals, cardinals, digit and punctuation collapsing); the POS-family affix
engine runs last. A form nothing applies to lemmatizes to its lowercase.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from ..data.errors import MalformedResourceError
from . import utils
from .lexicon import BaseLexicon
from .matcher import AffixEngine, MorphemePair
from .morpheme import MorphTag

logger = logging.getLogger(__name__)

ABBREVIATION_RULE = "morphology/abbreviation.rule"

# POS prefix → base POS family
POS_FAMILIES: Tuple[Tuple[str, str], ...] = (
    ("VB", MorphTag.VB),
    ("NN", MorphTag.NN),
    ("JJ", MorphTag.JJ),
    ("RB", MorphTag.RB),
)


def pos_family(pos: str) -> Optional[str]:
    for prefix, family in POS_FAMILIES:
        if pos.startswith(prefix):
            return family
    return None


def parse_abbreviation_rules(lines: Iterable[str]) -> Dict[Tuple[str, str], str]:
    """'n't RB not' → {("n't", 'RB'): 'not'}"""
    rules = {}
    for line_no, line in enumerate(lines, 1):
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 3:
            raise MalformedResourceError("expected 'form POS lemma'", ABBREVIATION_RULE, line_no)
        form, pos, lemma = fields
        rules[(form.lower(), pos)] = lemma
    return rules


@dataclass(frozen=True)
class EnglishLemmatizer:
    engines: Mapping[str, AffixEngine]
    lexicons: Mapping[str, BaseLexicon]
    abbreviations: Mapping[Tuple[str, str], str] = field(default_factory=dict)
    cardinals: FrozenSet[str] = frozenset()
    ordinals: FrozenSet[str] = frozenset()

    def __post_init__(self):
        # freeze the lookup tables handed in by the factory
        object.__setattr__(self, "engines", MappingProxyType(dict(self.engines)))
        object.__setattr__(self, "lexicons", MappingProxyType(dict(self.lexicons)))
        object.__setattr__(self, "abbreviations", MappingProxyType(dict(self.abbreviations)))

    # ------------------------------------------------------------------

    def get_lemma(self, form: str, pos: str) -> str:
        lower = form.lower()

        lemma = self.abbreviations.get((lower, pos))
        if lemma is not None:
            return lemma

        if utils.is_url(lower):
            return MorphTag.LEMMA_URL
        if self.is_ordinal(lower):
            return MorphTag.LEMMA_ORDINAL
        if self.is_cardinal(lower):
            return MorphTag.LEMMA_CARDINAL

        lower = utils.normalize_punctuation(utils.normalize_digits(lower))

        morphemes = self._decompose(lower, pos)
        if morphemes is not None:
            return morphemes[0].form
        return lower

    def analyze(self, form: str, pos: str) -> Optional[MorphemePair]:
        """(base, affix) morphemes of an inflected form, or None."""
        return self._decompose(form.lower(), pos)

    def is_ordinal(self, lower: str) -> bool:
        return lower in self.ordinals or utils.is_numeric_ordinal(lower)

    def is_cardinal(self, lower: str) -> bool:
        """'ten', plus plural forms such as 'tens' and 'thirties'."""
        if lower in self.cardinals:
            return True
        if lower.endswith("ies") and lower[:-3] + "y" in self.cardinals:
            return True
        return lower.endswith("s") and lower[:-1] in self.cardinals

    # ------------------------------------------------------------------

    def _decompose(self, lower: str, pos: str) -> Optional[MorphemePair]:
        family = pos_family(pos)
        if family is None or family not in self.engines:
            return None
        return self.engines[family].decompose(lower, pos, self.lexicons[family])

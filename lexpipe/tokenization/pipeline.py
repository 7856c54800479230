"""
English Tokenizer Pipeline
--------------------------
Raw text → normalized text → whitespace tokens → fixed sequence of
isolate / escape / restore stages → ordered (text, protected) tokens.

Stage order matters: structural isolate stages run before the escapes that
hide delimiter-like characters, and every escape is undone at the very end.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from . import stages
from .dictionaries import TokenizerDictionaries
from .tokens import D0D_MARKS, EscapeKind, Token

# ==========================
# Result object
# ==========================

@dataclass
class TokenizationResult:
    tokens: List[Token]
    normalized_text: str = ""
    debug: Optional[Dict[str, Any]] = None

    @property
    def texts(self) -> List[str]:
        return [t.text for t in self.tokens]

    def as_pairs(self) -> List[Tuple[str, bool]]:
        return [t.as_pair() for t in self.tokens]


# ==========================
# Tokenizer
# ==========================

class EnglishTokenizer:
    def __init__(self, dictionaries: TokenizerDictionaries, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.dictionaries = dictionaries
        self.normalizer = stages.TextNormalizer(dictionaries.non_utf8)

        self.flags = {
            "protect_social_tags": False,
            "user_id_mode": False,
        }
        self.flags.update(self.config.get("tokenization", {}))

        self.marker = stages.ProtectionMarker(
            dictionaries.emoticons,
            dictionaries.abbreviations,
            social_tags=bool(self.flags["protect_social_tags"]),
        )

    def get_token_list(self, text: str) -> List[Tuple[str, bool]]:
        return self.tokenize(text).as_pairs()

    def get_tokens(self, text: str) -> List[str]:
        return self.tokenize(text).texts

    def tokenize(self, text: str, trace: bool = False) -> TokenizationResult:
        dbg: Optional[Dict[str, Any]] = {"input": text} if trace else None

        def _snapshot(stage: str, tokens: List[Token]) -> None:
            if dbg is not None:
                dbg[stage] = [t.as_pair() for t in tokens]

        d = self.dictionaries
        user_id_mode = bool(self.flags["user_id_mode"])

        normalized = self.normalizer.apply(text)
        current = stages.split_whitespace(normalized)
        _snapshot("split", current)

        current = self.marker.mark_emoticons(current)
        _snapshot("emoticons", current)

        # 1-4) structural isolation
        current = stages.isolate(current, stages.URL_SPAN_RE)
        _snapshot("urls", current)
        current = stages.isolate(current, stages.ABBREVIATION_RE, stages.wrap_leading_group)
        _snapshot("abbreviation_remnants", current)
        current = stages.isolate(current, stages.REPEATED_PUNCT_RE)
        _snapshot("repeated_punctuation", current)
        current = stages.isolate(current, stages.US_DOLLAR_RE)
        _snapshot("us_dollar", current)

        # 5-6) hide digit-punctuation-digit and whitelisted hyphens
        for mark in D0D_MARKS:
            current = stages.escape_d0d(current, mark)
        _snapshot("d0d_escaped", current)
        current = stages.escape_hyphens(current, d.hyphen_pattern)
        _snapshot("hyphens_escaped", current)

        # 7-9) leading punctuation, protection, compounds
        current = stages.isolate(current, stages.PUNCTUATION_PRE_RE)
        _snapshot("punctuation_pre", current)
        current = self.marker.mark(current)
        _snapshot("protected", current)
        current = stages.split_compounds(current, d.compounds)
        _snapshot("compounds", current)

        # 10-13) contractions and in-word escapes
        current = stages.isolate(current, stages.CONTRACTION_RE)
        _snapshot("contractions", current)
        if user_id_mode:
            current = stages.escape(current, stages.PERIOD_ESCAPE_RE, EscapeKind.PERIOD)
        current = stages.escape(current, stages.AMPERSAND_ESCAPE_RE, EscapeKind.AMPERSAND)
        current = stages.escape(current, stages.APOSTROPHE_ESCAPE_RE, EscapeKind.APOSTROPHE)
        _snapshot("word_escapes", current)

        # 14-15) numeral boundaries, trailing punctuation
        for pattern in d.unit_patterns:
            current = stages.isolate(current, pattern, stages.split_groups)
        _snapshot("units", current)
        current = stages.isolate(current, stages.PUNCTUATION_POST_RE)
        _snapshot("punctuation_post", current)

        # 16-20) restore in reverse of hiding
        for mark in D0D_MARKS:
            current = stages.restore(current, EscapeKind.for_d0d(mark))
        if user_id_mode:
            current = stages.restore(current, EscapeKind.PERIOD)
        current = stages.restore(current, EscapeKind.HYPHEN)
        current = stages.restore(current, EscapeKind.APOSTROPHE)
        current = stages.restore(current, EscapeKind.AMPERSAND)
        _snapshot("restored", current)

        return TokenizationResult(tokens=current, normalized_text=normalized, debug=dbg)

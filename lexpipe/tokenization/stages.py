"""
Tokenizer stages
----------------
Every stage takes a token list and returns a new one. Protected tokens pass
through untouched, except in restore passes which undo private escapes on
every token.
"""
from __future__ import annotations

import re
from typing import Callable, Iterable, List, Mapping, Optional, Sequence, Tuple

from .dictionaries import ABBREVIATION_SHAPE_RE, FILENAME_EXT_RE, PUNCT, CompoundOffsets
from .tokens import DELIM, PROTECT_MARK, EscapeKind, Pending, Protected, Token

Substitution = Callable[[re.Match], str]

# ==========================
# Isolate / escape patterns
# ==========================

URL_SPAN_RE = re.compile(
    r"(?i)(?:"
    r"(?:https?|ftp|sftp|file|mailto|news|telnet|ssh):(?://)?[^\s<>\"]*[^\s<>\".,;:!?'()\[\]{}]"
    r"|www\d{0,3}\.[^\s<>\"]*[^\s<>\".,;:!?'()\[\]{}]"
    r"|[\w.+\-]+@[\w+\-]+(?:\.[\w+\-]+)+"
    r")"
)
ABBREVIATION_RE = re.compile(rf"^((?:[^\W\d_]\.)+)({PUNCT}*)$")
REPEATED_PUNCT_RE = re.compile(r"[.?!]{2,}|-{2,}|\*{2,}|={2,}|~{2,}|,{2,}|`{2,}|'{2,}")
US_DOLLAR_RE = re.compile(r"^US\$")
PUNCTUATION_PRE_RE = re.compile(r"[()\[\]{}<>,:;\"]")
CONTRACTION_RE = re.compile(r"(?i)(?:'(?:s|d|m|z|ll|re|ve|nt)|n't)$")
PUNCTUATION_POST_RE = re.compile(r"[.?!`'\-/@#$%&|]")
SOCIAL_TAG_RE = re.compile(r"^[@#][^\W_]+$")

# 3-group escapes: (left context)(delimiter)(?=(right context))
D0D_ESCAPES: Mapping[str, Tuple[re.Pattern, ...]] = {
    ".": (re.compile(r"(^|[^\W_])(\.)(?=(\d))"),),
    ",": (re.compile(r"(\d)(,)(?=(\d))"),),
    ":": (re.compile(r"(\d)(:)(?=(\d))"),),
    "-": (re.compile(r"(\d)(-)(?=(\d))"),),
    "/": (re.compile(r"(\d)(/)(?=(\d))"),),
    "'": (re.compile(r"(^)(')(?=(\d))"), re.compile(r"(\d)(')(?=(s))")),
}
PERIOD_ESCAPE_RE = re.compile(r"([^\W_])(\.)(?=([^\W_]))")
AMPERSAND_ESCAPE_RE = re.compile(r"([A-Z])(&)(?=([A-Z]))")
APOSTROPHE_ESCAPE_RE = re.compile(r"(\w)(')(?=(\w))")


# ==========================
# Normalizer & splitter
# ==========================

class TextNormalizer:
    """Applies the non-UTF8 table once, in table order, as literal replacements."""

    def __init__(self, table: Iterable[Tuple[str, str]]):
        self.table = tuple(table)

    def apply(self, text: str) -> str:
        for source, replacement in self.table:
            text = text.replace(source, replacement)
        return text


def split_whitespace(text: str) -> List[Token]:
    return [Pending(piece) for piece in text.split()]


# ==========================
# Protection marker
# ==========================

def _protect_where(tokens: Sequence[Token], predicate: Callable[[str], bool]) -> List[Token]:
    return [Protected(t.text) if not t.protected and predicate(t.text) else t for t in tokens]


def protect_emoticons(tokens: Sequence[Token], emoticons: frozenset) -> List[Token]:
    return _protect_where(tokens, lambda s: s.lower() in emoticons)


def protect_abbreviations(tokens: Sequence[Token], abbreviations: frozenset) -> List[Token]:
    def _is_abbreviation(s: str) -> bool:
        lower = s.lower()
        return lower in abbreviations or ABBREVIATION_SHAPE_RE.search(lower) is not None
    return _protect_where(tokens, _is_abbreviation)


def protect_filenames(tokens: Sequence[Token]) -> List[Token]:
    return _protect_where(tokens, lambda s: FILENAME_EXT_RE.search(s.lower()) is not None)


def protect_social_tags(tokens: Sequence[Token]) -> List[Token]:
    """@mentions and #hashtags: '@'/'#' followed by alphanumerics only."""
    return _protect_where(tokens, lambda s: SOCIAL_TAG_RE.match(s) is not None)


class ProtectionMarker:
    def __init__(self, emoticons: frozenset, abbreviations: frozenset, social_tags: bool = False):
        self.emoticons = emoticons
        self.abbreviations = abbreviations
        self.social_tags = social_tags

    def mark_emoticons(self, tokens: Sequence[Token]) -> List[Token]:
        return protect_emoticons(tokens, self.emoticons)

    def mark(self, tokens: Sequence[Token]) -> List[Token]:
        tokens = protect_abbreviations(tokens, self.abbreviations)
        tokens = protect_filenames(tokens)
        if self.social_tags:
            tokens = protect_social_tags(tokens)
        return tokens


# ==========================
# Isolate
# ==========================

def wrap_match(m: re.Match) -> str:
    """' <MARK>span ': the whole span becomes a protected token."""
    return f"{DELIM}{PROTECT_MARK}{m.group(0)}{DELIM}"


def wrap_leading_group(m: re.Match) -> str:
    """Protect group 1, leave group 2 pending."""
    return f"{DELIM}{PROTECT_MARK}{m.group(1)}{DELIM}{m.group(2)}"


def split_groups(m: re.Match) -> str:
    """Plain boundary between group 1 and group 2, nothing protected."""
    return f"{m.group(1)}{DELIM}{m.group(2)}"


def _resplit(text: str) -> List[Token]:
    out: List[Token] = []
    for piece in text.split(DELIM):
        if piece.startswith(PROTECT_MARK):
            piece = piece[len(PROTECT_MARK):]
            if piece:
                out.append(Protected(piece))
        elif piece:
            out.append(Pending(piece))
    return out


def isolate(tokens: Sequence[Token], pattern: re.Pattern, substitute: Substitution = wrap_match) -> List[Token]:
    out: List[Token] = []
    for t in tokens:
        if t.protected:
            out.append(t)
            continue
        rewritten = pattern.sub(substitute, t.text)
        if rewritten == t.text:
            out.append(t)
        else:
            out.extend(_resplit(rewritten))
    return out


# ==========================
# Escape / restore
# ==========================

def escape(tokens: Sequence[Token], pattern: re.Pattern, kind: EscapeKind) -> List[Token]:
    """Rewrite only the delimiter group to the kind's private code. No re-split."""
    def _sub(m: re.Match) -> str:
        return m.group(1) + kind.code

    return [t if t.protected else Pending(pattern.sub(_sub, t.text)) for t in tokens]


def escape_d0d(tokens: Sequence[Token], mark: str) -> List[Token]:
    kind = EscapeKind.for_d0d(mark)
    for pattern in D0D_ESCAPES[mark]:
        tokens = escape(tokens, pattern, kind)
    return list(tokens)


def escape_hyphens(tokens: Sequence[Token], whitelist: Optional[re.Pattern]) -> List[Token]:
    """Hide every hyphen of a whitelisted hyphenated word."""
    if whitelist is None:
        return list(tokens)
    return [
        Pending(EscapeKind.HYPHEN.encode(t.text))
        if not t.protected and whitelist.search(t.text.lower())
        else t
        for t in tokens
    ]


def restore(tokens: Sequence[Token], kind: EscapeKind) -> List[Token]:
    return [type(t)(kind.decode(t.text)) if kind.code in t.text else t for t in tokens]


# ==========================
# Compounds
# ==========================

def split_compound(text: str, offsets: CompoundOffsets) -> List[Token]:
    return [Protected(text[begin:end]) for begin, end in offsets]


def split_compounds(tokens: Sequence[Token], compounds: Mapping[str, CompoundOffsets]) -> List[Token]:
    out: List[Token] = []
    for t in tokens:
        offsets = None if t.protected else compounds.get(t.text.lower())
        # lower() may change the length of some non-ASCII strings
        if offsets is None or offsets[-1][1] != len(t.text):
            out.append(t)
        else:
            out.extend(split_compound(t.text, offsets))
    return out

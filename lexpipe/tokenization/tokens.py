"""
Token variants and private escape codes used by the tokenizer pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Mapping, Tuple


# ==========================
# Tokens
# ==========================

@dataclass(frozen=True)
class Token:
    text: str
    protected: ClassVar[bool] = False

    def as_pair(self) -> Tuple[str, bool]:
        return (self.text, self.protected)


@dataclass(frozen=True)
class Pending(Token):
    """Token that later stages may still split or rewrite."""
    protected: ClassVar[bool] = False


@dataclass(frozen=True)
class Protected(Token):
    """Token that no later stage may split or rewrite (restore passes excepted)."""
    protected: ClassVar[bool] = True


# ==========================
# Private codes
# ==========================

# Delimiter used when an isolate stage re-splits a token
DELIM = " "
# Prefix marking a fragment that must come out of an isolate stage protected
PROTECT_MARK = "\uE000"

# Punctuation hidden between digits, in code order
D0D_MARKS: Tuple[str, ...] = (".", ",", ":", "-", "/", "'")
PUNCTUATION_CODES: Mapping[str, int] = MappingProxyType({mark: i for i, mark in enumerate(D0D_MARKS)})


class EscapeKind(Enum):
    """Closed set of escapes; each hides one character behind one private code point."""

    D0D_PERIOD = (".", 0xE010)
    D0D_COMMA = (",", 0xE011)
    D0D_COLON = (":", 0xE012)
    D0D_HYPHEN = ("-", 0xE013)
    D0D_SLASH = ("/", 0xE014)
    D0D_APOSTROPHE = ("'", 0xE015)
    PERIOD = (".", 0xE020)
    HYPHEN = ("-", 0xE021)
    APOSTROPHE = ("'", 0xE022)
    AMPERSAND = ("&", 0xE023)

    def __init__(self, char: str, codepoint: int):
        self.char = char
        self.code = chr(codepoint)

    @classmethod
    def for_d0d(cls, mark: str) -> "EscapeKind":
        return D0D_KINDS[PUNCTUATION_CODES[mark]]

    def encode(self, text: str) -> str:
        return text.replace(self.char, self.code)

    def decode(self, text: str) -> str:
        return text.replace(self.code, self.char)


D0D_KINDS: Tuple[EscapeKind, ...] = (
    EscapeKind.D0D_PERIOD,
    EscapeKind.D0D_COMMA,
    EscapeKind.D0D_COLON,
    EscapeKind.D0D_HYPHEN,
    EscapeKind.D0D_SLASH,
    EscapeKind.D0D_APOSTROPHE,
)

PRIVATE_CODES = frozenset([PROTECT_MARK] + [kind.code for kind in EscapeKind])

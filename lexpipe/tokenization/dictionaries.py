"""
Tokenizer dictionaries
----------------------
Immutable lookup tables and compiled patterns shared by every tokenizer call.
Built once from line-oriented resources; malformed resources fail here,
never during tokenization.
"""
from __future__ import annotations

import logging
import re
import string
from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..data.errors import MalformedResourceError

logger = logging.getLogger(__name__)

# Resource names, relative to the resource root
EMOTICONS = "tokenizer/emoticons.txt"
ABBREVIATIONS = "tokenizer/abbreviations.txt"
HYPHENS = "tokenizer/hyphens.txt"
COMPOUNDS = "tokenizer/compounds.txt"
UNITS = "tokenizer/units.txt"
NON_UTF8 = "tokenizer/non_utf8.txt"

RESOURCE_NAMES = (EMOTICONS, ABBREVIATIONS, HYPHENS, COMPOUNDS, UNITS, NON_UTF8)

# ASCII punctuation as a character class
PUNCT = "[" + re.escape(string.punctuation) + "]"

ABBREVIATION_SHAPE_RE = re.compile(r"^(?:[^\W\d_]\.)+[^\W\d_]?$")
FILENAME_EXT_RE = re.compile(
    r"\w\.(?:txt|log|csv|tsv|json|xml|ya?ml|html?|css|js|py|java|c|cpp|h|sh|"
    r"pdf|docx?|xlsx?|pptx?|rtf|odt|jpe?g|png|gif|bmp|svg|tiff?|"
    r"mp3|mp4|wav|avi|mov|zip|gz|tgz|tar|rar|7z|exe|dll|jar|iso)$"
)

CompoundOffsets = Tuple[Tuple[int, int], ...]


@dataclass(frozen=True)
class TokenizerDictionaries:
    emoticons: FrozenSet[str]
    abbreviations: FrozenSet[str]
    hyphen_pattern: Optional[re.Pattern]
    compounds: Mapping[str, CompoundOffsets]
    unit_patterns: Tuple[re.Pattern, ...]
    non_utf8: Tuple[Tuple[str, str], ...]

    @classmethod
    def from_lines(
        cls,
        *,
        emoticons: Iterable[str],
        abbreviations: Iterable[str],
        hyphens: Iterable[str],
        compounds: Iterable[str],
        units: Sequence[str],
        non_utf8: Iterable[str],
    ) -> "TokenizerDictionaries":
        dictionaries = cls(
            emoticons=build_string_set(emoticons),
            abbreviations=build_string_set(abbreviations),
            hyphen_pattern=build_hyphen_pattern(hyphens),
            compounds=build_compound_map(compounds),
            unit_patterns=build_unit_patterns(units),
            non_utf8=build_non_utf8_table(non_utf8),
        )
        logger.info(
            f"📚 Tokenizer dictionaries ready: {len(dictionaries.emoticons)} emoticons, "
            f"{len(dictionaries.abbreviations)} abbreviations, {len(dictionaries.compounds)} compounds, "
            f"{len(dictionaries.non_utf8)} non-UTF8 rules"
        )
        return dictionaries

    @classmethod
    def from_resources(cls, resources: Mapping[str, List[str]]) -> "TokenizerDictionaries":
        """Build from a {resource name: lines} mapping as returned by the registry."""
        return cls.from_lines(
            emoticons=resources[EMOTICONS],
            abbreviations=resources[ABBREVIATIONS],
            hyphens=resources[HYPHENS],
            compounds=resources[COMPOUNDS],
            units=resources[UNITS],
            non_utf8=resources[NON_UTF8],
        )


def build_string_set(lines: Iterable[str]) -> FrozenSet[str]:
    return frozenset(line.strip().lower() for line in lines if line.strip())


def build_hyphen_pattern(lines: Iterable[str]) -> Optional[re.Pattern]:
    """Join the whitelist lines into one alternation. An empty whitelist escapes nothing."""
    alternatives = [line.strip() for line in lines if line.strip()]
    if not alternatives:
        return None
    try:
        return re.compile("|".join(alternatives))
    except re.error as e:
        raise MalformedResourceError(f"hyphen whitelist does not compile: {e}", HYPHENS) from e


def build_compound_map(lines: Iterable[str]) -> Mapping[str, CompoundOffsets]:
    """
    Map each compound's concatenated lowercase form to the offsets of its parts.

    'gon na' → {'gonna': ((0, 3), (3, 5))}
    """
    compounds = {}
    for line_no, line in enumerate(lines, 1):
        parts = line.split()
        if not parts:
            continue
        if len(parts) == 1:
            raise MalformedResourceError("compound needs at least two parts", COMPOUNDS, line_no)

        offsets = []
        begin = 0
        for part in parts:
            end = begin + len(part)
            offsets.append((begin, end))
            begin = end
        compounds["".join(parts).lower()] = tuple(offsets)
    return MappingProxyType(compounds)


def build_unit_patterns(lines: Sequence[str]) -> Tuple[re.Pattern, ...]:
    """
    Compile the 4 numeral boundary patterns from the 3-line units resource:
    signs, currencies, units (each a regex alternation).
    """
    lines = [line.strip() for line in lines if line.strip()]
    if len(lines) < 3:
        raise MalformedResourceError(
            f"expected 3 lines (signs, currencies, units), found {len(lines)}", UNITS
        )
    signs, currencies, units = lines[:3]

    try:
        return (
            re.compile(rf"(?i)^({PUNCT}*(?:{signs}))(\d)"),
            re.compile(rf"(?i)^({PUNCT}*(?:{currencies}))(\d)"),
            re.compile(rf"(?i)(\d)((?:{currencies}){PUNCT}*)$"),
            re.compile(rf"(?i)(\d)((?:{units}){PUNCT}*)$"),
        )
    except re.error as e:
        raise MalformedResourceError(f"unit pattern does not compile: {e}", UNITS) from e


def build_non_utf8_table(lines: Iterable[str]) -> Tuple[Tuple[str, str], ...]:
    """Parse 'source<TAB>replacement' lines, keeping file order."""
    table = []
    for line_no, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        if not line:
            continue
        if "\t" not in line:
            raise MalformedResourceError("expected 'source<TAB>replacement'", NON_UTF8, line_no)
        source, replacement = line.split("\t", 1)
        if not source:
            raise MalformedResourceError("empty source pattern", NON_UTF8, line_no)
        table.append((source, replacement))
    return tuple(table)

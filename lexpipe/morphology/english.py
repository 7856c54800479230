"""
English matcher chains
----------------------
One engine per base POS family. Every chain starts with the irregular
forms of its inflection, then tries regular suffix rewrites from the most
specific suffix to the least specific one.
"""
from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, Mapping

from ..data.errors import MalformedResourceError
from .matcher import AffixEngine, AffixMatcher
from .morpheme import MorphTag
from .replacers import DoubledConsonantReplacer, ExceptionReplacer, SuffixReplacer

logger = logging.getLogger(__name__)

INFLECTION_EXC = "morphology/inflection.exc"

INFLECTION_TAGS = ("VBZ", "VBG", "VBD", "VBN", "NNS", "JJR", "JJS", "RBR", "RBS")

ExceptionTables = Mapping[str, Mapping[str, str]]


def parse_inflection_exceptions(lines: Iterable[str]) -> Dict[str, Dict[str, str]]:
    """
    Parse 'TAG form base' lines into {tag: {form: base}}.

    'VBD took take' → {'VBD': {'took': 'take'}}
    """
    tables: Dict[str, Dict[str, str]] = {tag: {} for tag in INFLECTION_TAGS}
    for line_no, line in enumerate(lines, 1):
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 3:
            raise MalformedResourceError("expected 'TAG form base'", INFLECTION_EXC, line_no)
        tag, form, base = fields
        if tag not in tables:
            raise MalformedResourceError(f"unknown inflection tag '{tag}'", INFLECTION_EXC, line_no)
        tables[tag][form.lower()] = base.lower()
    return tables


def _exceptions(tables: ExceptionTables, *tags: str) -> ExceptionReplacer:
    merged: Dict[str, str] = {}
    for tag in tags:
        merged.update(tables.get(tag, {}))
    return ExceptionReplacer(merged)


def _gate(tags: str) -> re.Pattern:
    return re.compile(rf"^(?:{tags})$")


# ==========================
# Engines
# ==========================

def build_verb_engine(tables: ExceptionTables) -> AffixEngine:
    third_person = AffixMatcher("-s", MorphTag.I_3PS, _gate("VBZ"), (
        _exceptions(tables, "VBZ"),
        SuffixReplacer("ies", "y"),
        SuffixReplacer("es"),
        SuffixReplacer("s"),
    ))
    past_participle = AffixMatcher("-en", MorphTag.I_PPT, _gate("VBN"), (
        _exceptions(tables, "VBN"),
        DoubledConsonantReplacer("en"),
        SuffixReplacer("en"),
        SuffixReplacer("en", "e"),
        SuffixReplacer("n"),
    ))
    past = AffixMatcher("-ed", MorphTag.I_PST, _gate("VBD|VBN"), (
        _exceptions(tables, "VBD", "VBN"),
        SuffixReplacer("ied", "y"),
        DoubledConsonantReplacer("ed"),
        SuffixReplacer("ed", "e"),
        SuffixReplacer("ed"),
    ))
    gerund = AffixMatcher("-ing", MorphTag.I_GRD, _gate("VBG"), (
        _exceptions(tables, "VBG"),
        SuffixReplacer("ying", "ie"),
        DoubledConsonantReplacer("ing"),
        SuffixReplacer("ing", "e"),
        SuffixReplacer("ing"),
    ))
    return AffixEngine(MorphTag.VB, [third_person, past_participle, past, gerund])


def build_noun_engine(tables: ExceptionTables) -> AffixEngine:
    plural = AffixMatcher("-s", MorphTag.I_PLR, _gate("NNS|NNPS"), (
        _exceptions(tables, "NNS"),
        SuffixReplacer("ies", "y"),
        SuffixReplacer("ves", "f"),
        SuffixReplacer("ves", "fe"),
        SuffixReplacer("ices", "ex"),
        SuffixReplacer("ices", "ix"),
        DoubledConsonantReplacer("es"),
        SuffixReplacer("ses", "sis"),
        SuffixReplacer("es"),
        SuffixReplacer("men", "man"),
        SuffixReplacer("ae", "a"),
        SuffixReplacer("i", "us"),
        SuffixReplacer("ora", "us"),
        SuffixReplacer("a", "um"),
        SuffixReplacer("a", "on"),
        SuffixReplacer("ice", "ouse"),
        SuffixReplacer("eese", "oose"),
        SuffixReplacer("eeth", "ooth"),
        SuffixReplacer("eet", "oot"),
        SuffixReplacer("s"),
    ))
    return AffixEngine(MorphTag.NN, [plural])


def _graded_engine(base_pos: str, tables: ExceptionTables, comparative: str, superlative: str) -> AffixEngine:
    comparative_matcher = AffixMatcher("-er", MorphTag.I_COM, _gate(comparative), (
        _exceptions(tables, comparative),
        SuffixReplacer("ier", "y"),
        DoubledConsonantReplacer("er"),
        SuffixReplacer("er", "e"),
        SuffixReplacer("er"),
    ))
    superlative_matcher = AffixMatcher("-est", MorphTag.I_SUP, _gate(superlative), (
        _exceptions(tables, superlative),
        SuffixReplacer("iest", "y"),
        DoubledConsonantReplacer("est"),
        SuffixReplacer("est", "e"),
        SuffixReplacer("est"),
    ))
    return AffixEngine(base_pos, [comparative_matcher, superlative_matcher])


def build_adjective_engine(tables: ExceptionTables) -> AffixEngine:
    return _graded_engine(MorphTag.JJ, tables, "JJR", "JJS")


def build_adverb_engine(tables: ExceptionTables) -> AffixEngine:
    return _graded_engine(MorphTag.RB, tables, "RBR", "RBS")


ENGINE_BUILDERS = {
    MorphTag.VB: build_verb_engine,
    MorphTag.NN: build_noun_engine,
    MorphTag.JJ: build_adjective_engine,
    MorphTag.RB: build_adverb_engine,
}


def build_engines(tables: ExceptionTables) -> Dict[str, AffixEngine]:
    engines = {pos: builder(tables) for pos, builder in ENGINE_BUILDERS.items()}
    logger.debug(f"🔧 Affix engines built: {', '.join(f'{pos}={len(e)}' for pos, e in engines.items())}")
    return engines

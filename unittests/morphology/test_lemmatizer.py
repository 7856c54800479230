#!/usr/bin/env python3
"""
Lemmatizer tests over the bundled morphology resources
"""

import pytest

from lexpipe.data.cache.cache_memory import InMemoryCache
from lexpipe.data.errors import MalformedResourceError
from lexpipe.data.registry import MORPHOLOGY_RESOURCES, ResourceRegistry
from lexpipe.morphology import LemmatizerFactory, Morpheme, MorphTag
from lexpipe.morphology import utils
from lexpipe.morphology.lemmatizer import parse_abbreviation_rules, pos_family
from unittests.fixtures import InMemoryLoader


LEMMA_CASES = [
    # abbreviation
    ("n't", "RB", "not"),
    ("na", "TO", "to"),

    # ordinal
    ("1st", "XX", MorphTag.LEMMA_ORDINAL),
    ("12nd", "XX", MorphTag.LEMMA_ORDINAL),
    ("23rd", "XX", MorphTag.LEMMA_ORDINAL),
    ("34th", "XX", MorphTag.LEMMA_ORDINAL),
    ("first", "XX", MorphTag.LEMMA_ORDINAL),
    ("third", "XX", MorphTag.LEMMA_ORDINAL),
    ("fourth", "XX", MorphTag.LEMMA_ORDINAL),

    # cardinal
    ("zero", "XX", MorphTag.LEMMA_CARDINAL),
    ("ten", "XX", MorphTag.LEMMA_CARDINAL),
    ("tens", "XX", MorphTag.LEMMA_CARDINAL),
    ("eleven", "XX", MorphTag.LEMMA_CARDINAL),
    ("fourteen", "XX", MorphTag.LEMMA_CARDINAL),
    ("thirties", "XX", MorphTag.LEMMA_CARDINAL),

    # verb: 3rd-person singular
    ("studies", "VBZ", "study"),
    ("pushes", "VBZ", "push"),
    ("takes", "VBZ", "take"),

    # verb: gerund
    ("lying", "VBG", "lie"),
    ("feeling", "VBG", "feel"),
    ("running", "VBG", "run"),
    ("taking", "VBG", "take"),

    # verb: past (participle)
    ("denied", "VBD", "deny"),
    ("entered", "VBD", "enter"),
    ("zipped", "VBD", "zip"),
    ("heard", "VBD", "hear"),
    ("drawn", "VBN", "draw"),
    ("clung", "VBN", "cling"),

    # verb: irregular
    ("chivvies", "VBZ", "chivy"),
    ("took", "VBD", "take"),
    ("beaten", "VBN", "beat"),
    ("forbidden", "VBN", "forbid"),
    ("bitten", "VBN", "bite"),
    ("spoken", "VBN", "speak"),
    ("woven", "VBN", "weave"),
    ("woken", "VBN", "wake"),
    ("slept", "VBD", "sleep"),
    ("fed", "VBD", "feed"),
    ("led", "VBD", "lead"),
    ("learnt", "VBD", "learn"),
    ("rode", "VBD", "ride"),
    ("spoke", "VBD", "speak"),
    ("woke", "VBD", "wake"),
    ("wrote", "VBD", "write"),
    ("bore", "VBD", "bear"),
    ("stove", "VBD", "stave"),
    ("drove", "VBD", "drive"),
    ("wove", "VBD", "weave"),

    # noun: plural
    ("studies", "NNS", "study"),
    ("crosses", "NNS", "cross"),
    ("areas", "NNS", "area"),
    ("gentlemen", "NNS", "gentleman"),
    ("vertebrae", "NNS", "vertebra"),
    ("foci", "NNS", "focus"),

    # noun: irregular
    ("indices", "NNS", "index"),
    ("appendices", "NNS", "appendix"),
    ("wolves", "NNS", "wolf"),
    ("knives", "NNS", "knife"),
    ("quizzes", "NNS", "quiz"),
    ("mice", "NNS", "mouse"),
    ("geese", "NNS", "goose"),
    ("teeth", "NNS", "tooth"),
    ("feet", "NNS", "foot"),
    ("analyses", "NNS", "analysis"),
    ("optima", "NNS", "optimum"),
    ("lexica", "NNS", "lexicon"),
    ("corpora", "NNS", "corpus"),

    # adjective: comparative
    ("easier", "JJR", "easy"),
    ("smaller", "JJR", "small"),
    ("bigger", "JJR", "big"),
    ("larger", "JJR", "large"),

    # adjective: superlative
    ("easiest", "JJS", "easy"),
    ("smallest", "JJS", "small"),
    ("biggest", "JJS", "big"),
    ("largest", "JJS", "large"),

    # adjective: irregular
    ("best", "JJS", "good"),

    # adverb: comparative
    ("earlier", "RBR", "early"),
    ("sooner", "RBR", "soon"),
    ("larger", "RBR", "large"),

    # adverb: superlative
    ("earliest", "RBS", "early"),
    ("soonest", "RBS", "soon"),
    ("largest", "RBS", "large"),

    # adverb: irregular
    ("best", "RBS", "well"),

    # URL
    ("http://www.google.com", "XX", MorphTag.LEMMA_URL),
    ("www.google.com", "XX", MorphTag.LEMMA_URL),
    ("mailto:somebody@google.com", "XX", MorphTag.LEMMA_URL),
    ("some-body@google+.com", "XX", MorphTag.LEMMA_URL),

    # numbers
    ("10%", "XX", "0"),
    ("$10", "XX", "0"),
    (".01", "XX", "0"),
    ("12.34", "XX", "0"),
    ("12,34,56", "XX", "0"),
    ("12-34-56", "XX", "0"),
    ("12/34/46", "XX", "0"),
    ("A.01", "XX", "a.0"),
    ("A:01", "XX", "a:0"),
    ("A/01", "XX", "a/0"),
    ("$10.23,45:67-89/10%", "XX", "0"),

    # punctuation
    (".!?-*=~,", "XX", ".!?-*=~,"),
    ("..!!??--**==~~,,", "XX", "..!!??--**==~~,,"),
    ("...!!!???---***===~~~,,,", "XX", "..!!??--**==~~,,"),
    ("....!!!!????----****====~~~~,,,,", "XX", "..!!??--**==~~,,"),
]


class TestEnglishLemmatizer:

    @pytest.mark.parametrize("form, pos, expected", LEMMA_CASES)
    def test_get_lemma(self, lemmatizer, form, pos, expected):
        assert lemmatizer.get_lemma(form, pos) == expected

    def test_unknown_form_falls_back_to_lowercase(self, lemmatizer):
        assert lemmatizer.get_lemma("Blorfs", "NNS") == "blorfs"
        assert lemmatizer.get_lemma("Hello", "UH") == "hello"

    def test_pos_gate_applies(self, lemmatizer):
        # plural rule is not tried for a base-form verb tag
        assert lemmatizer.get_lemma("studies", "VB") == "studies"

    def test_analyze(self, lemmatizer):
        assert lemmatizer.analyze("Studies", "VBZ") == (
            Morpheme("study", MorphTag.VB),
            Morpheme("-s", MorphTag.I_3PS),
        )
        assert lemmatizer.analyze("wolves", "NNS") == (
            Morpheme("wolf", MorphTag.NN),
            Morpheme("-s", MorphTag.I_PLR),
        )
        assert lemmatizer.analyze("happy", "UH") is None

    def test_lexicon_pos_override(self, lemmatizer):
        # 'people NNS' in noun.base
        assert lemmatizer.lexicons[MorphTag.NN].pos_of("people") == "NNS"


class TestLemmaUtils:

    @pytest.mark.parametrize("pos, family", [
        ("VBZ", MorphTag.VB),
        ("NNPS", MorphTag.NN),
        ("JJS", MorphTag.JJ),
        ("RBR", MorphTag.RB),
        ("MD", None),
    ])
    def test_pos_family(self, pos, family):
        assert pos_family(pos) == family

    def test_normalize_digits(self):
        assert utils.normalize_digits("$10.23,45:67-89/10%") == "0"
        assert utils.normalize_digits("a.01") == "a.0"
        assert utils.normalize_digits("abc") == "abc"

    def test_normalize_punctuation(self):
        assert utils.normalize_punctuation("wow!!!!") == "wow!!"
        assert utils.normalize_punctuation("ok!!") == "ok!!"

    def test_abbreviation_rules(self):
        assert parse_abbreviation_rules(["n't RB not", ""]) == {("n't", "RB"): "not"}
        with pytest.raises(MalformedResourceError):
            parse_abbreviation_rules(["n't RB"])


class TestLemmatizerFactory:

    @pytest.mark.asyncio
    async def test_create_from_memory(self):
        resources = {name: [] for name in MORPHOLOGY_RESOURCES}
        resources["morphology/verb.base"] = ["take", "study"]
        resources["morphology/inflection.exc"] = ["VBD took take"]
        resources["morphology/cardinal.base"] = ["ten"]
        registry = ResourceRegistry(InMemoryLoader(resources), InMemoryCache())

        lemmatizer = await LemmatizerFactory.create(registry)
        assert lemmatizer.get_lemma("took", "VBD") == "take"
        assert lemmatizer.get_lemma("studies", "VBZ") == "study"
        assert lemmatizer.get_lemma("tens", "NNS") == MorphTag.LEMMA_CARDINAL
        assert lemmatizer.get_lemma("third", "JJ") == "third"

    @pytest.mark.asyncio
    async def test_malformed_exceptions(self):
        resources = {name: [] for name in MORPHOLOGY_RESOURCES}
        resources["morphology/inflection.exc"] = ["VBD took"]
        registry = ResourceRegistry(InMemoryLoader(resources), InMemoryCache())

        with pytest.raises(MalformedResourceError):
            await LemmatizerFactory.create(registry)

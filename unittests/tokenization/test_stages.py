#!/usr/bin/env python3
"""
Unit tests for individual tokenizer stages and the private escape codes
"""

import re

import pytest

from lexpipe.tokenization import stages
from lexpipe.tokenization.tokens import (
    D0D_KINDS,
    D0D_MARKS,
    PRIVATE_CODES,
    EscapeKind,
    Pending,
    Protected,
)


class TestTokens:

    def test_variants(self):
        assert Pending("a").as_pair() == ("a", False)
        assert Protected("a").as_pair() == ("a", True)

    def test_punctuation_codes_are_bijective(self):
        assert [EscapeKind.for_d0d(mark).char for mark in D0D_MARKS] == list(D0D_MARKS)
        assert len({kind.code for kind in D0D_KINDS}) == len(D0D_MARKS)

    def test_private_codes_are_distinct(self):
        assert len(PRIVATE_CODES) == len(EscapeKind) + 1

    @pytest.mark.parametrize("kind", list(EscapeKind))
    def test_encode_decode(self, kind):
        text = f"a{kind.char}b{kind.char}"
        encoded = kind.encode(text)
        assert kind.char not in encoded
        assert kind.decode(encoded) == text


class TestIsolate:

    def test_protected_tokens_pass_through(self):
        tokens = [Protected("a,b"), Pending("c,d")]
        out = stages.isolate(tokens, stages.PUNCTUATION_PRE_RE)
        assert out == [Protected("a,b"), Pending("c"), Protected(","), Pending("d")]

    def test_unchanged_token_is_kept(self):
        token = Pending("plain")
        assert stages.isolate([token], stages.PUNCTUATION_PRE_RE)[0] is token

    def test_leading_group_only_is_protected(self):
        out = stages.isolate([Pending("U.S.,")], stages.ABBREVIATION_RE, stages.wrap_leading_group)
        assert out == [Protected("U.S."), Pending(",")]

    def test_split_groups_protects_nothing(self):
        pattern = re.compile(r"(\d)(km)$")
        out = stages.isolate([Pending("5km")], pattern, stages.split_groups)
        assert out == [Pending("5"), Pending("km")]

    def test_multiple_spans_in_one_token(self):
        out = stages.isolate([Pending("(a)")], stages.PUNCTUATION_PRE_RE)
        assert [t.as_pair() for t in out] == [("(", True), ("a", False), (")", True)]


class TestEscape:

    def test_adjacent_spans_all_escaped(self):
        out = stages.escape_d0d([Pending("1,2,3")], ",")
        assert out == [Pending(EscapeKind.D0D_COMMA.encode("1,2,3"))]

    def test_escape_skips_protected(self):
        token = Protected("1,2")
        assert stages.escape_d0d([token], ",") == [token]

    @pytest.mark.parametrize("mark, text", [
        (".", "3.14"),
        (".", ".5"),
        (":", "10:30"),
        ("-", "10-20"),
        ("/", "1/2"),
        ("'", "'90"),
        ("'", "1990's"),
    ])
    def test_d0d_marks(self, mark, text):
        escaped = stages.escape_d0d([Pending(text)], mark)[0].text
        assert mark not in escaped
        assert stages.restore([Pending(escaped)], EscapeKind.for_d0d(mark))[0].text == text

    def test_d0d_needs_digits(self):
        assert stages.escape_d0d([Pending("a,b")], ",") == [Pending("a,b")]

    def test_restore_touches_protected_tokens(self):
        code = EscapeKind.HYPHEN.code
        out = stages.restore([Protected(f"e{code}mail")], EscapeKind.HYPHEN)
        assert out == [Protected("e-mail")]

    def test_hyphen_whitelist(self):
        whitelist = re.compile(r"^e-")
        out = stages.escape_hyphens([Pending("e-mail-x"), Pending("well-known")], whitelist)
        assert "-" not in out[0].text
        assert out[1] == Pending("well-known")

    def test_empty_hyphen_whitelist(self):
        assert stages.escape_hyphens([Pending("e-mail")], None) == [Pending("e-mail")]

    def test_ampersand_only_between_capitals(self):
        out = stages.escape([Pending("AT&T"), Pending("a&b")], stages.AMPERSAND_ESCAPE_RE, EscapeKind.AMPERSAND)
        assert "&" not in out[0].text
        assert out[1].text == "a&b"


class TestProtectionMarker:

    @pytest.fixture
    def marker(self):
        return stages.ProtectionMarker(frozenset({":)", ":d"}), frozenset({"dr."}))

    def test_emoticons_case_insensitive(self, marker):
        out = marker.mark_emoticons([Pending(":D"), Pending(":)"), Pending("x")])
        assert [t.protected for t in out] == [True, True, False]

    def test_abbreviation_set_and_shape(self, marker):
        out = marker.mark([Pending("Dr."), Pending("i.e."), Pending("x.y.z"), Pending("Drs")])
        assert [t.protected for t in out] == [True, True, True, False]

    def test_filenames(self, marker):
        out = marker.mark([Pending("notes.TXT"), Pending("file.unknown")])
        assert [t.protected for t in out] == [True, False]

    def test_social_tags_only_when_enabled(self, marker):
        assert not marker.mark([Pending("#nlp")])[0].protected
        social = stages.ProtectionMarker(frozenset(), frozenset(), social_tags=True)
        out = social.mark([Pending("#nlp"), Pending("@a_b"), Pending("@")])
        assert [t.protected for t in out] == [True, False, False]


class TestCompounds:

    def test_offsets_partition_token(self):
        compounds = {"gonna": ((0, 3), (3, 5))}
        out = stages.split_compounds([Pending("GoNNa")], compounds)
        assert out == [Protected("GoN"), Protected("Na")]
        assert "".join(t.text for t in out) == "GoNNa"

    def test_protected_token_not_split(self):
        compounds = {"gonna": ((0, 3), (3, 5))}
        assert stages.split_compounds([Protected("gonna")], compounds) == [Protected("gonna")]

    def test_unknown_token(self):
        assert stages.split_compounds([Pending("going")], {}) == [Pending("going")]


class TestNormalizer:

    def test_table_order_and_literal(self):
        normalizer = stages.TextNormalizer([("…", "..."), (".", "·")])
        # the second rule sees the output of the first
        assert normalizer.apply("a…") == "a···"

    def test_regex_chars_are_literal(self):
        assert stages.TextNormalizer([(".*", "x")]).apply("a.*b") == "axb"

    def test_split_whitespace(self):
        assert stages.split_whitespace("  a \t b\n") == [Pending("a"), Pending("b")]

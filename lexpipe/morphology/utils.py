"""
Lemma normalization utilities shared by the lemmatizer.
"""
import re

from ..tokenization.stages import URL_SPAN_RE

_DIGITS_RE = re.compile(r"\d+")
_DIGIT_LINK_RE = re.compile(r"0[.,:\-/]0")
_DIGIT_AFFIX_RES = (
    re.compile(r"0%"),
    re.compile(r"\$0"),
    re.compile(r"^\.0"),
)
_PUNCT_RUN_RE = re.compile(r"([.!?\-*=~,])\1{2,}")
_ORDINAL_SUFFIX_RE = re.compile(r"^\d+(?:st|nd|rd|th)$")


def is_url(form: str) -> bool:
    return URL_SPAN_RE.fullmatch(form) is not None


def is_numeric_ordinal(form: str) -> bool:
    """'1st', '23rd', '34th'. The suffix is not checked against the number."""
    return _ORDINAL_SUFFIX_RE.match(form) is not None


def normalize_digits(form: str) -> str:
    """
    Collapse numerals to a single '0'.

    '$10.23,45:67-89/10%' → '0', 'a.01' → 'a.0'
    """
    form = _DIGITS_RE.sub("0", form)

    while True:
        collapsed = _DIGIT_LINK_RE.sub("0", form)
        if collapsed == form:
            break
        form = collapsed

    for pattern in _DIGIT_AFFIX_RES:
        form = pattern.sub("0", form)
    return form


def normalize_punctuation(form: str) -> str:
    """Runs of 3+ identical punctuation marks shrink to 2: '....' → '..'"""
    return _PUNCT_RUN_RE.sub(r"\1\1", form)

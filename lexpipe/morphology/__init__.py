"""
English Morphology Module

Affix matching engines and the lemmatizer built on top of them.
"""

from .morpheme import Morpheme, MorphTag
from .matcher import AffixMatcher, AffixEngine
from .lexicon import BaseLexicon
from .lemmatizer import EnglishLemmatizer
from .factory import LemmatizerFactory

__all__ = [
    'Morpheme',
    'MorphTag',
    'AffixMatcher',
    'AffixEngine',
    'BaseLexicon',
    'EnglishLemmatizer',
    'LemmatizerFactory',
]

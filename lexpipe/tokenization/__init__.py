"""
English Tokenization Module

Splits raw English text into an ordered token stream, keeping URLs,
abbreviations, numerals, emoticons and contractions intact.
"""

from .pipeline import EnglishTokenizer, TokenizationResult
from .factory import TokenizerFactory
from .dictionaries import TokenizerDictionaries
from .tokens import Token, Pending, Protected, EscapeKind

__all__ = [
    'EnglishTokenizer',
    'TokenizationResult',
    'TokenizerFactory',
    'TokenizerDictionaries',
    'Token',
    'Pending',
    'Protected',
    'EscapeKind',
]

"""
Test fixtures for lexpipe unit tests
"""

from .memory_loader import InMemoryLoader, minimal_tokenizer_resources

__all__ = [
    'InMemoryLoader',
    'minimal_tokenizer_resources',
]

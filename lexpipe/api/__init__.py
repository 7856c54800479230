"""
HTTP API for tokenization and lemmatization.
"""

from .router import router

__all__ = ["router"]

"""
Affix replacers
---------------
Each replacer turns an inflected lowercase form into one candidate base form,
or None when its suffix does not apply. Replacers never consult the lexicon;
the matcher does that.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Mapping, Optional

VOWELS = frozenset("aeiou")


class AffixReplacer(ABC):
    @abstractmethod
    def __call__(self, form: str) -> Optional[str]:
        """Return a candidate base for form, or None"""
        pass


class SuffixReplacer(AffixReplacer):
    """Strip a suffix and append a replacement: studies → ies|y → study."""

    def __init__(self, suffix: str, replacement: str = ""):
        self.suffix = suffix
        self.replacement = replacement

    def __call__(self, form: str) -> Optional[str]:
        if len(form) <= len(self.suffix) or not form.endswith(self.suffix):
            return None
        return form[: len(form) - len(self.suffix)] + self.replacement

    def __repr__(self) -> str:
        return f"SuffixReplacer({self.suffix!r} → {self.replacement!r})"


class DoubledConsonantReplacer(AffixReplacer):
    """Strip a suffix and undo final consonant doubling: running → run."""

    def __init__(self, suffix: str):
        self.suffix = suffix

    def __call__(self, form: str) -> Optional[str]:
        if not form.endswith(self.suffix):
            return None
        stem = form[: len(form) - len(self.suffix)]
        if len(stem) < 3 or stem[-1] != stem[-2] or stem[-1] in VOWELS or not stem[-1].isalpha():
            return None
        return stem[:-1]

    def __repr__(self) -> str:
        return f"DoubledConsonantReplacer({self.suffix!r})"


class ExceptionReplacer(AffixReplacer):
    """Irregular forms looked up in a fixed table: took → take."""

    def __init__(self, table: Mapping[str, str]):
        self.table = MappingProxyType(dict(table))

    def __call__(self, form: str) -> Optional[str]:
        return self.table.get(form)

    def __len__(self) -> int:
        return len(self.table)

    def __repr__(self) -> str:
        return f"ExceptionReplacer({len(self.table)} entries)"

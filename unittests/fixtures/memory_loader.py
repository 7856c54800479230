#!/usr/bin/env python3
"""
In-memory resource loader for registry and factory tests
Serves resource lines from a dict and counts how often each one is read
"""

from collections import Counter
from typing import Dict, List, Optional

from lexpipe.data.errors import ResourceNotFoundError
from lexpipe.data.loaders.loader_interface import LoaderInterface


class InMemoryLoader(LoaderInterface):
    """Loader backed by a {name: lines} dict"""

    def __init__(self, resources: Optional[Dict[str, List[str]]] = None, healthy: bool = True):
        self.resources = dict(resources or {})
        self.healthy = healthy
        self.load_counts: Counter = Counter()

    async def load_lines(self, name: str) -> List[str]:
        self.load_counts[name] += 1
        if name not in self.resources:
            raise ResourceNotFoundError("not in test resources", name)
        return list(self.resources[name])

    async def test_connection(self) -> bool:
        return self.healthy


def minimal_tokenizer_resources() -> Dict[str, List[str]]:
    """Smallest resource set that builds a working tokenizer"""
    return {
        "tokenizer/emoticons.txt": [":)", ":-("],
        "tokenizer/abbreviations.txt": ["dr.", "etc."],
        "tokenizer/hyphens.txt": ["^e-mail"],
        "tokenizer/compounds.txt": ["can not", "gon na"],
        "tokenizer/units.txt": [r"\+|\-", r"\$", r"%|km"],
        "tokenizer/non_utf8.txt": ["’\t'"],
    }

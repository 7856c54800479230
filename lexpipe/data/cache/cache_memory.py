"""
In-memory cache implementation with TTL support.
"""
import time
import fnmatch
from typing import Any, Optional, Dict, List
from dataclasses import dataclass

from .cache_interface import CacheInterface


@dataclass
class CacheEntry:
    """Cache entry with expiration tracking."""
    value: Any
    created_at: float
    ttl: Optional[int] = None

    @property
    def is_expired(self) -> bool:
        """Check if entry has expired."""
        if self.ttl is None:
            return False
        return time.time() > (self.created_at + self.ttl)


class InMemoryCache(CacheInterface):
    """
    In-memory cache with TTL support.

    Expired entries are dropped lazily, on the first read that sees them.
    Resource files are small and few, so no background sweep is needed.
    """

    def __init__(self):
        self._data: Dict[str, CacheEntry] = {}
        self._hits = 0
        self._misses = 0
        self._sets = 0
        self._deletes = 0

    async def get(self, key: str) -> Optional[Any]:
        """Get value by key, return None if expired or missing."""
        entry = self._data.get(key)
        if entry is None:
            self._misses += 1
            return None

        if entry.is_expired:
            self._data.pop(key, None)
            self._misses += 1
            return None

        self._hits += 1
        return entry.value

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """Set key-value pair with optional TTL in seconds."""
        self._data[key] = CacheEntry(value=value, created_at=time.time(), ttl=ttl)
        self._sets += 1

    async def delete(self, key: str) -> bool:
        """Delete key. Returns True if key existed."""
        existed = key in self._data
        if existed:
            self._data.pop(key)
            self._deletes += 1
        return existed

    async def exists(self, key: str) -> bool:
        """Check if key exists and is not expired."""
        entry = self._data.get(key)
        if entry is None:
            return False

        if entry.is_expired:
            self._data.pop(key, None)
            return False

        return True

    async def clear(self) -> None:
        cleared_count = len(self._data)
        self._data.clear()
        self._deletes += cleared_count

    async def get_stats(self) -> Dict[str, Any]:
        total_requests = self._hits + self._misses
        hit_rate = (self._hits / total_requests * 100) if total_requests > 0 else 0

        return {
            "type": "in_memory",
            "entries": len(self._data),
            "hits": self._hits,
            "misses": self._misses,
            "sets": self._sets,
            "deletes": self._deletes,
            "hit_rate": f"{hit_rate:.1f}%",
            "total_requests": total_requests,
        }

    async def get_keys(self, pattern: str = "*") -> List[str]:
        """Get all live keys matching pattern. Supports * and ? wildcards."""
        matching_keys = []
        for key, entry in list(self._data.items()):
            if entry.is_expired:
                self._data.pop(key, None)
            elif fnmatch.fnmatchcase(key, pattern):
                matching_keys.append(key)
        return matching_keys

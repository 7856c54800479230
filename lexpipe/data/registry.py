"""
ResourceRegistry - Central orchestrator for resource access.

Coordinates between cache and loader; every resource is read from the
loader at most once per TTL window.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from .cache.cache_interface import CacheInterface
from .loaders.loader_interface import LoaderInterface

logger = logging.getLogger(__name__)

TOKENIZER_RESOURCES = (
    "tokenizer/emoticons.txt",
    "tokenizer/abbreviations.txt",
    "tokenizer/hyphens.txt",
    "tokenizer/compounds.txt",
    "tokenizer/units.txt",
    "tokenizer/non_utf8.txt",
)

MORPHOLOGY_RESOURCES = (
    "morphology/verb.base",
    "morphology/noun.base",
    "morphology/adjective.base",
    "morphology/adverb.base",
    "morphology/inflection.exc",
    "morphology/abbreviation.rule",
    "morphology/cardinal.base",
    "morphology/ordinal.base",
)

CACHE_PREFIX = "resource:"


class ResourceRegistry:
    """
    Resource registry with cache + loader architecture.

    Features:
    - Cache-first lookups with TTL
    - Fail-fast: loader errors propagate to the caller
    - Cache hydration at startup
    - Cache invalidation support
    """

    def __init__(self, loader: LoaderInterface, cache: CacheInterface, ttl: Optional[int] = None):
        """Initialize with loader and cache implementations. ttl=None keeps entries forever."""
        self.loader = loader
        self.cache = cache
        self._default_ttl = ttl

        logger.info("🗄️  ResourceRegistry initialized")

    async def get_lines(self, name: str, force_reload: bool = False) -> List[str]:
        """Get the lines of one resource with caching."""
        cache_key = f"{CACHE_PREFIX}{name}"

        if not force_reload:
            cached = await self.cache.get(cache_key)
            if cached is not None:
                logger.debug(f"✅ Resource cache hit for {name}")
                return list(cached)

        logger.debug(f"🔄 Loading resource {name}")
        lines = await self.loader.load_lines(name)

        await self.cache.set(cache_key, tuple(lines), self._default_ttl)
        logger.debug(f"💾 Cached resource {name}")

        return lines

    async def get_many(self, names: Iterable[str], force_reload: bool = False) -> Dict[str, List[str]]:
        return {name: await self.get_lines(name, force_reload) for name in names}

    async def get_tokenizer_resources(self, force_reload: bool = False) -> Dict[str, List[str]]:
        return await self.get_many(TOKENIZER_RESOURCES, force_reload)

    async def get_morphology_resources(self, force_reload: bool = False) -> Dict[str, List[str]]:
        return await self.get_many(MORPHOLOGY_RESOURCES, force_reload)

    async def invalidate(self, name: Optional[str] = None) -> None:
        """Invalidate one cached resource, or all of them."""
        if name is not None:
            await self.cache.delete(f"{CACHE_PREFIX}{name}")
            logger.debug(f"🗑️  Invalidated resource cache for {name}")
            return

        for key in await self.cache.get_keys(f"{CACHE_PREFIX}*"):
            await self.cache.delete(key)
        logger.info("🗑️  Invalidated all resource caches")

    async def hydrate_cache(self) -> None:
        """Pre-load every known resource into the cache."""
        logger.info("🔄 Hydrating resource cache")

        try:
            await self.get_tokenizer_resources(force_reload=True)
            await self.get_morphology_resources(force_reload=True)

            logger.info(f"✅ Resource cache hydrated ({len(TOKENIZER_RESOURCES) + len(MORPHOLOGY_RESOURCES)} resources)")

        except Exception as e:
            logger.error(f"❌ Failed to hydrate resource cache: {e}")
            raise

    async def get_cache_stats(self) -> Dict[str, Any]:
        stats = await self.cache.get_stats()
        stats["registry_info"] = {
            "default_ttl": self._default_ttl,
            "cache_type": type(self.cache).__name__,
            "loader_type": type(self.loader).__name__,
        }
        return stats

    async def test_health(self) -> Dict[str, bool]:
        """Test health of cache and loader."""
        health = {}

        try:
            health["cache"] = await self.cache.exists("_health_test_key") is not None
        except Exception as e:
            logger.error(f"Cache health check failed: {e}")
            health["cache"] = False

        try:
            health["loader"] = await self.loader.test_connection()
        except Exception as e:
            logger.error(f"Loader health check failed: {e}")
            health["loader"] = False

        health["overall"] = health["cache"] and health["loader"]
        return health

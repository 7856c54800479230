"""
Resource layer: loaders, cache and the registry that pairs them.
"""

from .registry import ResourceRegistry
from .cache.cache_memory import InMemoryCache
from .loaders.loader_package import PackageResourceLoader
from .errors import ResourceError, ResourceNotFoundError, MalformedResourceError

__all__ = [
    "ResourceRegistry",
    "InMemoryCache",
    "PackageResourceLoader",
    "ResourceError",
    "ResourceNotFoundError",
    "MalformedResourceError",
]

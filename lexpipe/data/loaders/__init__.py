"""
Resource loaders.
"""
from .loader_interface import LoaderInterface
from .loader_package import PackageResourceLoader

__all__ = ["LoaderInterface", "PackageResourceLoader"]

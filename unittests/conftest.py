#!/usr/bin/env python3
"""
Pytest configuration and fixtures for lexpipe tests

Session-scoped fixtures load the bundled resources once and build the
tokenizer and lemmatizer shared by the whole test session.
"""

import asyncio
import os
import sys

import pytest

# Add project root to Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lexpipe.data.cache.cache_memory import InMemoryCache
from lexpipe.data.loaders.loader_package import PackageResourceLoader
from lexpipe.data.registry import ResourceRegistry
from lexpipe.morphology import LemmatizerFactory
from lexpipe.tokenization import TokenizerFactory


def make_registry() -> ResourceRegistry:
    return ResourceRegistry(loader=PackageResourceLoader(), cache=InMemoryCache())


@pytest.fixture(scope="session")
def resource_registry():
    """Session-scoped ResourceRegistry over the bundled resources"""
    return make_registry()


@pytest.fixture(scope="session")
def tokenizer(resource_registry):
    """Default tokenizer: no social tags, no user-id mode"""
    return asyncio.run(TokenizerFactory.create(resource_registry))


@pytest.fixture(scope="session")
def social_tokenizer(resource_registry):
    config = {"tokenization": {"protect_social_tags": True}}
    return asyncio.run(TokenizerFactory.create(resource_registry, config))


@pytest.fixture(scope="session")
def user_id_tokenizer(resource_registry):
    config = {"tokenization": {"user_id_mode": True}}
    return asyncio.run(TokenizerFactory.create(resource_registry, config))


@pytest.fixture(scope="session")
def lemmatizer(resource_registry):
    return asyncio.run(LemmatizerFactory.create(resource_registry))

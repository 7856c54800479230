"""
TokenizerFactory - Async factory for creating sync EnglishTokenizer instances

Resources are loaded asynchronously through the registry once; the tokenizer
itself is synchronous and holds only frozen in-memory dictionaries.
"""

import logging
from typing import Any, Dict, Optional

from .dictionaries import RESOURCE_NAMES, TokenizerDictionaries
from .pipeline import EnglishTokenizer

logger = logging.getLogger(__name__)


class TokenizerFactory:
    @staticmethod
    async def create(resource_registry, config: Optional[Dict[str, Any]] = None) -> EnglishTokenizer:
        """
        Create an EnglishTokenizer by loading all dictionary resources.

        Args:
            resource_registry: ResourceRegistry used to read the tokenizer resources
            config: Optional tokenizer config, e.g. {"tokenization": {"user_id_mode": True}}

        Returns:
            EnglishTokenizer: Fully initialized tokenizer

        Raises:
            ResourceError: if a resource is missing or malformed
        """
        logger.info("🏭 Creating EnglishTokenizer")

        try:
            resources = await resource_registry.get_many(RESOURCE_NAMES)
            dictionaries = TokenizerDictionaries.from_resources(resources)
            tokenizer = EnglishTokenizer(dictionaries, config=config)

            logger.info(f"✅ EnglishTokenizer created (flags={tokenizer.flags})")
            return tokenizer

        except Exception as e:
            logger.error(f"❌ Failed to create EnglishTokenizer: {e}")
            raise

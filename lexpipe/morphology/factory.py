"""
LemmatizerFactory - Async factory for creating sync EnglishLemmatizer instances
"""

import logging

from .english import INFLECTION_EXC, build_engines, parse_inflection_exceptions
from .lemmatizer import ABBREVIATION_RULE, EnglishLemmatizer, parse_abbreviation_rules
from .lexicon import BaseLexicon
from .morpheme import MorphTag

logger = logging.getLogger(__name__)

BASE_LEXICONS = {
    MorphTag.VB: "morphology/verb.base",
    MorphTag.NN: "morphology/noun.base",
    MorphTag.JJ: "morphology/adjective.base",
    MorphTag.RB: "morphology/adverb.base",
}
CARDINAL_BASE = "morphology/cardinal.base"
ORDINAL_BASE = "morphology/ordinal.base"


def _word_set(lines):
    return frozenset(line.strip().lower() for line in lines if line.strip())


class LemmatizerFactory:
    @staticmethod
    async def create(resource_registry) -> EnglishLemmatizer:
        """
        Create an EnglishLemmatizer from the morphology resources.

        Raises:
            ResourceError: if a resource is missing or malformed
        """
        logger.info("🏭 Creating EnglishLemmatizer")

        try:
            lexicons = {
                pos: BaseLexicon.from_lines(pos, await resource_registry.get_lines(name), name)
                for pos, name in BASE_LEXICONS.items()
            }
            exceptions = parse_inflection_exceptions(await resource_registry.get_lines(INFLECTION_EXC))
            abbreviations = parse_abbreviation_rules(await resource_registry.get_lines(ABBREVIATION_RULE))

            lemmatizer = EnglishLemmatizer(
                engines=build_engines(exceptions),
                lexicons=lexicons,
                abbreviations=abbreviations,
                cardinals=_word_set(await resource_registry.get_lines(CARDINAL_BASE)),
                ordinals=_word_set(await resource_registry.get_lines(ORDINAL_BASE)),
            )

            logger.info(
                f"✅ EnglishLemmatizer created: "
                f"{', '.join(f'{pos}={len(lex)}' for pos, lex in lexicons.items())} base forms, "
                f"{sum(len(t) for t in exceptions.values())} irregular forms"
            )
            return lemmatizer

        except Exception as e:
            logger.error(f"❌ Failed to create EnglishLemmatizer: {e}")
            raise

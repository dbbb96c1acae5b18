"""Build the command pipeline from settings.

The classifier and the spelling dictionary are loaded once here and
shared read-only for the lifetime of the process.
"""

import logging

from scum_bot.bot.handler import MessageHandler, SessionFactory
from scum_bot.config import Settings
from scum_bot.dice.roller import RandomSource
from scum_bot.parser.dispatcher import CommandDispatcher
from scum_bot.parser.natural_language import NaturalLanguageResolver
from scum_bot.parser.pattern_classifier import PatternIntentClassifier
from scum_bot.parser.spelling import SymSpellCorrector

logger = logging.getLogger(__name__)


def build_dispatcher(settings: Settings) -> CommandDispatcher:
    """Create a dispatcher with the pattern classifier and SymSpell corrector."""
    corrector = SymSpellCorrector.load(
        dictionary_path=settings.spelling_dictionary_path,
        use_english_dictionary=settings.spelling_use_english_dictionary,
        max_edit_distance=settings.spelling_max_edit_distance,
    )
    resolver = NaturalLanguageResolver(PatternIntentClassifier(), corrector)
    logger.debug(f"Command dispatcher ready with prefix {settings.command_prefix!r}")
    return CommandDispatcher(resolver, prefix=settings.command_prefix)


def build_handler(
    settings: Settings,
    session_factory: SessionFactory,
    rng: RandomSource | None = None,
) -> MessageHandler:
    """Create a message handler wired to the database."""
    return MessageHandler(build_dispatcher(settings), session_factory, rng=rng)

"""Command parsing for chat messages.

Converts message text into Command objects that the message handler
can run.

Main Components:
    - Command types: CharacterRollCommand, HelpCommand, RollCommand
    - parse_shorthand: strict "!roll 3d" style grammar
    - NaturalLanguageResolver: mention extraction, spelling correction,
      intent classification and intent-to-command mapping
    - CommandDispatcher: shorthand first, natural language second
"""

from scum_bot.parser.commands import (
    CharacterRollCommand,
    Command,
    HelpCommand,
    RollCommand,
    is_permitted_privately,
)
from scum_bot.parser.dispatcher import CommandDispatcher, CommandOutcome, CommandSource
from scum_bot.parser.errors import (
    ClassifierError,
    CommandError,
    IntentError,
    MissingActionError,
    MissingAttributeError,
    MissingSlotError,
    NoIntentError,
    ShorthandSyntaxError,
    TooManyDiceError,
    UnknownIntentError,
)
from scum_bot.parser.intent_mapper import parse_intent_result
from scum_bot.parser.intent_types import (
    CustomValue,
    IntentClassifier,
    IntentResult,
    NumberValue,
    Slot,
    SpellingCorrector,
)
from scum_bot.parser.natural_language import (
    NaturalLanguageResolver,
    NaturalLanguageResult,
    extract_addressed_text,
)
from scum_bot.parser.pattern_classifier import PatternIntentClassifier
from scum_bot.parser.shorthand import ShorthandResult, parse_shorthand
from scum_bot.parser.spelling import SymSpellCorrector

__all__ = [
    # Commands
    "CharacterRollCommand",
    "Command",
    "HelpCommand",
    "RollCommand",
    "is_permitted_privately",
    # Errors
    "ClassifierError",
    "CommandError",
    "IntentError",
    "MissingActionError",
    "MissingAttributeError",
    "MissingSlotError",
    "NoIntentError",
    "ShorthandSyntaxError",
    "TooManyDiceError",
    "UnknownIntentError",
    # Intent classification
    "CustomValue",
    "IntentClassifier",
    "IntentResult",
    "NumberValue",
    "Slot",
    "SpellingCorrector",
    "PatternIntentClassifier",
    "SymSpellCorrector",
    "parse_intent_result",
    # Parsers
    "ShorthandResult",
    "parse_shorthand",
    "NaturalLanguageResolver",
    "NaturalLanguageResult",
    "extract_addressed_text",
    "CommandDispatcher",
    "CommandOutcome",
    "CommandSource",
]

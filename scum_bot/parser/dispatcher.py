"""Command dispatcher: shorthand first, natural language second.

    "!roll 3d"            -> shorthand -> RollCommand(3d)
    "!roll zzz"           -> shorthand -> ShorthandSyntaxError (no fallback)
    "<@bot> roll 3 dice"  -> natural language -> RollCommand(3d)
    "hello everyone"      -> None (not addressed to the bot)
"""

from dataclasses import dataclass
from enum import Enum

from scum_bot.parser.commands import Command, is_permitted_privately
from scum_bot.parser.errors import CommandError
from scum_bot.parser.intent_types import IntentResult
from scum_bot.parser.natural_language import NaturalLanguageResolver
from scum_bot.parser.shorthand import DEFAULT_PREFIX, parse_shorthand


class CommandSource(str, Enum):
    """Which parser produced a command."""

    SHORTHAND = "shorthand"
    NATURAL_LANGUAGE = "natural_language"


@dataclass(frozen=True)
class CommandOutcome:
    """Result of parsing one message.

    Exactly one of command and error is set.

    Attributes:
        source: Which parser handled the message.
        command: The parsed command.
        error: Why parsing failed.
        intent_result: Classifier output (natural language only).
        text: The text that was parsed, before spelling correction.
        corrected: Spelling-corrected text (natural language only).
    """

    source: CommandSource
    command: Command | None = None
    error: CommandError | None = None
    intent_result: IntentResult | None = None
    text: str = ""
    corrected: str | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


class CommandDispatcher:
    """Route a message to the shorthand or natural-language parser.

    Args:
        resolver: Natural-language resolver.
        prefix: Shorthand command prefix.
    """

    def __init__(self, resolver: NaturalLanguageResolver, prefix: str = DEFAULT_PREFIX) -> None:
        self.resolver = resolver
        self.prefix = prefix

    def parse(
        self,
        text: str,
        bot_mention: str | None = None,
        dice_only: bool = False,
    ) -> CommandOutcome | None:
        """Parse a message into a command.

        Args:
            text: Message content.
            bot_mention: The bot's user ID, if known.
            dice_only: Whether the channel treats every message as addressed.

        Returns:
            CommandOutcome, or None if the message holds no command.
        """
        if shorthand := parse_shorthand(text, self.prefix):
            return CommandOutcome(
                source=CommandSource.SHORTHAND,
                command=shorthand.command,
                error=shorthand.error,
                text=text,
            )

        result = self.resolver.resolve(text, bot_mention, dice_only)
        if result is None:
            return None

        return CommandOutcome(
            source=CommandSource.NATURAL_LANGUAGE,
            command=result.command,
            error=result.error,
            intent_result=result.intent_result,
            text=result.text,
            corrected=result.corrected,
        )

    @staticmethod
    def is_permitted_privately(command: Command) -> bool:
        """Whether a command may run in a private message.

        Character rolls need channel-scoped character data, so only
        help and plain dice rolls are allowed.
        """
        return is_permitted_privately(command)

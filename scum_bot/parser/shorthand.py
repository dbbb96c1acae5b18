"""Shorthand command parsing.

Shorthand commands start with the command prefix (``!`` by default):

    !help
    !roll 3d                        explicit dice pool
    !r hack                         action roll
    !roll hack with 2 bonus dice    action roll with bonus dice
    !roll insight                   resistance roll

Once a shorthand command is recognised the parse is committed: a bad
argument is reported as an error and the natural-language path is not
tried.
"""

import re
from dataclasses import dataclass

from scum_bot.character.checks import parse_check
from scum_bot.dice.parser import DiceParseError, PoolTooLargeError, parse_pool
from scum_bot.parser.commands import CharacterRollCommand, Command, HelpCommand, RollCommand
from scum_bot.parser.errors import CommandError, ShorthandSyntaxError, TooManyDiceError


DEFAULT_PREFIX = "!"


@dataclass(frozen=True)
class ShorthandResult:
    """Outcome of a recognised shorthand command.

    Exactly one of command and error is set.
    """

    command: Command | None = None
    error: CommandError | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


def _help_pattern(prefix: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(prefix)}help$", re.IGNORECASE)


def _roll_pattern(prefix: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(prefix)}(?:r|roll) +(.*)$", re.IGNORECASE | re.DOTALL)


def parse_shorthand(text: str, prefix: str = DEFAULT_PREFIX) -> ShorthandResult | None:
    """Try to parse text as a shorthand command.

    Args:
        text: Message text.
        prefix: Command prefix.

    Returns:
        ShorthandResult if the text is a shorthand command (even an
        invalid one), None otherwise.
    """
    text = text.strip()

    if _help_pattern(prefix).match(text):
        return ShorthandResult(command=HelpCommand())

    if match := _roll_pattern(prefix).match(text):
        return _parse_roll_argument(match.group(1).strip())

    return None


def _parse_roll_argument(argument: str) -> ShorthandResult:
    """Parse the argument of a roll command: a pool, else a check."""
    try:
        return ShorthandResult(command=RollCommand(parse_pool(argument)))
    except PoolTooLargeError as e:
        return ShorthandResult(error=TooManyDiceError(e.count))
    except DiceParseError:
        pass

    check = parse_check(argument)
    if check is None:
        return ShorthandResult(error=ShorthandSyntaxError(argument))
    return ShorthandResult(command=CharacterRollCommand(check))

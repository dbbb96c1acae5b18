"""Command types produced by the command parsers.

Commands are transient value objects: one is created per parsed message
and consumed by the message handler.
"""

from dataclasses import dataclass

from scum_bot.character.checks import Check
from scum_bot.dice.types import DicePool


@dataclass(frozen=True)
class CharacterRollCommand:
    """Roll a check against the sender's character."""

    check: Check

    description = "perform a character roll"
    # Needs channel-scoped character data
    is_private = False


@dataclass(frozen=True)
class HelpCommand:
    """Show usage examples."""

    description = "ask for help"
    is_private = True


@dataclass(frozen=True)
class RollCommand:
    """Roll an explicit dice pool."""

    pool: DicePool

    description = "perform a roll"
    is_private = True


Command = CharacterRollCommand | HelpCommand | RollCommand


def is_permitted_privately(command: Command) -> bool:
    """Whether a command may be run in a private message."""
    return command.is_private

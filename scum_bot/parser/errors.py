"""Command resolution exception definitions.

Every error carries the message shown to the user. Errors that point at
a problem with the bot rather than with what the user typed are marked
internal; they are logged in full and rendered as a generic failure.
"""

from scum_bot.dice.types import MAXIMUM_ROLLS


class CommandError(Exception):
    """Base exception for command resolution.

    Attributes:
        is_internal: Whether this is the bot's fault rather than the user's.
    """

    is_internal = False


# Shorthand commands


class ShorthandSyntaxError(CommandError):
    """A shorthand roll command whose argument is neither a pool nor a check."""

    def __init__(self, argument: str = "") -> None:
        super().__init__(
            "It looks like you're trying to roll an action or resistance roll, "
            "but the syntax is invalid. Try typing `!help` for some examples."
        )
        self.argument = argument


class TooManyDiceError(CommandError):
    """A dice pool larger than the maximum was requested.

    Attributes:
        count: The requested number of dice.
    """

    def __init__(self, count: int) -> None:
        super().__init__(
            f"It looks like you're trying to roll {count} dice. That's too many "
            f"dice! Try rolling {MAXIMUM_ROLLS} or fewer dice."
        )
        self.count = count


# Natural language commands


class MissingSlotError(CommandError):
    """A required slot was missing from a classified intent."""

    pass


class MissingAttributeError(MissingSlotError):
    """Resistance roll without a recognisable attribute."""

    def __init__(self) -> None:
        super().__init__(
            "It looks like you're trying to roll a resistance roll, but I'm not "
            "sure what kind of resistance roll you want. Try \"Roll insight "
            "resistance roll\", \"Resolve resistance roll\", etc."
        )


class MissingActionError(MissingSlotError):
    """Action roll without a recognisable action."""

    def __init__(self) -> None:
        super().__init__(
            "It looks like you're trying to roll an action check, but I'm not "
            "sure what action you want. Try \"Roll command\", \"Hacking roll\", etc."
        )


class IntentError(CommandError):
    """The intent classifier could not produce a usable intent."""

    pass


class NoIntentError(IntentError):
    """The classifier abstained."""

    def __init__(self) -> None:
        super().__init__(
            "I'm not sure what you mean. Try asking again with a different or "
            "simpler phrasing. Try asking for help to see some examples."
        )


class UnknownIntentError(IntentError):
    """The classifier returned an intent name with no command.

    Attributes:
        intent_name: The unrecognised intent name.
    """

    is_internal = True

    def __init__(self, intent_name: str) -> None:
        super().__init__(
            f"An unknown intent name was returned by the NLP engine: {intent_name}"
        )
        self.intent_name = intent_name


class ClassifierError(IntentError):
    """The classifier itself failed. Not retried.

    Attributes:
        cause: The underlying exception.
    """

    is_internal = True

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"An unknown error was returned by the NLP engine: {cause}")
        self.cause = cause

"""Responses sent back to the chat.

Each response renders to a single string addressed to the message's
author.
"""

from dataclasses import dataclass
from enum import Enum


GENERIC_ERROR_TEXT = "Something went wrong understanding that."


class ResponseKind(str, Enum):
    """Kind of response, which decides how it is rendered."""

    DICE_ROLL = "dice_roll"
    HELP = "help"
    CLARIFICATION = "clarification"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Response:
    """A reply to one message.

    Attributes:
        kind: Response kind.
        text: Reply text. For errors, the underlying cause.
        error: The exception behind an error response.
    """

    kind: ResponseKind
    text: str
    error: Exception | None = None

    @classmethod
    def dice_roll(cls, text: str) -> "Response":
        return cls(ResponseKind.DICE_ROLL, text)

    @classmethod
    def help(cls, text: str) -> "Response":
        return cls(ResponseKind.HELP, text)

    @classmethod
    def clarification(cls, text: str) -> "Response":
        return cls(ResponseKind.CLARIFICATION, text)

    @classmethod
    def warning(cls, text: str) -> "Response":
        return cls(ResponseKind.WARNING, text)

    @classmethod
    def from_error(cls, error: Exception) -> "Response":
        return cls(ResponseKind.ERROR, str(error), error)

    @property
    def is_error(self) -> bool:
        return self.kind == ResponseKind.ERROR

    def render(self, author_id: str) -> str:
        """Render the reply, mentioning the author.

        Errors show a generic message with the raw cause appended for
        diagnostics.
        """
        mention = f"<@{author_id}>"
        if self.kind == ResponseKind.WARNING:
            return f"{mention} ⚠️ {self.text}"
        if self.kind == ResponseKind.ERROR:
            return f"{mention} {GENERIC_ERROR_TEXT} ({self.text})"
        return f"{mention} {self.text}"

"""Message handling: turn chat messages into rendered replies."""

from scum_bot.bot.factory import build_dispatcher, build_handler
from scum_bot.bot.handler import (
    HELP_TEXT,
    ActionKind,
    HandlerAction,
    IncomingMessage,
    MessageHandler,
)
from scum_bot.bot.responses import Response, ResponseKind

__all__ = [
    "HELP_TEXT",
    "ActionKind",
    "HandlerAction",
    "IncomingMessage",
    "MessageHandler",
    "Response",
    "ResponseKind",
    "build_dispatcher",
    "build_handler",
]

"""Message handler: one chat message in, one action out.

The handler sits between the chat transport and the command pipeline:

    IncomingMessage
        ↓
    channel settings (enabled? dice-only?)
        ↓
    CommandDispatcher.parse → CommandOutcome | None
        ↓
    intent log (natural language only)
        ↓
    HandlerAction: ignore, or respond with a rendered Response
"""

import logging
from contextlib import AbstractContextManager
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from scum_bot.bot.responses import Response
from scum_bot.character.checks import resolve_check
from scum_bot.dice.roller import RandomSource, roll_pool
from scum_bot.dice.types import DicePool, RollsTooGreatError
from scum_bot.managers.channel_manager import ChannelManager, ChannelSettings
from scum_bot.managers.character_manager import CharacterManager
from scum_bot.managers.intent_log_manager import IntentLogManager
from scum_bot.parser.commands import (
    CharacterRollCommand,
    Command,
    HelpCommand,
    RollCommand,
)
from scum_bot.parser.dispatcher import CommandDispatcher, CommandOutcome, CommandSource
from scum_bot.parser.errors import CommandError, TooManyDiceError

logger = logging.getLogger(__name__)


SessionFactory = Callable[[], AbstractContextManager[Session]]

CHARACTER_NOT_FOUND_WARNING_TEXT = "Couldn't find any entry for character."
RATING_NOT_SET_WARNING_TEXT = "Couldn't find required ratings for character."

HELP_TEXT = (
    "Try typing the following:\n"
    "• \"Roll three dice\"\n"
    "• \"Do a hacking roll\"\n"
    "• \"Perform an insight resistance roll\"\n"
    "Or use the shorthand:\n"
    "• `!roll 3d`\n"
    "• `!roll hack with 1 bonus dice`\n"
    "• `!roll insight`"
)


@dataclass(frozen=True)
class IncomingMessage:
    """A chat message as delivered by the transport.

    Attributes:
        message_id: Transport message ID.
        channel_id: Channel the message was sent in.
        author_id: Sender's user ID.
        content: Raw message text.
        is_private: Sent in a private (direct) message.
        is_admin: Sender has administrator permissions. Private messages
            have no channel permissions, so transports report their
            senders as administrators.
        is_own: Sent by the bot itself.
    """

    message_id: str
    channel_id: str
    author_id: str
    content: str
    is_private: bool = False
    is_admin: bool = False
    is_own: bool = False


class ActionKind(str, Enum):
    """What the handler decided to do with a message."""

    IGNORE_OWN_MESSAGE = "ignore_own_message"
    IGNORE_CHANNEL_DISABLED = "ignore_channel_disabled"
    IGNORE_COMMAND_MISSING = "ignore_command_missing"
    RESPOND = "respond"


@dataclass(frozen=True)
class HandlerAction:
    """The handler's decision for one message."""

    kind: ActionKind
    response: Response | None = None

    @classmethod
    def respond(cls, response: Response) -> "HandlerAction":
        return cls(ActionKind.RESPOND, response)

    def render(self, author_id: str) -> str | None:
        """Render the reply text, or None if the message is ignored."""
        if self.response is None:
            return None
        return self.response.render(author_id)


class MessageHandler:
    """Turn incoming messages into actions.

    Args:
        dispatcher: Command dispatcher.
        session_factory: Context manager factory yielding database
            sessions, e.g. get_db_session.
        rng: Random source for dice (defaults to the random module).
    """

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        session_factory: SessionFactory,
        rng: RandomSource | None = None,
    ) -> None:
        self.dispatcher = dispatcher
        self.session_factory = session_factory
        self.rng = rng

    def handle(self, message: IncomingMessage, bot_mention: str | None = None) -> HandlerAction:
        """Decide what to do with a message.

        Args:
            message: The incoming message.
            bot_mention: The bot's user ID, if known yet.

        Returns:
            HandlerAction; RESPOND actions carry the response.
        """
        logger.info(
            f"Received message. Message ID: {message.message_id}; Content: {message.content!r}"
        )

        # Responding to ourselves could loop forever
        if message.is_own:
            action = HandlerAction(ActionKind.IGNORE_OWN_MESSAGE)
        else:
            channel = self._get_channel(message.channel_id)
            # Private channels are implicitly dice only, no need to @mention
            outcome = self.dispatcher.parse(
                message.content.strip(),
                bot_mention,
                channel.dice_only or message.is_private,
            )
            self._log_outcome(message, outcome)
            action = self._get_action(outcome, channel, message)

        self._log_action(message, action)
        return action

    def _get_channel(self, channel_id: str) -> ChannelSettings:
        try:
            with self.session_factory() as db:
                return ChannelManager(db).get(channel_id)
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving channel. Channel ID: {channel_id}; Error: {e}")
            return ChannelSettings()

    def _get_action(
        self,
        outcome: CommandOutcome | None,
        channel: ChannelSettings,
        message: IncomingMessage,
    ) -> HandlerAction:
        if outcome is None:
            return HandlerAction(ActionKind.IGNORE_COMMAND_MISSING)

        if outcome.source == CommandSource.NATURAL_LANGUAGE and outcome.intent_result:
            self._log_intent(message, outcome)

        if outcome.error is not None:
            return HandlerAction.respond(self._error_response(outcome.error))

        command = outcome.command
        if not message.is_admin and not channel.enabled:
            return HandlerAction(ActionKind.IGNORE_CHANNEL_DISABLED)

        if message.is_private and not self.dispatcher.is_permitted_privately(command):
            return HandlerAction.respond(
                Response.warning(
                    f"It looks like you're trying to {command.description}. "
                    "You can't do that in a private message."
                )
            )

        return HandlerAction.respond(self.run_command(command, message.channel_id, message.author_id))

    def run_command(self, command: Command, channel_id: str, author_id: str) -> Response:
        """Run a parsed command and build its response."""
        if isinstance(command, CharacterRollCommand):
            return self._character_roll(command, channel_id, author_id)
        if isinstance(command, HelpCommand):
            return Response.help(HELP_TEXT)
        if isinstance(command, RollCommand):
            result = roll_pool(command.pool, self.rng)
            return Response.dice_roll(f"rolled {command.pool} = {result}")
        raise TypeError(f"Unknown command: {command!r}")

    def _character_roll(
        self,
        command: CharacterRollCommand,
        channel_id: str,
        author_id: str,
    ) -> Response:
        try:
            with self.session_factory() as db:
                character = CharacterManager(db).lookup(channel_id, author_id)
        except SQLAlchemyError as e:
            return Response.from_error(e)

        if character is None:
            return Response.warning(CHARACTER_NOT_FOUND_WARNING_TEXT)

        size = resolve_check(command.check, character)
        if size is None:
            return Response.warning(RATING_NOT_SET_WARNING_TEXT)

        try:
            pool = DicePool.create(size)
        except RollsTooGreatError as e:
            return self._error_response(TooManyDiceError(e.count))

        result = roll_pool(pool, self.rng)
        return Response.dice_roll(f"rolled {command.check} ({pool}) = {result}")

    def _log_intent(self, message: IncomingMessage, outcome: CommandOutcome) -> None:
        try:
            with self.session_factory() as db:
                IntentLogManager(db).log(
                    message_id=message.message_id,
                    channel_id=message.channel_id,
                    user_id=message.author_id,
                    content=message.content,
                    intent_result=outcome.intent_result,
                    corrected=outcome.corrected,
                )
        except SQLAlchemyError as e:
            logger.error(
                f"Error logging intent result. Message ID: {message.message_id}; Error: {e}"
            )

    @staticmethod
    def _error_response(error: CommandError) -> Response:
        if error.is_internal:
            return Response.from_error(error)
        return Response.clarification(str(error))

    def _log_outcome(self, message: IncomingMessage, outcome: CommandOutcome | None) -> None:
        if outcome is None:
            return

        message_id = message.message_id
        if outcome.source == CommandSource.SHORTHAND:
            if outcome.is_error:
                logger.info(
                    f"Error parsing shorthand command. Message ID: {message_id}; "
                    f"Error: {outcome.error!r}"
                )
            else:
                logger.info(
                    f"Parsed shorthand command successfully. Message ID: {message_id}; "
                    f"Command: {outcome.command!r}"
                )
        elif outcome.is_error:
            logger.info(
                f"Error parsing natural language command. Message ID: {message_id}; "
                f"Corrected Message: {outcome.corrected or ''}; Error: {outcome.error}"
            )
        else:
            logger.info(
                f"Parsed natural language command successfully. Message ID: {message_id}; "
                f"Command: {outcome.command!r}; Corrected Message: {outcome.corrected or ''}"
            )

    def _log_action(self, message: IncomingMessage, action: HandlerAction) -> None:
        message_id = message.message_id
        if action.kind == ActionKind.IGNORE_OWN_MESSAGE:
            logger.info(f"Ignoring message because it was sent by us. Message ID: {message_id}")
        elif action.kind == ActionKind.IGNORE_CHANNEL_DISABLED:
            logger.info(
                f"Ignoring command because the bot is disabled in this channel. "
                f"Message ID: {message_id}"
            )
        elif action.kind == ActionKind.IGNORE_COMMAND_MISSING:
            logger.info(
                f"Ignoring message because it contains no command. Message ID: {message_id}"
            )
        elif action.response is not None and action.response.is_error:
            logger.error(
                f"Error processing command. Message ID: {message_id}; "
                f"Error: {action.response.error!r}"
            )

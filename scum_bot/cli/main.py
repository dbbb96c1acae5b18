"""Main CLI application for the dice bot."""

import itertools
import logging

import typer
from rich.logging import RichHandler

from scum_bot.bot.factory import build_dispatcher, build_handler
from scum_bot.bot.handler import IncomingMessage
from scum_bot.cli.display import (
    console,
    display_error,
    display_info,
    display_outcome,
    display_reply,
    display_success,
    prompt_message,
)
from scum_bot.config import get_settings

# Create main app
app = typer.Typer(
    name="scum-bot",
    help="A Scum and Villainy dice bot",
    add_completion=False,
)

EXIT_COMMANDS = {"/quit", "/exit"}


def configure_logging(level: str) -> None:
    """Send log records to the console through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
) -> None:
    """Scum Bot - roll dice and character checks from chat messages.

    Use 'scum-bot init-db' once, then 'scum-bot chat' to talk to the bot.
    """
    configure_logging("DEBUG" if verbose else get_settings().log_level)


@app.command("init-db")
def init_db_command() -> None:
    """Create the database tables."""
    from scum_bot.database.connection import init_db

    try:
        init_db()
    except Exception as e:
        display_error(f"Failed to initialise database: {e}")
        raise typer.Exit(1)
    display_success(f"Database ready: {get_settings().database_url}")


@app.command()
def parse(
    text: str = typer.Argument(..., help="Message text to parse"),
    dice_only: bool = typer.Option(False, "--dice-only", help="Treat the message as addressed"),
    bot_id: str = typer.Option(None, "--bot-id", help="Bot user ID for @mentions"),
) -> None:
    """Show how a message would be parsed, without rolling."""
    settings = get_settings()
    try:
        dispatcher = build_dispatcher(settings)
    except FileNotFoundError as e:
        display_error(str(e))
        raise typer.Exit(1)

    outcome = dispatcher.parse(text.strip(), bot_id or settings.bot_id, dice_only)
    display_outcome(outcome)


@app.command()
def chat(
    channel_id: str = typer.Option("1", "--channel", "-c", help="Channel ID to chat in"),
    user_id: str = typer.Option("1", "--user", "-u", help="Your user ID"),
    private: bool = typer.Option(False, "--private", "-p", help="Chat in a private message"),
    admin: bool = typer.Option(True, "--admin/--no-admin", help="Chat as a channel administrator"),
    bot_id: str = typer.Option(None, "--bot-id", help="Bot user ID for @mentions"),
) -> None:
    """Chat with the bot from the console.

    Type messages as you would in a channel. Type /quit to leave.
    """
    from scum_bot.database.connection import get_db_session

    settings = get_settings()
    try:
        handler = build_handler(settings, get_db_session)
    except FileNotFoundError as e:
        display_error(str(e))
        raise typer.Exit(1)

    mention = bot_id or settings.bot_id
    display_info(f"Chatting in channel {channel_id} as user {user_id}. Type /quit to leave.")
    if mention:
        display_info(f"Address the bot with <@{mention}>.")

    for message_number in itertools.count(1):
        try:
            content = prompt_message()
        except (EOFError, KeyboardInterrupt):
            break
        if content.lower() in EXIT_COMMANDS:
            break
        if not content:
            continue

        message = IncomingMessage(
            message_id=str(message_number),
            channel_id=channel_id,
            author_id=user_id,
            content=content,
            is_private=private,
            is_admin=admin,
        )
        action = handler.handle(message, mention)
        reply = action.render(user_id)
        if reply is None:
            display_info(f"(ignored: {action.kind.value})")
        else:
            display_reply(reply)


if __name__ == "__main__":
    app()

"""Rich display helpers for CLI output."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from scum_bot.parser.dispatcher import CommandOutcome


# Shared console instance
console = Console()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def display_success(message: str) -> None:
    """Display success message.

    Args:
        message: Success message.
    """
    console.print(f"[bold green]{escape(message)}[/bold green]")


def display_info(message: str) -> None:
    """Display info message.

    Args:
        message: Info message.
    """
    console.print(f"[dim]{escape(message)}[/dim]")


def display_reply(text: str) -> None:
    """Display the bot's rendered reply.

    Args:
        text: Rendered reply text.
    """
    console.print(Panel(escape(text), border_style="cyan", padding=(0, 1)))


def display_outcome(outcome: CommandOutcome | None) -> None:
    """Display how a message was parsed.

    Args:
        outcome: Dispatcher outcome, or None if nothing was recognised.
    """
    if outcome is None:
        console.print("[dim]No command: the message is not addressed to the bot.[/dim]")
        return

    table = Table(title="Parsed Command", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Source", outcome.source.value)
    table.add_row("Text", escape(outcome.text))
    if outcome.corrected is not None:
        table.add_row("Corrected", escape(outcome.corrected))
    if outcome.intent_result is not None:
        intent = outcome.intent_result
        table.add_row("Intent", f"{intent.intent_name} ({intent.probability:.2f})")
        for slot in intent.slots:
            table.add_row(f"Slot: {slot.slot_name}", escape(str(slot.value.value)))
    if outcome.command is not None:
        table.add_row("Command", escape(repr(outcome.command)))
    if outcome.error is not None:
        table.add_row("Error", f"[red]{escape(type(outcome.error).__name__)}[/red]: {escape(str(outcome.error))}")

    console.print(table)


def prompt_message() -> str:
    """Prompt for a chat message.

    Returns:
        The typed message.
    """
    return console.input("\n[bold cyan]You: [/bold cyan]").strip()

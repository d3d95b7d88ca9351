"""
Console output and user interaction utilities.

Formatted console output for the CLI, rendered with rich.
"""

from typing import Any

from rich.console import Console
from rich.table import Table

from .constants import EMOJI_ERROR, EMOJI_INFO, EMOJI_SUCCESS, EMOJI_WARNING
from .formatters import format_amount

console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print success message with emoji."""
    console.print(f"{EMOJI_SUCCESS} {message}")


def print_error(message: str) -> None:
    """Print error message with emoji."""
    error_console.print(f"{EMOJI_ERROR} {message}", style="red")


def print_warning(message: str) -> None:
    """Print warning message with emoji."""
    error_console.print(f"{EMOJI_WARNING} {message}", style="yellow")


def print_info(message: str) -> None:
    """Print info message with emoji."""
    console.print(f"{EMOJI_INFO} {message}")


def print_json(data: Any) -> None:
    """Pretty-print a decoded API response."""
    console.print_json(data=data)


def build_funds_table(funds: dict[str, Any], title: str = "Funds") -> Table:
    """Build a table of non-zero balances from a getInfo `funds` mapping."""
    table = Table(title=title)
    table.add_column("Currency", style="cyan")
    table.add_column("Amount", justify="right")

    for currency, amount in sorted(funds.items()):
        try:
            if float(amount) == 0:
                continue
        except (TypeError, ValueError):
            pass
        table.add_row(currency.upper(), format_amount(amount))

    return table


def confirm_action(prompt: str, default: bool = False) -> bool:
    """
    Ask for user confirmation.

    Args:
        prompt: The question to ask
        default: Default value if user just presses Enter

    Returns:
        True if user confirms, False otherwise
    """
    suffix = " (y/N)" if not default else " (Y/n)"
    response = console.input(f"{prompt}{suffix}: ").strip().lower()

    if not response:
        return default

    return response in ["y", "yes"]

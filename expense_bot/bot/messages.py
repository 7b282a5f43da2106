"""
Message templates for bot responses.

This module contains all message templates used by the bot commands.
"""

from decimal import Decimal
from typing import Iterable

from expense_bot.models import Store


def get_recorded_message() -> str:
    """Get message for a successfully recorded expense."""
    return "done"


def get_total_message(total: Decimal) -> str:
    """Get message for the ``total`` command."""
    return f"{total:.2f}"


def get_help_message(stores: Iterable[Store]) -> str:
    """Get help message listing every store shortcut in table order."""
    return "\n".join(f"{store.shortcut}: {store.name}" for store in stores)


def get_unknown_command_message() -> str:
    """Get message for unrecognized text."""
    return "I don't understand"


def get_cant_process_message() -> str:
    """Get message for a request that could not be processed."""
    return "Sorry, I can't process that."


def get_ledger_error_message() -> str:
    """Get error message when the spreadsheet could not be reached."""
    return "❌ Error updating the spreadsheet. Please try again later."

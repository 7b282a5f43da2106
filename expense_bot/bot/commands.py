"""
Bot command handlers.

This module contains all individual command handler functions. Each handler
returns the reply text; sending it is left to the router.
"""

import logging
from decimal import Decimal, DecimalException

from expense_bot.bot.context import BotContext
from expense_bot.bot.messages import (
    get_help_message,
    get_recorded_message,
    get_total_message,
    get_unknown_command_message,
)
from expense_bot.bot.parser import parse_price
from expense_bot.models import ExpenseRecord, Store

logger = logging.getLogger(__name__)


def handle_record_command(context: BotContext, store: Store, message_text: str) -> str:
    """
    Handle a store shortcut - append an expense to the ledger.

    Args:
        context: Bot dependencies
        store: Store whose shortcut matched
        message_text: Message text from user

    Returns:
        Reply text

    Raises:
        InvalidPriceError: If the trailing price token is malformed
        LedgerError: If the row could not be appended
    """
    price = parse_price(message_text)
    record = ExpenseRecord.for_store(store, price, context.today())
    context.ledger.append_row(record.to_row())
    logger.info(f"Recorded {price} at {store.name} ({store.category})")
    return get_recorded_message()


def handle_total_command(context: BotContext) -> str:
    """
    Handle ``total`` - sum every price recorded in the ledger.

    Cells that are empty, not decimals (such as a header row) or too large
    to add are skipped.

    Raises:
        LedgerError: If the price column could not be read
    """
    total = Decimal("0")
    for cell in context.ledger.get_price_column():
        try:
            value = Decimal(cell.strip())
            if value.is_finite():
                total += value
                continue
        except DecimalException:
            pass
        logger.warning(f"Skipping non-numeric ledger cell: {cell!r}")
    logger.info(f"Ledger total is {total}")
    return get_total_message(total)


def handle_help_command(context: BotContext) -> str:
    """Handle ``help`` - list available shortcuts."""
    return get_help_message(context.stores)


def handle_unknown_command(context: BotContext, message_text: str) -> str:
    """Handle unrecognized text."""
    logger.info(f"Unrecognized message: {message_text!r}")
    return get_unknown_command_message()

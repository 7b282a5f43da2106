"""
Bot command handling module.

This module contains all Telegram bot command processing logic including:
- Message parsing
- Message templates
- Command handlers
- Command routing
"""

from expense_bot.bot.context import BotContext
from expense_bot.bot.parser import parse_price, parse_update
from expense_bot.bot.router import build_routes, process_message, route_message

__all__ = [
    "BotContext",
    "build_routes",
    "parse_price",
    "parse_update",
    "process_message",
    "route_message",
]

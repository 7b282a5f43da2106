"""
Services layer for remote dependencies.

This module contains the clients the bot talks to:
- Telegram client for sending replies
- Spreadsheet ledger for expense rows
- Google Sheets authorization
"""

from expense_bot.services.ledger import Ledger, SheetsLedger
from expense_bot.services.sheets_auth import get_sheets_client
from expense_bot.services.telegram_client import send_message

__all__ = [
    "Ledger",
    "SheetsLedger",
    "get_sheets_client",
    "send_message",
]

"""
Personal expense-logging Telegram bot.

Messages like ``"SP 12.50"`` are recorded as rows in a Google spreadsheet;
``total`` and ``help`` report on the ledger and the known stores.
"""

__version__ = "0.1.0"

"""
Data models for the application.

This module contains all data models used throughout the application.
"""

from expense_bot.models.expense import (
    DEFAULT_STORES,
    ExpenseRecord,
    InboundMessage,
    Store,
    build_store_table,
)

__all__ = ["DEFAULT_STORES", "ExpenseRecord", "InboundMessage", "Store", "build_store_table"]

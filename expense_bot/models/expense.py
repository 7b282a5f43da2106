"""
Expense-related data models.

This module contains data models for stores, inbound messages and the
records written to the ledger.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Tuple

from expense_bot.errors import ConfigurationError


@dataclass(frozen=True)
class Store:
    """Merchant profile addressed by a message shortcut."""
    location: str
    name: str
    category: str
    shortcut: str


@dataclass(frozen=True)
class InboundMessage:
    """Text of a single chat message received by the webhook."""
    text: str


@dataclass(frozen=True)
class ExpenseRecord:
    """Model for one purchase appended to the ledger."""
    date: date
    location: str
    name: str
    category: str
    price: Decimal

    @classmethod
    def for_store(cls, store: Store, price: Decimal, on: date) -> "ExpenseRecord":
        return cls(
            date=on,
            location=store.location,
            name=store.name,
            category=store.category,
            price=price,
        )

    def to_row(self) -> List[str]:
        """
        Convert the record to a spreadsheet row.

        Returns:
            ``[date, location, name, category, price]`` with the date as
            YYYY-MM-DD and the price as its decimal string
        """
        return [
            self.date.strftime('%Y-%m-%d'),
            self.location,
            self.name,
            self.category,
            str(self.price),
        ]


DEFAULT_STORES: Tuple[Store, ...] = (
    Store("Lonsdale, North Vancouver", "Persia Foods", "vegetable & fruit", "P"),
    Store("North Vancouver", "Taiwan", "lunch", "TW"),
    Store("North Vancouver", "Save on Foods", "food", "SF"),
    Store("North Vancouver", "T&T Supermarket", "food", "TT"),
    Store("North Vancouver", "Shoppers", "food", "SP"),
)


def build_store_table(stores: Iterable[Store]) -> Tuple[Store, ...]:
    """
    Validate and freeze a store table.

    Table order is match priority, so shortcuts must be unique and no
    shortcut may be a prefix of another.

    Args:
        stores: Stores in priority order

    Returns:
        Tuple of stores in the given order

    Raises:
        ConfigurationError: If a shortcut is empty, duplicated or overlaps
    """
    table = tuple(stores)
    if not table:
        raise ConfigurationError("Store table is empty")

    for store in table:
        if not store.shortcut or store.shortcut != store.shortcut.strip() or " " in store.shortcut:
            raise ConfigurationError(f"Invalid shortcut for store {store.name!r}: {store.shortcut!r}")

    for i, first in enumerate(table):
        for second in table[i + 1:]:
            if first.shortcut == second.shortcut:
                raise ConfigurationError(f"Duplicate shortcut: {first.shortcut!r}")
            if second.shortcut.startswith(first.shortcut) or first.shortcut.startswith(second.shortcut):
                raise ConfigurationError(
                    f"Shortcut {first.shortcut!r} overlaps with {second.shortcut!r}"
                )
    return table

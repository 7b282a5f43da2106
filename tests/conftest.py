# tests/conftest.py
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

import pytest

from expense_bot.bot import BotContext
from expense_bot.config import Config
from expense_bot.errors import LedgerError
from expense_bot.models import DEFAULT_STORES

TODAY = date(2024, 3, 9)


class FakeLedger:
    """In-memory ledger recording appended rows."""

    def __init__(self, prices: Optional[List[str]] = None, fail: bool = False):
        self.rows: List[List[str]] = []
        self.prices = prices or []
        self.fail = fail
        self.reads = 0

    def append_row(self, row: List[str]) -> None:
        if self.fail:
            raise LedgerError("spreadsheet unavailable")
        self.rows.append(row)

    def get_price_column(self) -> List[str]:
        self.reads += 1
        if self.fail:
            raise LedgerError("spreadsheet unavailable")
        return list(self.prices)


class RecordingSender:
    """Async send function that remembers every reply."""

    def __init__(self, result: bool = True):
        self.sent: List[Tuple[str, int, str]] = []
        self.result = result

    async def __call__(self, bot_token: str, chat_id: int, message: str) -> bool:
        self.sent.append((bot_token, chat_id, message))
        return self.result

    @property
    def replies(self) -> List[str]:
        return [message for _, _, message in self.sent]


@pytest.fixture
def ledger() -> FakeLedger:
    return FakeLedger()


@pytest.fixture
def sender() -> RecordingSender:
    return RecordingSender()


def make_context(ledger, sender, stores=DEFAULT_STORES) -> BotContext:
    """
    Helper to construct a BotContext with a fixed clock.
    """
    return BotContext(
        ledger=ledger,
        stores=tuple(stores),
        chat_id=188909374,
        bot_token="123:test-token",
        send_message_func=sender,
        today=lambda: TODAY,
    )


@pytest.fixture
def bot_context(ledger, sender) -> BotContext:
    return make_context(ledger, sender)


def make_config(**overrides) -> type:
    """
    Helper to build a Config subclass with the given settings.
    """
    settings = {
        "SPREADSHEET_ID": "sheet-id",
        "BOT_TOKEN": "123:test-token",
        "REPLY_CHAT_ID": 188909374,
        "SHEET_NAME": "Expenses",
        "GOOGLE_SERVICE_ACCOUNT_FILE": "",
        "SSL_CERT_FILE": "",
        "SSL_KEY_FILE": "",
        "HTTP_TIMEOUT": 5.0,
    }
    settings.update(overrides)
    return type("TestConfig", (Config,), settings)

# tests/test_parser.py
from __future__ import annotations

import json
from decimal import Decimal

import pytest

from expense_bot.bot.parser import normalize_keyword, parse_price, parse_update
from expense_bot.errors import InvalidPriceError, MalformedUpdateError


def test_parse_price_uses_last_token():
    assert parse_price("SP 12.50") == Decimal("12.50")
    assert parse_price("TW lunch with team 9") == Decimal("9")


def test_parse_price_single_token_is_zero():
    assert parse_price("SP") == Decimal("0")
    assert parse_price("") == Decimal("0")


@pytest.mark.parametrize(
    "text",
    [
        "SP abc",
        "SP -3",
        "SP NaN",
        "SP Infinity",
        "SP 1,50",
        "SP 1E+1000000",
        "SP 1e3",
        "SP .5",
        "SP 5.",
        "SP 1234567890123",
        "SP 1.23456",
        "SP ١٢",
    ],
)
def test_parse_price_rejects_invalid_tokens(text):
    with pytest.raises(InvalidPriceError) as excinfo:
        parse_price(text)
    assert excinfo.value.token == text.split()[-1]


def test_parse_price_accepts_plain_amounts():
    assert parse_price("SP 123456789012.5") == Decimal("123456789012.5")
    assert parse_price("SP 0.0001") == Decimal("0.0001")
    assert parse_price("SP 007") == Decimal("7")


def test_parse_update_extracts_text():
    body = json.dumps({"update_id": 1, "message": {"message_id": 7, "text": "SP 5"}})
    assert parse_update(body).text == "SP 5"
    assert parse_update(body.encode("utf-8")).text == "SP 5"
    assert parse_update({"message": {"text": "help"}}).text == "help"


@pytest.mark.parametrize("body", [None, "not json", b"\xff\xfe", "[]", '"SP 5"'])
def test_parse_update_rejects_malformed_bodies(body):
    with pytest.raises(MalformedUpdateError):
        parse_update(body)


@pytest.mark.parametrize(
    "update",
    [
        {"update_id": 2, "edited_message": {"text": "SP 5"}},
        {"message": {"photo": []}},
        {"message": {"text": 12}},
        {"message": {"text": ""}},
        {"message": "SP 5"},
    ],
)
def test_parse_update_ignores_updates_without_text(update):
    assert parse_update(json.dumps(update)) is None


def test_normalize_keyword():
    assert normalize_keyword("  ToTaL ") == "total"

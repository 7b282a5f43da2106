# tests/test_ledger.py
from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests
from gspread.exceptions import GSpreadException

from expense_bot.errors import LedgerError
from expense_bot.services.ledger import SheetsLedger


def _ledger(spreadsheet) -> SheetsLedger:
    return SheetsLedger(spreadsheet, "Expenses!A:E", "Expenses!E:E")


def test_append_row_uses_raw_values_append():
    spreadsheet = MagicMock()
    row = ["2024-03-09", "North Vancouver", "Shoppers", "food", "12.50"]

    _ledger(spreadsheet).append_row(row)

    spreadsheet.values_append.assert_called_once_with(
        "Expenses!A:E",
        params={"valueInputOption": "RAW"},
        body={"values": [row]},
    )


def test_get_price_column_flattens_values():
    spreadsheet = MagicMock()
    spreadsheet.values_get.return_value = {
        "range": "Expenses!E1:E4",
        "majorDimension": "ROWS",
        "values": [["3"], [], ["4.5"], ["10.25"]],
    }

    cells = _ledger(spreadsheet).get_price_column()

    spreadsheet.values_get.assert_called_once_with("Expenses!E:E")
    assert cells == ["3", "4.5", "10.25"]


def test_get_price_column_of_empty_sheet():
    spreadsheet = MagicMock()
    spreadsheet.values_get.return_value = {"range": "Expenses!E1:E1000", "majorDimension": "ROWS"}

    assert _ledger(spreadsheet).get_price_column() == []


@pytest.mark.parametrize(
    "error",
    [GSpreadException("quota"), requests.exceptions.ReadTimeout("slow")],
)
def test_append_failures_become_ledger_errors(error):
    spreadsheet = MagicMock()
    spreadsheet.values_append.side_effect = error

    with pytest.raises(LedgerError):
        _ledger(spreadsheet).append_row(["x"])


def test_read_failures_become_ledger_errors():
    spreadsheet = MagicMock()
    spreadsheet.values_get.side_effect = requests.exceptions.ConnectionError("down")

    with pytest.raises(LedgerError):
        _ledger(spreadsheet).get_price_column()

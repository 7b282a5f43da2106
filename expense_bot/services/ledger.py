"""
Spreadsheet ledger service.

This module appends expense rows to, and reads prices from, a Google
spreadsheet through gspread.
"""

import logging
from typing import List, Protocol

import requests
from google.auth.exceptions import GoogleAuthError
from gspread import Spreadsheet
from gspread.exceptions import GSpreadException

from expense_bot.errors import LedgerError

logger = logging.getLogger(__name__)

LEDGER_EXCEPTIONS = (GSpreadException, GoogleAuthError, requests.exceptions.RequestException)


class Ledger(Protocol):
    """Capability the command handlers need from the ledger."""

    def append_row(self, row: List[str]) -> None:
        ...

    def get_price_column(self) -> List[str]:
        ...


class SheetsLedger:
    """Ledger backed by a single sheet of a Google spreadsheet."""

    def __init__(self, spreadsheet: Spreadsheet, ledger_range: str, price_range: str):
        """
        Initialize the ledger.

        Args:
            spreadsheet: Authorized gspread spreadsheet
            ledger_range: Range rows are appended to, e.g. ``Sheet1!A:E``
            price_range: Single-column range holding prices, e.g. ``Sheet1!E:E``
        """
        self.spreadsheet = spreadsheet
        self.ledger_range = ledger_range
        self.price_range = price_range

    def append_row(self, row: List[str]) -> None:
        """
        Append one row with RAW value input.

        Raises:
            LedgerError: If the Sheets API call fails or times out
        """
        try:
            logger.debug(f"Appending row to {self.ledger_range}: {row}")
            self.spreadsheet.values_append(
                self.ledger_range,
                params={"valueInputOption": "RAW"},
                body={"values": [row]},
            )
            logger.info("Successfully appended row to spreadsheet")
        except LEDGER_EXCEPTIONS as e:
            logger.exception("Unable to append row to spreadsheet")
            raise LedgerError(f"Unable to append row: {e}") from e

    def get_price_column(self) -> List[str]:
        """
        Read every cell of the price column.

        Returns:
            Cell values as strings, top to bottom

        Raises:
            LedgerError: If the Sheets API call fails or times out
        """
        try:
            response = self.spreadsheet.values_get(self.price_range)
        except LEDGER_EXCEPTIONS as e:
            logger.exception("Unable to read prices from spreadsheet")
            raise LedgerError(f"Unable to read prices: {e}") from e

        cells: List[str] = []
        for row in response.get("values", []):
            if row:
                cells.append(str(row[0]))

        logger.info(f"Successfully retrieved {len(cells)} price cells from spreadsheet")
        return cells

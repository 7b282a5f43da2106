"""
Message parsing utilities.

This module handles parsing of webhook payloads and expense commands from
message text.
"""

import json
import re
from decimal import Decimal
from typing import Any, Optional, Union

from expense_bot.errors import InvalidPriceError, MalformedUpdateError
from expense_bot.models import InboundMessage

# Plain amounts only, e.g. "12", "12.50"; no signs, exponents or separators
PRICE_PATTERN = re.compile(r"[0-9]{1,12}(?:\.[0-9]{1,4})?")


def parse_update(body: Union[str, bytes, dict, None]) -> Optional[InboundMessage]:
    """
    Extract the inbound message from a Telegram webhook body.

    Args:
        body: Raw JSON body or an already decoded update

    Returns:
        InboundMessage holding ``message.text``, or None for updates that
        carry no text message (edits, stickers, photos, ...)

    Raises:
        MalformedUpdateError: If the body is not a JSON object
    """
    if body is None:
        raise MalformedUpdateError("Empty request body")

    if isinstance(body, (str, bytes)):
        try:
            update: Any = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedUpdateError(f"Invalid JSON in request body: {e}") from e
    else:
        update = body

    if not isinstance(update, dict):
        raise MalformedUpdateError("Update is not a JSON object")

    message = update.get("message")
    if not isinstance(message, dict):
        return None

    text = message.get("text")
    if not isinstance(text, str) or not text:
        return None

    return InboundMessage(text=text)


def parse_price(message_text: str) -> Decimal:
    """
    Parse the price from the last token of an expense command.

    Args:
        message_text: Message text from Telegram

    Returns:
        The price, or 0 when the message is a single token

    Raises:
        InvalidPriceError: If the trailing token is not a plain non-negative
            decimal of at most 12 integer and 4 fractional digits

    Examples:
        >>> parse_price("SP 12.50")
        Decimal('12.50')
        >>> parse_price("SP")
        Decimal('0')
    """
    parts = message_text.split()
    if len(parts) <= 1:
        return Decimal("0")

    token = parts[-1]
    if not PRICE_PATTERN.fullmatch(token):
        raise InvalidPriceError(token)
    return Decimal(token)


def normalize_keyword(message_text: str) -> str:
    """Normalize message text for case-insensitive keyword comparison."""
    return message_text.strip().lower()

"""
Application assembly.

Builds the bot context from configuration. Everything that can fail because
of missing credentials or settings fails here, at startup.
"""

import logging
from typing import Iterable, Optional

from expense_bot.bot.context import BotContext
from expense_bot.bot.router import build_routes
from expense_bot.config import Config, config as default_config
from expense_bot.errors import ConfigurationError
from expense_bot.models import DEFAULT_STORES, Store, build_store_table
from expense_bot.services import SheetsLedger, get_sheets_client, send_message
from expense_bot.services.ledger import LEDGER_EXCEPTIONS

logger = logging.getLogger(__name__)


def create_bot_context(
    config: Optional[Config] = None,
    stores: Iterable[Store] = DEFAULT_STORES,
) -> BotContext:
    """
    Validate configuration and build the bot context.

    Args:
        config: Application configuration, the global config by default
        stores: Store table in match priority order

    Returns:
        Ready-to-use BotContext

    Raises:
        ConfigurationError: If settings, credentials or the store table are invalid
    """
    config = config or default_config
    config.validate()
    store_table = build_store_table(stores)

    client = get_sheets_client(config)
    try:
        spreadsheet = client.open_by_key(config.SPREADSHEET_ID)
    except LEDGER_EXCEPTIONS + (PermissionError,) as e:
        raise ConfigurationError(f"Unable to open spreadsheet {config.SPREADSHEET_ID}: {e}") from e

    ledger = SheetsLedger(spreadsheet, config.ledger_range(), config.price_range())
    logger.info(
        f"Bot ready: {len(store_table)} stores, ledger {config.ledger_range()}, "
        f"replies to chat_id {config.REPLY_CHAT_ID}"
    )
    return BotContext(
        ledger=ledger,
        stores=store_table,
        chat_id=config.REPLY_CHAT_ID,
        bot_token=config.BOT_TOKEN,
        send_message_func=send_message,
        routes=tuple(build_routes(store_table)),
    )

#!/usr/bin/env python3
"""
AWS Lambda entry point for the expense bot webhook.

Point an API Gateway proxy integration at ``aws_lambda.lambda_handler`` and
register its URL as the Telegram webhook.

Required Environment Variables:
    - SPREADSHEET_ID: Google spreadsheet the expenses are appended to
    - BOT_TOKEN: Telegram bot token
    - GOOGLE_SERVICE_ACCOUNT_FILE: Service account key (Lambda cannot run the browser OAuth flow)
"""

import json
import logging
from http import HTTPStatus
from typing import Optional

from expense_bot.app import create_bot_context
from expense_bot.bot import BotContext
from expense_bot.config import configure_logging
from expense_bot.errors import ConfigurationError
from expense_bot.webhook import lambda_handler_for

configure_logging()
logger = logging.getLogger(__name__)

_bot_context: Optional[BotContext] = None


def get_bot_context() -> BotContext:
    """Build the bot context on the first invocation and reuse it while the container is warm."""
    global _bot_context
    if _bot_context is None:
        _bot_context = create_bot_context()
    return _bot_context


def lambda_handler(event, context):
    try:
        bot_context = get_bot_context()
    except ConfigurationError as e:
        logger.error(f"Configuration validation failed: {e}")
        return {
            "statusCode": int(HTTPStatus.INTERNAL_SERVER_ERROR),
            "headers": {
                "Content-Type": "application/json"
            },
            "body": json.dumps({"ok": False, "error": str(e)}),
        }
    return lambda_handler_for(bot_context, event)

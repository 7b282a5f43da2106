"""
Telegram bot client service.

This module provides functionality for sending messages via Telegram bot API.
"""

import logging

from telegram import Bot
from telegram.error import TelegramError

from expense_bot.config import config

logger = logging.getLogger(__name__)


async def send_message(bot_token: str, user_id: int, message: str) -> bool:
    """
    Send a message to a user via Telegram bot.

    Replies are plain text; the HTTP layer of the client encodes them.

    Args:
        bot_token: Telegram bot token
        user_id: Telegram user ID to send message to
        message: Message text to send

    Returns:
        True if message sent successfully, False otherwise
    """
    timeout = config.HTTP_TIMEOUT
    try:
        async with Bot(token=bot_token) as bot:
            await bot.send_message(
                chat_id=user_id,
                text=message,
                connect_timeout=timeout,
                read_timeout=timeout,
                write_timeout=timeout,
                pool_timeout=timeout,
            )

        logger.info(f"Successfully sent message to user {user_id}")
        return True

    except TelegramError as e:
        logger.error(f"Telegram error sending message to user {user_id}: {e}")
        return False
    except Exception as e:
        logger.error(f"Error sending message to user {user_id}: {e}")
        return False

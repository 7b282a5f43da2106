"""
Command routing logic.

This module classifies message text against an ordered list of routes and
sends the resulting reply to the configured chat.
"""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, List, Sequence

from expense_bot.bot.commands import (
    handle_help_command,
    handle_record_command,
    handle_total_command,
    handle_unknown_command,
)
from expense_bot.bot.context import BotContext
from expense_bot.bot.messages import get_cant_process_message, get_ledger_error_message
from expense_bot.bot.parser import normalize_keyword
from expense_bot.errors import DependencyError, RequestError
from expense_bot.models import Store

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    """A named (predicate, action) pair; the first matching route wins."""
    name: str
    matches: Callable[[str], bool]
    action: Callable[[BotContext, str], str]


def _starts_with(shortcut: str, message_text: str) -> bool:
    return message_text.startswith(shortcut)


def _is_keyword(keyword: str, message_text: str) -> bool:
    return normalize_keyword(message_text) == keyword


def _record_action(store: Store) -> Callable[[BotContext, str], str]:
    def action(context: BotContext, message_text: str) -> str:
        return handle_record_command(context, store, message_text)
    return action


def build_routes(stores: Sequence[Store]) -> List[Route]:
    """
    Build the dispatch table for a store table.

    Store shortcuts are matched case-sensitively as message prefixes, in
    table order. The ``total`` and ``help`` keywords follow and are matched
    case-insensitively against the whole message.

    Args:
        stores: Validated store table

    Returns:
        Routes in priority order
    """
    routes = [
        Route(
            name=f"store:{store.shortcut}",
            matches=partial(_starts_with, store.shortcut),
            action=_record_action(store),
        )
        for store in stores
    ]
    routes.append(Route(
        name="total",
        matches=partial(_is_keyword, "total"),
        action=lambda context, _text: handle_total_command(context),
    ))
    routes.append(Route(
        name="help",
        matches=partial(_is_keyword, "help"),
        action=lambda context, _text: handle_help_command(context),
    ))
    return routes


def route_message(context: BotContext, message_text: str) -> str:
    """
    Classify a message and run the matching command.

    Args:
        context: Bot dependencies
        message_text: Message text from user

    Returns:
        Reply text

    Raises:
        RequestError: If the message cannot be processed
        DependencyError: If the ledger call fails
    """
    for route in context.routes:
        if route.matches(message_text):
            logger.debug(f"Message matched route {route.name}")
            return route.action(context, message_text)
    return handle_unknown_command(context, message_text)


async def process_message(context: BotContext, message_text: str) -> bool:
    """
    Process a message and send exactly one reply to the configured chat.

    Errors never propagate to the caller; they are reported through the
    reply instead.

    Args:
        context: Bot dependencies
        message_text: Message text from user

    Returns:
        True if the message was processed without error, False otherwise
    """
    success = False
    try:
        reply = route_message(context, message_text)
        success = True
    except RequestError as e:
        logger.warning(f"Cannot process message {message_text!r}: {e}")
        reply = get_cant_process_message()
    except DependencyError as e:
        logger.error(f"Ledger failure while processing {message_text!r}: {e}")
        reply = get_ledger_error_message()
    except Exception:
        logger.exception(f"Error processing message {message_text!r}")
        reply = get_cant_process_message()

    sent = await context.send_message_func(context.bot_token, context.chat_id, reply)
    if not sent:
        logger.warning(f"Reply to chat_id {context.chat_id} was not delivered")
    return success

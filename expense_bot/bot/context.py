"""
Dependencies shared by the command handlers.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Awaitable, Callable, Tuple

from expense_bot.models import Store
from expense_bot.services.ledger import Ledger

if TYPE_CHECKING:
    # Avoid circular imports
    from expense_bot.bot.router import Route

SendMessageFunc = Callable[[str, int, str], Awaitable[bool]]


@dataclass(frozen=True)
class BotContext:
    """
    Everything a request needs, built once at startup.

    Attributes:
        ledger: Spreadsheet the expenses are appended to
        stores: Validated store table in match priority order
        chat_id: Telegram chat every reply is sent to
        bot_token: Telegram bot token
        send_message_func: Function to send messages (bot_token, chat_id, message)
        today: Clock used to date new records
        routes: Dispatch table, built from ``stores`` when not given
    """
    ledger: Ledger
    stores: Tuple[Store, ...]
    chat_id: int
    bot_token: str
    send_message_func: SendMessageFunc
    today: Callable[[], date] = field(default=date.today)
    routes: Tuple["Route", ...] = ()

    def __post_init__(self):
        if not self.routes:
            from expense_bot.bot.router import build_routes

            object.__setattr__(self, "routes", tuple(build_routes(self.stores)))

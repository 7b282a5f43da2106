"""
Run the expense bot webhook server.

Usage:
    python -m expense_bot
"""

import logging
import sys

from expense_bot.app import create_bot_context
from expense_bot.config import config, configure_logging
from expense_bot.errors import ConfigurationError
from expense_bot.server import create_server

logger = logging.getLogger(__name__)


def main() -> int:
    configure_logging()
    try:
        bot_context = create_bot_context(config)
        server = create_server(bot_context, config)
    except ConfigurationError as e:
        logger.error(f"Configuration validation failed: {e}")
        return 1
    except OSError as e:
        logger.error(f"Unable to start webhook server: {e}")
        return 1

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        server.server_close()
    return 0


if __name__ == "__main__":
    sys.exit(main())

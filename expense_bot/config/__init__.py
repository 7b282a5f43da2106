"""
Configuration module.

This module provides configuration management for the application.
"""

import logging
import sys
from typing import Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from expense_bot.config.settings import Config

# Create a global config instance
config = Config()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for an entry point."""
    logging.basicConfig(
        level=(level or config.LOG_LEVEL).upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
        force=True,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


__all__ = ["Config", "config", "configure_logging"]

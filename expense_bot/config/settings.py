"""
Application settings and configuration.

This module defines the configuration class for managing environment variables.
"""

import os

from expense_bot.errors import ConfigurationError

DEFAULT_TOKEN_FILE = os.path.join(
    os.path.expanduser("~"),
    ".credentials",
    "sheets.googleapis.com-python-quickstart.json",
)


class Config:
    """Configuration class for managing environment variables."""

    SPREADSHEET_ID: str = os.getenv("SPREADSHEET_ID", "")
    BOT_TOKEN: str = os.getenv("BOT_TOKEN", "")
    REPLY_CHAT_ID: int = int(os.getenv("REPLY_CHAT_ID", "188909374"))
    SHEET_NAME: str = os.getenv("SHEET_NAME", "工作表1")

    GOOGLE_CLIENT_SECRET_FILE: str = os.getenv("GOOGLE_CLIENT_SECRET_FILE", "client_secret.json")
    GOOGLE_TOKEN_FILE: str = os.getenv("GOOGLE_TOKEN_FILE", DEFAULT_TOKEN_FILE)
    GOOGLE_SERVICE_ACCOUNT_FILE: str = os.getenv("GOOGLE_SERVICE_ACCOUNT_FILE", "")

    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "10"))

    WEBHOOK_PATH: str = os.getenv("WEBHOOK_PATH", "/telegramBot")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8443"))
    SSL_CERT_FILE: str = os.getenv("SSL_CERT_FILE", "")
    SSL_KEY_FILE: str = os.getenv("SSL_KEY_FILE", "")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration.

        Checks that all required environment variables are set and that the
        TLS settings come as a pair.

        Returns:
            True if validation succeeds

        Raises:
            ConfigurationError: If any required settings are missing
        """
        required = ["SPREADSHEET_ID", "BOT_TOKEN"]
        missing = [var for var in required if not getattr(cls, var)]
        if missing:
            raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")
        if bool(cls.SSL_CERT_FILE) != bool(cls.SSL_KEY_FILE):
            raise ConfigurationError("SSL_CERT_FILE and SSL_KEY_FILE must be set together")
        if cls.HTTP_TIMEOUT <= 0:
            raise ConfigurationError("HTTP_TIMEOUT must be positive")
        return True

    @classmethod
    def ledger_range(cls) -> str:
        """Range rows are appended to: date, location, name, category, price."""
        return f"{cls.SHEET_NAME}!A:E"

    @classmethod
    def price_range(cls) -> str:
        """Single-column range holding the recorded prices."""
        return f"{cls.SHEET_NAME}!E:E"

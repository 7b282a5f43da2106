"""
Google Sheets authorization.

Two credential providers are supported: an installed-app OAuth flow whose
token is cached in a local file, and a service account key file.
"""

import logging
import os
from typing import Callable, Dict

import gspread
from google.auth.exceptions import GoogleAuthError

from expense_bot.config import Config
from expense_bot.errors import ConfigurationError

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


def oauth_client(config: Config) -> gspread.Client:
    """
    Authorize with the installed-app OAuth flow.

    The first run opens a browser for consent and caches the token under
    ``GOOGLE_TOKEN_FILE``; later runs reuse the cached token.
    """
    if not os.path.exists(config.GOOGLE_CLIENT_SECRET_FILE):
        raise ConfigurationError(f"Unable to read client secret file: {config.GOOGLE_CLIENT_SECRET_FILE}")

    token_dir = os.path.dirname(config.GOOGLE_TOKEN_FILE)
    if token_dir:
        os.makedirs(token_dir, mode=0o700, exist_ok=True)

    if not os.path.exists(config.GOOGLE_TOKEN_FILE):
        logger.info(f"No cached token, saving credential file to: {config.GOOGLE_TOKEN_FILE}")

    return gspread.oauth(
        scopes=SCOPES,
        credentials_filename=config.GOOGLE_CLIENT_SECRET_FILE,
        authorized_user_filename=config.GOOGLE_TOKEN_FILE,
    )


def service_account_client(config: Config) -> gspread.Client:
    """Authorize with a service account key file."""
    if not os.path.exists(config.GOOGLE_SERVICE_ACCOUNT_FILE):
        raise ConfigurationError(
            f"Unable to read service account file: {config.GOOGLE_SERVICE_ACCOUNT_FILE}"
        )
    return gspread.service_account(filename=config.GOOGLE_SERVICE_ACCOUNT_FILE, scopes=SCOPES)


CREDENTIAL_PROVIDERS: Dict[str, Callable[[Config], gspread.Client]] = {
    "oauth": oauth_client,
    "service_account": service_account_client,
}


def get_sheets_client(config: Config) -> gspread.Client:
    """
    Build an authorized gspread client with the configured timeout.

    Args:
        config: Application configuration

    Returns:
        gspread client

    Raises:
        ConfigurationError: If credentials are missing or rejected
    """
    provider = "service_account" if config.GOOGLE_SERVICE_ACCOUNT_FILE else "oauth"
    try:
        client = CREDENTIAL_PROVIDERS[provider](config)
    except (GoogleAuthError, ValueError, OSError) as e:
        raise ConfigurationError(f"Unable to authorize Google Sheets client: {e}") from e

    client.set_timeout(config.HTTP_TIMEOUT)
    logger.info(f"Google Sheets client initialized using {provider} credentials")
    return client

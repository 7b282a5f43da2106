"""
Exception hierarchy.

Request-level errors are reported back to the caller of a single webhook
request, dependency-level errors wrap failures of the ledger service, and
configuration errors are raised while the bot is being built at startup.
"""


class ExpenseBotError(Exception):
    """Base class for all bot errors."""


class RequestError(ExpenseBotError):
    """The inbound request itself cannot be processed."""


class MalformedUpdateError(RequestError):
    """Webhook body is not valid JSON or lacks ``message.text``."""


class InvalidPriceError(RequestError):
    """Trailing price token is not a non-negative decimal."""

    def __init__(self, token: str):
        super().__init__(f"Invalid price: {token!r}")
        self.token = token


class DependencyError(ExpenseBotError):
    """A remote service call failed."""


class LedgerError(DependencyError):
    """Reading from or appending to the spreadsheet failed."""


class ConfigurationError(ExpenseBotError):
    """Missing or invalid configuration detected at startup."""

"""
Standalone webhook server.

Serves the Telegram webhook on a single path over HTTP, or HTTPS when a
certificate and key are configured.
"""

import logging
import ssl
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Optional

from expense_bot.bot import BotContext
from expense_bot.config import Config
from expense_bot.webhook import handle_webhook_update

logger = logging.getLogger(__name__)


class WebhookRequestHandler(BaseHTTPRequestHandler):
    """Request handler bound to a bot context by ``make_handler``."""

    bot_context: BotContext
    webhook_path: str = "/telegramBot"

    def do_POST(self):
        if self.path.split("?", 1)[0] != self.webhook_path:
            self._send(HTTPStatus.NOT_FOUND)
            return

        try:
            content_length = int(self.headers.get("Content-Length", 0))
        except ValueError:
            self._send(HTTPStatus.BAD_REQUEST, "Invalid Content-Length")
            return
        body = self.rfile.read(content_length)

        event = {
            "httpMethod": "POST",
            "path": self.path,
            "body": body,
        }
        response = handle_webhook_update(event, self.bot_context)
        self._send(HTTPStatus(response["statusCode"]), response.get("body", ""))

    def do_GET(self):
        self._send(HTTPStatus.METHOD_NOT_ALLOWED)

    def _send(self, status: HTTPStatus, body: str = ""):
        payload = body.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        if payload:
            self.wfile.write(payload)

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)


def make_handler(bot_context: BotContext, webhook_path: str) -> type:
    """Create a request handler class bound to the given context and path."""
    return type(
        "BoundWebhookRequestHandler",
        (WebhookRequestHandler,),
        {"bot_context": bot_context, "webhook_path": webhook_path},
    )


def create_server(bot_context: BotContext, config: Config) -> ThreadingHTTPServer:
    """
    Create the webhook server, wrapping its socket in TLS when configured.

    Args:
        bot_context: Bot dependencies
        config: Application configuration

    Returns:
        Bound server, not yet serving
    """
    server = ThreadingHTTPServer((config.HOST, config.PORT), make_handler(bot_context, config.WEBHOOK_PATH))
    ssl_context: Optional[ssl.SSLContext] = None
    if config.SSL_CERT_FILE:
        ssl_context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
        ssl_context.load_cert_chain(config.SSL_CERT_FILE, config.SSL_KEY_FILE)
        server.socket = ssl_context.wrap_socket(server.socket, server_side=True)

    scheme = "https" if ssl_context else "http"
    logger.info(f"Listening on {scheme}://{config.HOST}:{config.PORT}{config.WEBHOOK_PATH}")
    return server

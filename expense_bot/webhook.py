"""
Webhook handling for API Gateway style events.

The standalone HTTP server and the AWS Lambda entry point both translate
their requests into an event dict and call ``handle_webhook_update``.
"""

import asyncio
import base64
import logging
from http import HTTPStatus
from typing import Any, Dict, Optional

from expense_bot.bot import BotContext, parse_update, process_message
from expense_bot.errors import MalformedUpdateError

logger = logging.getLogger(__name__)


def _response(status: HTTPStatus, body: str = "") -> Dict[str, Any]:
    return {
        "statusCode": int(status),
        "headers": {
            "Content-Type": "text/plain; charset=utf-8"
        },
        "body": body,
    }


def _is_api_gateway_event(event: Dict[str, Any]) -> bool:
    """
    Check if the event is from API Gateway.

    Args:
        event: Lambda event object

    Returns:
        True if event is from API Gateway, False otherwise
    """
    return (
        "httpMethod" in event or
        "requestContext" in event or
        ("path" in event and "body" in event)
    )


def _get_body(event: Dict[str, Any]) -> Optional[Any]:
    # Try standard location first, then fallback to requestContext.body for custom setups
    body = event.get("body")
    if body is None:
        body = event.get("requestContext", {}).get("body")
    if body is not None and event.get("isBase64Encoded"):
        try:
            body = base64.b64decode(body, validate=True)
        except (ValueError, TypeError) as e:
            raise MalformedUpdateError(f"Invalid base64 request body: {e}") from e
    return body


def handle_webhook_update(event: Dict[str, Any], context: BotContext) -> Dict[str, Any]:
    """
    Handle webhook update from API Gateway.

    Once the body has been parsed the update is acknowledged with 202, even
    when processing failed; failures are reported to the user through the
    reply, and a non-2xx answer would make Telegram deliver the update again.

    Args:
        event: API Gateway event object
        context: Bot dependencies

    Returns:
        API Gateway response dictionary
    """
    try:
        message = parse_update(_get_body(event))
    except MalformedUpdateError as e:
        logger.warning(f"Rejecting webhook update: {e}")
        return _response(HTTPStatus.BAD_REQUEST, str(e))

    if message is None:
        # Return 2xx to acknowledge webhook
        logger.info("Webhook update does not contain a text message, ignoring")
        return _response(HTTPStatus.ACCEPTED)

    try:
        logger.info(f"Processing webhook update: text={message.text}")
        success = asyncio.run(process_message(context, message.text))
    except Exception:
        logger.exception("Error handling webhook update")
        return _response(HTTPStatus.INTERNAL_SERVER_ERROR)

    if not success:
        logger.warning(f"Message {message.text!r} was not processed")
    return _response(HTTPStatus.ACCEPTED)


def lambda_handler_for(context: BotContext, event: Dict[str, Any]) -> Dict[str, Any]:
    """Route a Lambda event, rejecting anything that is not a webhook call."""
    if not _is_api_gateway_event(event):
        logger.warning("Unknown event type - expected an API Gateway webhook call")
        return _response(HTTPStatus.BAD_REQUEST, "Unsupported event")
    return handle_webhook_update(event, context)

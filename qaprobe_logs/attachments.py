"""
Request/response evidence helpers shared by the API suite.

Every helper logs through the standard logger and, when a sink is given,
records the same content as a named attachment.
"""

import json
import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 63


def log_test_start(test_name: str) -> None:
    logger.info(SEPARATOR)
    logger.info(f"Starting test: {test_name}")
    logger.info(SEPARATOR)


def _as_text(body: Any) -> str:
    if body is None:
        return "{}"
    if isinstance(body, str):
        return body
    if hasattr(body, "to_payload"):
        body = body.to_payload()
    try:
        return json.dumps(body, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(body)


def attach_request_body(sink, body: Any) -> str:
    """Attach the request payload as "Request Body"; returns the text attached"""
    text = _as_text(body)
    logger.info(f"Request Body: {text}")
    if sink is not None:
        sink.attach("Request Body", text)
    return text


def attach_response_body(sink, response: Optional[Any]) -> str:
    """Attach the response text as "Response Body"; "{}" for a missing response"""
    if response is None:
        logger.info("Response is null")
        text = "{}"
    else:
        text = getattr(response, "text", None) or "{}"
        logger.info(f"Response Body: {text}")
    if sink is not None:
        sink.attach("Response Body", text)
    return text


def attach_error_message(sink, message: str) -> str:
    logger.error(f"Error: {message}")
    if sink is not None:
        sink.attach("Error Message", message)
    return message

"""Turns domain errors that reach a handler into an error page or JSON body."""

import functools
import logging
from collections.abc import Callable
from typing import Any

from core.errors import (
    AuthenticationError,
    SessionError,
    TripStoreError,
    TumapsError,
    ValidationError,
)
from core.web.http import html_response, json_response
from core.web.templates import render

logger = logging.getLogger(__name__)

Handler = Callable[[dict[str, Any], object], dict[str, Any]]

_STATUS_CODES: list[tuple[type[TumapsError], int]] = [
    (ValidationError, 400),
    (AuthenticationError, 401),
    (TripStoreError, 502),
    (SessionError, 503),
]


def status_for(error: TumapsError) -> int:
    for error_type, status in _STATUS_CODES:
        if isinstance(error, error_type):
            return status
    return 500


def handle_errors(as_json: bool = False) -> Callable[[Handler], Handler]:
    """Catch TumapsError at the handler edge and render its user_message."""

    def decorator(func: Handler) -> Handler:
        @functools.wraps(func)
        def wrapper(event: dict[str, Any], context: object) -> dict[str, Any]:
            try:
                return func(event, context)
            except TumapsError as e:
                status = status_for(e)
                if status >= 500:
                    logger.exception("%s failed: %s", func.__module__, e.code.value)
                else:
                    logger.info("%s rejected request: %s", func.__module__, e.code.value)
                if as_json:
                    return json_response({"error": e.code.value, "message": e.user_message}, status_code=status)
                body = render("error.html", message=e.user_message, back_href="/")
                return html_response(body, status_code=status)

        return wrapper

    return decorator

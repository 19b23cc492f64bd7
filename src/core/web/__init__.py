"""HTTP glue: API Gateway events in, HTML/JSON responses out."""

from core.web.http import (
    Request,
    clear_session_cookie,
    html_response,
    json_response,
    parse_request,
    redirect,
    session_cookie,
)
from core.web.edge import handle_errors
from core.web.session import current_session, redirect_to_login
from core.web.templates import render

__all__ = [
    "Request",
    "clear_session_cookie",
    "current_session",
    "handle_errors",
    "html_response",
    "json_response",
    "parse_request",
    "redirect",
    "redirect_to_login",
    "render",
    "session_cookie",
]

"""GET/POST /login: email/password sign in and sign up against the hosted auth service."""

import asyncio
import logging
from typing import Any

from core.auth import get_auth_provider
from core.clients import get_dynamo_client
from core.config import get_config
from core.errors import AuthenticationError, ErrorCode, USER_MESSAGES
from core.services.session import store_session
from core.web import (
    Request,
    current_session,
    handle_errors,
    html_response,
    parse_request,
    redirect,
    render,
    session_cookie,
)

logger = logging.getLogger(__name__)

SIGN_IN = "signin"
SIGN_UP = "signup"

CONFIRM_EMAIL_NOTICE = "Account created. Check your email to confirm it, then sign in."


def _mode(value: str | None) -> str:
    return SIGN_UP if value == SIGN_UP else SIGN_IN


def _page(
    mode: str,
    email: str = "",
    error: str | None = None,
    notice: str | None = None,
    status: int = 200,
) -> dict[str, Any]:
    body = render(
        "login.html",
        mode=mode,
        is_sign_up=mode == SIGN_UP,
        email=email,
        error=error,
        notice=notice,
    )
    return html_response(body, status_code=status)


def _submit(request: Request) -> dict[str, Any]:
    config = get_config()
    mode = _mode(request.form.get("mode"))
    email = request.form.get("email", "").strip()
    password = request.form.get("password", "")
    confirm_password = request.form.get("confirm_password", "")

    if not email or not password:
        return _page(mode, email, error=USER_MESSAGES[ErrorCode.MISSING_CREDENTIALS], status=400)
    if mode == SIGN_UP and password != confirm_password:
        return _page(mode, email, error=USER_MESSAGES[ErrorCode.PASSWORDS_DO_NOT_MATCH], status=400)

    provider = get_auth_provider()
    try:
        if mode == SIGN_UP:
            auth_session = asyncio.run(provider.sign_up(email, password))
        else:
            auth_session = asyncio.run(provider.sign_in(email, password))
    except AuthenticationError as e:
        logger.info("%s rejected: %s", mode, e.code.value)
        return _page(mode, email, error=e.user_message, status=400 if mode == SIGN_UP else 401)

    if auth_session is None:
        logger.info("Sign up pending email confirmation")
        return _page(SIGN_IN, email, notice=CONFIRM_EMAIL_NOTICE)

    session_id = store_session(auth_session, get_dynamo_client(), config.sessions_table, config.session_ttl_seconds)
    logger.info("Signed in user %s", auth_session.user.user_id)
    return redirect("/dashboard", cookies=[session_cookie(config, session_id)])


@handle_errors()
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    config = get_config()
    request = parse_request(event)

    if request.method == "POST":
        return _submit(request)

    if current_session(request, config) is not None:
        return redirect("/dashboard")
    return _page(_mode(request.query.get("mode")))

"""Session lookup for page handlers."""

import asyncio

from core.auth import get_auth_provider
from core.auth.interface import AuthSession
from core.clients import get_dynamo_client
from core.config import Config
from core.services.session import resolve_session
from core.web.http import Request, clear_session_cookie, redirect


def current_session(request: Request, config: Config) -> AuthSession | None:
    """Resolve the session cookie to a live hosted session, refreshing tokens if needed."""
    session_id = request.cookies.get(config.session_cookie_name)
    if not session_id:
        return None
    return asyncio.run(
        resolve_session(session_id, get_auth_provider(), get_dynamo_client(), config.sessions_table)
    )


def redirect_to_login(request: Request, config: Config) -> dict[str, object]:
    """Send an unauthenticated visitor to /login, dropping a stale cookie if one was sent."""
    cookies = [clear_session_cookie(config)] if config.session_cookie_name in request.cookies else None
    return redirect("/login", cookies=cookies)

"""POST /logout: end the session at the auth service and locally."""

import asyncio
import logging
from typing import Any

from core.auth import get_auth_provider
from core.clients import get_dynamo_client
from core.config import get_config
from core.services.session import delete_session, load_session
from core.web import clear_session_cookie, handle_errors, parse_request, redirect

logger = logging.getLogger(__name__)


@handle_errors()
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    """Always ends at /login with the cookie cleared, even if revocation fails."""
    config = get_config()
    request = parse_request(event)
    session_id = request.cookies.get(config.session_cookie_name)

    if session_id:
        try:
            dynamo_client = get_dynamo_client()
            auth_session = load_session(session_id, dynamo_client, config.sessions_table)
            if auth_session is not None:
                asyncio.run(get_auth_provider().sign_out(auth_session.access_token))
            delete_session(session_id, dynamo_client, config.sessions_table)
            logger.info("Signed out session %s", session_id[:8])
        except Exception:
            logger.exception("Failed to clean up session %s", session_id[:8])

    return redirect("/login", cookies=[clear_session_cookie(config)])

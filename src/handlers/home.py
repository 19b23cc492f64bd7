"""GET /: redirect on session presence."""

from typing import Any

from core.config import get_config
from core.web import current_session, handle_errors, parse_request, redirect, redirect_to_login


@handle_errors()
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    config = get_config()
    request = parse_request(event)

    if current_session(request, config) is not None:
        return redirect("/dashboard")
    return redirect_to_login(request, config)

"""GET /dashboard: signed-in landing page."""

from typing import Any

from core.config import get_config
from core.services.dashboard import build_dashboard
from core.web import current_session, handle_errors, html_response, parse_request, redirect_to_login, render


@handle_errors()
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    config = get_config()
    request = parse_request(event)

    auth_session = current_session(request, config)
    if auth_session is None:
        return redirect_to_login(request, config)

    dashboard = build_dashboard(auth_session.user)
    return html_response(render("dashboard.html", dashboard=dashboard))

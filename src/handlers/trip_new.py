"""GET/POST /trips/new: trip creation form."""

import logging
from typing import Any

from core.auth import AuthUser
from core.clients import get_supabase_client
from core.config import get_config
from core.errors import TripStoreError, ValidationError
from core.models.trip import TripFilter
from core.services.trips import TripRepository, parse_trip_form
from core.web import current_session, handle_errors, html_response, parse_request, redirect, redirect_to_login, render

logger = logging.getLogger(__name__)

STATUS_OPTIONS = [
    (option.value, option.value.replace("_", " ").capitalize()) for option in TripFilter if option is not TripFilter.ALL
]


def _form_page(
    user: AuthUser,
    form: dict[str, str] | None = None,
    field_errors: dict[str, str] | None = None,
    error: str | None = None,
    status: int = 200,
) -> dict[str, Any]:
    body = render(
        "trip_new.html",
        user=user,
        statuses=STATUS_OPTIONS,
        form=form or {},
        field_errors=field_errors or {},
        error=error,
    )
    return html_response(body, status_code=status)


@handle_errors()
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    config = get_config()
    request = parse_request(event)
    auth_session = current_session(request, config)
    if auth_session is None:
        return redirect_to_login(request, config)

    if request.method != "POST":
        return _form_page(auth_session.user)

    try:
        trip = parse_trip_form(request.form)
    except ValidationError as e:
        return _form_page(auth_session.user, request.form, e.field_errors, status=400)

    repository = TripRepository(get_supabase_client(), config.trips_table)
    try:
        repository.create_trip(auth_session.access_token, auth_session.user.user_id, trip)
    except TripStoreError as e:
        logger.exception("Could not save trip for user %s", auth_session.user.user_id)
        return _form_page(auth_session.user, request.form, error=e.user_message, status=502)

    return redirect("/trips")

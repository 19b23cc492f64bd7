"""API Gateway HTTP API (payload format 2.0) request parsing and response builders."""

import base64
import json
from http.cookies import CookieError, SimpleCookie
from typing import Any
from urllib.parse import parse_qs

from pydantic import BaseModel, ConfigDict, Field

from core.config import Config
from core.errors import ErrorCode, ValidationError


class Request(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: str
    path: str
    query: dict[str, str] = Field(default_factory=dict)
    path_params: dict[str, str] = Field(default_factory=dict)
    cookies: dict[str, str] = Field(default_factory=dict)
    form: dict[str, str] = Field(default_factory=dict)


def _parse_cookies(event: dict[str, Any]) -> dict[str, str]:
    raw_cookies: list[str] = list(event.get("cookies") or [])
    headers = {k.lower(): v for k, v in (event.get("headers") or {}).items()}
    if not raw_cookies and headers.get("cookie"):
        raw_cookies = headers["cookie"].split(";")

    cookies: dict[str, str] = {}
    for raw in raw_cookies:
        jar: SimpleCookie = SimpleCookie()
        try:
            jar.load(raw.strip())
        except CookieError:
            continue
        for name, morsel in jar.items():
            cookies[name] = morsel.value
    return cookies


def _parse_form(event: dict[str, Any]) -> dict[str, str]:
    body = event.get("body") or ""
    if not body:
        return {}
    if event.get("isBase64Encoded"):
        try:
            body = base64.b64decode(body).decode("utf-8")
        except (ValueError, UnicodeDecodeError) as e:
            raise ValidationError(f"Undecodable request body: {e}", code=ErrorCode.INVALID_REQUEST) from e
    # Last value wins for repeated fields
    return {key: values[-1] for key, values in parse_qs(body, keep_blank_values=True).items()}


def parse_request(event: dict[str, Any]) -> Request:
    http = event.get("requestContext", {}).get("http", {})
    method = str(http.get("method") or event.get("httpMethod") or "GET").upper()
    form = _parse_form(event) if method == "POST" else {}
    return Request(
        method=method,
        path=event.get("rawPath") or http.get("path") or "/",
        query=dict(event.get("queryStringParameters") or {}),
        path_params=dict(event.get("pathParameters") or {}),
        cookies=_parse_cookies(event),
        form=form,
    )


def html_response(body: str, status_code: int = 200, cookies: list[str] | None = None) -> dict[str, Any]:
    response: dict[str, Any] = {
        "statusCode": status_code,
        "headers": {"Content-Type": "text/html; charset=utf-8", "Cache-Control": "no-store"},
        "body": body,
    }
    if cookies:
        response["cookies"] = cookies
    return response


def json_response(payload: Any, status_code: int = 200) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json", "Cache-Control": "no-store"},
        "body": json.dumps(payload),
    }


def redirect(location: str, cookies: list[str] | None = None) -> dict[str, Any]:
    response: dict[str, Any] = {
        "statusCode": 302,
        "headers": {"Location": location, "Cache-Control": "no-store"},
        "body": "",
    }
    if cookies:
        response["cookies"] = cookies
    return response


def _cookie(config: Config, value: str, max_age: int) -> str:
    parts = [
        f"{config.session_cookie_name}={value}",
        "Path=/",
        f"Max-Age={max_age}",
        "HttpOnly",
        "SameSite=Lax",
    ]
    if not config.is_local:
        parts.append("Secure")
    return "; ".join(parts)


def session_cookie(config: Config, session_id: str) -> str:
    return _cookie(config, session_id, config.session_ttl_seconds)


def clear_session_cookie(config: Config) -> str:
    return _cookie(config, "", 0)

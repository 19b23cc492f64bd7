import logging
from time import time
from typing import Any

import jwt
from supabase import Client
from supabase_auth.errors import AuthError

from core.errors import AuthenticationError, ErrorCode

from .interface import AuthProvider, AuthSession, AuthUser

logger = logging.getLogger(__name__)

# Supabase Auth error codes that have a dedicated user-facing message.
_ERROR_CODES: dict[str, ErrorCode] = {
    "invalid_credentials": ErrorCode.INVALID_CREDENTIALS,
    "email_not_confirmed": ErrorCode.EMAIL_NOT_CONFIRMED,
    "user_already_exists": ErrorCode.USER_ALREADY_EXISTS,
    "email_exists": ErrorCode.USER_ALREADY_EXISTS,
    "weak_password": ErrorCode.WEAK_PASSWORD,
    "session_not_found": ErrorCode.INVALID_TOKEN,
    "refresh_token_not_found": ErrorCode.INVALID_TOKEN,
    "refresh_token_already_used": ErrorCode.INVALID_TOKEN,
    "bad_jwt": ErrorCode.INVALID_TOKEN,
}


def _error_code(error: AuthError, default: ErrorCode) -> ErrorCode:
    return _ERROR_CODES.get(str(getattr(error, "code", "") or ""), default)


def _to_auth_user(user: Any) -> AuthUser:
    metadata = dict(user.user_metadata) if user.user_metadata else {}
    email = user.email or ""
    return AuthUser(
        user_id=user.id,
        email=email,
        name=str(metadata.get("full_name") or metadata.get("name") or email.split("@")[0]),
        metadata={k: str(v) for k, v in metadata.items()},
    )


def _to_auth_session(session: Any) -> AuthSession:
    expires_at = session.expires_at or int(time()) + int(session.expires_in)
    return AuthSession(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_at=int(expires_at),
        user=_to_auth_user(session.user),
    )


class SupabaseAuthProvider(AuthProvider):
    """Email/password auth against Supabase Auth.

    The wrapped client must be created with ``persist_session=False``; every
    call passes tokens explicitly and nothing is kept between requests.
    """

    def __init__(self, client: Client):
        self._client = client

    async def sign_in(self, email: str, password: str) -> AuthSession:
        try:
            response = self._client.auth.sign_in_with_password({"email": email, "password": password})
        except AuthError as e:
            raise AuthenticationError(
                f"Sign in failed: {e.message}", code=_error_code(e, ErrorCode.AUTH_FAILED)
            ) from e
        if response.session is None:
            raise AuthenticationError("Sign in returned no session", code=ErrorCode.AUTH_FAILED)
        return _to_auth_session(response.session)

    async def sign_up(self, email: str, password: str) -> AuthSession | None:
        try:
            response = self._client.auth.sign_up({"email": email, "password": password})
        except AuthError as e:
            raise AuthenticationError(
                f"Sign up failed: {e.message}", code=_error_code(e, ErrorCode.AUTH_FAILED)
            ) from e
        if response.session is None:
            # Email confirmation pending
            return None
        return _to_auth_session(response.session)

    async def refresh_session(self, refresh_token: str) -> AuthSession:
        try:
            response = self._client.auth.refresh_session(refresh_token)
        except AuthError as e:
            raise AuthenticationError(
                f"Session refresh failed: {e.message}", code=_error_code(e, ErrorCode.INVALID_TOKEN)
            ) from e
        if response.session is None:
            raise AuthenticationError("Session refresh returned no session", code=ErrorCode.INVALID_TOKEN)
        return _to_auth_session(response.session)

    async def verify_token(self, token: str) -> AuthUser:
        try:
            response = self._client.auth.get_user(token)
        except AuthError as e:
            raise AuthenticationError(
                f"Token verification failed: {e.message}", code=ErrorCode.INVALID_TOKEN
            ) from e
        if response is None:
            raise AuthenticationError("Token verification failed: no user", code=ErrorCode.INVALID_TOKEN)
        return _to_auth_user(response.user)

    async def sign_out(self, access_token: str) -> None:
        """Revoke the session at Supabase. Failures are logged, never raised."""
        try:
            self._client.auth.admin.sign_out(access_token, "global")
        except AuthError as e:
            logger.warning("Supabase sign out failed: %s", e.message)

    async def decode_claims(self, token: str) -> dict[str, object]:
        """Decode JWT claims WITHOUT signature verification. For logging/routing only."""
        try:
            decoded: dict[str, object] = jwt.decode(token, options={"verify_signature": False})
            return decoded
        except jwt.InvalidTokenError as e:
            raise AuthenticationError(f"Invalid token: {e}", code=ErrorCode.INVALID_TOKEN) from e

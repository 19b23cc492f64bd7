from unittest.mock import MagicMock

import jwt
import pytest
from supabase_auth.errors import AuthError

from core.auth.interface import AuthSession, AuthUser
from core.auth.supabase_provider import SupabaseAuthProvider
from core.errors import AuthenticationError, ErrorCode


@pytest.fixture
def supabase_user():
    user = MagicMock()
    user.id = "user-123"
    user.email = "jane@example.com"
    user.user_metadata = {"full_name": "Jane Doe"}
    return user


@pytest.fixture
def supabase_session(supabase_user):
    session = MagicMock()
    session.access_token = "access"
    session.refresh_token = "refresh"
    session.expires_at = 2_000_000_000
    session.expires_in = 3600
    session.user = supabase_user
    return session


@pytest.fixture
def client():
    return MagicMock()


@pytest.mark.asyncio
async def test_sign_in_returns_session(client, supabase_session):
    client.auth.sign_in_with_password.return_value = MagicMock(session=supabase_session)
    provider = SupabaseAuthProvider(client)

    result = await provider.sign_in("jane@example.com", "secret")

    assert isinstance(result, AuthSession)
    assert result.access_token == "access"
    assert result.refresh_token == "refresh"
    assert result.expires_at == 2_000_000_000
    assert result.user.user_id == "user-123"
    assert result.user.name == "Jane Doe"
    client.auth.sign_in_with_password.assert_called_once_with({"email": "jane@example.com", "password": "secret"})


@pytest.mark.asyncio
async def test_sign_in_invalid_credentials(client):
    client.auth.sign_in_with_password.side_effect = AuthError("Invalid login credentials", "invalid_credentials")
    provider = SupabaseAuthProvider(client)

    with pytest.raises(AuthenticationError, match="Sign in failed") as exc_info:
        await provider.sign_in("jane@example.com", "wrong")

    assert exc_info.value.code == ErrorCode.INVALID_CREDENTIALS
    assert exc_info.value.user_message == "Invalid email or password."


@pytest.mark.asyncio
async def test_sign_in_unknown_error_code(client):
    client.auth.sign_in_with_password.side_effect = AuthError("Something odd", "unexpected_failure")
    provider = SupabaseAuthProvider(client)

    with pytest.raises(AuthenticationError) as exc_info:
        await provider.sign_in("jane@example.com", "secret")

    assert exc_info.value.code == ErrorCode.AUTH_FAILED


@pytest.mark.asyncio
async def test_sign_in_without_session(client):
    client.auth.sign_in_with_password.return_value = MagicMock(session=None)
    provider = SupabaseAuthProvider(client)

    with pytest.raises(AuthenticationError, match="no session"):
        await provider.sign_in("jane@example.com", "secret")


@pytest.mark.asyncio
async def test_sign_up_pending_confirmation(client):
    client.auth.sign_up.return_value = MagicMock(session=None)
    provider = SupabaseAuthProvider(client)

    assert await provider.sign_up("new@example.com", "secret123") is None


@pytest.mark.asyncio
async def test_sign_up_with_session(client, supabase_session):
    client.auth.sign_up.return_value = MagicMock(session=supabase_session)
    provider = SupabaseAuthProvider(client)

    result = await provider.sign_up("jane@example.com", "secret123")

    assert result is not None
    assert result.user.email == "jane@example.com"


@pytest.mark.asyncio
async def test_sign_up_existing_user(client):
    client.auth.sign_up.side_effect = AuthError("User already registered", "user_already_exists")
    provider = SupabaseAuthProvider(client)

    with pytest.raises(AuthenticationError, match="Sign up failed") as exc_info:
        await provider.sign_up("jane@example.com", "secret123")

    assert exc_info.value.code == ErrorCode.USER_ALREADY_EXISTS


@pytest.mark.asyncio
async def test_refresh_session(client, supabase_session):
    client.auth.refresh_session.return_value = MagicMock(session=supabase_session)
    provider = SupabaseAuthProvider(client)

    result = await provider.refresh_session("refresh")

    assert result.access_token == "access"
    client.auth.refresh_session.assert_called_once_with("refresh")


@pytest.mark.asyncio
async def test_refresh_session_revoked(client):
    client.auth.refresh_session.side_effect = AuthError("Invalid Refresh Token", "refresh_token_not_found")
    provider = SupabaseAuthProvider(client)

    with pytest.raises(AuthenticationError, match="Session refresh failed") as exc_info:
        await provider.refresh_session("stale")

    assert exc_info.value.code == ErrorCode.INVALID_TOKEN


@pytest.mark.asyncio
async def test_expires_at_derived_from_expires_in(client, supabase_session):
    supabase_session.expires_at = None
    client.auth.refresh_session.return_value = MagicMock(session=supabase_session)
    provider = SupabaseAuthProvider(client)

    result = await provider.refresh_session("refresh")

    assert result.expires_at > 3600


@pytest.mark.asyncio
async def test_verify_token(client, supabase_user):
    client.auth.get_user.return_value = MagicMock(user=supabase_user)
    provider = SupabaseAuthProvider(client)

    result = await provider.verify_token("jwt")

    assert isinstance(result, AuthUser)
    assert result.user_id == "user-123"
    assert result.metadata == {"full_name": "Jane Doe"}


@pytest.mark.asyncio
async def test_verify_token_invalid(client):
    client.auth.get_user.side_effect = AuthError("invalid JWT", "bad_jwt")
    provider = SupabaseAuthProvider(client)

    with pytest.raises(AuthenticationError, match="Token verification failed"):
        await provider.verify_token("invalid_token")


@pytest.mark.asyncio
async def test_name_falls_back_to_email_prefix(client, supabase_user):
    supabase_user.user_metadata = {}
    client.auth.get_user.return_value = MagicMock(user=supabase_user)
    provider = SupabaseAuthProvider(client)

    result = await provider.verify_token("jwt")

    assert result.name == "jane"


@pytest.mark.asyncio
async def test_sign_out_revokes_globally(client):
    provider = SupabaseAuthProvider(client)

    await provider.sign_out("access")

    client.auth.admin.sign_out.assert_called_once_with("access", "global")


@pytest.mark.asyncio
async def test_sign_out_failure_is_logged(client, caplog):
    client.auth.admin.sign_out.side_effect = AuthError("session missing", "session_not_found")
    provider = SupabaseAuthProvider(client)

    await provider.sign_out("access")

    assert "Supabase sign out failed" in caplog.text


@pytest.mark.asyncio
async def test_decode_claims(client):
    provider = SupabaseAuthProvider(client)
    token = jwt.encode({"sub": "user-123", "role": "authenticated"}, "secret", algorithm="HS256")

    claims = await provider.decode_claims(token)

    assert claims["sub"] == "user-123"


@pytest.mark.asyncio
async def test_decode_claims_invalid(client):
    provider = SupabaseAuthProvider(client)

    with pytest.raises(AuthenticationError, match="Invalid token"):
        await provider.decode_claims("not-a-jwt")

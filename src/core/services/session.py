"""Server-side session records for signed-in browsers."""

import logging
import uuid
from time import time
from typing import Any

from botocore.exceptions import ClientError

from core.auth.interface import AuthProvider, AuthSession, AuthUser
from core.errors import AuthenticationError, SessionError

logger = logging.getLogger(__name__)

REFRESH_LEEWAY_SECONDS = 60


def _to_item(session_id: str, auth_session: AuthSession, ttl: int) -> dict[str, Any]:
    return {
        "sessionId": {"S": session_id},
        "userId": {"S": auth_session.user.user_id},
        "email": {"S": auth_session.user.email},
        "name": {"S": auth_session.user.name},
        "accessToken": {"S": auth_session.access_token},
        "refreshToken": {"S": auth_session.refresh_token},
        "expiresAt": {"N": str(auth_session.expires_at)},
        "ttl": {"N": str(ttl)},
    }


def _from_item(item: dict[str, Any]) -> AuthSession:
    return AuthSession(
        access_token=item["accessToken"]["S"],
        refresh_token=item["refreshToken"]["S"],
        expires_at=int(item["expiresAt"]["N"]),
        user=AuthUser(
            user_id=item["userId"]["S"],
            email=item.get("email", {}).get("S", ""),
            name=item.get("name", {}).get("S", ""),
            metadata={},
        ),
    )


def store_session(auth_session: AuthSession, dynamo_client: Any, sessions_table: str, ttl_seconds: int) -> str:
    """Store a new session record and return its opaque id."""
    session_id = uuid.uuid4().hex
    ttl = int(time()) + ttl_seconds
    try:
        dynamo_client.put_item(TableName=sessions_table, Item=_to_item(session_id, auth_session, ttl))
    except ClientError as e:
        raise SessionError(f"Failed to store session: {e}") from e
    return session_id


def load_session(session_id: str, dynamo_client: Any, sessions_table: str) -> AuthSession | None:
    """Return the stored session, or None if it is missing or past its TTL.

    DynamoDB deletes expired items lazily, so the TTL is checked here too.
    """
    try:
        response = dynamo_client.get_item(TableName=sessions_table, Key={"sessionId": {"S": session_id}})
    except ClientError as e:
        raise SessionError(f"Failed to load session: {e}") from e

    item = response.get("Item")
    if not item:
        return None
    if int(item["ttl"]["N"]) <= int(time()):
        return None
    return _from_item(item)


def update_tokens(session_id: str, auth_session: AuthSession, dynamo_client: Any, sessions_table: str) -> None:
    """Write refreshed tokens back to an existing record."""
    try:
        dynamo_client.update_item(
            TableName=sessions_table,
            Key={"sessionId": {"S": session_id}},
            UpdateExpression="SET accessToken = :a, refreshToken = :r, expiresAt = :e",
            ExpressionAttributeValues={
                ":a": {"S": auth_session.access_token},
                ":r": {"S": auth_session.refresh_token},
                ":e": {"N": str(auth_session.expires_at)},
            },
        )
    except ClientError as e:
        raise SessionError(f"Failed to update session tokens: {e}") from e


def delete_session(session_id: str, dynamo_client: Any, sessions_table: str) -> None:
    """Delete a session record. Deleting a missing record is a no-op."""
    dynamo_client.delete_item(
        TableName=sessions_table,
        Key={"sessionId": {"S": session_id}},
    )


async def resolve_session(
    session_id: str | None,
    auth_provider: AuthProvider,
    dynamo_client: Any,
    sessions_table: str,
) -> AuthSession | None:
    """Load a session and refresh it with the auth service when its access token is about to expire."""
    if not session_id:
        return None

    auth_session = load_session(session_id, dynamo_client, sessions_table)
    if auth_session is None:
        return None
    if not auth_session.is_expired(leeway=REFRESH_LEEWAY_SECONDS):
        return auth_session

    try:
        refreshed = await auth_provider.refresh_session(auth_session.refresh_token)
    except AuthenticationError as e:
        logger.info("Session %s could not be refreshed (%s); discarding", session_id[:8], e.code.value)
        delete_session(session_id, dynamo_client, sessions_table)
        return None

    update_tokens(session_id, refreshed, dynamo_client, sessions_table)
    return refreshed

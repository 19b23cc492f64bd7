from abc import ABC, abstractmethod
from time import time

from pydantic import BaseModel


class AuthUser(BaseModel):
    user_id: str
    email: str
    name: str
    metadata: dict[str, str]


class AuthSession(BaseModel):
    access_token: str
    refresh_token: str
    expires_at: int
    user: AuthUser

    def is_expired(self, now: float | None = None, leeway: int = 60) -> bool:
        """True when the access token is expired or expires within ``leeway`` seconds."""
        current = time() if now is None else now
        return self.expires_at - leeway <= current


class AuthProvider(ABC):
    @abstractmethod
    async def sign_in(self, email: str, password: str) -> AuthSession: ...

    @abstractmethod
    async def sign_up(self, email: str, password: str) -> AuthSession | None: ...

    @abstractmethod
    async def refresh_session(self, refresh_token: str) -> AuthSession: ...

    @abstractmethod
    async def verify_token(self, token: str) -> AuthUser: ...

    @abstractmethod
    async def sign_out(self, access_token: str) -> None: ...

    @abstractmethod
    async def decode_claims(self, token: str) -> dict[str, object]: ...


def get_auth_provider() -> AuthProvider:
    from core.config import get_config

    config = get_config()
    if not config.supabase_url or not config.supabase_anon_key:
        raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY not configured")

    from core.auth.supabase_provider import SupabaseAuthProvider
    from core.clients import get_supabase_client

    return SupabaseAuthProvider(client=get_supabase_client())

"""Authentication abstraction layer."""

from core.auth.interface import AuthProvider, AuthSession, AuthUser, get_auth_provider
from core.auth.supabase_provider import SupabaseAuthProvider

__all__ = ["AuthProvider", "AuthSession", "AuthUser", "SupabaseAuthProvider", "get_auth_provider"]

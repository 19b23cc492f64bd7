"""Lazy-initialized service clients, reused across warm Lambda invocations."""

from functools import lru_cache
from typing import Any

import boto3
from supabase import Client, ClientOptions, create_client

from core.config import get_config


@lru_cache(maxsize=1)
def get_dynamo_client() -> Any:
    config = get_config()
    return boto3.client("dynamodb", endpoint_url=config.dynamodb_endpoint)


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """Supabase client with no in-process session; tokens live in session records."""
    config = get_config()
    if not config.supabase_url or not config.supabase_anon_key:
        raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY must be configured")
    return create_client(
        config.supabase_url,
        config.supabase_anon_key,
        options=ClientOptions(auto_refresh_token=False, persist_session=False),
    )

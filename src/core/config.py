import logging
from os import environ

import boto3
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

_cached_supabase_key: str | None = None


def _resolve_supabase_key() -> str:
    """Fetch the Supabase anon key from Secrets Manager at runtime, with caching."""
    global _cached_supabase_key
    if _cached_supabase_key is not None:
        return _cached_supabase_key

    # Local dev: use env var directly
    direct = environ.get("SUPABASE_ANON_KEY", "")
    if direct:
        _cached_supabase_key = direct
        return direct

    # Deployed: fetch from Secrets Manager by ARN
    arn = environ.get("SUPABASE_SECRET_ARN", "")
    if not arn:
        return ""

    client = boto3.client("secretsmanager")
    _cached_supabase_key = client.get_secret_value(SecretId=arn)["SecretString"]
    return _cached_supabase_key


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    dynamodb_endpoint: str | None = None
    sessions_table: str
    supabase_url: str = ""
    supabase_anon_key: str = ""
    trips_table: str
    google_maps_api_key: str = ""
    map_default_lat: float
    map_default_lng: float
    session_cookie_name: str
    session_ttl_seconds: int
    db_host: str
    db_port: int
    db_name: str
    db_user: str
    db_password: str
    db_secret_arn: str | None = None
    environment: str

    @property
    def is_local(self) -> bool:
        return self.environment == "local"


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config. For testing only."""
    global _cached_config, _cached_supabase_key
    _cached_config = None
    _cached_supabase_key = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        sessions_table=environ.get("SESSIONS_TABLE", "Sessions"),
        supabase_url=environ.get("SUPABASE_URL", ""),
        supabase_anon_key=_resolve_supabase_key(),
        trips_table=environ.get("TRIPS_TABLE", "trips"),
        google_maps_api_key=environ.get("GOOGLE_MAPS_API_KEY", ""),
        map_default_lat=float(environ.get("MAP_DEFAULT_LAT", "-23.5505")),
        map_default_lng=float(environ.get("MAP_DEFAULT_LNG", "-46.6333")),
        session_cookie_name=environ.get("SESSION_COOKIE_NAME", "tumaps-auth-token"),
        session_ttl_seconds=int(environ.get("SESSION_TTL_SECONDS", str(7 * 86400))),
        db_host=environ.get("DB_HOST", "localhost"),
        db_port=int(environ.get("DB_PORT", "5432")),
        db_name=environ.get("DB_NAME", "postgres"),
        db_user=environ.get("DB_USER", "postgres"),
        db_password=environ.get("DB_PASSWORD", "localdev"),
        db_secret_arn=environ.get("DB_SECRET_ARN"),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    if not _cached_config.supabase_url or not _cached_config.supabase_anon_key:
        logger.warning("Supabase credentials not configured. Set SUPABASE_URL and SUPABASE_ANON_KEY.")
    return _cached_config

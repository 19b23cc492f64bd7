"""Unit tests for configuration management."""

import os
from unittest.mock import MagicMock, patch

import pydantic
import pytest

from core.config import _reset_config, get_config


@pytest.fixture(autouse=True)
def _clear_config_cache():
    _reset_config()
    yield
    _reset_config()


def test_get_config_defaults():
    with patch.dict(os.environ, {}, clear=True):
        config = get_config()
        assert config.aws_region == "us-east-1"
        assert config.sessions_table == "Sessions"
        assert config.trips_table == "trips"
        assert config.session_cookie_name == "tumaps-auth-token"
        assert config.session_ttl_seconds == 7 * 86400
        assert config.map_default_lat == -23.5505
        assert config.map_default_lng == -46.6333
        assert config.environment == "local"
        assert config.is_local
        assert config.dynamodb_endpoint is None


def test_get_config_reads_supabase_env():
    env = {"SUPABASE_URL": "https://abc.supabase.co", "SUPABASE_ANON_KEY": "anon"}
    with patch.dict(os.environ, env, clear=True):
        config = get_config()
        assert config.supabase_url == "https://abc.supabase.co"
        assert config.supabase_anon_key == "anon"


def test_supabase_key_from_secrets_manager():
    env = {"SUPABASE_SECRET_ARN": "arn:aws:secretsmanager:us-east-1:1:secret:supabase"}
    with patch.dict(os.environ, env, clear=True), patch("core.config.boto3") as mock_boto3:
        mock_sm = MagicMock()
        mock_sm.get_secret_value.return_value = {"SecretString": "secret-anon"}
        mock_boto3.client.return_value = mock_sm

        config = get_config()

        assert config.supabase_anon_key == "secret-anon"
        mock_sm.get_secret_value.assert_called_once_with(SecretId=env["SUPABASE_SECRET_ARN"])


def test_missing_supabase_credentials_logs_warning(caplog):
    with patch.dict(os.environ, {}, clear=True):
        get_config()
    assert "Supabase credentials not configured" in caplog.text


def test_numeric_env_coercion():
    with patch.dict(os.environ, {"DB_PORT": "5433", "SESSION_TTL_SECONDS": "60"}, clear=True):
        config = get_config()
        assert config.db_port == 5433
        assert config.session_ttl_seconds == 60


def test_non_local_environment():
    with patch.dict(os.environ, {"ENVIRONMENT": "prod"}, clear=True):
        assert get_config().is_local is False


def test_get_config_is_cached():
    with patch.dict(os.environ, {}, clear=True):
        assert get_config() is get_config()


def test_config_is_immutable():
    with patch.dict(os.environ, {}, clear=True):
        config = get_config()
        with pytest.raises(pydantic.ValidationError):
            config.aws_region = "eu-west-1"  # type: ignore[misc]

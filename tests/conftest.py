"""Shared test fixtures for tumaps."""

import base64
import os
import sys
from pathlib import Path
from urllib.parse import urlencode

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from core.auth.interface import AuthSession, AuthUser  # noqa: E402
from core.config import Config  # noqa: E402


@pytest.fixture
def config():
    """A local Config independent of the process environment."""
    return Config(
        aws_region="us-east-1",
        dynamodb_endpoint=None,
        sessions_table="Sessions",
        supabase_url="https://project.supabase.co",
        supabase_anon_key="anon-key",
        trips_table="trips",
        google_maps_api_key="maps-key",
        map_default_lat=-23.5505,
        map_default_lng=-46.6333,
        session_cookie_name="tumaps-auth-token",
        session_ttl_seconds=7 * 86400,
        db_host="localhost",
        db_port=5432,
        db_name="postgres",
        db_user="postgres",
        db_password="localdev",
        environment="local",
    )


@pytest.fixture
def auth_user():
    return AuthUser(user_id="user-123", email="driver@example.com", name="driver", metadata={})


@pytest.fixture
def auth_session(auth_user):
    return AuthSession(
        access_token="access-token",
        refresh_token="refresh-token",
        expires_at=4_102_444_800,
        user=auth_user,
    )


@pytest.fixture
def make_event():
    """Build an API Gateway HTTP API (v2) event."""

    def _make(method="GET", path="/", query=None, path_params=None, cookies=None, form=None):
        event = {
            "version": "2.0",
            "rawPath": path,
            "requestContext": {"http": {"method": method, "path": path}},
            "queryStringParameters": query,
            "pathParameters": path_params,
            "cookies": cookies,
            "body": None,
            "isBase64Encoded": False,
        }
        if form is not None:
            event["body"] = base64.b64encode(urlencode(form).encode()).decode()
            event["isBase64Encoded"] = True
        return event

    return _make


# DynamoDB fixtures
@pytest.fixture
def dynamodb_client():
    """Provide a DynamoDB client for integration tests."""
    import boto3
    from core.config import get_config

    config = get_config()

    return boto3.client(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )


@pytest.fixture
def sessions_table(dynamodb_client):
    """Provide the Sessions table name, deleting test records afterwards."""
    from core.config import get_config

    table = get_config().sessions_table
    yield table

    response = dynamodb_client.scan(TableName=table)
    for item in response.get("Items", []):
        dynamodb_client.delete_item(TableName=table, Key={"sessionId": item["sessionId"]})

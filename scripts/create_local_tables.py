#!/usr/bin/env python3
"""Create the Sessions table in DynamoDB Local.

Mirrors the deployed table: a single ``sessionId`` hash key with TTL enabled on ``ttl``.

Usage:
    python scripts/create_local_tables.py
"""

import sys
from pathlib import Path

import boto3
from botocore.exceptions import ClientError

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_config


def create_sessions_table(dynamodb, table_name: str) -> None:
    try:
        dynamodb.create_table(
            TableName=table_name,
            KeySchema=[{"AttributeName": "sessionId", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "sessionId", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        print(f"✓ Created {table_name} table")
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            print(f"✓ {table_name} table already exists")
        else:
            raise

    dynamodb.get_waiter("table_exists").wait(TableName=table_name)
    try:
        dynamodb.update_time_to_live(
            TableName=table_name,
            TimeToLiveSpecification={"Enabled": True, "AttributeName": "ttl"},
        )
        print(f"✓ TTL enabled on {table_name}.ttl")
    except ClientError as e:
        # Re-enabling TTL on a table that already has it is rejected.
        if e.response["Error"]["Code"] != "ValidationException":
            raise
        print(f"✓ TTL already enabled on {table_name}")


def main():
    config = get_config()
    endpoint_url = config.dynamodb_endpoint or "http://localhost:8000"
    print(f"Creating DynamoDB tables at {endpoint_url}...")

    # DynamoDB Local accepts any credentials
    dynamodb = boto3.client(
        "dynamodb",
        endpoint_url=endpoint_url,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )
    create_sessions_table(dynamodb, config.sessions_table)
    print("✅ Sessions table ready")


if __name__ == "__main__":
    main()

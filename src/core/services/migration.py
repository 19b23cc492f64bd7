"""Apply the trips schema with Alembic from inside the migrate Lambda."""

import io
import json
import logging
import os

import boto3
from alembic.config import Config as AlembicConfig
from sqlalchemy import URL

from alembic import command
from core.config import get_config

logger = logging.getLogger(__name__)

ALEMBIC_ROOT = os.environ.get("ALEMBIC_ROOT", "/var/task")


def _secret_credentials(secret_arn: str, region: str) -> dict[str, object]:
    sm = boto3.client("secretsmanager", region_name=region)
    return json.loads(sm.get_secret_value(SecretId=secret_arn)["SecretString"])


def database_url() -> URL:
    """Build the Postgres URL from config, overlaid with the DB secret when one is set."""
    config = get_config()
    secret: dict[str, object] = {}
    if config.db_secret_arn:
        secret = _secret_credentials(config.db_secret_arn, config.aws_region)

    return URL.create(
        "postgresql+psycopg",
        username=str(secret.get("username", config.db_user)),
        password=str(secret.get("password", config.db_password)),
        host=str(secret.get("host", config.db_host)),
        port=int(secret.get("port", config.db_port)),
        database=str(secret.get("dbname", config.db_name)),
    )


def run_migrations(revision: str = "head") -> dict[str, str]:
    cfg = AlembicConfig(os.path.join(ALEMBIC_ROOT, "alembic.ini"))
    cfg.set_main_option("script_location", os.path.join(ALEMBIC_ROOT, "alembic"))
    cfg.attributes["database_url"] = database_url()

    # Alembic reports progress through its logger; capture it for the Lambda result.
    captured = io.StringIO()
    capture_handler = logging.StreamHandler(captured)
    alembic_logger = logging.getLogger("alembic")
    alembic_logger.addHandler(capture_handler)

    try:
        command.upgrade(cfg, revision)
    except Exception as e:
        logger.error("Upgrade to %s failed: %s", revision, e)
        raise
    finally:
        alembic_logger.removeHandler(capture_handler)

    output = captured.getvalue()
    logger.info("Upgraded trips schema to %s", revision)
    return {"status": "success", "revision": revision, "output": output}

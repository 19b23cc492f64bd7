"""Migration Lambda: applies pending Alembic revisions to the trips database."""

import logging
from typing import Any

from core.services.migration import run_migrations

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    revision = str((event or {}).get("revision") or "head")
    try:
        result = run_migrations(revision)
    except Exception as e:
        logger.exception("Migration to %s failed", revision)
        return {"statusCode": 500, "status": "error", "error": str(e)}
    return {"statusCode": 200, **result}

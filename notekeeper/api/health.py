"""
Health Check Endpoints.

Endpoints:
- /health: Liveness check (process running)
- /health/ready: Readiness check (database reachable)
"""

from typing import Any

from fastapi import APIRouter, HTTPException
from sqlalchemy import text

from notekeeper.core.database import session_scope
from notekeeper.core.dependencies import NoteStoreDep
from notekeeper.core.logging import get_logger
from notekeeper.core.utils import utc_now

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health", summary="Liveness check")
async def health() -> dict[str, str]:
    """Report that the process is up."""
    return {"status": "healthy"}


@router.get("/health/ready", summary="Readiness check")
async def ready(store: NoteStoreDep) -> dict[str, Any]:
    """
    Report whether the database answers a trivial query.

    Raises:
        HTTPException: 503 when the database is unreachable
    """
    start = utc_now()
    try:
        async with session_scope(store.session_factory) as session:
            await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Database health check failed", extra={"error": str(e)})
        raise HTTPException(
            status_code=503,
            detail={"status": "unhealthy", "database": str(e)},
        ) from e

    latency_ms = int((utc_now() - start).total_seconds() * 1000)
    return {"status": "healthy", "database": {"latency_ms": latency_ms}}

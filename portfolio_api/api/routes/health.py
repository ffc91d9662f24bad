"""
Liveness and readiness probes.
"""

import os
from pathlib import Path

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from portfolio_api.core.config import settings
from portfolio_api.core.logging import get_logger
from portfolio_api.db.session import get_session

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict:
    """Service identity plus whether uploads can be written."""
    upload_dir = Path(settings.UPLOAD_DIR)
    return {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "uploads_writable": upload_dir.is_dir() and os.access(upload_dir, os.W_OK),
    }


@router.get("/health/db")
def database_health_check(session: Session = Depends(get_session)) -> dict:
    """Round-trip a trivial query through the session's connection."""
    try:
        connection = session.connection()
        connection.execute(text("SELECT 1")).scalar()
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        return {"status": "unhealthy", "database": "error"}

    return {"status": "healthy", "database": "ok", "dialect": connection.dialect.name}

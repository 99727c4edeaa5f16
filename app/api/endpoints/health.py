"""
Liveness and readiness endpoints.

/health answers as long as the process is up. /health/detailed also checks
that the jobs table can be queried and reports 503 when it cannot.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import func, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.models.job import Job

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


def _check_database(db: Session) -> Dict[str, Any]:
    try:
        db.execute(text("SELECT 1"))
        job_count = db.query(func.count(Job.id)).scalar() or 0
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        return {"status": "unhealthy", "message": f"Database error: {e}"}

    return {"status": "healthy", "jobs": job_count}


@router.get("/health", status_code=status.HTTP_200_OK)
def health_check() -> Dict[str, str]:
    """Liveness probe."""
    return {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/health/detailed")
def detailed_health_check(response: Response, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Readiness probe: the database answers and the jobs table is reachable.
    """
    database = _check_database(db)
    healthy = database["status"] == "healthy"
    if not healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "healthy" if healthy else "unhealthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {"database": database}
    }

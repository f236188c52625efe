import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.db.session import get_db_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/")
def root_health_check() -> dict[str, str]:
    return {"status": "running", "service": "Advertisement API"}


@router.get("/health")
def health_check() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/health/db")
def database_health_check(db: Session = Depends(get_db_session)) -> dict[str, str]:
    """Readiness probe: round-trips a trivial query through the pool."""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "ok", "database": "reachable"}
    except Exception as e:
        logger.exception("Database health check failed")
        raise HTTPException(status_code=503, detail=f"Database unavailable: {e}")

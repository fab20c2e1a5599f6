import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from admin_api.core.exceptions import DataAccessError
from admin_api.database import Database
from admin_api.dependencies import get_database
from admin_api.schemas.health import HealthRead

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthRead)
async def health_check():
    """Liveness check. Does not touch the database."""
    return {
        "status": "OK",
        "database": "PostgreSQL",
        "timestamp": datetime.now(timezone.utc),
    }


@router.get("/health/db")
async def database_health(db: Database = Depends(get_database)):
    """Check database connectivity"""
    try:
        await db.execute("SELECT 1")
    except DataAccessError as e:
        logger.warning(f"Database health check failed: {e}")
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": "error", "error": str(e)},
        )
    return {"status": "healthy", "database": "connected"}

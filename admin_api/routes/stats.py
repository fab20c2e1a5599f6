import logging

from fastapi import APIRouter, Depends, HTTPException

from admin_api.core.exceptions import DataAccessError
from admin_api.database import Database
from admin_api.dependencies import get_database
from admin_api.schemas.stats import StatsRead
from admin_api.services.stats_service import StatsService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["stats"])


@router.get("/stats", response_model=StatsRead)
async def get_stats(db: Database = Depends(get_database)):
    """Dashboard counters and total inventory value"""
    try:
        return await StatsService(db).get_stats()
    except DataAccessError as e:
        logger.error(f"Error fetching stats: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch stats")

import logging
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core import errors, schemas
from app.core.reports.queries import ReportQueries, get_reports

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cost", tags=["Cost"])

reports_dep = Annotated[ReportQueries, Depends(get_reports)]
# ?id=1,2&id=3 arrives as ["1,2", "3"]
ids_query = Annotated[Optional[List[str]], Query(alias="id")]


@router.get("/worker", response_model=List[schemas.WorkerCostResponse])
async def cost_by_worker(reports: reports_dep, ids: ids_query = None):
    """Cost breakdown for each worker across all tasks at each location."""
    try:
        return await reports.cost_by_worker(ids)
    except errors.ValidationError as error:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, str(error))
    except errors.QueryError as error:
        logger.error(f"Worker cost breakdown failed: {error}")
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to compute worker cost breakdown",
        )


@router.get("/location", response_model=List[schemas.LocationCostResponse])
async def cost_by_location(reports: reports_dep, ids: ids_query = None):
    """Total cost of every task at each location."""
    try:
        return await reports.cost_by_location(ids)
    except errors.ValidationError as error:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, str(error))
    except errors.QueryError as error:
        logger.error(f"Location cost breakdown failed: {error}")
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to compute location cost breakdown",
        )

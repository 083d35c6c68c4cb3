import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.core import errors, schemas
from app.core.reports.queries import ReportQueries, get_reports

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/workers", tags=["Workers"])

reports_dep = Annotated[ReportQueries, Depends(get_reports)]


# Get worker
@router.get("/{worker_id}", response_model=schemas.WorkerResponse)
async def get_worker(worker_id: int, reports: reports_dep):
    try:
        worker = await reports.get_worker(worker_id)
    except errors.ValidationError as error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    except errors.QueryError as error:
        logger.error(f"Failed to load worker {worker_id}: {error}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load worker",
        )

    if worker is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Worker with id: {worker_id} does not exist",
        )
    return worker

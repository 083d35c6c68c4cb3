from typing import Annotated, Any, Dict, List, Optional, Union

from fastapi import Depends
from sqlalchemy import Select, func, select

from app.core import models
from app.core.database import Database, get_database
from app.core.errors import ValidationError
from app.core.reports.filters import RawIds, parse_id, parse_ids


# -----------------------------------------------------------------------------
# COST REPORTS
# Purpose: turn logged time into labor cost breakdowns.
#
# Cost of a logged row is hourly_wage * (time_seconds / 60). The wage is
# applied per minute rather than per hour. Existing consumers depend on
# these figures, so the formula is kept as is until product decides on
# the unit.
# -----------------------------------------------------------------------------


def logged_cost():
    """Per-row cost expression shared by every cost report."""
    return models.Worker.hourly_wage * (models.LoggedTime.time_seconds / 60)


def cost_by_worker_statement(worker_ids: Optional[List[int]] = None) -> Select:
    stmt = (
        select(
            models.Worker.id.label("id"),
            models.Worker.username.label("username"),
            models.Task.description.label("task"),
            models.Location.name.label("location"),
            models.Worker.hourly_wage.label("hourly_wage"),
            func.sum(models.LoggedTime.time_seconds).label("total_time"),
            func.sum(logged_cost()).label("total_cost"),
        )
        .select_from(models.Worker)
        .join(models.LoggedTime, models.LoggedTime.worker_id == models.Worker.id)
        .join(models.Task, models.LoggedTime.task_id == models.Task.id)
        .join(models.Location, models.Task.location_id == models.Location.id)
    )

    if worker_ids:
        stmt = stmt.where(models.Worker.id.in_(worker_ids))

    return stmt.group_by(
        models.Worker.id,
        models.Worker.username,
        models.Worker.hourly_wage,
        models.Task.description,
        models.Location.name,
    )


def cost_by_location_statement(location_ids: Optional[List[int]] = None) -> Select:
    stmt = (
        select(
            models.Location.id.label("id"),
            models.Location.name.label("location_name"),
            models.Task.description.label("task_name"),
            func.sum(logged_cost()).label("total_cost"),
        )
        .select_from(models.Location)
        .join(models.Task, models.Task.location_id == models.Location.id)
        .join(models.LoggedTime, models.LoggedTime.task_id == models.Task.id)
        .join(models.Worker, models.Worker.id == models.LoggedTime.worker_id)
    )

    if location_ids:
        stmt = stmt.where(models.Location.id.in_(location_ids))

    return stmt.group_by(
        models.Location.id,
        models.Location.name,
        models.Task.description,
    )


def worker_by_id_statement(worker_id: int) -> Select:
    return (
        select(
            models.Worker.id.label("id"),
            models.Worker.username.label("username"),
            models.Worker.hourly_wage.label("hourly_wage"),
        )
        .where(models.Worker.id == worker_id)
        .limit(1)
    )


class ReportQueries:
    """
    Cost breakdown queries over workers, locations, tasks and logged time.

    Filters arrive as raw request values and are validated here, before
    anything reaches the store. Each operation issues exactly one
    statement through the injected Database.
    """

    def __init__(self, db: Database):
        self.db = db

    async def cost_by_worker(self, worker_ids: RawIds = None) -> List[Dict[str, Any]]:
        """
        Break down labor cost per worker, task and location.

        Args:
            worker_ids: Optional worker ids (ints or comma-joined text).
                None or empty means every worker.

        Returns:
            One row per (worker, task, location) group

        Example:
            [
                {"id": 1, "username": "ana", "task": "Sweep", "location": "Depot",
                 "hourly_wage": 30, "total_time": 2400, "total_cost": 1200}
            ]
        """
        ids = parse_ids(worker_ids)
        return await self.db.execute(cost_by_worker_statement(ids))

    async def cost_by_location(
        self, location_ids: RawIds = None
    ) -> List[Dict[str, Any]]:
        """
        Break down labor cost per location and task.

        Args:
            location_ids: Optional location ids (ints or comma-joined text).
                None or empty means every location.

        Returns:
            One row per (location, task) group

        Example:
            [{"id": 3, "location_name": "Depot", "task_name": "Sweep", "total_cost": 1200}]
        """
        ids = parse_ids(location_ids)
        return await self.db.execute(cost_by_location_statement(ids))

    async def get_worker(self, worker_id: Union[int, str]) -> Optional[Dict[str, Any]]:
        """Return a single worker row, or None when it does not exist."""
        parsed = parse_id(worker_id)
        if parsed is None:
            raise ValidationError(worker_id, "A worker id is required")

        rows = await self.db.execute(worker_by_id_statement(parsed))
        return rows[0] if rows else None


# Hands every request its own ReportQueries bound to the shared Database
def get_reports(db: Annotated[Database, Depends(get_database)]) -> ReportQueries:
    return ReportQueries(db)

from pydantic import BaseModel, ConfigDict


# =========================
# WORKER
# =========================
class WorkerResponse(BaseModel):
    id: int
    username: str
    hourly_wage: float

    model_config = ConfigDict(from_attributes=True)


# =========================
# COST REPORTS
# =========================
class WorkerCostResponse(BaseModel):
    """One (worker, task, location) group of logged time."""

    id: int
    username: str
    task: str
    location: str
    hourly_wage: float
    total_time: int  # seconds
    total_cost: float


class LocationCostResponse(BaseModel):
    """One (location, task) group of logged time."""

    id: int
    location_name: str
    task_name: str
    total_cost: float

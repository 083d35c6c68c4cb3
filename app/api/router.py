from fastapi import APIRouter
from app.api.endpoints import cost, workers

api_router = APIRouter()

# Combine all sub-routers into one
api_router.include_router(cost.router)
api_router.include_router(workers.router)

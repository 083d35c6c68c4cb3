import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.core.config import settings
from app.core.database import database
from app.core.errors import QueryError
from app.api.router import api_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# Check the store is reachable, then close the pool once everything is done
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Connecting to DB...")
    try:
        await database.ping()
    except QueryError:
        await database.dispose()
        raise

    yield
    await database.dispose()


app = FastAPI(title="Labor Cost Reporting API", lifespan=lifespan)

# Include the master router containing all our endpoints
app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Hello!"}


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

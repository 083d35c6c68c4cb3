import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import settings
from app.core.errors import ConnectionAcquisitionError, QueryError

logger = logging.getLogger(__name__)

engine = create_async_engine(
    settings.database_url, echo=settings.DATABASE_ECHO, pool_pre_ping=True
)


class Database:
    """
    Read-only access to the reporting store.

    Every call to execute() opens its own session, runs exactly one
    statement and releases the connection back to the pool, whatever
    the outcome.
    """

    def __init__(self, bind: AsyncEngine):
        self.engine = bind
        # Rows are plain mappings, nothing to refresh after the session closes
        self._sessions = async_sessionmaker(
            bind=bind, class_=AsyncSession, expire_on_commit=False
        )

    async def execute(
        self, statement, parameters: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        async with self._sessions() as session:
            try:
                await session.connection()
            except SQLAlchemyError as error:
                logger.error(f"Could not acquire a database connection: {error}")
                raise ConnectionAcquisitionError(
                    "Could not acquire a database connection"
                ) from error

            try:
                result = await session.execute(statement, parameters or {})
                return [dict(row) for row in result.mappings().all()]
            except SQLAlchemyError as error:
                logger.error(f"Query failed: {error}")
                raise QueryError("Query failed") from error

    async def ping(self) -> None:
        """Run SELECT 1 so a misconfigured store fails loudly at startup."""
        await self.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        await self.engine.dispose()


database = Database(engine)


# This is the "Bridge" that gives my routes access to the store
async def get_database() -> Database:
    return database


# All the models are "stored" in the Base class will be processed by the Engine
class Base(DeclarativeBase):
    pass

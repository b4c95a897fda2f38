# src/common/database/database.py

import logging
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from src.common.config import settings
from src.models.models import Base

logger = logging.getLogger(__name__)

engine = create_async_engine(settings.DATABASE_URL, echo=False, pool_pre_ping=True)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

async def connect_to_db() -> None:
    """
    Verify the database is reachable and create any missing tables.
    An unreachable database is logged, not raised, so the API can still serve
    routes that do not depend on it.
    """
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            await conn.run_sync(Base.metadata.create_all)
        logger.info("PostgreSQL connected")
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Database unavailable at startup: %s", e)

async def close_db_connection() -> None:
    await engine.dispose()
    logger.info("PostgreSQL connection closed")

async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session() as session:
        yield session

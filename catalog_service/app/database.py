import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import declarative_base, sessionmaker
from tenacity import retry, stop_after_attempt, wait_fixed, before_sleep_log

from catalog_service.app.config import (
    DATABASE_URL,
    DATABASE_ECHO,
    DB_CONNECT_ATTEMPTS,
    DB_CONNECT_WAIT,
)
from catalog_service.app.logger import logger

Base = declarative_base()

engine = create_async_engine(DATABASE_URL, echo=DATABASE_ECHO)
SessionLocal = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@retry(
    stop=stop_after_attempt(DB_CONNECT_ATTEMPTS),
    wait=wait_fixed(DB_CONNECT_WAIT),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
async def wait_for_db():
    async with engine.begin() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("Database connection successful")
    return engine


async def create_tables():
    # models must be imported so their tables are registered on Base.metadata
    from catalog_service.app import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured", extra={"tables": sorted(Base.metadata.tables)})


async def get_session() -> AsyncSession:
    async with SessionLocal() as session:
        yield session

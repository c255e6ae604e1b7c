from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncEngine, AsyncSession
from sqlalchemy.orm import declarative_base
from sqlalchemy import text
from app.core.config import settings
import logging
from typing import AsyncGenerator, Optional
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)

Base = declarative_base()

# Process-wide pool, created by initialize_db() and disposed by close_db_connection()
engine: Optional[AsyncEngine] = None
AsyncSessionLocal: Optional[async_sessionmaker] = None


def normalize_database_url(db_url: str) -> str:
    """
    Rewrite plain PostgreSQL URLs so they use the asyncpg driver.
    """
    # If using postgresql://, convert to postgresql+asyncpg://
    if db_url.startswith('postgresql://'):
        return db_url.replace('postgresql://', 'postgresql+asyncpg://', 1)
    # If using postgres://, convert to postgresql+asyncpg://
    if db_url.startswith('postgres://'):
        return db_url.replace('postgres://', 'postgresql+asyncpg://', 1)
    return db_url


def create_engine_from_url(database_url: str) -> AsyncEngine:
    """
    Create an async engine; pool tuning only applies to server databases.
    """
    db_url = normalize_database_url(database_url)

    if db_url.startswith('sqlite'):
        logger.info("Using async SQLite database connection")
        return create_async_engine(db_url, echo=settings.SQL_ECHO, future=True)

    logger.info("Using async database connection with asyncpg")
    return create_async_engine(
        db_url,
        echo=settings.SQL_ECHO,
        future=True,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        # asyncpg-specific connect args
        connect_args={
            "command_timeout": settings.DB_COMMAND_TIMEOUT,
        }
    )


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False
    )


# Dependency to use in FastAPI endpoints
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides an async database session.
    """
    if AsyncSessionLocal is None:
        raise RuntimeError("Database has not been initialized")
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()

# Context manager for use in scripts
@asynccontextmanager
async def get_db_context():
    """
    Context manager for database sessions outside of request handlers.
    """
    if AsyncSessionLocal is None:
        raise RuntimeError("Database has not been initialized")
    session = AsyncSessionLocal()
    try:
        yield session
    finally:
        await session.close()

async def initialize_db(database_url: Optional[str] = None):
    """
    Create the connection pool and verify it's working.
    """
    global engine, AsyncSessionLocal

    if engine is not None:
        return True

    engine = create_engine_from_url(database_url or settings.DATABASE_URL)
    AsyncSessionLocal = create_session_factory(engine)

    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("Database connection initialized successfully")

    return True

async def create_tables():
    """
    Create all tables known to the metadata. Used by the seed script.
    """
    # Registers every model on Base.metadata
    import app.db.base  # noqa: F401

    if engine is None:
        raise RuntimeError("Database has not been initialized")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")

async def close_db_connection():
    """
    Close database connection pool.
    """
    global engine, AsyncSessionLocal

    if engine is None:
        return
    await engine.dispose()
    engine = None
    AsyncSessionLocal = None
    logger.info("Database connection pool closed")

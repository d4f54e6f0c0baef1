"""
Database configuration, session management and schema initialization
"""

import asyncio
from typing import Optional

from sqlmodel import SQLModel, select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker
import structlog

from storefront.core.config import get_settings
from storefront.core.seed import seed_demo_data
from storefront.models import Company

logger = structlog.get_logger(__name__)
settings = get_settings()

# Create async engine
async_engine = create_async_engine(
    settings.async_database_url,
    echo=settings.DEBUG,
    future=True,
    pool_pre_ping=True,
)

# Create async session factory
async_session_maker = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class DatabaseInitializer:
    """
    Creates the schema and seeds demo data once per process.

    Table creation uses create-if-not-exists semantics and seeding only runs
    when the companies table is empty, so calling this repeatedly is safe.
    """

    def __init__(self, engine: AsyncEngine, seed: bool = True):
        self.engine = engine
        self.seed = seed
        self.initialized = False
        self._lock = asyncio.Lock()

    async def run(self, force: bool = False) -> bool:
        """Initialize the database; returns True if demo data was inserted"""
        async with self._lock:
            if self.initialized and not force:
                return False

            async with self.engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables initialized")

            seeded = False
            if self.seed:
                async with AsyncSession(self.engine, expire_on_commit=False) as session:
                    result = await session.exec(select(func.count()).select_from(Company))
                    companies_count = result.one()
                    if companies_count == 0:
                        await seed_demo_data(session)
                        seeded = True

            self.initialized = True
            return seeded


_initializer: Optional[DatabaseInitializer] = None


async def init_db(force: bool = False) -> bool:
    """Initialize database tables and demo data for the configured engine"""
    global _initializer
    if _initializer is None:
        _initializer = DatabaseInitializer(async_engine, seed=settings.SEED_DEMO_DATA)
    return await _initializer.run(force=force)


async def get_session():
    """Dependency to get database session"""
    async with async_session_maker() as session:
        yield session

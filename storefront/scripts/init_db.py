"""
Create tables and seed demo data

Run once after provisioning a database, or any time: the step is
idempotent and never duplicates demo companies.
"""

import asyncio
import sys
import structlog

from storefront.core.database import async_engine, init_db

logger = structlog.get_logger(__name__)


async def _run(force: bool) -> bool:
    try:
        return await init_db(force=force)
    finally:
        await async_engine.dispose()


def main():
    """Main entry point for database initialization"""
    logger.info("Starting database initialization")
    try:
        seeded = asyncio.run(_run(force="--force" in sys.argv[1:]))
        logger.info(f"Database initialization complete (demo data seeded: {seeded})")
    except Exception as e:
        logger.error(f"Fatal error initializing database: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

"""
Drop and recreate the API management schema.

Every application, subscription and configuration row is lost; the default
view is recreated on the next application start.
"""

import asyncio
import sys
sys.path.append('src')

from infrastructure.config import get_logger, get_settings, setup_logger
from infrastructure.database import models  # noqa: F401
from infrastructure.database.session import engine, Base

logger = get_logger(__name__)


async def reset_database() -> list[str]:
    """Drop all tables and recreate them, returning the recreated table names."""
    tables = list(Base.metadata.tables)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            logger.info(f"Dropped {len(tables)} tables")
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Recreated tables: {', '.join(sorted(tables))}")
    except Exception as e:
        logger.error(f"Database reset failed: {e}")
        raise
    finally:
        await engine.dispose()
    return tables


if __name__ == "__main__":
    settings = get_settings()
    setup_logger(level=settings.log_level, log_format="text")
    print(f"\nWARNING: this deletes all data of environment {settings.environment_id} "
          f"({settings.environment})!\n")
    response = input("Are you sure? Type 'yes' to continue: ")

    if response.lower() == 'yes':
        asyncio.run(reset_database())
    else:
        print("\nCancelled.\n")

"""Main entry point: configure logging and create the database schema."""

import asyncio
import logging

from components.core.config import get_settings, setup_logging
from components.core.database import DatabaseManager
from components.core.init_db import create_tables

logger = logging.getLogger(__name__)


async def main() -> None:
    settings = get_settings()
    setup_logging(settings)

    db_manager = DatabaseManager(settings)
    try:
        await create_tables(db_manager.engine)
        logger.info("Database schema ready at %s:%s/%s", settings.DB_HOST, settings.DB_PORT, settings.DB_NAME)
    finally:
        await db_manager.dispose()


if __name__ == "__main__":
    asyncio.run(main())

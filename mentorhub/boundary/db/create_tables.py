"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, mentorhub.configs
System role: Database schema initialization

Usage:
    python -m mentorhub.boundary.db.create_tables
"""

import asyncio
import logging

from mentorhub.boundary.db.connection import dispose_engine, init_db
from mentorhub.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged.
    """
    try:
        await init_db()
        logger.info("All tables created successfully.")
    finally:
        await dispose_engine()


if __name__ == "__main__":
    configure_logging()
    asyncio.run(create_all_tables())

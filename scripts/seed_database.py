#!/usr/bin/env python3
"""
Script to load the demo lawyer, clients, templates and cases into the
database configured by DATABASE_URL.
"""
import asyncio
import os
import sys
import logging
import argparse

# Add the parent directory to the path so we can import from app
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from app.core.database import initialize_db, close_db_connection, create_tables, get_db_context
from app.utils.seed_data import seed_database

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)


async def main(database_url: str | None, with_tables: bool) -> None:
    await initialize_db(database_url)
    try:
        if with_tables:
            await create_tables()
        async with get_db_context() as db:
            created = await seed_database(db)
        logger.info(f"Seeding completed: {created}")
    finally:
        await close_db_connection()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the database with demo data")
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    parser.add_argument("--create-tables", action="store_true", help="Create missing tables first")
    args = parser.parse_args()

    asyncio.run(main(args.database_url, args.create_tables))

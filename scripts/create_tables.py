#!/usr/bin/env python
"""
Script to create the book club tables without running migrations
"""

# Standard library imports
import asyncio
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Third-party imports
from sqlalchemy import inspect

# Local application imports
from bookclub.core.db import async_engine

# Import all models to register them with Base
from bookclub.models import Base


async def create_tables():
    """Create all tables in the database"""
    print("Creating database tables...")

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    await async_engine.dispose()

    print("All tables created successfully!")
    print("\nTables:")
    for table in sorted(tables):
        print(f"  - {table}")


if __name__ == "__main__":
    asyncio.run(create_tables())

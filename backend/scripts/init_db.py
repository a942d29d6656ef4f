"""
Initialize the database: create the patients table.
Run with: python -m scripts.init_db
"""

import asyncio
from patient_service.database import engine, Base
from patient_service.models import Patient  # noqa: F401  registers the table on Base.metadata


async def init():
    print("Creating database tables...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("All tables created successfully.")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(init())

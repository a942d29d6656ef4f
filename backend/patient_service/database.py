from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool
from patient_service.config import get_settings

settings = get_settings()


def _engine_options(url: str) -> dict:
    options = {"echo": settings.database_echo}
    # SQLite files are opened per session so the engine can be shared between event loops
    if url.startswith("sqlite"):
        options["poolclass"] = NullPool
    return options


engine = create_async_engine(settings.database_url, **_engine_options(settings.database_url))

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding one session per request."""
    async with async_session() as session:
        yield session

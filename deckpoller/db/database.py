"""
Results database engine and session factory.

The engine targets settings.database_url (SQLite through aiosqlite unless
configured otherwise). The poll job loads known event ids and commits each
assembled event through async_session_factory.
"""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from deckpoller.config import settings
from deckpoller.models.db import Base

engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db() -> None:
    """Create the events and event_decks tables if they do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

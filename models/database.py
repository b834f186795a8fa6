# models/database.py
from typing import AsyncIterator, Dict

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from config.settings import settings

_engines: Dict[str, AsyncEngine] = {}
_session_factories: Dict[str, async_sessionmaker] = {}


class Base(DeclarativeBase):
    pass


def get_engine(url: str) -> AsyncEngine:
    """Return the engine for a database URL, creating it on first use."""
    if url not in _engines:
        _engines[url] = create_async_engine(url, echo=settings.database_echo)
    return _engines[url]


def get_session_factory(url: str) -> async_sessionmaker:
    if url not in _session_factories:
        _session_factories[url] = async_sessionmaker(get_engine(url), class_=AsyncSession, expire_on_commit=False)
    return _session_factories[url]


async def init_models(engine: AsyncEngine, *tables) -> None:
    """Create the given tables (or every mapped table) on an engine."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, tables=list(tables) or None)


async def get_resource_session() -> AsyncIterator[AsyncSession]:
    async with get_session_factory(settings.resource_database_url)() as session:
        yield session


async def get_song_session() -> AsyncIterator[AsyncSession]:
    async with get_session_factory(settings.song_database_url)() as session:
        yield session

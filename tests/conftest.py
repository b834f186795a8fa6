"""Shared fixtures: SQLite databases per service and wired test apps."""

import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from api import resource_main, song_main
from models.database import get_resource_session, get_song_session, init_models
from models.resource import Resource
from models.song import Song
from services.sync.client import SongServiceClient

from helpers import RecordingTransport

# =============================================================================
# DATABASES
# =============================================================================

async def _create_tables(url: str, table) -> None:
    engine = create_async_engine(url, poolclass=NullPool)
    await init_models(engine, table)
    await engine.dispose()


def _session_factory(url: str) -> async_sessionmaker:
    # NullPool: no connection outlives the event loop that opened it
    engine = create_async_engine(url, poolclass=NullPool)
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


def _session_override(factory: async_sessionmaker):
    async def _get_session():
        async with factory() as session:
            yield session

    return _get_session


@pytest.fixture
def resource_db(tmp_path) -> async_sessionmaker:
    url = f"sqlite+aiosqlite:///{tmp_path / 'resources.db'}"
    asyncio.run(_create_tables(url, Resource.__table__))
    return _session_factory(url)


@pytest.fixture
def song_db(tmp_path) -> async_sessionmaker:
    url = f"sqlite+aiosqlite:///{tmp_path / 'songs.db'}"
    asyncio.run(_create_tables(url, Song.__table__))
    return _session_factory(url)


# =============================================================================
# APPS
# =============================================================================

@pytest.fixture
def song_app(song_db):
    app = song_main.create_app()
    app.dependency_overrides[get_song_session] = _session_override(song_db)
    return app


@pytest.fixture
def song_client(song_app):
    return TestClient(song_app)


def build_resource_app(resource_db, transport) -> TestClient:
    http = httpx.AsyncClient(transport=transport, base_url="http://song-service")
    app = resource_main.create_app(song_client=SongServiceClient(http))
    app.dependency_overrides[get_resource_session] = _session_override(resource_db)
    return TestClient(app)


@pytest.fixture
def recording_transport():
    return RecordingTransport()


@pytest.fixture
def resource_client(resource_db, recording_transport):
    """Resource app whose song service calls are recorded, not delivered"""
    return build_resource_app(resource_db, httpx.MockTransport(recording_transport))


@pytest.fixture
def linked_resource_client(resource_db, song_app):
    """Resource app talking to a real in-process song app"""
    return build_resource_app(resource_db, httpx.ASGITransport(app=song_app))


@pytest.fixture
def make_resource_client(resource_db):
    """Build a resource app around any httpx handler standing in for the song service"""

    def _make(handler) -> TestClient:
        return build_resource_app(resource_db, httpx.MockTransport(handler))

    return _make

# api/dependencies.py
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from models.database import get_resource_session, get_song_session
from services.resources.service import ResourceService
from services.songs.service import SongService
from services.sync.client import SongServiceClient
from services.tags.extractor import TagExtractor


def get_song_client(request: Request) -> SongServiceClient:
    return request.app.state.song_client


def get_tag_extractor() -> TagExtractor:
    return TagExtractor()


def get_resource_service(
    session: AsyncSession = Depends(get_resource_session),
    extractor: TagExtractor = Depends(get_tag_extractor),
    song_client: SongServiceClient = Depends(get_song_client),
) -> ResourceService:
    return ResourceService(session, extractor, song_client)


def get_song_service(session: AsyncSession = Depends(get_song_session)) -> SongService:
    return SongService(session)

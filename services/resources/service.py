"""
Resource service - owns raw MP3 bytes and pushes metadata to the song service
"""

import asyncio
import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from api.errors import InvalidAudioFormat, InvalidContentType, NotFound
from config.settings import settings
from models.resource import Resource
from services.ids import join_ids, parse_csv_ids, parse_id
from services.sync.client import SongServiceClient, best_effort
from services.tags.extractor import TagExtractor

logger = logging.getLogger(__name__)

AUDIO_MPEG = "audio/mpeg"
MIN_MP3_SIZE = 3
MP3_SYNC_BYTE = 0xFF
MP3_FRAME_MASK = 0xE0
ID3_TAG = b"ID3"


# =============================================================================
# VALIDATION
# =============================================================================

def validate_content_type(content_type: Optional[str]) -> None:
    if not content_type or not content_type.startswith(AUDIO_MPEG):
        raise InvalidContentType(content_type or "unknown")


def validate_mp3(data: Optional[bytes]) -> None:
    """Accept data starting with an MPEG frame sync or an ID3 tag header."""
    if data is None or len(data) < MIN_MP3_SIZE:
        raise InvalidAudioFormat("Invalid MP3 file: data is null or too small")

    has_frame_sync = data[0] == MP3_SYNC_BYTE and (data[1] & MP3_FRAME_MASK) == MP3_FRAME_MASK
    has_id3_tag = data[:3] == ID3_TAG
    if not has_frame_sync and not has_id3_tag:
        raise InvalidAudioFormat("Invalid MP3 file: missing MP3 frame sync or ID3 tag")


# =============================================================================
# RESOURCE SERVICE
# =============================================================================

class ResourceService:
    """
    Stores resources and keeps the song service in step.

    The resource row is authoritative. Metadata sync runs after the row is
    committed and its outcome never changes what the caller gets back.
    """

    def __init__(
        self,
        session: AsyncSession,
        extractor: TagExtractor,
        song_client: SongServiceClient,
        max_csv_length: int = None,
    ):
        self.session = session
        self.extractor = extractor
        self.song_client = song_client
        self.max_csv_length = max_csv_length or settings.max_csv_length

    async def upload_resource(self, data: bytes, content_type: Optional[str]) -> int:
        validate_content_type(content_type)
        validate_mp3(data)

        resource = Resource(data=data)
        self.session.add(resource)
        await self.session.commit()
        logger.info(f"Resource saved with ID: {resource.id}")

        # Outcome deliberately dropped: metadata is best-effort
        outcome = await best_effort("metadata sync", self._extract_and_sync(resource.id, data))
        if not outcome.ok:
            logger.warning(f"Resource ID: {resource.id} was created but metadata is missing")

        return resource.id

    async def _extract_and_sync(self, resource_id: int, data: bytes) -> None:
        # mutagen parsing is synchronous; keep it off the event loop
        metadata = await asyncio.to_thread(self.extractor.extract, resource_id, data)
        await self.song_client.create_song(metadata)

    async def get_resource(self, raw_id: str) -> bytes:
        resource_id = parse_id(raw_id)
        resource = await self.session.get(Resource, resource_id)
        if resource is None:
            raise NotFound(f"Resource with ID={resource_id} not found")
        return resource.data

    async def delete_resources(self, ids: str) -> List[int]:
        """Delete existing ids, then ask the song service to drop their metadata."""
        requested = parse_csv_ids(ids, self.max_csv_length)

        deleted = []
        for resource_id in requested:
            if await self._exists(resource_id):
                await self.session.execute(delete(Resource).where(Resource.id == resource_id))
                deleted.append(resource_id)
                logger.debug(f"Deleted resource with ID: {resource_id}")
            else:
                logger.debug(f"Resource with ID: {resource_id} does not exist, skipping")
        await self.session.commit()

        if deleted:
            # Never raises; a failure leaves orphaned metadata, which is logged
            await self.song_client.delete_songs(join_ids(deleted))

        logger.info(f"Deleted {len(deleted)} resources out of {len(requested)} requested")
        return deleted

    async def _exists(self, resource_id: int) -> bool:
        result = await self.session.execute(select(Resource.id).where(Resource.id == resource_id))
        return result.scalar_one_or_none() is not None

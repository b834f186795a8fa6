"""
Song service - owns song metadata rows keyed by the resource id
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from api.errors import AlreadyExists, NotFound
from config.settings import settings
from models.song import Song
from services.ids import parse_csv_ids, parse_id
from services.songs.schemas import SongMetadata

logger = logging.getLogger(__name__)


class SongService:
    """Create-once, id-addressed store for song metadata"""

    def __init__(self, session: AsyncSession, max_csv_length: int = None):
        self.session = session
        self.max_csv_length = max_csv_length or settings.max_csv_length

    async def create_song(self, metadata: SongMetadata) -> int:
        """Persist metadata under the caller supplied id; never overwrites."""
        if await self._exists(metadata.id):
            raise AlreadyExists(f"Metadata for resource ID={metadata.id} already exists")

        self.session.add(Song(**metadata.model_dump()))
        try:
            await self.session.commit()
        except IntegrityError:
            # A concurrent create for the same id won the primary key
            await self.session.rollback()
            raise AlreadyExists(f"Metadata for resource ID={metadata.id} already exists")

        logger.info(f"Song metadata created with ID: {metadata.id}")
        return metadata.id

    async def get_song(self, raw_id: str) -> SongMetadata:
        song_id = parse_id(raw_id)
        song = await self.session.get(Song, song_id)
        if song is None:
            raise NotFound(f"Song metadata for ID={song_id} not found")
        return SongMetadata.model_validate(song)

    async def delete_songs(self, ids: str) -> List[int]:
        """Delete every listed id that exists; unknown ids are skipped."""
        requested = parse_csv_ids(ids, self.max_csv_length)

        deleted = []
        for song_id in requested:
            if await self._exists(song_id):
                await self.session.execute(delete(Song).where(Song.id == song_id))
                deleted.append(song_id)
            else:
                logger.debug(f"Song metadata with ID: {song_id} does not exist, skipping")

        await self.session.commit()
        logger.info(f"Deleted {len(deleted)} song metadata records out of {len(requested)} requested")
        return deleted

    async def _exists(self, song_id: int) -> bool:
        result = await self.session.execute(select(Song.id).where(Song.id == song_id))
        return result.scalar_one_or_none() is not None

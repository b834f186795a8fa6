"""
Song service client - propagates metadata creates and deletes from the
resource service to the song service
"""

import logging
from typing import Awaitable, Optional

import httpx
from pydantic import BaseModel

from api.errors import ServiceError, SyncFailure
from config.settings import settings
from services.tags.extractor import ExtractedMetadata

logger = logging.getLogger(__name__)

SONGS_ENDPOINT = "/songs"
ID_PARAM = "id"


class SyncOutcome(BaseModel):
    """Result of a best-effort sync; callers are free to ignore it"""
    operation: str
    ok: bool
    error: Optional[str] = None


async def best_effort(operation: str, call: Awaitable) -> SyncOutcome:
    """
    Await a sync step and report instead of raising.

    Extraction and transport failures arrive as ServiceError subclasses.
    Anything else is a bug in the step; it is logged with its traceback and
    still absorbed, since the resource write has already happened.
    """
    try:
        await call
    except ServiceError as e:
        logger.error(f"Best-effort {operation} failed: {e.message}")
        return SyncOutcome(operation=operation, ok=False, error=e.message)
    except Exception as e:
        logger.exception(f"Best-effort {operation} failed unexpectedly")
        return SyncOutcome(operation=operation, ok=False, error=repr(e))
    return SyncOutcome(operation=operation, ok=True)


class SongServiceClient:
    """HTTP client for the song service, addressed by logical name"""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    @classmethod
    def from_settings(cls) -> "SongServiceClient":
        # Bounded timeout, no retries: a failed sync is logged and left alone
        return cls(httpx.AsyncClient(
            base_url=settings.song_service_url,
            timeout=settings.song_service_timeout_seconds,
        ))

    async def create_song(self, metadata: ExtractedMetadata) -> None:
        """POST metadata; any transport error or non-2xx raises SyncFailure"""
        logger.debug(f"Sending metadata to Song Service for resource ID: {metadata.id}")

        try:
            response = await self.client.post(SONGS_ENDPOINT, json=metadata.model_dump())
            response.raise_for_status()
        except httpx.HTTPError as e:
            message = f"Failed to save metadata to Song Service for resource ID: {metadata.id}"
            logger.error(f"{message}: {e}")
            raise SyncFailure(message, resource_id=metadata.id) from e

        logger.info(f"Successfully saved metadata for resource ID: {metadata.id}")

    async def delete_songs(self, ids: str) -> SyncOutcome:
        """DELETE metadata for a CSV id list; failures are logged, never raised"""
        logger.debug(f"Requesting metadata deletion from Song Service for IDs: {ids}")

        try:
            response = await self.client.delete(SONGS_ENDPOINT, params={ID_PARAM: ids})
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(
                f"Failed to delete metadata from Song Service for IDs: {ids}. "
                f"This may result in orphaned metadata records: {e}"
            )
            return SyncOutcome(operation="metadata delete", ok=False, error=str(e))

        logger.info(f"Successfully requested deletion of metadata for IDs: {ids}")
        return SyncOutcome(operation="metadata delete", ok=True)

    async def close(self):
        await self.client.aclose()

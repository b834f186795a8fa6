"""
Tag extraction - turns raw MP3 bytes into a song metadata record

Missing or unreadable fields fall back to defaults, so a file without tags
still produces a complete record.
"""

import io
import logging
import math
from typing import Any, Callable, Dict, Optional

from mutagen.id3 import ID3, ID3NoHeaderError
from mutagen.mp3 import HeaderNotFoundError, MPEGInfo
from pydantic import BaseModel

from api.errors import ExtractionFailure

logger = logging.getLogger(__name__)

TITLE = "title"
ARTIST = "artist"
ALBUM = "album"
RELEASE_DATE = "release_date"
DURATION = "duration"

DEFAULT_VALUE = "Unknown"
DEFAULT_YEAR = "1900"
DEFAULT_DURATION = "00:00"
YEAR_LENGTH = 4

RawTags = Dict[str, Optional[str]]


class ExtractedMetadata(BaseModel):
    """Metadata as sent to the song service; validated on that side"""
    id: int
    name: str
    artist: str
    album: str
    duration: str
    year: str


# =============================================================================
# TAG READER
# =============================================================================

def read_raw_tags(data: bytes) -> RawTags:
    """Read raw tag values with mutagen; absent values come back as None"""
    fileobj = io.BytesIO(data)

    try:
        tags = ID3(fileobj)
    except ID3NoHeaderError:
        tags = None

    fileobj.seek(0)
    try:
        length = MPEGInfo(fileobj).length
    except HeaderNotFoundError:
        length = None

    return {
        TITLE: _frame_text(tags, "TIT2"),
        ARTIST: _frame_text(tags, "TPE1"),
        ALBUM: _frame_text(tags, "TALB"),
        RELEASE_DATE: _frame_text(tags, "TDRC"),
        DURATION: str(length) if length is not None else None,
    }


def _frame_text(tags: Any, key: str) -> Optional[str]:
    if tags is None or key not in tags:
        return None
    text_list = getattr(tags[key], "text", None)
    if not text_list:
        return None
    text = str(text_list[0]).strip()
    return text if text else None


# =============================================================================
# DEFAULTING
# =============================================================================

def extract_year(release_date: Optional[str]) -> str:
    if not release_date or len(release_date) < YEAR_LENGTH:
        logger.debug(f"No usable release date ({release_date!r}), using default year: {DEFAULT_YEAR}")
        return DEFAULT_YEAR
    return release_date[:YEAR_LENGTH]


def format_duration(raw_seconds: Optional[str]) -> str:
    """
    Render a seconds value as mm:ss.

    Fractions are truncated. Minutes are padded to two digits but never cut,
    so tracks of 100 minutes or more render with three or more minute digits.
    """
    if not raw_seconds:
        return DEFAULT_DURATION
    try:
        seconds = float(raw_seconds)
    except ValueError:
        logger.warning(f"Failed to parse duration: {raw_seconds}, using default: {DEFAULT_DURATION}")
        return DEFAULT_DURATION
    if not math.isfinite(seconds) or seconds < 0:
        logger.warning(f"Unusable duration: {raw_seconds}, using default: {DEFAULT_DURATION}")
        return DEFAULT_DURATION

    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def _value_or_default(value: Optional[str]) -> str:
    return value if value else DEFAULT_VALUE


# =============================================================================
# EXTRACTOR
# =============================================================================

class TagExtractor:
    """Pure bytes -> metadata conversion; the reader is swappable"""

    def __init__(self, reader: Callable[[bytes], RawTags] = read_raw_tags):
        self.reader = reader

    def extract(self, resource_id: int, data: bytes) -> ExtractedMetadata:
        logger.debug(f"Starting metadata extraction for resource ID: {resource_id}")

        try:
            raw = self.reader(data)
        except Exception as e:
            logger.error(f"Failed to extract metadata from MP3 file for resource ID: {resource_id}: {e}")
            raise ExtractionFailure("Failed to extract metadata from MP3 file") from e

        metadata = ExtractedMetadata(
            id=resource_id,
            name=_value_or_default(raw.get(TITLE)),
            artist=_value_or_default(raw.get(ARTIST)),
            album=_value_or_default(raw.get(ALBUM)),
            duration=format_duration(raw.get(DURATION)),
            year=extract_year(raw.get(RELEASE_DATE)),
        )
        logger.debug(
            f"Extracted metadata for resource ID: {resource_id} - Name: {metadata.name}, "
            f"Artist: {metadata.artist}, Album: {metadata.album}, "
            f"Duration: {metadata.duration}, Year: {metadata.year}"
        )
        return metadata

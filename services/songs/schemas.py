# services/songs/schemas.py
import re
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from services.ids import MAX_ID

DURATION_PATTERN = re.compile(r"^\d{2}:\d{2}$")
YEAR_PATTERN = re.compile(r"^\d{4}$")
MIN_YEAR = 1900
MAX_YEAR = 2099

REQUIRED_MESSAGES = {
    "id": "ID is required",
    "name": "Song name is required",
    "artist": "Artist name is required",
    "album": "Album name is required",
    "duration": "Duration is required",
    "year": "Year is required",
}


class SongMetadata(BaseModel):
    """Song metadata as accepted and returned by the song service"""
    # Defaults are validated so a missing field gets its own "is required" message
    model_config = ConfigDict(from_attributes=True, validate_default=True)

    id: Optional[Annotated[int, Field(gt=0, le=MAX_ID)]] = None
    name: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    duration: Optional[str] = None
    year: Optional[str] = None

    @field_validator(*REQUIRED_MESSAGES, mode="before")
    @classmethod
    def _check_present(cls, value, info: ValidationInfo):
        if value is None:
            raise ValueError(REQUIRED_MESSAGES[info.field_name])
        return value

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return _check_length(value, "Song name")

    @field_validator("artist")
    @classmethod
    def _check_artist(cls, value: str) -> str:
        return _check_length(value, "Artist name")

    @field_validator("album")
    @classmethod
    def _check_album(cls, value: str) -> str:
        return _check_length(value, "Album name")

    @field_validator("duration")
    @classmethod
    def _check_duration(cls, value: str) -> str:
        if not DURATION_PATTERN.fullmatch(value) or int(value[3:]) > 59:
            raise ValueError("Duration must be in mm:ss format with seconds between 00 and 59")
        return value

    @field_validator("year")
    @classmethod
    def _check_year(cls, value: str) -> str:
        if not YEAR_PATTERN.fullmatch(value) or not MIN_YEAR <= int(value) <= MAX_YEAR:
            raise ValueError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}")
        return value


class SongIdResponse(BaseModel):
    id: int


class DeleteResponse(BaseModel):
    ids: List[int]


def _check_length(value: str, label: str) -> str:
    if not 1 <= len(value) <= 100:
        raise ValueError(f"{label} must be between 1 and 100 characters")
    return value

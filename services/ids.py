# services/ids.py
"""Id parsing shared by the resource and song services."""

import re
from typing import List, Optional

from api.errors import InvalidId, InvalidRequest

_DIGITS = re.compile(r"^[+-]?\d+$")
# Largest value a BIGINT primary key can hold
MAX_ID = 2 ** 63 - 1


def _is_valid_id(text: str) -> bool:
    return bool(_DIGITS.fullmatch(text)) and 0 < int(text) <= MAX_ID


def parse_id(value: Optional[str]) -> int:
    """Parse a single path id; anything but a positive integer is InvalidId."""
    text = "" if value is None else str(value).strip()
    if not _is_valid_id(text):
        raise InvalidId(f"Invalid value '{value}' for ID. Must be a positive integer")
    return int(text)


def parse_csv_ids(ids: Optional[str], max_length: int) -> List[int]:
    """
    Parse a comma separated id list.

    The whole string is checked before any token: it must be non-blank and
    shorter than max_length characters. Empty tokens are skipped, and the first
    token that is not a positive integer aborts the whole parse.
    """
    if ids is None or not ids.strip():
        raise InvalidRequest("ID parameter is required")
    if len(ids) >= max_length:
        raise InvalidRequest(
            f"CSV string is too long: received {len(ids)} characters, maximum allowed is {max_length}"
        )

    parsed = []
    for token in ids.split(","):
        token = token.strip()
        if not token:
            continue
        if not _is_valid_id(token):
            raise InvalidId(f"Invalid ID format: '{token}'. Only positive integers are allowed")
        parsed.append(int(token))
    return parsed


def join_ids(ids: List[int]) -> str:
    return ",".join(str(i) for i in ids)

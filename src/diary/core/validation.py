"""Date-key validation and input clamping for diary entries."""

import re
from datetime import date

_KEY_RE = re.compile(r"[0-9]{8}")

TITLE_MAX_LENGTH = 100
BODY_MAX_LENGTH = 10_000
# Two-digit years are not accepted as keys
MIN_YEAR = 100


class InvalidEntryError(ValueError):
    """Raised when caller input cannot be stored as a diary entry."""


def is_valid_date_key(key: str) -> bool:
    """Check that key is YYYYMMDD and names a real calendar date."""
    if not _KEY_RE.fullmatch(key):
        return False
    try:
        value = key_to_date(key)
    except ValueError:
        return False
    return value.year >= MIN_YEAR


def key_to_date(key: str) -> date:
    return date(int(key[:4]), int(key[4:6]), int(key[6:8]))


def date_to_key(value: date) -> str:
    return value.strftime("%Y%m%d")


def date_input_to_key(value: str) -> str:
    """Convert a YYYY-MM-DD string to a YYYYMMDD key."""
    year, month, day = value.split("-")
    return f"{year}{month}{day}"


def key_to_date_input(key: str) -> str:
    """Convert a YYYYMMDD key to YYYY-MM-DD."""
    return f"{key[:4]}-{key[4:6]}-{key[6:8]}"


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n")


def clamp_title(title: str, limit: int = TITLE_MAX_LENGTH) -> str:
    return title.strip()[:limit]


def clamp_body(body: str, limit: int = BODY_MAX_LENGTH) -> str:
    return body[:limit]

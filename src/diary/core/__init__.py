"""Functional core - pure diary logic with no I/O."""

from .codec import escape_field, unescape_field
from .entry import DiaryEntry, decode_file, encode_file
from .theme import Theme, generate_theme
from .validation import (
    InvalidEntryError,
    clamp_body,
    clamp_title,
    date_to_key,
    is_valid_date_key,
    normalize_line_endings,
)

__all__ = [
    # Codec
    "escape_field",
    "unescape_field",
    # Entries
    "DiaryEntry",
    "decode_file",
    "encode_file",
    # Theme
    "Theme",
    "generate_theme",
    # Validation
    "InvalidEntryError",
    "clamp_body",
    "clamp_title",
    "date_to_key",
    "is_valid_date_key",
    "normalize_line_endings",
]

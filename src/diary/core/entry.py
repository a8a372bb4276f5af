"""Diary entry model and the TSV file format."""

import logging
import re
from dataclasses import dataclass
from typing import Iterable

from .codec import escape_field, unescape_field

logger = logging.getLogger(__name__)

FIELD_COUNT = 5
_LINE_SPLIT_RE = re.compile(r"\r?\n")


@dataclass
class DiaryEntry:
    """A single diary entry, keyed by its YYYYMMDD date."""

    key: str
    title: str
    body: str
    created_at: str
    updated_at: str

    def to_dict(self) -> dict[str, str]:
        return {
            "key": self.key,
            "title": self.title,
            "body": self.body,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    def to_line(self) -> str:
        """Serialize to one tab-separated line, without the line ending."""
        return "\t".join(
            [
                self.key,
                escape_field(self.title),
                escape_field(self.body),
                self.created_at,
                self.updated_at,
            ]
        )

    @classmethod
    def from_line(cls, line: str) -> "DiaryEntry | None":
        """Parse one TSV line. Returns None if the line has too few fields."""
        cols = line.split("\t")
        if len(cols) < FIELD_COUNT:
            return None
        key, title, body, created_at, updated_at = cols[:FIELD_COUNT]
        return cls(
            key=key,
            title=unescape_field(title),
            body=unescape_field(body),
            created_at=created_at,
            updated_at=updated_at,
        )


def decode_file(data: bytes) -> dict[str, DiaryEntry]:
    """Decode the diary file into a mapping of key to entry.

    Blank lines are ignored and lines with fewer than five fields are
    dropped. A key seen twice keeps its last line. Invalid UTF-8 bytes
    become U+FFFD instead of failing the whole file.
    """
    entries: dict[str, DiaryEntry] = {}
    for lineno, line in enumerate(_LINE_SPLIT_RE.split(data.decode("utf-8", errors="replace")), start=1):
        if not line.strip():
            continue
        entry = DiaryEntry.from_line(line)
        if entry is None:
            logger.warning(f"Skipping malformed diary line {lineno}: expected {FIELD_COUNT} fields")
            continue
        entries[entry.key] = entry
    return entries


def encode_file(entries: Iterable[DiaryEntry]) -> bytes:
    """Encode entries, in the order given, as newline-terminated TSV lines."""
    return "".join(f"{entry.to_line()}\n" for entry in entries).encode("utf-8")

"""Diary storage interface."""

from typing import Protocol

from ..core.entry import DiaryEntry


class DiaryStore(Protocol):
    """Interface for reading and writing diary entries.

    Keys are assumed to be valid YYYYMMDD date keys.
    """

    async def list(self) -> list[DiaryEntry]:
        """All entries, newest key first."""
        ...

    async def get(self, key: str) -> DiaryEntry | None:
        """Read the entry for a key. Returns None if not found."""
        ...

    async def upsert(self, key: str, title: str, body: str) -> DiaryEntry:
        """Create or overwrite the entry for a key."""
        ...

    async def delete(self, key: str) -> bool:
        """Remove the entry for a key. Returns whether it existed."""
        ...

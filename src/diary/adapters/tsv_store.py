"""TSV file diary storage adapter."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import aiofiles
import aiofiles.os

from ..core.entry import DiaryEntry, decode_file, encode_file
from ..gate import Gate
from .atomic_file import atomic_replace

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with milliseconds and a Z suffix."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TsvDiaryStore:
    """
    Single-file diary storage.

    Implements DiaryStore protocol. All entries live in one TSV file, one line
    per entry, sorted by key. Every operation holds the gate across its whole
    read-modify-write so concurrent calls in this process never interleave.
    """

    def __init__(self, data_file: Path | str, gate: Gate, clock: Clock = utc_now):
        self.data_file = Path(data_file).expanduser()
        self.gate = gate
        self.clock = clock

    async def _load(self) -> dict[str, DiaryEntry]:
        """Read and decode the data file. A missing file is an empty diary."""
        await aiofiles.os.makedirs(self.data_file.parent, exist_ok=True)
        try:
            async with aiofiles.open(self.data_file, "rb") as f:
                raw = await f.read()
        except FileNotFoundError:
            return {}
        return decode_file(raw)

    async def _save(self, entries: dict[str, DiaryEntry]) -> None:
        ordered = [entries[key] for key in sorted(entries)]
        await atomic_replace(self.data_file, encode_file(ordered))

    async def list(self) -> list[DiaryEntry]:
        """All entries, newest key first."""
        async with self.gate.hold():
            entries = await self._load()
        return sorted(entries.values(), key=lambda e: e.key, reverse=True)

    async def get(self, key: str) -> DiaryEntry | None:
        """Read the entry for a key. Returns None if not found."""
        async with self.gate.hold():
            entries = await self._load()
        return entries.get(key)

    async def upsert(self, key: str, title: str, body: str) -> DiaryEntry:
        """Create or overwrite an entry, keeping its original created_at."""
        async with self.gate.hold():
            entries = await self._load()
            now = format_timestamp(self.clock())
            existing = entries.get(key)
            entry = DiaryEntry(
                key=key,
                title=title,
                body=body,
                created_at=existing.created_at if existing and existing.created_at else now,
                updated_at=now,
            )
            entries[key] = entry
            await self._save(entries)
        logger.info(f"{'Updated' if existing else 'Created'} diary entry {key}")
        return entry

    async def delete(self, key: str) -> bool:
        """Remove an entry. The file is rewritten even if the key was absent."""
        async with self.gate.hold():
            entries = await self._load()
            existed = entries.pop(key, None) is not None
            await self._save(entries)
        if existed:
            logger.info(f"Deleted diary entry {key}")
        return existed

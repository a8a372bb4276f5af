"""Shared workflow layer between the CLI and the diary store.

Validates and normalizes caller input before it reaches the store, which
trusts its keys.
"""

from .adapters.tsv_store import TsvDiaryStore
from .config import Config
from .core.entry import DiaryEntry
from .core.validation import (
    InvalidEntryError,
    clamp_body,
    clamp_title,
    is_valid_date_key,
    normalize_line_endings,
)
from .gate import shared_gate
from .ports.diary_store import DiaryStore


def get_store(config: Config) -> TsvDiaryStore:
    """Build the diary store for the configured file, guarded by the shared gate."""
    return TsvDiaryStore(config.data_path(), gate=shared_gate())


def require_valid_key(key: str) -> str:
    if not is_valid_date_key(key):
        raise InvalidEntryError(f"Invalid date key {key!r}. Expected YYYYMMDD.")
    return key


async def read_entry(store: DiaryStore, key: str) -> DiaryEntry | None:
    return await store.get(require_valid_key(key))


async def save_entry(store: DiaryStore, config: Config, key: str, title: str, body: str) -> DiaryEntry:
    """Normalize, clamp and store an entry. Raises InvalidEntryError on bad input."""
    require_valid_key(key)
    title = clamp_title(normalize_line_endings(title), config.title_max_length)
    body = clamp_body(normalize_line_endings(body), config.body_max_length)
    if not title:
        raise InvalidEntryError("Title is required.")
    return await store.upsert(key, title, body)


async def remove_entry(store: DiaryStore, key: str) -> bool:
    return await store.delete(require_valid_key(key))

"""Crash-safe whole-file replacement.

Uses the write-to-temp-then-rename pattern:
1. Write to a temp file in the target's own directory
2. Flush + fsync it
3. os.replace() it onto the target (atomic on the same filesystem)

Readers see either the old file or the new one, never a partial write.
"""

import asyncio
import logging
import os
import uuid
from pathlib import Path

import aiofiles
import aiofiles.os

logger = logging.getLogger(__name__)


def temp_path_for(path: Path) -> Path:
    """A fresh temp file name beside path."""
    return path.with_name(f".{path.name}.{uuid.uuid4().hex}.tmp")


async def atomic_replace(path: Path | str, data: bytes) -> None:
    """Replace the contents of path with data atomically.

    If writing the temp file fails it is removed and the error re-raised.
    If the final rename fails the temp file is left in place.
    """
    path = Path(path)
    tmp_path = temp_path_for(path)
    try:
        async with aiofiles.open(tmp_path, "wb") as f:
            await f.write(data)
            await f.flush()
            await asyncio.to_thread(os.fsync, f.fileno())
    except BaseException:
        try:
            await aiofiles.os.remove(tmp_path)
        except FileNotFoundError:
            pass
        raise

    await aiofiles.os.replace(tmp_path, path)
    logger.debug(f"Replaced {path} ({len(data)} bytes)")

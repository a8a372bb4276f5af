"""Adapters - I/O implementations of ports."""

from .atomic_file import atomic_replace
from .tsv_store import TsvDiaryStore

__all__ = [
    "atomic_replace",
    "TsvDiaryStore",
]

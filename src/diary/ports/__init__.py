"""Ports - interfaces/protocols for external dependencies."""

from .diary_store import DiaryStore

__all__ = [
    "DiaryStore",
]

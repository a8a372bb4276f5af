"""Tests for the shared workflow layer."""

import asyncio
from pathlib import Path

import pytest

from diary.config import DEFAULT_DATA_FILE, Config
from diary.core.validation import InvalidEntryError
from diary.gate import shared_gate
from diary.workflows import get_store, read_entry, remove_entry, save_entry


@pytest.fixture
def config(tmp_path):
    return Config(data_file=str(tmp_path / "diary.tsv"))


@pytest.fixture
def store(config):
    return get_store(config)


class TestGetStore:
    def test_uses_configured_file(self, tmp_path, config):
        store = get_store(config)
        assert store.data_file == tmp_path / "diary.tsv"

    def test_expands_user_path(self):
        store = get_store(Config(data_file="~/some/diary.tsv"))
        assert "~" not in str(store.data_file)
        assert store.data_file == Path.home() / "some" / "diary.tsv"

    def test_falls_back_to_default(self):
        store = get_store(Config(data_file=""))
        assert store.data_file == DEFAULT_DATA_FILE

    def test_stores_share_one_gate(self, config):
        assert get_store(config).gate is get_store(config).gate is shared_gate()


class TestSaveEntry:
    def test_saves_normalized_entry(self, store, config):
        entry = asyncio.run(save_entry(store, config, "20240101", "  Title  ", "a\r\nb"))
        assert entry.title == "Title"
        assert entry.body == "a\nb"
        assert asyncio.run(store.get("20240101")) == entry

    def test_clamps_to_config_limits(self, store):
        config = Config(data_file=str(store.data_file), title_max_length=5, body_max_length=3)
        entry = asyncio.run(save_entry(store, config, "20240101", "Titles galore", "abcdef"))
        assert entry.title == "Title"
        assert entry.body == "abc"

    def test_rejects_invalid_key(self, store, config):
        with pytest.raises(InvalidEntryError, match="Expected YYYYMMDD"):
            asyncio.run(save_entry(store, config, "20240230", "Title", "Body"))
        assert not store.data_file.exists()

    def test_rejects_blank_title(self, store, config):
        with pytest.raises(InvalidEntryError, match="Title is required"):
            asyncio.run(save_entry(store, config, "20240101", "   ", "Body"))


class TestReadAndRemove:
    def test_read_entry_validates_key(self, store):
        with pytest.raises(InvalidEntryError):
            asyncio.run(read_entry(store, "2024-01-01"))

    def test_remove_entry(self, store, config):
        asyncio.run(save_entry(store, config, "20240101", "Title", "Body"))
        assert asyncio.run(remove_entry(store, "20240101")) is True
        assert asyncio.run(read_entry(store, "20240101")) is None

    def test_remove_entry_validates_key(self, store):
        with pytest.raises(InvalidEntryError):
            asyncio.run(remove_entry(store, "20241301"))

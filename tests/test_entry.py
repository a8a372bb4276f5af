"""Tests for the diary entry model and TSV file format."""

import pytest

from diary.core.entry import DiaryEntry, decode_file, encode_file


@pytest.fixture
def make_entry():
    """Factory for creating entries."""
    def _make(key: str, title: str = "Title", body: str = "Body") -> DiaryEntry:
        return DiaryEntry(
            key=key,
            title=title,
            body=body,
            created_at="2024-01-01T00:00:00.000Z",
            updated_at="2024-01-02T00:00:00.000Z",
        )
    return _make


class TestDiaryEntry:
    def test_to_line(self, make_entry):
        entry = make_entry("20240101", title="A\tB", body="x\ny")
        assert entry.to_line() == (
            "20240101\tA\\tB\tx\\ny\t2024-01-01T00:00:00.000Z\t2024-01-02T00:00:00.000Z"
        )

    def test_from_line_too_few_fields(self):
        assert DiaryEntry.from_line("20240101\tTitle\tBody") is None

    def test_from_line_ignores_extra_fields(self):
        entry = DiaryEntry.from_line("20240101\tT\tB\tc\tu\textra")
        assert entry == DiaryEntry("20240101", "T", "B", "c", "u")

    def test_to_dict(self, make_entry):
        d = make_entry("20240101").to_dict()
        assert d["key"] == "20240101"
        assert set(d) == {"key", "title", "body", "created_at", "updated_at"}


class TestEncodeFile:
    def test_empty(self):
        assert encode_file([]) == b""

    def test_one_line_per_entry_with_trailing_newline(self, make_entry):
        data = encode_file([make_entry("20240101"), make_entry("20240102")])
        text = data.decode("utf-8")
        assert text.endswith("\n")
        assert text.count("\n") == 2

    def test_keeps_caller_order(self, make_entry):
        data = encode_file([make_entry("20240102"), make_entry("20240101")])
        lines = data.decode("utf-8").splitlines()
        assert [line.split("\t")[0] for line in lines] == ["20240102", "20240101"]

    def test_utf8(self, make_entry):
        data = encode_file([make_entry("20240101", title="일기")])
        assert "일기".encode("utf-8") in data


class TestDecodeFile:
    def test_empty(self):
        assert decode_file(b"") == {}

    def test_round_trip(self, make_entry):
        entries = [
            make_entry("20240103", title="Third", body="tab\there"),
            make_entry("20240101", title="First", body="two\nlines"),
            make_entry("20240102", title="Second", body="back\\slash"),
        ]
        decoded = decode_file(encode_file(entries))
        assert decoded == {e.key: e for e in entries}

    def test_accepts_crlf(self):
        data = b"20240101\tA\tB\tc\tu\r\n20240102\tC\tD\tc\tu\r\n"
        decoded = decode_file(data)
        assert decoded["20240101"].updated_at == "u"
        assert decoded["20240102"].title == "C"

    def test_skips_blank_lines(self):
        data = b"\n   \n20240101\tA\tB\tc\tu\n\n"
        assert list(decode_file(data)) == ["20240101"]

    def test_skips_corrupt_line(self):
        data = (
            b"20240101\tA\tB\tc\tu\n"
            b"20240102\tbroken\tline\n"
            b"20240103\tC\tD\tc\tu\n"
        )
        decoded = decode_file(data)
        assert list(decoded) == ["20240101", "20240103"]
        assert decoded["20240103"].body == "D"

    def test_logs_corrupt_line(self, caplog):
        decode_file(b"only\tthree\tfields\n")
        assert "malformed diary line 1" in caplog.text

    def test_duplicate_key_last_wins(self):
        data = b"20240101\tOld\tB\tc\tu\n20240101\tNew\tB\tc\tu\n"
        assert decode_file(data)["20240101"].title == "New"

    def test_key_and_timestamps_not_unescaped(self):
        data = b"20240101\tA\tB\tc\\n\tu\\t\n"
        entry = decode_file(data)["20240101"]
        assert entry.created_at == "c\\n"
        assert entry.updated_at == "u\\t"

    def test_invalid_utf8_replaced_not_fatal(self):
        data = b"20240101\tA\tB\tc\tu\n\x80garbage\n20240102\tT\xff\tD\tc\tu\n"
        decoded = decode_file(data)
        assert list(decoded) == ["20240101", "20240102"]
        assert decoded["20240102"].title == "T\ufffd"

    def test_does_not_split_on_other_line_separators(self):
        data = "20240101\tA\tpara\u2028graph\tc\tu\n".encode("utf-8")
        assert decode_file(data)["20240101"].body == "para\u2028graph"

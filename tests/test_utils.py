"""Tests for share server helper functions."""

import uuid

from share_api.utils import format_file_size, generate_uuid, join_url, text_preview


class TestFormatFileSize:
    def test_bytes(self):
        assert format_file_size(500) == "500 B"
        assert format_file_size(0) == "0 B"
        assert format_file_size(1023) == "1023 B"

    def test_kilobytes(self):
        assert format_file_size(2048) == "2.0 KB"
        assert format_file_size(1536) == "1.5 KB"

    def test_megabytes(self):
        assert format_file_size(5_242_880) == "5.00 MB"
        assert format_file_size(1024 * 1024) == "1.00 MB"


class TestTextPreview:
    def test_short_text_unchanged(self):
        assert text_preview("Hello World") == "Hello World"

    def test_exactly_fifty_chars_unchanged(self):
        text = "x" * 50
        assert text_preview(text) == text

    def test_long_text_truncated(self):
        text = "abcdefghij" * 5 + "Z"
        assert len(text) == 51
        assert text_preview(text) == "abcdefghij" * 5 + "..."


def test_generate_uuid_is_uuid4():
    value = generate_uuid()
    assert uuid.UUID(value).version == 4
    assert generate_uuid() != value


def test_join_url_strips_trailing_slash():
    assert join_url("http://host/", "/view?id=1") == "http://host/view?id=1"
    assert join_url("http://host", "/view?id=1") == "http://host/view?id=1"

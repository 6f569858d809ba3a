"""Integration tests for database repositories."""

import sqlite3
from datetime import datetime

import pytest

from share_api.database import get_db_connection, get_row_value
from share_api.password_gate import fingerprint
from share_api.repositories.file_share_repository import FileShareRepository, NewFileShare
from share_api.repositories.text_share_repository import NewTextShare, TextShareRepository


class TestDatabaseHelpers:
    """Test database helper functions."""

    def test_get_row_value_defaults(self, test_db):
        TextShareRepository.insert(NewTextShare(content="hello"))
        with get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM text_messages")
            row = cursor.fetchone()

        assert get_row_value(row, "content") == "hello"
        assert get_row_value(row, "password_hash") is None
        assert get_row_value(row, "password_hash", "default") == "default"
        assert get_row_value(row, "nonexistent", "default") == "default"


class TestTextShareRepository:
    """Test TextShareRepository with various scenarios."""

    def test_insert_assigns_id_and_timestamp(self, test_db):
        share = TextShareRepository.insert(NewTextShare(content="Hello World"))

        assert share.id
        assert share.content == "Hello World"
        assert share.password_hash is None
        assert isinstance(share.created_at, datetime)
        assert share.kind == "text"
        assert not share.is_gated

    def test_ids_are_unique(self, test_db):
        first = TextShareRepository.insert(NewTextShare(content="a"))
        second = TextShareRepository.insert(NewTextShare(content="a"))
        assert first.id != second.id

    def test_get_by_id_round_trip(self, test_db):
        created = TextShareRepository.insert(
            NewTextShare(content="  keep spacing\n", password_hash=fingerprint("pw"))
        )

        fetched = TextShareRepository.get_by_id(created.id)

        assert fetched == created
        assert fetched.content == "  keep spacing\n"
        assert fetched.is_gated

    def test_get_by_id_not_found(self, test_db):
        assert TextShareRepository.get_by_id("missing") is None

    def test_insert_fails_without_schema(self, tmp_path, monkeypatch):
        monkeypatch.setattr("share_api.database.DATABASE_PATH", str(tmp_path / "empty.db"))
        with pytest.raises(sqlite3.OperationalError):
            TextShareRepository.insert(NewTextShare(content="x"))


class TestFileShareRepository:
    """Test FileShareRepository with various scenarios."""

    def _new_share(self, **overrides):
        values = dict(
            file_name="report.pdf",
            file_path="abc/report.pdf",
            file_size=2048,
            public_url="http://testserver/blobs/abc/report.pdf",
            file_type="application/pdf",
        )
        values.update(overrides)
        return NewFileShare(**values)

    def test_insert_and_fetch(self, test_db):
        created = FileShareRepository.insert(self._new_share())

        fetched = FileShareRepository.get_by_id(created.id)

        assert fetched == created
        assert fetched.kind == "file"
        assert fetched.file_size == 2048
        assert fetched.file_type == "application/pdf"
        assert not fetched.is_gated

    def test_empty_type_defaults_to_octet_stream(self, test_db):
        created = FileShareRepository.insert(self._new_share(file_type=""))
        assert created.file_type == "application/octet-stream"
        assert FileShareRepository.get_by_id(created.id).file_type == "application/octet-stream"

    def test_stores_fingerprint(self, test_db):
        created = FileShareRepository.insert(self._new_share(password_hash=fingerprint("pw")))
        assert FileShareRepository.get_by_id(created.id).password_hash == fingerprint("pw")

    def test_duplicate_storage_path_rejected(self, test_db):
        FileShareRepository.insert(self._new_share())
        with pytest.raises(sqlite3.IntegrityError):
            FileShareRepository.insert(self._new_share())

    def test_get_by_id_not_found(self, test_db):
        assert FileShareRepository.get_by_id("missing") is None

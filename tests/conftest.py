"""Shared pytest fixtures for all tests."""

from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from share_api.database import init_database


ORIGIN = "http://testserver"


@pytest.fixture
def test_db(tmp_path, monkeypatch) -> Generator[Path, None, None]:
    """
    Create a temporary test database for each test.
    """
    db_path = tmp_path / "test.db"
    monkeypatch.setattr("share_api.database.DATABASE_PATH", str(db_path))
    monkeypatch.setattr("share_api.config.DATABASE_PATH", str(db_path))
    init_database()
    yield db_path


@pytest.fixture
def blob_dir(tmp_path, monkeypatch) -> Path:
    """
    Point the blob store at a temporary directory.
    """
    blobs = tmp_path / "blobs"
    monkeypatch.setattr("blobstore.blob_storage.BLOBS_DIR", blobs)
    return blobs


@pytest.fixture
def client(test_db, blob_dir, monkeypatch):
    """
    Create FastAPI test client backed by the temporary stores.
    """
    monkeypatch.setattr("share_api.config.PUBLIC_ORIGIN", None)
    from share_api.main import app
    return TestClient(app)


@pytest.fixture
def sample_png():
    """
    Small binary payload standing in for an image upload.
    """
    return b"\x89PNG\r\n\x1a\n" + b"\x00" * 128

"""Manages uploaded blobs on disk under slash-separated storage keys."""

import os
from pathlib import Path
from typing import Iterator, Optional

from common.constants import BLOB_STREAM_PIECE_SIZE, DEFAULT_BLOB_STORAGE_PATH
from common.logging_config import get_logger

logger = get_logger(__name__)

BLOBS_DIR = Path(os.environ.get("QRSHARE_BLOB_STORAGE_PATH", DEFAULT_BLOB_STORAGE_PATH))


class BlobExistsError(Exception):
    """
    Raised when writing to a key that is already occupied.
    """
    pass


class InvalidBlobKeyError(ValueError):
    """
    Raised when a key is empty or would escape the storage directory.
    """
    pass


def ensure_blobs_directory() -> None:
    """Ensure blobs directory exists."""
    BLOBS_DIR.mkdir(parents=True, exist_ok=True)


def get_blob_path(key: str) -> Path:
    """
    Resolve the on-disk path for a storage key.

    Args:
        key: Storage key such as "<uuid>/<file name>"

    Returns:
        Path object inside the blobs directory

    Raises:
        InvalidBlobKeyError: If the key is empty, absolute or traverses upwards
    """
    parts = [part for part in key.split("/") if part]
    if not parts or any(part in (".", "..") for part in parts) or "\\" in key or "\x00" in key:
        raise InvalidBlobKeyError(f"Invalid storage key: {key!r}")
    return BLOBS_DIR.joinpath(*parts)


def write_blob(key: str, data: bytes, overwrite: bool = False) -> str:
    """
    Write blob data to disk.

    Args:
        key: Storage key
        data: Raw bytes
        overwrite: Replace an existing blob at the same key

    Returns:
        The storage key the data was written under

    Raises:
        BlobExistsError: If the key is taken and overwrite is disabled
        InvalidBlobKeyError: If the key is malformed
        OSError: If write operation fails
    """
    ensure_blobs_directory()
    filepath = get_blob_path(key)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    mode = "wb" if overwrite else "xb"
    try:
        with open(filepath, mode) as f:
            f.write(data)
    except FileExistsError:
        raise BlobExistsError(f"The resource already exists: {key}")

    logger.debug(f"Wrote blob {key} ({len(data)} bytes)")
    return key


def read_blob(key: str) -> bytes:
    """
    Read an entire blob from disk.

    Raises:
        FileNotFoundError: If blob does not exist
    """
    return get_blob_path(key).read_bytes()


def read_blob_streaming(key: str, piece_size: int = BLOB_STREAM_PIECE_SIZE) -> Iterator[bytes]:
    """
    Stream blob data in pieces.

    Args:
        key: Storage key
        piece_size: Size of each piece in bytes (default 64KB)

    Yields:
        Blob data pieces

    Raises:
        FileNotFoundError: If blob does not exist
    """
    filepath = get_blob_path(key)
    with open(filepath, 'rb') as f:
        while True:
            piece = f.read(piece_size)
            if not piece:
                break
            yield piece


def blob_exists(key: str) -> bool:
    """Check if a blob exists on disk. Malformed keys never exist."""
    try:
        return get_blob_path(key).is_file()
    except InvalidBlobKeyError:
        return False


def get_blob_size(key: str) -> Optional[int]:
    """
    Get size of a blob in bytes.

    Returns:
        Size in bytes, or None if blob doesn't exist
    """
    if not blob_exists(key):
        return None
    return get_blob_path(key).stat().st_size

"""Client abstraction for storing uploads in the blob store."""

import asyncio
from typing import Iterator
from urllib.parse import quote

from blobstore import blob_storage
from blobstore.blob_storage import BlobExistsError, InvalidBlobKeyError
from common.logging_config import get_logger
from share_api.config import BLOB_ROUTE_PREFIX
from share_api.exceptions import ShareNotFoundError, UploadError
from share_api.utils import join_url

logger = get_logger(__name__)


class BlobStoreClient:
    """
    Async facade over the blob store.
    Disk writes run in a worker thread so the event loop stays free.
    """

    async def put(self, key: str, data: bytes) -> str:
        """
        Store bytes under a key that must not exist yet.

        Args:
            key: Storage key ("<uuid>/<file name>")
            data: Raw file contents

        Returns:
            The stored key

        Raises:
            UploadError: If the key is taken, malformed, or the write fails
        """
        try:
            stored_key = await asyncio.to_thread(blob_storage.write_blob, key, data, False)
        except BlobExistsError as e:
            logger.warning(f"Blob upload refused, key already exists: {key}")
            raise UploadError(str(e)) from e
        except InvalidBlobKeyError as e:
            logger.warning(f"Blob upload refused, invalid key: {key}")
            raise UploadError(str(e)) from e
        except OSError as e:
            logger.error(f"Blob upload failed for {key}: {e}", exc_info=True)
            raise UploadError(f"Upload failed: {e}") from e

        logger.info(f"Stored blob {stored_key} ({len(data)} bytes)")
        return stored_key

    @staticmethod
    def public_url(key: str, origin: str) -> str:
        """
        Resolve the public address a stored blob is served from.
        """
        return join_url(origin, f"{BLOB_ROUTE_PREFIX}/{quote(key)}")

    @staticmethod
    def stream(key: str) -> Iterator[bytes]:
        """
        Stream a stored blob.

        Raises:
            ShareNotFoundError: If no blob exists under the key
        """
        if not blob_storage.blob_exists(key):
            raise ShareNotFoundError(f"Blob not found: {key}")
        return blob_storage.read_blob_streaming(key)

    @staticmethod
    def size(key: str) -> int:
        size = blob_storage.get_blob_size(key)
        if size is None:
            raise ShareNotFoundError(f"Blob not found: {key}")
        return size

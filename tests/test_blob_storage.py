"""Tests for the on-disk blob store and its async client."""

import pytest

from blobstore import blob_storage
from blobstore.blob_storage import BlobExistsError, InvalidBlobKeyError
from share_api.blob_client import BlobStoreClient
from share_api.exceptions import ShareNotFoundError, UploadError


class TestBlobStorage:
    def test_write_and_read(self, blob_dir):
        blob_storage.write_blob("abc/hello.txt", b"hello")

        assert (blob_dir / "abc" / "hello.txt").read_bytes() == b"hello"
        assert blob_storage.read_blob("abc/hello.txt") == b"hello"
        assert blob_storage.blob_exists("abc/hello.txt")
        assert blob_storage.get_blob_size("abc/hello.txt") == 5

    def test_overwrite_disabled_by_default(self, blob_dir):
        blob_storage.write_blob("abc/hello.txt", b"first")
        with pytest.raises(BlobExistsError):
            blob_storage.write_blob("abc/hello.txt", b"second")
        assert blob_storage.read_blob("abc/hello.txt") == b"first"

    def test_overwrite_when_enabled(self, blob_dir):
        blob_storage.write_blob("abc/hello.txt", b"first")
        blob_storage.write_blob("abc/hello.txt", b"second", overwrite=True)
        assert blob_storage.read_blob("abc/hello.txt") == b"second"

    def test_same_name_under_different_prefixes(self, blob_dir):
        blob_storage.write_blob("one/report.pdf", b"1")
        blob_storage.write_blob("two/report.pdf", b"2")
        assert blob_storage.read_blob("one/report.pdf") == b"1"
        assert blob_storage.read_blob("two/report.pdf") == b"2"

    @pytest.mark.parametrize("key", ["", "/", "../escape.txt", "abc/../../escape.txt", "abc/./x"])
    def test_rejects_unsafe_keys(self, blob_dir, key):
        with pytest.raises(InvalidBlobKeyError):
            blob_storage.write_blob(key, b"x")
        assert not blob_storage.blob_exists(key)

    def test_streaming_in_pieces(self, blob_dir):
        blob_storage.write_blob("abc/data.bin", b"x" * 10)
        pieces = list(blob_storage.read_blob_streaming("abc/data.bin", piece_size=4))
        assert pieces == [b"xxxx", b"xxxx", b"xx"]

    def test_missing_blob(self, blob_dir):
        assert not blob_storage.blob_exists("nope/none.txt")
        assert blob_storage.get_blob_size("nope/none.txt") is None


class TestBlobStoreClient:
    @pytest.mark.asyncio
    async def test_put_returns_key(self, blob_dir):
        client = BlobStoreClient()
        key = await client.put("abc/file.txt", b"data")
        assert key == "abc/file.txt"
        assert blob_storage.read_blob(key) == b"data"

    @pytest.mark.asyncio
    async def test_put_existing_key_raises_upload_error(self, blob_dir):
        client = BlobStoreClient()
        await client.put("abc/file.txt", b"data")
        with pytest.raises(UploadError):
            await client.put("abc/file.txt", b"other")

    @pytest.mark.asyncio
    async def test_put_invalid_key_raises_upload_error(self, blob_dir):
        with pytest.raises(UploadError):
            await BlobStoreClient().put("../x", b"data")

    def test_public_url_quotes_key(self):
        url = BlobStoreClient.public_url("abc/my report.pdf", "http://host/")
        assert url == "http://host/blobs/abc/my%20report.pdf"

    def test_stream_missing_blob(self, blob_dir):
        with pytest.raises(ShareNotFoundError):
            BlobStoreClient.stream("abc/missing.txt")

"""Public blob addresses: serves stored uploads by storage key."""

import mimetypes
from urllib.parse import quote

from fastapi import APIRouter
from fastapi.responses import StreamingResponse

from common.constants import DEFAULT_MIME_TYPE
from share_api.blob_client import BlobStoreClient
from share_api.config import BLOB_ROUTE_PREFIX

router = APIRouter(prefix=BLOB_ROUTE_PREFIX, tags=["Blobs"])


@router.get("/{key:path}")
async def download_blob(key: str):
    """
    Download a stored upload.

    Parameters:
        - key: Storage key ("<uuid>/<file name>")

    Returns:
        - StreamingResponse with the file data

    Raises:
        - 404: No blob under this key
    """
    size = BlobStoreClient.size(key)
    stream = BlobStoreClient.stream(key)
    file_name = key.rsplit("/", 1)[-1]
    media_type = mimetypes.guess_type(file_name)[0] or DEFAULT_MIME_TYPE

    return StreamingResponse(
        stream,
        media_type=media_type,
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{quote(file_name)}",
            "Content-Length": str(size),
            "Cache-Control": "public, max-age=3600",
        }
    )

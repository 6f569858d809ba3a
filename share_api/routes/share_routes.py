"""Share creation and viewing API routes."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from common.constants import MAX_UPLOAD_SIZE_BYTES
from share_api.exceptions import MissingIdError, PersistenceError, ShareNotFoundError
from share_api.dependencies import get_access_resolver, get_origin, get_share_service
from share_api.schemas.common import ErrorResponse
from share_api.schemas.shares import (
    CreateTextShareRequest,
    FileContentResponse,
    ShareCreatedResponse,
    TextContentResponse,
    UnlockRequest,
    ViewResponse
)
from share_api.services.access_resolver import AccessResolver, ViewSession, ViewState
from share_api.services.share_service import ShareService
from share_api.types import ShareResult
from share_api.upload_validator import FileCandidate, select_first
from share_api.utils import format_file_size

router = APIRouter(prefix="/api/shares", tags=["Shares"])

# Multipart parts for files the browser cannot type arrive as octet-stream;
# treat them like an empty browser-reported type.
UNKNOWN_UPLOAD_TYPES = {"", "application/octet-stream"}

VIEW_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


def _created(result: ShareResult) -> ShareCreatedResponse:
    return ShareCreatedResponse(
        view_url=result.view_url,
        display_name=result.display_name,
        share_id=result.share_id,
        degraded=result.degraded,
    )


async def read_upload(files: List[UploadFile]) -> tuple[FileCandidate, bytes]:
    """
    Read the first uploaded part of a selection into a candidate descriptor and its bytes.

    Parts after the first are ignored and never read.

    Raises:
        ValidationError: If no part carries a file name
    """
    file = select_first(part for part in files if part.filename)

    # Stop reading one byte past the limit; validation rejects the rest.
    data = await file.read(MAX_UPLOAD_SIZE_BYTES + 1)
    size_bytes = len(data)
    if size_bytes > MAX_UPLOAD_SIZE_BYTES and file.size:
        size_bytes = file.size
    # Also lets API clients that declare octet-stream past the allow-list.
    mime_type = file.content_type or ""
    if mime_type in UNKNOWN_UPLOAD_TYPES:
        mime_type = ""
    return FileCandidate(name=file.filename, size_bytes=size_bytes, mime_type=mime_type), data


def view_response(session: ViewSession) -> ViewResponse:
    """
    Convert a loaded view session into its API representation.

    Raises:
        MissingIdError: If no id was supplied
        ShareNotFoundError: If the share does not exist
        PersistenceError: If the share could not be fetched
    """
    if session.state is ViewState.ERROR:
        if not session.share_id:
            raise MissingIdError("Missing id")
        raise PersistenceError(session.error or "Failed to load share")
    if session.state is ViewState.NOT_FOUND:
        raise ShareNotFoundError(f"Share not found: {session.share_id}")

    record = session.record
    response = ViewResponse(
        id=record.id,
        kind=record.kind,
        state=session.state.value,
        created_at=record.created_at.isoformat(),
        notice=session.notice.value if session.notice else None,
    )

    unlocked = session.unlocked_record
    if unlocked is None:
        return response
    if unlocked.kind == "text":
        response.text = TextContentResponse(content=unlocked.content)
    else:
        response.file = FileContentResponse(
            file_name=unlocked.file_name,
            file_size=unlocked.file_size,
            file_size_display=format_file_size(unlocked.file_size),
            file_type=unlocked.file_type,
            download_url=unlocked.public_url,
        )
    return response


@router.post(
    "/text",
    response_model=ShareCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}}
)
async def create_text_share(
    request: CreateTextShareRequest,
    origin: str = Depends(get_origin),
    share_service: ShareService = Depends(get_share_service)
):
    """
    Save a text message and return the link to encode in a QR code.

    Parameters:
        - content: Message text (must not be blank)
        - password: Optional password gating the view page

    Returns:
        - view_url: "<origin>/view?id=<id>"
        - display_name: Message preview (50 characters, then "...")

    Raises:
        - 400: Blank content
        - 500: Record store failure
    """
    result = share_service.create_text_share(request.content, origin, password=request.password)
    return _created(result)


@router.post(
    "/file",
    response_model=ShareCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}, 415: {"model": ErrorResponse}}
)
async def create_file_share(
    file: List[UploadFile] = File(...),
    password: Optional[str] = Form(None),
    origin: str = Depends(get_origin),
    share_service: ShareService = Depends(get_share_service)
):
    """
    Upload a file and return the link to encode in a QR code.

    Parameters:
        - file: File to share (multipart/form-data, up to 50MB); only the first
          part of a multi-file selection is used
        - password: Optional password gating the view page

    Returns:
        - view_url: "<origin>/view-file?id=<id>", or the raw blob address
          when the record could not be saved (degraded=true)
        - display_name: Original file name

    Raises:
        - 400: No file, or a file name that cannot be stored
        - 413: File too large
        - 415: Unsupported file type
        - 502: Blob store failure
    """
    candidate, data = await read_upload(file)
    result = await share_service.create_file_share(candidate, data, origin, password=password)
    return _created(result)


@router.get("/text", response_model=ViewResponse, responses=VIEW_ERRORS)
async def view_text_share(
    share_id: Optional[str] = Query(None, alias="id"),
    resolver: AccessResolver = Depends(get_access_resolver)
):
    """
    Resolve a text share: content when public, "gated" when password protected.
    """
    return view_response(resolver.open_text(share_id))


@router.post("/text/unlock", response_model=ViewResponse, responses=VIEW_ERRORS)
async def unlock_text_share(
    request: UnlockRequest,
    share_id: Optional[str] = Query(None, alias="id"),
    resolver: AccessResolver = Depends(get_access_resolver)
):
    """
    Submit a password for a gated text share.

    Returns state "unlocked" with the content, or state "gated" with
    notice "wrong_password". Attempts are not limited.
    """
    session = resolver.open_text(share_id)
    view_response(session)
    session.submit_password(request.password)
    return view_response(session)


@router.get("/file", response_model=ViewResponse, responses=VIEW_ERRORS)
async def view_file_share(
    share_id: Optional[str] = Query(None, alias="id"),
    resolver: AccessResolver = Depends(get_access_resolver)
):
    """
    Resolve a file share: download address when public, "gated" when password protected.
    """
    return view_response(resolver.open_file(share_id))


@router.post("/file/unlock", response_model=ViewResponse, responses=VIEW_ERRORS)
async def unlock_file_share(
    request: UnlockRequest,
    share_id: Optional[str] = Query(None, alias="id"),
    resolver: AccessResolver = Depends(get_access_resolver)
):
    """
    Submit a password for a gated file share.
    """
    session = resolver.open_file(share_id)
    view_response(session)
    session.submit_password(request.password)
    return view_response(session)

"""HTML pages: share forms, result page and the gated view pages."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.responses import HTMLResponse

from share_api.dependencies import get_access_resolver, get_origin, get_share_service
from share_api.exceptions import EmptyPasswordError, PersistenceError, UploadError, ValidationError
from share_api.rendering import (
    render_file_view,
    render_home,
    render_share_result,
    render_text_view
)
from share_api.routes.share_routes import read_upload
from share_api.services.access_resolver import AccessResolver, ViewSession, ViewState
from share_api.services.share_service import ShareService

router = APIRouter(tags=["Pages"])


def _status_for(session: ViewSession) -> int:
    if session.state is ViewState.NOT_FOUND:
        return status.HTTP_404_NOT_FOUND
    if session.state is ViewState.ERROR:
        return status.HTTP_400_BAD_REQUEST if not session.share_id else status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_200_OK


def _attempt(session: ViewSession, password: Optional[str]) -> str:
    """Apply a form password to a gated session; returns an inline error if any."""
    if session.state is not ViewState.GATED:
        return ""
    try:
        session.submit_password(password)
    except EmptyPasswordError as e:
        return str(e)
    return ""


@router.get("/", response_class=HTMLResponse)
async def home():
    """Share forms."""
    return HTMLResponse(render_home())


@router.post("/share/text", response_class=HTMLResponse)
async def share_text_page(
    content: str = Form(""),
    password: Optional[str] = Form(None),
    origin: str = Depends(get_origin),
    share_service: ShareService = Depends(get_share_service)
):
    """Create a text share from the home form and show its QR code."""
    try:
        result = share_service.create_text_share(content, origin, password=password)
    except ValidationError as e:
        return HTMLResponse(render_home(error=str(e)), status_code=status.HTTP_400_BAD_REQUEST)
    except PersistenceError as e:
        return HTMLResponse(render_home(error=str(e)), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTMLResponse(render_share_result(result))


@router.post("/share/file", response_class=HTMLResponse)
async def share_file_page(
    file: List[UploadFile] = File(...),
    password: Optional[str] = Form(None),
    origin: str = Depends(get_origin),
    share_service: ShareService = Depends(get_share_service)
):
    """Create a file share from the home form and show its QR code."""
    try:
        candidate, data = await read_upload(file)
        result = await share_service.create_file_share(candidate, data, origin, password=password)
    except ValidationError as e:
        return HTMLResponse(render_home(error=str(e)), status_code=status.HTTP_400_BAD_REQUEST)
    except UploadError as e:
        return HTMLResponse(render_home(error=str(e)), status_code=status.HTTP_502_BAD_GATEWAY)
    return HTMLResponse(render_share_result(result))


@router.get("/view", response_class=HTMLResponse)
async def view_text_page(
    share_id: Optional[str] = Query(None, alias="id"),
    resolver: AccessResolver = Depends(get_access_resolver)
):
    """Text view page; shows a password prompt for gated shares."""
    session = resolver.open_text(share_id)
    return HTMLResponse(render_text_view(session), status_code=_status_for(session))


@router.post("/view", response_class=HTMLResponse)
async def unlock_text_page(
    share_id: Optional[str] = Query(None, alias="id"),
    password: Optional[str] = Form(None),
    resolver: AccessResolver = Depends(get_access_resolver)
):
    """Password form submission for a gated text share."""
    session = resolver.open_text(share_id)
    error = _attempt(session, password)
    return HTMLResponse(render_text_view(session, error=error), status_code=_status_for(session))


@router.get("/view-file", response_class=HTMLResponse)
async def view_file_page(
    share_id: Optional[str] = Query(None, alias="id"),
    resolver: AccessResolver = Depends(get_access_resolver)
):
    """File view page; shows a password prompt for gated shares."""
    session = resolver.open_file(share_id)
    return HTMLResponse(render_file_view(session), status_code=_status_for(session))


@router.post("/view-file", response_class=HTMLResponse)
async def unlock_file_page(
    share_id: Optional[str] = Query(None, alias="id"),
    password: Optional[str] = Form(None),
    resolver: AccessResolver = Depends(get_access_resolver)
):
    """Password form submission for a gated file share."""
    session = resolver.open_file(share_id)
    error = _attempt(session, password)
    return HTMLResponse(render_file_view(session, error=error), status_code=_status_for(session))

"""Standalone rendered page for a text share, callable cross-origin."""

from typing import Optional

from fastapi import APIRouter, Query, Response, status
from fastapi.responses import HTMLResponse, PlainTextResponse

from common.logging_config import get_logger
from share_api.rendering import render_text_artifact
from share_api.repositories.text_share_repository import TextShareRepository

logger = get_logger(__name__)

router = APIRouter(prefix="/functions", tags=["Artifacts"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


@router.options("/view-text")
async def view_text_preflight():
    """Pre-flight: empty body with the CORS headers."""
    return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


@router.get("/view-text")
async def view_text_artifact(share_id: Optional[str] = Query(None, alias="id")):
    """
    Render a text share as a self-contained HTML page.

    Parameters:
        - id: Text share id

    Returns:
        - text/html page with the escaped message and its creation time

    Raises:
        - 400: Missing id parameter
        - 404: Message not found
        - 500: Internal server error
    """
    if not share_id:
        return PlainTextResponse(
            "Missing id parameter", status_code=status.HTTP_400_BAD_REQUEST, headers=CORS_HEADERS
        )

    try:
        share = TextShareRepository.get_by_id(share_id)
        if share is None:
            return PlainTextResponse(
                "Message not found", status_code=status.HTTP_404_NOT_FOUND, headers=CORS_HEADERS
            )
        html = render_text_artifact(share)
    except Exception as e:
        logger.error(f"Failed to render text share [id={share_id}]: {e}", exc_info=True)
        return PlainTextResponse(
            "Internal server error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, headers=CORS_HEADERS
        )

    return HTMLResponse(
        html,
        headers=CORS_HEADERS,
        media_type="text/html; charset=utf-8",
    )

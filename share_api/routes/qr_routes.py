"""QR code image and PDF download routes."""

from urllib.parse import quote

from fastapi import APIRouter, Query, Response

from share_api.qr_artifacts import export_as_document, pdf_filename, render_qr

router = APIRouter(prefix="/api/qr", tags=["QR"])


@router.get("")
async def qr_image(url: str = Query(..., min_length=1)):
    """
    Render a link as a QR code PNG.
    """
    return Response(content=render_qr(url), media_type="image/png")


@router.get("/pdf")
async def qr_document(
    url: str = Query(..., min_length=1),
    label: str = Query("", description="Share display name printed under the code")
):
    """
    Render a link as a printable A4 PDF named after the share.

    Parameters:
        - url: Link to encode
        - label: Display name; defaults to the link itself
    """
    label = label or url
    document = export_as_document(render_qr(url), label)
    filename = pdf_filename(label)
    return Response(
        content=document,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )

"""QR code image and printable PDF generation for share links."""

import io
from typing import Callable

import qrcode
import qrcode.constants
from fpdf import FPDF
from PIL import Image

from common.constants import (
    PDF_PAGE_HEIGHT_MM,
    PDF_PAGE_WIDTH_MM,
    PDF_QR_SIZE_MM,
    QR_BORDER_MODULES,
    QR_DARK_COLOR,
    QR_LIGHT_COLOR,
    QR_PIXEL_WIDTH,
)
from common.logging_config import get_logger
from share_api.exceptions import ClipboardError

logger = get_logger(__name__)

SCAN_CAPTION = "Scan to view"


def render_qr(url: str) -> bytes:
    """
    Encode a URL as a QR code PNG.

    High error correction, a two-module quiet zone and a fixed
    dark/light colour pair; the image is scaled to a fixed width.

    Args:
        url: Link to encode

    Returns:
        PNG bytes
    """
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_H,
        box_size=10,
        border=QR_BORDER_MODULES,
    )
    qr.add_data(url)
    qr.make(fit=True)

    img = qr.make_image(fill_color=QR_DARK_COLOR, back_color=QR_LIGHT_COLOR)
    raw = io.BytesIO()
    img.save(raw)
    raw.seek(0)

    with Image.open(raw) as symbol:
        scaled = symbol.convert("RGB").resize(
            (QR_PIXEL_WIDTH, QR_PIXEL_WIDTH), Image.Resampling.NEAREST
        )

    buffer = io.BytesIO()
    scaled.save(buffer, format="PNG")
    return buffer.getvalue()


def _latin1(text: str) -> str:
    # Core PDF fonts only cover Latin-1.
    return text.encode("latin-1", "replace").decode("latin-1")


def export_as_document(qr_png: bytes, label: str) -> bytes:
    """
    Lay a QR code out on a single A4 page with a caption and label below it.

    Args:
        qr_png: PNG produced by render_qr
        label: Share display name printed under the code

    Returns:
        PDF bytes
    """
    pdf = FPDF(orientation="P", unit="mm", format="A4")
    pdf.set_auto_page_break(False)
    pdf.add_page()

    x = (PDF_PAGE_WIDTH_MM - PDF_QR_SIZE_MM) / 2
    y = (PDF_PAGE_HEIGHT_MM - PDF_QR_SIZE_MM) / 2 - 20
    pdf.image(io.BytesIO(qr_png), x=x, y=y, w=PDF_QR_SIZE_MM, h=PDF_QR_SIZE_MM)

    pdf.set_font("Helvetica", size=14)
    pdf.set_text_color(26, 26, 46)
    caption_width = pdf.get_string_width(SCAN_CAPTION)
    pdf.text((PDF_PAGE_WIDTH_MM - caption_width) / 2, y + PDF_QR_SIZE_MM + 8, SCAN_CAPTION)

    printable = _latin1(label)
    pdf.set_font("Helvetica", size=12)
    pdf.set_text_color(100, 100, 100)
    label_width = pdf.get_string_width(printable)
    pdf.text((PDF_PAGE_WIDTH_MM - label_width) / 2, y + PDF_QR_SIZE_MM + 15, printable)

    return bytes(pdf.output())


def pdf_filename(display_name: str) -> str:
    """Download name for the PDF: the display name up to its first dot."""
    stem = display_name.split(".")[0]
    return f"{stem}-qrcode.pdf"


def copy_link(url: str, write_text: Callable[[str], None]) -> None:
    """
    Copy a share link using the caller's clipboard writer.

    Python-side form of the result page's Copy Link button, for front ends
    that bring their own clipboard (a desktop shell, a terminal helper). The
    HTML result page copies through the browser clipboard API instead and
    reports the same "Failed to copy link" notice on failure.

    Raises:
        ClipboardError: If the writer fails; nothing else is affected
    """
    try:
        write_text(url)
    except Exception as e:
        logger.warning(f"Failed to copy link: {e}")
        raise ClipboardError("Failed to copy link") from e
    logger.debug("Link copied to clipboard")

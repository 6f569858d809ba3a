"""Utility helper functions for the share server."""

import uuid
from datetime import datetime, timezone

from common.constants import DISPLAY_NAME_MAX_CHARS


def generate_uuid() -> str:
    """
    Generate a new UUID4 string.

    Returns:
        UUID4 string
    """
    return str(uuid.uuid4())


def get_current_timestamp() -> datetime:
    """
    Get the current time as a timezone-aware UTC datetime.
    """
    return datetime.now(timezone.utc)


def text_preview(content: str, max_chars: int = DISPLAY_NAME_MAX_CHARS) -> str:
    """
    Shorten text for display next to its QR code.

    Args:
        content: Original text as entered
        max_chars: Number of characters kept before the ellipsis

    Returns:
        The content unchanged if short enough, else its head followed by "..."
    """
    if len(content) > max_chars:
        return content[:max_chars] + "..."
    return content


def format_file_size(size_bytes: int) -> str:
    """
    Format a byte count for display (e.g., "500 B", "2.0 KB", "5.00 MB").

    Uses binary units; kilobytes get one decimal place, megabytes two.
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    return f"{size_bytes / 1024 / 1024:.2f} MB"


def join_url(origin: str, path: str) -> str:
    """Join an origin such as "https://host" and an absolute path."""
    return f"{origin.rstrip('/')}{path}"

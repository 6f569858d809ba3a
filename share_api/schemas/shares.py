"""Pydantic schemas for share creation and viewing endpoints."""

from typing import Optional
from pydantic import BaseModel


class CreateTextShareRequest(BaseModel):
    """Request model for creating a text share."""
    content: str
    password: Optional[str] = None


class ShareCreatedResponse(BaseModel):
    """Response model for a created share."""
    view_url: str
    display_name: str
    share_id: Optional[str] = None
    degraded: bool = False


class UnlockRequest(BaseModel):
    """Request model for a password attempt."""
    password: str


class TextContentResponse(BaseModel):
    """Unlocked text share content."""
    content: str


class FileContentResponse(BaseModel):
    """Unlocked file share details."""
    file_name: str
    file_size: int
    file_size_display: str
    file_type: str
    download_url: str


class ViewResponse(BaseModel):
    """Response model for viewing a share."""
    id: str
    kind: str
    state: str
    created_at: str
    notice: Optional[str] = None
    text: Optional[TextContentResponse] = None
    file: Optional[FileContentResponse] = None

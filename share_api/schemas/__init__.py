"""Pydantic schemas for API requests and responses."""

from share_api.schemas.shares import (
    CreateTextShareRequest,
    ShareCreatedResponse,
    UnlockRequest,
    TextContentResponse,
    FileContentResponse,
    ViewResponse
)
from share_api.schemas.common import ErrorResponse

__all__ = [
    "CreateTextShareRequest",
    "ShareCreatedResponse",
    "UnlockRequest",
    "TextContentResponse",
    "FileContentResponse",
    "ViewResponse",
    "ErrorResponse"
]

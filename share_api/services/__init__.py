"""Service layer for business logic."""

from share_api.services.share_service import ShareService
from share_api.services.access_resolver import AccessResolver, ViewNotice, ViewSession, ViewState

__all__ = [
    "ShareService",
    "AccessResolver",
    "ViewNotice",
    "ViewSession",
    "ViewState",
]

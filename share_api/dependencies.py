"""FastAPI dependencies shared by the route modules."""

from fastapi import Request

from share_api import config
from share_api.services.access_resolver import AccessResolver
from share_api.services.share_service import ShareService


def get_origin(request: Request) -> str:
    """
    Origin that view links are built on.

    Uses QRSHARE_PUBLIC_ORIGIN when configured, otherwise the scheme and
    host the request arrived on.
    """
    if config.PUBLIC_ORIGIN:
        return config.PUBLIC_ORIGIN.rstrip("/")
    return str(request.base_url).rstrip("/")


def get_share_service() -> ShareService:
    return ShareService()


def get_access_resolver() -> AccessResolver:
    return AccessResolver()

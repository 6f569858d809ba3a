"""API routes package."""

from share_api.routes.share_routes import router as share_router
from share_api.routes.view_routes import router as view_router
from share_api.routes.artifact_routes import router as artifact_router
from share_api.routes.blob_routes import router as blob_router
from share_api.routes.qr_routes import router as qr_router

__all__ = ["share_router", "view_router", "artifact_router", "blob_router", "qr_router"]

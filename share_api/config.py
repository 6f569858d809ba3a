"""Configuration settings for the share server."""

import os
from typing import Optional


DATABASE_PATH = os.environ.get("QRSHARE_DATABASE_PATH", "./data/qrshare.db")

SERVER_HOST = os.environ.get("QRSHARE_HOST", "0.0.0.0")

SERVER_PORT = int(os.environ.get("QRSHARE_PORT", "8000"))

# When unset, the origin is taken from the incoming request's base URL.
PUBLIC_ORIGIN: Optional[str] = os.environ.get("QRSHARE_PUBLIC_ORIGIN") or None

BLOB_ROUTE_PREFIX = "/blobs"

"""Repository layer for data access."""

from share_api.repositories.text_share_repository import NewTextShare, TextShare, TextShareRepository
from share_api.repositories.file_share_repository import NewFileShare, FileShare, FileShareRepository

__all__ = [
    "NewTextShare",
    "TextShare",
    "TextShareRepository",
    "NewFileShare",
    "FileShare",
    "FileShareRepository",
]

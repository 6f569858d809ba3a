"""Size and type policy applied to an upload before it reaches the blob store."""

from dataclasses import dataclass
from typing import Iterable, Optional, TypeVar

from common.constants import ALLOWED_MIME_TYPES, BYTES_PER_MB, MAX_UPLOAD_SIZE_BYTES
from share_api.exceptions import FileTooLargeError, UnsupportedFileTypeError, ValidationError

T = TypeVar("T")

# Names end up as the last segment of a storage key.
UNSTORABLE_NAMES = {"", ".", ".."}
UNSTORABLE_NAME_CHARS = ("/", "\\", "\x00")


@dataclass(frozen=True)
class FileCandidate:
    """
    Descriptor of a file the user picked, before any bytes are stored.
    """
    name: str
    size_bytes: int
    mime_type: str = ""


def is_storable_name(name: str) -> bool:
    """A file name is storable when it is a single, non-relative path segment."""
    if name.strip() in UNSTORABLE_NAMES:
        return False
    return not any(char in name for char in UNSTORABLE_NAME_CHARS)


def validate_upload(candidate: FileCandidate) -> FileCandidate:
    """
    Enforce the upload policy on a candidate file.

    Args:
        candidate: File descriptor with size and declared mime type

    Returns:
        The same candidate when it is acceptable

    Raises:
        ValidationError: If the file name cannot be stored
        FileTooLargeError: If the file exceeds 50 MiB
        UnsupportedFileTypeError: If a non-empty mime type is not allowed
    """
    if not is_storable_name(candidate.name):
        raise ValidationError(f"Invalid file name: {candidate.name!r}")

    if candidate.size_bytes > MAX_UPLOAD_SIZE_BYTES:
        size_mb = candidate.size_bytes / BYTES_PER_MB
        raise FileTooLargeError(
            f"File size exceeds 50MB limit. Your file is {size_mb:.2f}MB"
        )

    # An empty mime type means the browser could not tell; let it through.
    if candidate.mime_type and candidate.mime_type not in ALLOWED_MIME_TYPES:
        raise UnsupportedFileTypeError(
            "File type not supported. Please upload PDF, images, videos, audio, or documents."
        )

    return candidate


def select_first(candidates: Iterable[Optional[T]]) -> T:
    """
    Pick the file to share from a drop or picker selection.

    Only the first file is considered; the rest are ignored.

    Raises:
        ValidationError: If the selection is empty
    """
    first = next(iter(candidates), None)
    if first is None:
        raise ValidationError("No file selected")
    return first

"""Project-wide constants (upload limits, allowed types, QR parameters)."""

MAX_UPLOAD_SIZE_BYTES: int = 50 * 1024 * 1024  # 50 MiB
BYTES_PER_MB: int = 1024 * 1024

ALLOWED_MIME_TYPES: frozenset = frozenset({
    'application/pdf',
    'image/jpeg',
    'image/png',
    'image/gif',
    'image/webp',
    'video/mp4',
    'video/webm',
    'audio/mpeg',
    'audio/wav',
    'application/msword',
    'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
    'application/vnd.ms-excel',
    'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
    'text/plain',
    'application/zip',
})

DEFAULT_MIME_TYPE: str = 'application/octet-stream'

DISPLAY_NAME_MAX_CHARS: int = 50

DEFAULT_BLOB_STORAGE_PATH: str = './data/blobs'
BLOB_STREAM_PIECE_SIZE: int = 64 * 1024

QR_PIXEL_WIDTH: int = 400
QR_BORDER_MODULES: int = 2
QR_DARK_COLOR: str = '#1a1a2e'
QR_LIGHT_COLOR: str = '#ffffff'

PDF_PAGE_WIDTH_MM: float = 210.0
PDF_PAGE_HEIGHT_MM: float = 297.0
PDF_QR_SIZE_MM: float = 100.0

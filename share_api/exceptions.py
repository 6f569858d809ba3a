"""Custom exception classes for the share server."""


class QRShareException(Exception):
    """
    Base exception class for all share-related errors.
    """
    pass


class ValidationError(QRShareException):
    """
    Raised when user input is rejected before any storage call is made.
    """
    pass


class FileTooLargeError(ValidationError):
    """
    Raised when an upload exceeds the maximum allowed size.
    """
    pass


class UnsupportedFileTypeError(ValidationError):
    """
    Raised when an upload declares a mime type outside the allow-list.
    """
    pass


class EmptyContentError(ValidationError):
    """
    Raised when a text share has no content after trimming.
    """
    pass


class EmptyPasswordError(ValidationError):
    """
    Raised when a password attempt is empty or whitespace-only.
    """
    pass


class MissingIdError(ValidationError):
    """
    Raised when a view request carries no share id.
    """
    pass


class UploadError(QRShareException):
    """
    Raised when the blob store rejects or fails an upload.
    """
    pass


class PersistenceError(QRShareException):
    """
    Raised when the record store fails to insert or fetch a share.
    """
    pass


class ShareNotFoundError(QRShareException):
    """
    Raised when a requested share does not exist.
    """
    pass


class InvalidViewStateError(QRShareException):
    """
    Raised when a view session receives an operation its state does not allow.
    """
    pass


class ClipboardError(QRShareException):
    """
    Raised when copying a link to the clipboard fails.
    """
    pass

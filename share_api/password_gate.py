"""Password fingerprinting used to gate access to shares.

The fingerprint is a single unsalted SHA-256 digest. It keeps casual viewers
out of a shared link; it does not resist offline guessing if a stored
fingerprint leaks, and verification attempts are not rate limited.
"""

import hashlib
from typing import Optional


def normalize_password(password: Optional[str]) -> Optional[str]:
    """
    Trim a submitted password.

    Args:
        password: Raw password as entered, possibly None

    Returns:
        The trimmed password, or None if it is absent or whitespace-only
    """
    if password is None:
        return None
    trimmed = password.strip()
    return trimmed or None


def fingerprint(password: str) -> str:
    """
    Derive the stored fingerprint for a password.

    Args:
        password: Plain text password (surrounding whitespace is ignored)

    Returns:
        Lowercase hex SHA-256 digest of the trimmed password (64 characters)
    """
    return hashlib.sha256(password.strip().encode('utf-8')).hexdigest()


def matches(candidate: str, stored_fingerprint: str) -> bool:
    """
    Check a password attempt against a stored fingerprint.

    Args:
        candidate: Plain text password attempt
        stored_fingerprint: Fingerprint saved with the share

    Returns:
        True if the fingerprints are identical, False otherwise
    """
    return fingerprint(candidate) == stored_fingerprint

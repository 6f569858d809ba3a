"""Share-server data type definitions."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ShareResult:
    """
    Outcome of creating a share: the link encoded into the QR code.

    degraded is set when a file was stored but its record could not be
    written; view_url is then the raw blob address and no gate applies.
    """
    view_url: str
    display_name: str
    share_id: Optional[str] = None
    degraded: bool = False

"""View-time access resolution for shared links.

Each view request owns a ViewSession. A session starts in LOADING, resolves
to a terminal NOT_FOUND or ERROR state, or to GATED/UNLOCKED depending on
whether the share carries a password fingerprint. Password attempts move a
GATED session to UNLOCKED; a wrong attempt leaves it GATED with a notice.
Attempts are not limited.
"""

from enum import Enum
from typing import Callable, Optional, Union

from common.logging_config import get_logger
from share_api.exceptions import EmptyPasswordError, InvalidViewStateError
from share_api.password_gate import matches, normalize_password
from share_api.repositories.file_share_repository import FileShare, FileShareRepository
from share_api.repositories.text_share_repository import TextShare, TextShareRepository

logger = get_logger(__name__)

ShareRecord = Union[TextShare, FileShare]


class ViewState(str, Enum):
    LOADING = "loading"
    NOT_FOUND = "not_found"
    ERROR = "error"
    GATED = "gated"
    UNLOCKED = "unlocked"


class ViewNotice(str, Enum):
    WRONG_PASSWORD = "wrong_password"


class ViewSession:
    """
    Per-request view state for one share.

    Args:
        share_id: Value of the "id" query parameter, possibly missing
        fetch: Callable returning the record for an id, or None if absent
    """

    def __init__(self, share_id: Optional[str], fetch: Callable[[str], Optional[ShareRecord]]):
        self.share_id = share_id.strip() if share_id else None
        self._fetch = fetch
        self.state = ViewState.LOADING
        self.record: Optional[ShareRecord] = None
        self.error: Optional[str] = None
        self.notice: Optional[ViewNotice] = None

    def load(self) -> ViewState:
        if self.state is not ViewState.LOADING:
            raise InvalidViewStateError(f"Session already loaded (state={self.state.value})")

        if not self.share_id:
            self.state = ViewState.ERROR
            self.error = "Missing id"
            return self.state

        try:
            record = self._fetch(self.share_id)
        except Exception as e:
            logger.error(f"Failed to fetch share [id={self.share_id}]: {e}")
            self.state = ViewState.ERROR
            self.error = "Failed to load share"
            return self.state

        if record is None:
            self.state = ViewState.NOT_FOUND
            self.error = "Not found"
            return self.state

        self.record = record
        self.state = ViewState.GATED if record.password_hash else ViewState.UNLOCKED
        logger.debug(f"Share loaded [id={self.share_id}] state={self.state.value}")
        return self.state

    def submit_password(self, attempt: Optional[str]) -> ViewState:
        """
        Check a password attempt against the share's fingerprint.

        Raises:
            InvalidViewStateError: If the session is not waiting for a password
            EmptyPasswordError: If the attempt is blank; the state is unchanged
        """
        if self.state is not ViewState.GATED:
            raise InvalidViewStateError(f"No password expected (state={self.state.value})")

        trimmed = normalize_password(attempt)
        if trimmed is None:
            raise EmptyPasswordError("Please enter a password")

        if matches(trimmed, self.record.password_hash):
            self.state = ViewState.UNLOCKED
            self.notice = None
            logger.info(f"Share unlocked [id={self.share_id}]")
        else:
            self.notice = ViewNotice.WRONG_PASSWORD
            logger.info(f"Wrong password for share [id={self.share_id}]")
        return self.state

    @property
    def unlocked_record(self) -> Optional[ShareRecord]:
        """The record, but only once the session is unlocked."""
        if self.state is ViewState.UNLOCKED:
            return self.record
        return None


class AccessResolver:
    def __init__(
        self,
        text_repo: Optional[TextShareRepository] = None,
        file_repo: Optional[FileShareRepository] = None,
    ):
        self.text_repo = text_repo or TextShareRepository()
        self.file_repo = file_repo or FileShareRepository()

    def open_text(self, share_id: Optional[str]) -> ViewSession:
        session = ViewSession(share_id, self.text_repo.get_by_id)
        session.load()
        return session

    def open_file(self, share_id: Optional[str]) -> ViewSession:
        session = ViewSession(share_id, self.file_repo.get_by_id)
        session.load()
        return session

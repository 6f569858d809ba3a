"""Share creation service: validates input, stores it, and builds the view link."""

from typing import Optional

from common.constants import DEFAULT_MIME_TYPE
from common.logging_config import get_logger
from share_api.blob_client import BlobStoreClient
from share_api.exceptions import EmptyContentError, PersistenceError
from share_api.password_gate import fingerprint, normalize_password
from share_api.repositories.file_share_repository import FileShareRepository, NewFileShare
from share_api.repositories.text_share_repository import NewTextShare, TextShareRepository
from share_api.types import ShareResult
from share_api.upload_validator import FileCandidate, validate_upload
from share_api.utils import generate_uuid, join_url, text_preview

logger = get_logger(__name__)


def _password_hash(password: Optional[str]) -> Optional[str]:
    trimmed = normalize_password(password)
    return fingerprint(trimmed) if trimmed is not None else None


class ShareService:
    def __init__(
        self,
        text_repo: Optional[TextShareRepository] = None,
        file_repo: Optional[FileShareRepository] = None,
        blob_client: Optional[BlobStoreClient] = None,
    ):
        self.text_repo = text_repo or TextShareRepository()
        self.file_repo = file_repo or FileShareRepository()
        self.blob_client = blob_client or BlobStoreClient()

    def create_text_share(self, content: str, origin: str, password: Optional[str] = None) -> ShareResult:
        """
        Save a text message and return its view link.

        The content is stored exactly as entered; only the emptiness check
        looks at the trimmed value.

        Raises:
            EmptyContentError: If the content is blank
            PersistenceError: If the record store rejects the insert
        """
        if not content or not content.strip():
            raise EmptyContentError("Please enter some text")

        new_share = NewTextShare(content=content, password_hash=_password_hash(password))

        try:
            share = self.text_repo.insert(new_share)
        except Exception as e:
            logger.error(f"Failed to save text share: {e}")
            raise PersistenceError(str(e) or "Failed to save message") from e

        logger.info(f"Text share ready [id={share.id}] gated={share.is_gated}")
        return ShareResult(
            view_url=join_url(origin, f"/view?id={share.id}"),
            display_name=text_preview(content),
            share_id=share.id,
        )

    async def create_file_share(
        self,
        candidate: FileCandidate,
        data: bytes,
        origin: str,
        password: Optional[str] = None,
    ) -> ShareResult:
        """
        Store an uploaded file and return its view link.

        Steps:
            1. Validate size and type (nothing is stored on failure)
            2. Upload bytes under "<random uuid>/<file name>" without overwrite
            3. Insert the file record, gated by a fingerprint when a password is given

        If step 3 fails the upload is kept and the raw blob address is
        returned instead of a view page link.

        Raises:
            ValidationError: If the file breaks the upload policy
            UploadError: If the blob store fails; no record is written
        """
        validate_upload(candidate)

        storage_key = f"{generate_uuid()}/{candidate.name}"
        stored_key = await self.blob_client.put(storage_key, data)
        public_url = self.blob_client.public_url(stored_key, origin)

        new_share = NewFileShare(
            file_name=candidate.name,
            file_path=stored_key,
            file_size=candidate.size_bytes,
            file_type=candidate.mime_type or DEFAULT_MIME_TYPE,
            public_url=public_url,
            password_hash=_password_hash(password),
        )

        try:
            share = self.file_repo.insert(new_share)
        except Exception as e:
            logger.error(f"Database insert error for {stored_key}, falling back to blob address: {e}")
            return ShareResult(
                view_url=public_url,
                display_name=candidate.name,
                share_id=None,
                degraded=True,
            )

        logger.info(f"File share ready: {candidate.name} [id={share.id}] gated={share.is_gated}")
        return ShareResult(
            view_url=join_url(origin, f"/view-file?id={share.id}"),
            display_name=candidate.name,
            share_id=share.id,
        )

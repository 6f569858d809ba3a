"""File share repository for database operations."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from common.constants import DEFAULT_MIME_TYPE
from common.logging_config import get_logger
from share_api.database import get_db_connection, get_row_value
from share_api.utils import generate_uuid, get_current_timestamp

logger = get_logger(__name__)


@dataclass(frozen=True)
class NewFileShare:
    file_name: str
    file_path: str
    file_size: int
    public_url: str
    file_type: str = DEFAULT_MIME_TYPE
    password_hash: Optional[str] = None


@dataclass(frozen=True)
class FileShare:
    id: str
    file_name: str
    file_path: str
    file_size: int
    file_type: str
    public_url: str
    created_at: datetime
    password_hash: Optional[str] = None

    @property
    def kind(self) -> str:
        return "file"

    @property
    def is_gated(self) -> bool:
        return self.password_hash is not None


class FileShareRepository:
    @staticmethod
    def insert(share: NewFileShare) -> FileShare:
        share_id = generate_uuid()
        created_at = get_current_timestamp()
        file_type = share.file_type or DEFAULT_MIME_TYPE
        logger.debug(f"Inserting file share: {share.file_name} [id={share_id}]")

        with get_db_connection() as conn:
            cursor = conn.cursor()
            try:
                cursor.execute(
                    """
                    INSERT INTO file_uploads (id, file_name, file_path, file_size, file_type,
                                              public_url, password_hash, created_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (share_id, share.file_name, share.file_path, share.file_size, file_type,
                     share.public_url, share.password_hash, created_at.isoformat())
                )
                conn.commit()
                logger.info(f"File share created: {share.file_name} [id={share_id}]")
            except Exception as e:
                logger.error(f"Failed to insert file share {share.file_name}: {e}", exc_info=True)
                raise

        return FileShare(
            id=share_id,
            file_name=share.file_name,
            file_path=share.file_path,
            file_size=share.file_size,
            file_type=file_type,
            public_url=share.public_url,
            created_at=created_at,
            password_hash=share.password_hash,
        )

    @staticmethod
    def get_by_id(share_id: str) -> Optional[FileShare]:
        logger.debug(f"Fetching file share [id={share_id}]")
        with get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """SELECT id, file_name, file_path, file_size, file_type, public_url,
                          password_hash, created_at
                   FROM file_uploads WHERE id = ?""",
                (share_id,)
            )
            row = cursor.fetchone()

            if row is None:
                logger.debug(f"File share not found [id={share_id}]")
                return None

            return FileShare(
                id=row["id"],
                file_name=row["file_name"],
                file_path=row["file_path"],
                file_size=row["file_size"],
                file_type=row["file_type"],
                public_url=row["public_url"],
                created_at=datetime.fromisoformat(row["created_at"]),
                password_hash=get_row_value(row, "password_hash"),
            )

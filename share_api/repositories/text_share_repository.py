"""Text share repository for database operations."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from common.logging_config import get_logger
from share_api.database import get_db_connection, get_row_value
from share_api.utils import generate_uuid, get_current_timestamp

logger = get_logger(__name__)


@dataclass(frozen=True)
class NewTextShare:
    content: str
    password_hash: Optional[str] = None


@dataclass(frozen=True)
class TextShare:
    id: str
    content: str
    created_at: datetime
    password_hash: Optional[str] = None

    @property
    def kind(self) -> str:
        return "text"

    @property
    def is_gated(self) -> bool:
        return self.password_hash is not None


class TextShareRepository:
    @staticmethod
    def insert(share: NewTextShare) -> TextShare:
        share_id = generate_uuid()
        created_at = get_current_timestamp()
        logger.debug(f"Inserting text share [id={share_id}] gated={share.password_hash is not None}")

        with get_db_connection() as conn:
            cursor = conn.cursor()
            try:
                cursor.execute(
                    """
                    INSERT INTO text_messages (id, content, password_hash, created_at)
                    VALUES (?, ?, ?, ?)
                    """,
                    (share_id, share.content, share.password_hash, created_at.isoformat())
                )
                conn.commit()
                logger.info(f"Text share created [id={share_id}]")
            except Exception as e:
                logger.error(f"Failed to insert text share [id={share_id}]: {e}", exc_info=True)
                raise

        return TextShare(
            id=share_id,
            content=share.content,
            created_at=created_at,
            password_hash=share.password_hash,
        )

    @staticmethod
    def get_by_id(share_id: str) -> Optional[TextShare]:
        logger.debug(f"Fetching text share [id={share_id}]")
        with get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """SELECT id, content, password_hash, created_at
                   FROM text_messages WHERE id = ?""",
                (share_id,)
            )
            row = cursor.fetchone()

            if row is None:
                logger.debug(f"Text share not found [id={share_id}]")
                return None

            return TextShare(
                id=row["id"],
                content=row["content"],
                created_at=datetime.fromisoformat(row["created_at"]),
                password_hash=get_row_value(row, "password_hash"),
            )

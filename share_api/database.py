"""Database schema and connection management for SQLite."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator

from share_api.config import DATABASE_PATH


def init_database() -> None:
    """
    Initialize database and create tables if they don't exist.
    """
    db_path = Path(DATABASE_PATH)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    with get_db_connection() as conn:
        cursor = conn.cursor()

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS text_messages (
                id TEXT PRIMARY KEY,
                content TEXT NOT NULL,
                password_hash TEXT,
                created_at TEXT NOT NULL
            )
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS file_uploads (
                id TEXT PRIMARY KEY,
                file_name TEXT NOT NULL,
                file_path TEXT NOT NULL UNIQUE,
                file_size INTEGER NOT NULL,
                file_type TEXT NOT NULL,
                public_url TEXT NOT NULL,
                password_hash TEXT,
                created_at TEXT NOT NULL
            )
        """)

        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_text_messages_created_at ON text_messages(created_at)
        """)

        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_file_uploads_created_at ON file_uploads(created_at)
        """)

        conn.commit()


@contextmanager
def get_db_connection() -> Generator[sqlite3.Connection, None, None]:
    """
    Context manager for database connections.
    """
    conn = sqlite3.connect(DATABASE_PATH)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
    finally:
        conn.close()


def get_row_value(row: sqlite3.Row, column: str, default: Any = None) -> Any:
    """Read a column from a row, returning default for missing or NULL values."""
    if column not in row.keys():
        return default
    value = row[column]
    return default if value is None else value

"""
SQLite persistence for the vector store: connection, schema and migration.
"""

import sqlite3

from .config import ensure_db_directory
from .errors import OpenFailed
from ..util.logging import logger

TABLE_NAME = "docs"

REQUIRED_COLUMNS = ("id", "text", "emb")

CREATE_DOCS_SQL = '''
    CREATE TABLE IF NOT EXISTS docs (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        text TEXT NOT NULL,
        emb BLOB NOT NULL,
        meta TEXT
    )
'''


def connect(path: str) -> sqlite3.Connection:
    """Open a SQLite connection at `path` and bring its schema up to date.

    The connection may be used from any thread; callers serialize access.
    On any failure the connection is closed and OpenFailed is raised.
    """
    try:
        ensure_db_directory(path)
    except OSError as e:
        logger.log_store_operation("open", path, {"error": str(e)}, status="failed")
        raise OpenFailed(f"Unable to create directory for database: {e}", path) from e

    conn = None
    try:
        conn = sqlite3.connect(path, check_same_thread=False)
        init_schema(conn)
        migrate_schema(conn, path)
    except (sqlite3.Error, OpenFailed) as e:
        if conn is not None:
            conn.close()
        logger.log_store_operation("open", path, {"error": str(e)}, status="failed")
        if isinstance(e, OpenFailed):
            raise
        raise OpenFailed(f"Unable to open database: {e}", path) from e

    logger.log_store_operation("open", path)
    return conn


def init_schema(conn: sqlite3.Connection) -> None:
    """Create the docs table if it does not exist."""
    with conn:
        conn.execute(CREATE_DOCS_SQL)


def table_columns(conn: sqlite3.Connection) -> list:
    cursor = conn.execute(f"PRAGMA table_info({TABLE_NAME})")
    return [col[1] for col in cursor.fetchall()]


def migrate_schema(conn: sqlite3.Connection, path: str) -> None:
    """Upgrade a docs table created by an older layout.

    Tables without a `meta` column gain one; existing rows are kept with a
    NULL meta. A table missing any required column cannot be used.
    """
    columns = table_columns(conn)

    missing = [c for c in REQUIRED_COLUMNS if c not in columns]
    if missing:
        raise OpenFailed(f"Incompatible docs table, missing columns: {', '.join(missing)}", path)

    if "meta" not in columns:
        with conn:
            conn.execute("ALTER TABLE docs ADD COLUMN meta TEXT")
        logger.log_store_operation("migrate", path, {"added_column": "meta"})


def health_check(conn: sqlite3.Connection) -> bool:
    """Check that the docs table is present."""
    try:
        cursor = conn.execute("SELECT name FROM sqlite_master WHERE type='table';")
        table_names = [table[0] for table in cursor.fetchall()]
        return TABLE_NAME in table_names
    except sqlite3.Error:
        return False

"""
Record store for the API.

The findings table lives in a single SQLite file resolved from the
APP_DB_PATH environment variable (default: kitteo.sqlite).  The store offers
exactly two operations, matching how the app uses it:

- ``load_all()``: every record, newest first (created_at descending).
- ``insert(fields)``: append one record and return it as stored.

There is no update or delete.  After an insert the caller reloads the whole
set; nothing is patched incrementally.

A get_store() dependency hands each request its own store backed by a fresh
connection that is closed after the response is sent.
"""

import logging
import os
import sqlite3
from collections.abc import Generator
from pathlib import Path

from findings.errors import InsertError, LoadError
from findings.models import FindingFields, FindingRecord

logger = logging.getLogger(__name__)

_DB_PATH: Path = Path(os.getenv("APP_DB_PATH", "kitteo.sqlite"))

TABLE = "hallazgos_kitteo"

SCHEMA = f"""
    CREATE TABLE IF NOT EXISTS {TABLE} (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        fecha TEXT NOT NULL,
        area TEXT NOT NULL DEFAULT 'KITTEO',
        no_orden TEXT NOT NULL,
        hallazgo TEXT NOT NULL,
        no_parte TEXT NOT NULL,
        no_parte_requerido TEXT,
        cantidad INTEGER NOT NULL CHECK (cantidad >= 1),
        usuario TEXT NOT NULL,
        usuario_kitteo TEXT,
        created_at TEXT NOT NULL
            DEFAULT (strftime('%Y-%m-%dT%H:%M:%f', 'now'))
    );
    CREATE INDEX IF NOT EXISTS idx_{TABLE}_created_at ON {TABLE} (created_at);
"""

_COLUMNS = (
    "id, fecha, area, no_orden, hallazgo, no_parte, no_parte_requerido, "
    "cantidad, usuario, usuario_kitteo, created_at"
)


def get_db_path() -> Path:
    """Return the configured database path."""
    return _DB_PATH


def _make_conn(db_path: Path) -> sqlite3.Connection:
    """Open a SQLite connection with standard pragmas."""
    conn = sqlite3.connect(str(db_path), check_same_thread=False, timeout=10)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA synchronous=NORMAL")
    conn.execute("PRAGMA busy_timeout=5000")
    return conn


def init_db(db_path: Path) -> None:
    """Create the findings table if it does not exist yet."""
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = _make_conn(db_path)
    try:
        conn.executescript(SCHEMA)
        conn.commit()
    finally:
        conn.close()


class FindingStore:
    """SQLite-backed persistence for finding records."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def load_all(self) -> list[FindingRecord]:
        """Return every record sorted by created_at descending.

        Raises:
            LoadError: If the query fails.
        """
        try:
            rows = self._conn.execute(
                f"SELECT {_COLUMNS} FROM {TABLE} "
                "ORDER BY created_at DESC, id DESC"
            ).fetchall()
        except sqlite3.Error as exc:
            logger.error("Loading findings failed: %s", exc)
            raise LoadError(f"Could not load findings: {exc}") from exc
        return [FindingRecord.from_row(r) for r in rows]

    def count(self) -> int:
        try:
            return self._conn.execute(f"SELECT COUNT(*) FROM {TABLE}").fetchone()[0]
        except sqlite3.Error as exc:
            raise LoadError(f"Could not count findings: {exc}") from exc

    def insert(self, fields: FindingFields) -> FindingRecord:
        """Insert one finding and return it with its id and created_at.

        Raises:
            InsertError: If the store rejects the row.
        """
        try:
            cur = self._conn.execute(
                f"INSERT INTO {TABLE} (fecha, area, no_orden, hallazgo, no_parte, "
                "no_parte_requerido, cantidad, usuario, usuario_kitteo) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    fields.date, fields.area, fields.order_number,
                    fields.finding_type, fields.part_number,
                    fields.required_part_number, fields.quantity,
                    fields.reporting_user, fields.kitteo_user,
                ),
            )
            self._conn.commit()
            row = self._conn.execute(
                f"SELECT {_COLUMNS} FROM {TABLE} WHERE id = ?", (cur.lastrowid,)
            ).fetchone()
        except sqlite3.Error as exc:
            self._conn.rollback()
            logger.error("Inserting finding failed: %s", exc)
            raise InsertError(f"Could not save finding: {exc}") from exc
        logger.info("Inserted finding id=%s order=%s", row["id"], fields.order_number)
        return FindingRecord.from_row(row)


def get_store() -> Generator[FindingStore, None, None]:
    """FastAPI dependency: yield a FindingStore, close its connection on exit.

    Usage in a route::

        from api.database import get_store
        from fastapi import Depends

        @router.get("/example")
        def example(store=Depends(get_store)):
            ...

    Raises:
        LoadError: If the database cannot be opened.
    """
    try:
        conn = _make_conn(_DB_PATH)
    except sqlite3.Error as exc:
        raise LoadError(f"Could not open database '{_DB_PATH}': {exc}") from exc
    try:
        yield FindingStore(conn)
    finally:
        conn.close()

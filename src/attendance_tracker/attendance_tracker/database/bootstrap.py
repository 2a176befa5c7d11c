from __future__ import annotations

from pathlib import Path

from .connection import DatabaseConnection
from .sqlite_base import db_cursor

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    """Create the attendance table if it does not exist yet (idempotent)."""
    sql = Path(schema_path).read_text(encoding="utf-8")
    with db_cursor(conn_factory, action="apply schema") as cur:
        cur.executescript(sql)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, action="list tables") as cur:
        cur.execute("SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name")
        return [row[0] for row in cur.fetchall()]

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

from ..core.exceptions import StorageError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, action: str) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor on the shared connection.

    Any sqlite3 failure inside the block is re-raised as StorageError naming the
    action, with the driver error chained as the cause.
    """
    try:
        cur = conn_factory.connect().cursor()
    except (sqlite3.Error, OSError) as exc:
        raise StorageError(f"{action} failed: cannot open database") from exc
    try:
        yield cur
    except (sqlite3.Error, OverflowError) as exc:
        # OverflowError: an int too large to bind as SQLite INTEGER
        raise StorageError(f"{action} failed") from exc
    finally:
        cur.close()


def fetchall(cur: sqlite3.Cursor) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return [dict(r) for r in rows or []]

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class DBConfig:
    path: str


class DatabaseConnection:
    """Owner of the single long-lived SQLite connection.

    Built once by the container and handed to repositories. The connection runs
    in autocommit mode, so every statement commits on its own; SQLite serializes
    concurrent writers.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def path(self) -> str:
        return self._config.path

    def connect(self) -> sqlite3.Connection:
        if self._conn is None:
            if self._config.path != ":memory:":
                Path(self._config.path).parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self._config.path, check_same_thread=False, isolation_level=None)
            conn.row_factory = sqlite3.Row
            self._conn = conn
        return self._conn

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

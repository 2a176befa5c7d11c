"""Backup the attendance database.

Uses SQLite's online backup API, so it is safe while the server is running.
"""

from __future__ import annotations

import importlib
import sqlite3
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module


def backup_database(db_path: str | Path, out_dir: str | Path) -> Path:
    db_path = Path(db_path)
    if not db_path.exists():
        raise FileNotFoundError(db_path)

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{db_path.stem}_{ts}.db"

    src = sqlite3.connect(str(db_path))
    dst = sqlite3.connect(str(out_file))
    try:
        src.backup(dst)
    finally:
        dst.close()
        src.close()
    return out_file


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    try:
        out_file = backup_database(settings.DB_PATH, REPO_ROOT / "backups")
    except FileNotFoundError:
        raise SystemExit(f"Database not found: {settings.DB_PATH}")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()

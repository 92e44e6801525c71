import logging
import sqlite3
from pathlib import Path

from .settings import Settings


logger = logging.getLogger(__name__)


def connect(db_path: str | Path):
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    return conn


def init_db(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    with connect(settings.db_path) as conn:
        # AUTOINCREMENT keeps ids strictly increasing, so id order is insertion order.
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS transactions (
              id INTEGER PRIMARY KEY AUTOINCREMENT,
              name TEXT NOT NULL,
              description TEXT NOT NULL,
              date_time TEXT,
              price REAL NOT NULL,
              created_at TEXT NOT NULL DEFAULT (datetime('now'))
            );
            """
        )
    logger.info("store_ready db_path=%s", settings.db_path)

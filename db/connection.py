from __future__ import annotations

import sqlite3
from typing import Optional

from db import schema


def get_connection(db_path: str, timeout: Optional[float] = 30.0) -> sqlite3.Connection:
    """Open a SQLite connection with sane pragmas for local dashboard use.

    - WAL journal so report reads do not block company writes
    - NORMAL synchronous for performance
    - foreign_keys ON to enforce integrity
    """
    conn = sqlite3.connect(db_path, timeout=timeout or 30.0)
    conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    conn.execute("PRAGMA foreign_keys=ON;")
    return conn


def open_store(db_path: str) -> sqlite3.Connection:
    """Connection with the schema bootstrapped (idempotent)."""
    conn = get_connection(db_path)
    schema.bootstrap(conn)
    return conn

"""Audit trail of dispatched procedures, stored in SQLite.

The database location is owned by the deployment; every function takes it
explicitly. ``audit_sink`` binds a path into the callable the Dispatcher
expects.
"""

import time
from functools import partial
from pathlib import Path
from typing import Optional, Union

import aiosqlite

DbPath = Union[str, Path]


async def init_audit_db(db_path: DbPath) -> None:
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    async with aiosqlite.connect(db_path) as db:
        await db.execute(
            """
            CREATE TABLE IF NOT EXISTS audit_log (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                timestamp REAL,
                procedure TEXT,
                method TEXT,
                params TEXT,
                status_code INTEGER,
                error TEXT
            )
            """
        )
        await db.commit()


async def log_request(
    db_path: DbPath,
    procedure: str,
    method: str,
    params: str,
    status_code: Optional[int],
    error: Optional[str] = None,
) -> None:
    """Append one dispatch outcome. Status is None when no response was read."""
    async with aiosqlite.connect(db_path) as db:
        await db.execute(
            "INSERT INTO audit_log (timestamp, procedure, method, params, status_code, error) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            (time.time(), procedure, method, params, status_code, error),
        )
        await db.commit()


def audit_sink(db_path: DbPath):
    return partial(log_request, db_path)


async def get_recent_logs(db_path: DbPath, limit: int = 100) -> list[dict]:
    """Newest entries first."""
    async with aiosqlite.connect(db_path) as db:
        db.row_factory = aiosqlite.Row
        cursor = await db.execute(
            "SELECT timestamp, procedure, method, params, status_code, error "
            "FROM audit_log ORDER BY id DESC LIMIT ?",
            (limit,),
        )
        return [dict(row) for row in await cursor.fetchall()]

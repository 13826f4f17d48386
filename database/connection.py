"""SQLite connection setup for the durable raffle store."""

from __future__ import annotations

from pathlib import Path

import aiosqlite


async def _apply_pragma(conn: aiosqlite.Connection, busy_timeout_ms: int) -> None:
    await conn.execute("PRAGMA journal_mode=WAL")
    # FULL fsyncs the WAL on every commit, so a committed mutation survives power loss
    await conn.execute("PRAGMA synchronous=FULL")
    await conn.execute("PRAGMA temp_store=MEMORY")
    await conn.execute("PRAGMA locking_mode=NORMAL")
    await conn.execute(f"PRAGMA busy_timeout={int(busy_timeout_ms)}")


async def open_connection(database_path: str, busy_timeout_ms: int = 5000) -> aiosqlite.Connection:
    """Open a connection to ``database_path``, creating parent folders."""
    path = Path(database_path)
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(path.as_posix())
    try:
        await _apply_pragma(conn, busy_timeout_ms)
    except Exception:
        await conn.close()
        raise
    return conn

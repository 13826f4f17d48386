"""Database schema migrations."""

from __future__ import annotations

import aiosqlite


SCHEMA_SQL: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS raffle_state (
        id INTEGER PRIMARY KEY CHECK (id = 1),
        document TEXT NOT NULL,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    );
    """,
)


async def run_migrations(conn: aiosqlite.Connection) -> None:
    for statement in SCHEMA_SQL:
        await conn.execute(statement)
    await conn.commit()

"""Durable, crash-safe store holding the single raffle state document."""

from __future__ import annotations

import asyncio
import json
from contextlib import asynccontextmanager, suppress
from typing import AsyncIterator, Callable, Optional

import aiosqlite

from core.exceptions import StoreError
from core.logger import get_logger
from database.connection import open_connection
from database.migrations import run_migrations
from database.models import RaffleState

logger = get_logger(__name__)

_STORE_ERRORS = (aiosqlite.Error, OSError, ValueError, TypeError)

_UPSERT_SQL = """
    INSERT INTO raffle_state (id, document, updated_at)
    VALUES (1, ?, CURRENT_TIMESTAMP)
    ON CONFLICT(id) DO UPDATE SET
        document=excluded.document,
        updated_at=excluded.updated_at
"""


class RaffleStore:
    """Owns the canonical :class:`RaffleState`.

    Readers get deep copies of the last committed state. Writers are
    serialized behind one lock; a mutation becomes visible only after it
    has been committed to disk, and a failed commit leaves memory untouched.
    """

    def __init__(self, conn: aiosqlite.Connection, state: RaffleState) -> None:
        self._conn = conn
        self._state = state
        self._lock = asyncio.Lock()
        self._closed = False

    @classmethod
    async def open(
        cls,
        path: str,
        default: Optional[RaffleState] = None,
        busy_timeout_ms: int = 5000,
    ) -> RaffleStore:
        """Open the store at ``path``, seeding it with ``default`` if empty.

        Raises:
            StoreError: If the file cannot be opened, read or initialized
        """
        try:
            conn = await open_connection(path, busy_timeout_ms)
        except _STORE_ERRORS as exc:
            raise StoreError(f"Cannot open raffle store at {path}: {exc}") from exc

        try:
            await run_migrations(conn)
            cursor = await conn.execute("SELECT document FROM raffle_state WHERE id = 1")
            row = await cursor.fetchone()
            await cursor.close()
            if row is None:
                state = default.copy() if default is not None else RaffleState()
                await cls._write(conn, state)
                logger.info(f"Initialized new raffle store at {path}")
            else:
                state = RaffleState.from_document(json.loads(row[0]))
                logger.info(
                    f"Loaded raffle store from {path}: "
                    f"{len(state.giftcards)} giftcards, {len(state.participants)} participants"
                )
        except _STORE_ERRORS as exc:
            await conn.close()
            raise StoreError(f"Cannot load raffle store at {path}: {exc}") from exc

        return cls(conn, state)

    async def close(self) -> None:
        async with self._lock:
            if self._closed:
                return
            self._closed = True
            await self._conn.close()

    def read(self) -> RaffleState:
        """Return a copy of the last committed state."""
        return self._state.copy()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[RaffleState]:
        """Yield a writable copy of the state and commit it on exit.

        An exception raised inside the block discards the changes.

        Raises:
            StoreError: If the changes could not be committed
        """
        async with self._lock:
            if self._closed:
                raise StoreError("Raffle store is closed")
            draft = self._state.copy()
            yield draft
            await self._commit(draft)

    async def mutate(self, fn: Callable[[RaffleState], Optional[RaffleState]]) -> RaffleState:
        """Apply ``fn`` under the writer lock, persist, then publish.

        ``fn`` may change the state it receives in place or return a
        replacement state.

        Returns:
            A copy of the newly committed state
        """
        async with self._lock:
            if self._closed:
                raise StoreError("Raffle store is closed")
            draft = self._state.copy()
            replacement = fn(draft)
            new_state = replacement if replacement is not None else draft
            await self._commit(new_state)
            return new_state.copy()

    async def _commit(self, new_state: RaffleState) -> None:
        if new_state == self._state:
            return
        write = asyncio.ensure_future(self._write(self._conn, new_state))
        try:
            await asyncio.shield(write)
        except asyncio.CancelledError:
            # The commit may still land on disk; memory must follow it
            try:
                await write
            except _STORE_ERRORS as exc:
                logger.error(f"Failed to persist raffle state after cancellation: {exc}")
            else:
                self._state = new_state.copy()
            raise
        except _STORE_ERRORS as exc:
            logger.error(f"Failed to persist raffle state: {exc}")
            raise StoreError(f"Failed to persist raffle state: {exc}") from exc
        # Publish only after the commit succeeded
        self._state = new_state.copy()

    @staticmethod
    async def _write(conn: aiosqlite.Connection, state: RaffleState) -> None:
        payload = json.dumps(state.to_document())
        try:
            await conn.execute(_UPSERT_SQL, (payload,))
            await conn.commit()
        except BaseException:
            with suppress(Exception):
                await conn.rollback()
            raise

"""Raffle engine: the state machine behind every bot command."""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Iterable, Optional

from core import get_logger
from core.exceptions import DrawingInProgressError
from database.store import RaffleStore
from services.drawing import DrawingExecutor, DrawingReport
from utils.validators import contains_secret

logger = get_logger(__name__)


class JoinOutcome(str, Enum):
    NO_RAFFLE = "no_raffle"
    WRONG_SECRET = "wrong_secret"
    DRAWING_IN_PROGRESS = "drawing_in_progress"
    JOINED = "joined"


class RaffleEngine:
    """Start, join, count and end raffles against a :class:`RaffleStore`."""

    def __init__(self, store: RaffleStore, executor: DrawingExecutor) -> None:
        self.store = store
        self.executor = executor
        self._drawing_lock = asyncio.Lock()

    @property
    def drawing_in_progress(self) -> bool:
        return self._drawing_lock.locked()

    async def start_raffle(self, giftcards: Iterable[str], secret_code: Optional[str] = None) -> int:
        """Replace the gift card pool and secret code in one step.

        Returns:
            Number of gift cards in the new pool
        """
        if self.drawing_in_progress:
            raise DrawingInProgressError("Cannot start a raffle while a drawing is running")

        codes = set(giftcards)

        def replace(state):
            state.giftcards = set(codes)
            state.secret_code = secret_code

        await self.store.mutate(replace)
        logger.info(
            f"Raffle started with {len(codes)} giftcards"
            f"{', secret code required' if secret_code else ''}"
        )
        return len(codes)

    async def join(self, chat_id: int, text: str) -> JoinOutcome:
        """Enter ``chat_id`` into the open raffle if it is eligible."""
        if self.drawing_in_progress:
            return JoinOutcome.DRAWING_IN_PROGRESS

        async with self.store.transaction() as state:
            # Checked again under the writer lock; the drawing snapshots under it too
            if self.drawing_in_progress:
                return JoinOutcome.DRAWING_IN_PROGRESS
            if not state.is_open:
                return JoinOutcome.NO_RAFFLE
            if state.secret_code and not contains_secret(text, state.secret_code):
                return JoinOutcome.WRONG_SECRET
            state.participants.add(chat_id)

        logger.info(f"Chat {chat_id} entered the raffle")
        return JoinOutcome.JOINED

    def participants_count(self) -> int:
        return len(self.store.read().participants)

    def giftcards_count(self) -> int:
        return len(self.store.read().giftcards)

    async def end_raffle(self) -> DrawingReport:
        """Run the drawing. Only one drawing may run at a time.

        Raises:
            DrawingInProgressError: If a drawing is already running
        """
        if self.drawing_in_progress:
            raise DrawingInProgressError("A drawing is already in progress")
        async with self._drawing_lock:
            return await self.executor.run()

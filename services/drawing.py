"""Drawing executor: shuffles participants and hands out gift cards."""

from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Protocol

from core import get_logger, DrawingDefaults, Replies
from core.exceptions import DeliveryError, DeliveryTimeoutError
from database.models import RaffleState
from database.store import RaffleStore

logger = get_logger(__name__)


class Messenger(Protocol):
    """Outbound side of the chat transport."""

    async def send(self, chat_id: int, text: str) -> None:
        ...


@dataclass
class DrawingReport:
    """Outcome of one drawing."""
    delivered: List[int] = field(default_factory=list)
    failed: Dict[int, str] = field(default_factory=dict)
    unserved: List[int] = field(default_factory=list)
    leftover_codes: int = 0

    @property
    def drawn(self) -> int:
        return len(self.delivered) + len(self.failed)


class DrawingExecutor:
    """Pairs a random permutation of participants with gift cards.

    Each pairing is checkpointed on its own: the code leaves the durable
    pool before it is sent, and the participant leaves the durable
    participant set once both messages were delivered. A drawing that is
    interrupted can therefore be re-run without sending anyone a second code.
    """

    def __init__(
        self,
        store: RaffleStore,
        messenger: Messenger,
        timeout: float = DrawingDefaults.DELIVERY_TIMEOUT,
        delay: float = DrawingDefaults.DELIVERY_DELAY,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.store = store
        self.messenger = messenger
        self.timeout = timeout
        self.delay = delay
        self.rng = rng or random.SystemRandom()

    def shuffle(self, participants: Iterable[int]) -> List[int]:
        """Uniformly random order of ``participants``.

        Sorting first makes the result depend only on the RNG, not on set
        iteration order.
        """
        order = sorted(participants)
        self.rng.shuffle(order)
        return order

    async def run(self) -> DrawingReport:
        """Run a drawing and close the raffle.

        Raises:
            StoreError: If a checkpoint cannot be committed; the drawing stops
        """
        report = DrawingReport()
        async with self.store.transaction() as state:
            order = self.shuffle(state.participants)
        logger.info(f"Drawing started with {len(order)} participants")

        for index, chat_id in enumerate(order):
            if index > 0 and self.delay > 0:
                await asyncio.sleep(self.delay)

            code = await self._claim_giftcard()
            if code is None:
                report.unserved = order[index:]
                logger.info(f"Out of giftcards, {len(report.unserved)} participants receive nothing")
                break

            try:
                await self._deliver(chat_id, code)
            except DeliveryError as exc:
                report.failed[chat_id] = exc.reason
                logger.warning(f"Failed to deliver giftcard to {chat_id}: {exc.reason}")
                continue

            await self.store.mutate(lambda state: state.participants.discard(chat_id))
            report.delivered.append(chat_id)
            logger.info(f"Delivered giftcard to {chat_id}")

        report.leftover_codes = len(self.store.read().giftcards)
        await self.store.mutate(self._close_raffle)
        logger.info(
            f"Drawing finished: {len(report.delivered)} delivered, {len(report.failed)} failed, "
            f"{len(report.unserved)} unserved, {report.leftover_codes} codes discarded"
        )
        return report

    async def _claim_giftcard(self) -> Optional[str]:
        async with self.store.transaction() as state:
            return state.pop_giftcard()

    async def _deliver(self, chat_id: int, code: str) -> None:
        await self._send(chat_id, Replies.WINNER_NOTICE)
        await self._send(chat_id, code)

    async def _send(self, chat_id: int, text: str) -> None:
        try:
            await asyncio.wait_for(self.messenger.send(chat_id, text), timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            raise DeliveryTimeoutError(chat_id, f"no response within {self.timeout:g}s") from exc
        except DeliveryError:
            raise
        except Exception as exc:
            raise DeliveryError(chat_id, f"{type(exc).__name__}: {exc}") from exc

    @staticmethod
    def _close_raffle(state: RaffleState) -> None:
        state.participants.clear()
        state.giftcards.clear()
        state.secret_code = None

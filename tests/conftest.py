"""Pytest configuration and fixtures."""

import asyncio
import random
from typing import Iterable, List, Optional, Tuple
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

from database.models import RaffleState
from database.store import RaffleStore
from services.drawing import DrawingExecutor
from services.raffle import RaffleEngine
from services.router import CommandRouter, InboundMessage
from core.constants import ChatScope


ADMIN = "raffle_admin"
BOT = "raffle_bot"


class RecordingMessenger:
    """Messenger double that records what would have been sent."""

    def __init__(
        self,
        fail_for: Iterable[int] = (),
        hang_for: Iterable[int] = (),
        hang_on_text: Iterable[str] = (),
        crash_after: Optional[int] = None,
    ) -> None:
        self.fail_for = set(fail_for)
        self.hang_for = set(hang_for)
        self.hang_on_text = set(hang_on_text)
        self.crash_after = crash_after
        self.sent: List[Tuple[int, str]] = []

    async def send(self, chat_id: int, text: str) -> None:
        if self.crash_after is not None and len(self.sent) >= self.crash_after:
            raise SimulatedCrash()
        if chat_id in self.hang_for or text in self.hang_on_text:
            await asyncio.sleep(3600)
        if chat_id in self.fail_for:
            raise RuntimeError("Forbidden: bot was blocked by the user")
        self.sent.append((chat_id, text))

    def recipients(self) -> List[int]:
        seen: List[int] = []
        for chat_id, _ in self.sent:
            if chat_id not in seen:
                seen.append(chat_id)
        return seen

    def codes_for(self, chat_id: int) -> List[str]:
        return [text for recipient, text in self.sent if recipient == chat_id][1::2]


class SimulatedCrash(BaseException):
    """Stands in for the process dying mid-drawing."""


@pytest.fixture
def store_path(tmp_path):
    return str(tmp_path / "data" / "raffle.sqlite")


@pytest_asyncio.fixture
async def store(store_path):
    """Empty raffle store on a temporary file."""
    raffle_store = await RaffleStore.open(store_path)
    yield raffle_store
    await raffle_store.close()


@pytest.fixture
def messenger():
    return RecordingMessenger()


@pytest.fixture
def executor(store, messenger):
    return DrawingExecutor(store, messenger, timeout=1.0, delay=0, rng=random.Random(1234))


@pytest.fixture
def engine(store, executor):
    return RaffleEngine(store, executor)


@pytest.fixture
def router(engine):
    return CommandRouter(engine, admin_username=ADMIN, bot_username=BOT)


async def seed(store: RaffleStore, giftcards=(), participants=(), secret_code=None) -> None:
    """Write a given state straight into the store."""
    await store.mutate(lambda _: RaffleState(set(giftcards), set(participants), secret_code))


def make_inbound(
    text: Optional[str],
    chat_id: Optional[int] = 1001,
    username: Optional[str] = "someone",
    scope: Optional[ChatScope] = ChatScope.PRIVATE,
) -> InboundMessage:
    return InboundMessage(
        chat_scope=scope,
        user_id=chat_id,
        username=username,
        chat_id=chat_id,
        text=text,
    )


class MockMessage:
    """Mock object mimicking an aiogram Message."""

    def __init__(self, text=None, chat_id=1001, username="someone", chat_type="private"):
        self.text = text
        self.from_user = MagicMock()
        self.from_user.id = chat_id
        self.from_user.username = username
        self.chat = MagicMock()
        self.chat.id = chat_id
        self.chat.type = chat_type
        self.answer = AsyncMock()

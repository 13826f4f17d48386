"""Tests for the raffle engine state machine."""

import asyncio

import pytest

from core.exceptions import DrawingInProgressError
from services.raffle import JoinOutcome, RaffleEngine
from tests.conftest import seed


@pytest.mark.asyncio
async def test_join_without_raffle(engine, store):
    assert await engine.join(1, "hi") is JoinOutcome.NO_RAFFLE
    assert store.read().participants == set()


@pytest.mark.asyncio
async def test_repeat_joins_do_not_duplicate(engine, store):
    await engine.start_raffle({"ABCDEF"})
    for _ in range(3):
        assert await engine.join(1, "me!") is JoinOutcome.JOINED
    await engine.join(2, "me too")
    assert store.read().participants == {1, 2}
    assert engine.participants_count() == 2


@pytest.mark.asyncio
async def test_concurrent_joins_do_not_duplicate(engine, store):
    await engine.start_raffle({"ABCDEF"})
    await asyncio.gather(*(engine.join(chat_id % 5, "join") for chat_id in range(40)))
    assert store.read().participants == {0, 1, 2, 3, 4}


@pytest.mark.asyncio
async def test_secret_code_gates_entry(engine, store):
    await engine.start_raffle({"ABCDEF"}, secret_code="GOLD")
    assert await engine.join(1, "silver") is JoinOutcome.WRONG_SECRET
    assert await engine.join(2, "the code is GOLD") is JoinOutcome.JOINED
    assert store.read().participants == {2}


@pytest.mark.asyncio
async def test_start_replaces_previous_raffle(engine, store):
    """Codes and secret are replaced, never merged with leftovers."""
    await engine.start_raffle({"AAAAAA", "BBBBBB"}, secret_code="GOLD")
    await engine.join(1, "GOLD")

    count = await engine.start_raffle({"CCCCCC"})

    state = store.read()
    assert count == 1
    assert state.giftcards == {"CCCCCC"}
    assert state.secret_code is None
    assert state.participants == {1}


@pytest.mark.asyncio
async def test_start_with_no_valid_codes_leaves_raffle_closed(engine, store):
    await seed(store, giftcards={"AAAAAA"})
    await engine.start_raffle(set())
    assert not store.read().is_open
    assert await engine.join(1, "hi") is JoinOutcome.NO_RAFFLE


@pytest.mark.asyncio
async def test_counts_before_any_raffle(engine):
    assert engine.participants_count() == 0
    assert engine.giftcards_count() == 0


@pytest.mark.asyncio
async def test_end_raffle_delivers_and_closes(engine, store, messenger):
    await engine.start_raffle({"AAAAAA", "BBBBBB"})
    for chat_id in (1, 2, 3):
        await engine.join(chat_id, "hi")

    report = await engine.end_raffle()

    assert len(report.delivered) == 2
    assert engine.participants_count() == 0
    assert engine.giftcards_count() == 0
    assert not engine.drawing_in_progress


class GatedMessenger:
    """Holds every send until the test opens the gate."""

    def __init__(self):
        self.gate = asyncio.Event()
        self.started = asyncio.Event()

    async def send(self, chat_id, text):
        self.started.set()
        await self.gate.wait()


@pytest.mark.asyncio
async def test_joins_and_drawings_rejected_during_drawing(store):
    from services.drawing import DrawingExecutor

    messenger = GatedMessenger()
    engine = RaffleEngine(store, DrawingExecutor(store, messenger, timeout=5.0, delay=0))
    await engine.start_raffle({"AAAAAA"})
    await engine.join(1, "hi")

    drawing = asyncio.create_task(engine.end_raffle())
    await messenger.started.wait()

    assert engine.drawing_in_progress
    assert await engine.join(2, "late") is JoinOutcome.DRAWING_IN_PROGRESS
    with pytest.raises(DrawingInProgressError):
        await engine.end_raffle()
    with pytest.raises(DrawingInProgressError):
        await engine.start_raffle({"BBBBBB"})

    messenger.gate.set()
    report = await drawing

    assert report.delivered == [1]
    assert store.read().participants == set()

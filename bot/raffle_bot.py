"""Thin wrapper around the aiogram bot and dispatcher."""

from __future__ import annotations

from contextlib import suppress

from aiogram import Bot, Dispatcher

from core import get_logger

logger = get_logger(__name__)


class RaffleBot:
    def __init__(self, token: str) -> None:
        self.bot = Bot(token=token)
        # Updates are handled as separate tasks, so joins run concurrently
        self.dispatcher = Dispatcher()

    async def start(self) -> None:
        me = await self.bot.get_me()
        logger.info(f"Polling updates as @{me.username}")
        await self.dispatcher.start_polling(self.bot, handle_as_tasks=True)

    async def stop(self) -> None:
        # RuntimeError when polling never started
        with suppress(RuntimeError):
            await self.dispatcher.stop_polling()
        await self.bot.session.close()

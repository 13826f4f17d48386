"""Outbound Telegram messaging used by the drawing executor."""

from __future__ import annotations

from aiogram import Bot
from asyncio_throttle import Throttler

from core import TelegramLimits


class TelegramMessenger:
    """Sends plain text messages, throttled to stay under Telegram's limits."""

    def __init__(self, bot: Bot, rate_limit: int = TelegramLimits.SEND_RATE_LIMIT) -> None:
        self.bot = bot
        self.throttler = Throttler(rate_limit=rate_limit, period=1.0)

    async def send(self, chat_id: int, text: str) -> None:
        async with self.throttler:
            await self.bot.send_message(chat_id, text)

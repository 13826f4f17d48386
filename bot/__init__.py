"""Telegram transport adapter."""

from .messenger import TelegramMessenger
from .raffle_bot import RaffleBot

__all__ = [
    "RaffleBot",
    "TelegramMessenger",
]

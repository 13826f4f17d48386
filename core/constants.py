"""Application-wide constants and configuration values."""

from __future__ import annotations

from enum import Enum


# Admin command markers
class CommandMarkers:
    """Text markers the administrator uses to drive the raffle."""
    START_RAFFLE = "#StartRaffle"
    SECRET_CODE = "#SecretCode"
    END_RAFFLE = "#EndRaffle"
    PARTICIPANTS_COUNT = "#ParticipantsCount"
    GIFTCARDS_COUNT = "#GiftcardsCount"


# User-facing replies
class Replies:
    """Texts sent back to users."""
    RAFFLE_STARTED = "Yay! The raffle has begun!"
    RAFFLE_ENDED = "Horray! We gave out all the gift cards!"
    DRAWING_ALREADY_RUNNING = "A drawing is already in progress, please wait for it to finish."
    NO_ONGOING_RAFFLE = (
        "Sorry! There's no ongoing raffle at the moment. "
        "Watch out for future raffles in our user group!"
    )
    WRONG_SECRET = "Sorry! That's an incorrect secret code."
    DRAWING_IN_PROGRESS = "Sorry! The winners are being drawn right now, entries are closed."
    JOINED = "Yay! You've been entered into the raffle!"
    WINNER_NOTICE = "Congratulations! You won a giftcard! The code is:"


# Gift card format
class GiftcardRules:
    """Reward code format rules."""
    MIN_LENGTH = 6  # codes must be longer than 5 characters


# Drawing defaults
class DrawingDefaults:
    """Default values for the drawing executor."""
    DELIVERY_TIMEOUT = 10.0  # seconds per send
    DELIVERY_DELAY = 0.2  # seconds between recipients


# Telegram limits
class TelegramLimits:
    """Telegram API limits."""
    SEND_RATE_LIMIT = 25  # messages per second, below the 30/s bot limit


# Store defaults
class StoreDefaults:
    """Default durable store configuration."""
    PATH = "data/raffle.sqlite"
    BUSY_TIMEOUT = 5000  # milliseconds


class ChatScope(str, Enum):
    """Telegram chat types."""
    PRIVATE = "private"
    GROUP = "group"
    SUPERGROUP = "supergroup"
    CHANNEL = "channel"

"""Application-wide exception classes."""

from __future__ import annotations


class RaffleBotError(Exception):
    """Base exception for all application errors."""
    pass


class ConfigurationError(RaffleBotError):
    """Raised when configuration is invalid."""
    pass


class StoreError(RaffleBotError):
    """Raised when the raffle state cannot be persisted or loaded.

    A mutation that raises this error was not applied.
    """
    pass


class MessageError(RaffleBotError):
    """Base exception for inbound messages the bot drops without a reply."""
    pass


class MessageFormatError(MessageError):
    """Raised when an inbound message lacks text or a chat id."""
    pass


class UnhandledCommandError(MessageError):
    """Raised when admin text matches no known command."""
    pass


class RaffleError(RaffleBotError):
    """Base exception for raffle operations."""
    pass


class DrawingInProgressError(RaffleError):
    """Raised when a drawing is requested while another one is running."""
    pass


class DeliveryError(RaffleBotError):
    """Raised when a message could not be delivered to a recipient."""

    def __init__(self, chat_id: int, reason: str) -> None:
        super().__init__(f"delivery to {chat_id} failed: {reason}")
        self.chat_id = chat_id
        self.reason = reason


class DeliveryTimeoutError(DeliveryError):
    """Raised when a recipient did not accept a message in time."""
    pass

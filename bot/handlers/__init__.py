"""Aggregate bot handlers for dispatch registration."""

from .raffle import RaffleHandlers, setup_raffle_handlers, to_inbound

__all__ = [
    "RaffleHandlers",
    "setup_raffle_handlers",
    "to_inbound",
]

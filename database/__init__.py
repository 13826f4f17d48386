"""Database package public API."""

from .connection import open_connection
from .migrations import run_migrations
from .models import RaffleState
from .store import RaffleStore

__all__ = [
    "RaffleState",
    "RaffleStore",
    "open_connection",
    "run_migrations",
]

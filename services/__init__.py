"""Services package."""

from .commands import AdminCommand, CommandKind, parse_admin_command
from .drawing import DrawingExecutor, DrawingReport, Messenger
from .raffle import JoinOutcome, RaffleEngine
from .router import CommandRouter, InboundMessage, parse_chat_scope

__all__ = [
    "AdminCommand",
    "CommandKind",
    "parse_admin_command",
    "DrawingExecutor",
    "DrawingReport",
    "Messenger",
    "JoinOutcome",
    "RaffleEngine",
    "CommandRouter",
    "InboundMessage",
    "parse_chat_scope",
]

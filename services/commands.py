"""Parsing of administrator commands into tagged variants."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Tuple

from core.constants import CommandMarkers
from utils.validators import is_valid_giftcard


class CommandKind(str, Enum):
    START_RAFFLE = "start_raffle"
    END_RAFFLE = "end_raffle"
    PARTICIPANTS_COUNT = "participants_count"
    GIFTCARDS_COUNT = "giftcards_count"


@dataclass(frozen=True)
class AdminCommand:
    kind: CommandKind
    giftcards: FrozenSet[str] = field(default_factory=frozenset)
    secret_code: Optional[str] = None


_EXACT_COMMANDS = {
    CommandMarkers.END_RAFFLE: CommandKind.END_RAFFLE,
    CommandMarkers.PARTICIPANTS_COUNT: CommandKind.PARTICIPANTS_COUNT,
    CommandMarkers.GIFTCARDS_COUNT: CommandKind.GIFTCARDS_COUNT,
}


def parse_giftcards(lines: Iterable[str]) -> FrozenSet[str]:
    """Keep only the lines that are well-formed gift card codes."""
    return frozenset(code for code in (line.strip() for line in lines) if is_valid_giftcard(code))


def _split_secret(lines: list[str]) -> Tuple[Optional[str], list[str]]:
    if lines and lines[0].strip().startswith(CommandMarkers.SECRET_CODE):
        secret = lines[0].strip()[len(CommandMarkers.SECRET_CODE):].strip()
        return secret or None, lines[1:]
    return None, lines


def parse_start_raffle(text: str) -> AdminCommand:
    """Parse a start message.

    Layout::

        #StartRaffle
        #SecretCode GOLD      <- optional, must be the first line after the marker
        CODE0001
        CODE0002
    """
    lines = text.splitlines()[1:]
    secret_code, code_lines = _split_secret(lines)
    return AdminCommand(
        kind=CommandKind.START_RAFFLE,
        giftcards=parse_giftcards(code_lines),
        secret_code=secret_code,
    )


def parse_admin_command(text: str) -> Optional[AdminCommand]:
    """Return the command ``text`` encodes, or None if it encodes none."""
    if text.startswith(CommandMarkers.START_RAFFLE):
        return parse_start_raffle(text)
    kind = _EXACT_COMMANDS.get(text.strip())
    if kind is None:
        return None
    return AdminCommand(kind=kind)

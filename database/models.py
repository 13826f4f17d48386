"""Raffle state model persisted by the durable store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Set


@dataclass(slots=True)
class RaffleState:
    """Entire raffle state, stored as a single document.

    A raffle is open exactly while ``giftcards`` is non-empty.
    """

    giftcards: Set[str] = field(default_factory=set)
    participants: Set[int] = field(default_factory=set)
    secret_code: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return bool(self.giftcards)

    def copy(self) -> RaffleState:
        return RaffleState(
            giftcards=set(self.giftcards),
            participants=set(self.participants),
            secret_code=self.secret_code,
        )

    def pop_giftcard(self) -> Optional[str]:
        """Remove and return the lexicographically smallest code."""
        if not self.giftcards:
            return None
        code = min(self.giftcards)
        self.giftcards.remove(code)
        return code

    def to_document(self) -> Dict[str, Any]:
        return {
            "giftcards": sorted(self.giftcards),
            "participants": sorted(self.participants),
            "secret_code": self.secret_code,
        }

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> RaffleState:
        """Build a state from a stored document.

        Documents written with plain lists (duplicates included) load as sets.
        """
        secret_code = document.get("secret_code")
        return cls(
            giftcards={str(code) for code in document.get("giftcards") or ()},
            participants={int(chat_id) for chat_id in document.get("participants") or ()},
            secret_code=str(secret_code) if secret_code else None,
        )

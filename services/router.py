"""Command router: classifies inbound messages and dispatches them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core import get_logger, ChatScope, Replies
from core.exceptions import DrawingInProgressError, MessageFormatError, UnhandledCommandError
from services.commands import AdminCommand, CommandKind, parse_admin_command
from services.raffle import JoinOutcome, RaffleEngine

logger = get_logger(__name__)


def parse_chat_scope(chat_type: Optional[str]) -> Optional[ChatScope]:
    """Map a Telegram chat type string to a :class:`ChatScope`."""
    if chat_type is None:
        return None
    try:
        return ChatScope(str(chat_type).lower())
    except ValueError:
        return None


@dataclass(frozen=True)
class InboundMessage:
    """Transport-independent view of a received chat message."""
    chat_scope: Optional[ChatScope]
    user_id: Optional[int]
    username: Optional[str]
    chat_id: Optional[int]
    text: Optional[str]


_JOIN_REPLIES = {
    JoinOutcome.NO_RAFFLE: Replies.NO_ONGOING_RAFFLE,
    JoinOutcome.WRONG_SECRET: Replies.WRONG_SECRET,
    JoinOutcome.DRAWING_IN_PROGRESS: Replies.DRAWING_IN_PROGRESS,
    JoinOutcome.JOINED: Replies.JOINED,
}


class CommandRouter:
    """Decides which raffle operation an inbound message triggers.

    Only direct chats are served. The configured administrator drives the
    raffle with commands; anyone else who writes to the bot joins it.
    """

    def __init__(
        self,
        engine: RaffleEngine,
        admin_username: str,
        bot_username: Optional[str] = None,
    ) -> None:
        self.engine = engine
        self.admin_username = admin_username.lstrip("@")
        self.bot_username = bot_username.lstrip("@") if bot_username else None

    def is_admin(self, message: InboundMessage) -> bool:
        return bool(self.admin_username) and message.username == self.admin_username

    async def route(self, message: InboundMessage) -> Optional[str]:
        """Handle ``message`` and return the reply text, or None for no reply.

        Raises:
            MessageFormatError: If the message has no text or chat id
            UnhandledCommandError: If admin text matches no command
            StoreError: If a state change could not be persisted
        """
        if message.chat_scope is not ChatScope.PRIVATE:
            logger.debug(f"Ignoring message from {message.chat_scope} chat {message.chat_id}: not applicable")
            return None
        if message.text is None:
            raise MessageFormatError("cannot parse out text")
        if message.chat_id is None:
            raise MessageFormatError("could not get chat id")

        logger.debug(f"msg from chat {message.chat_id} = {message.text!r}")

        if self.bot_username and message.username == self.bot_username:
            return None
        if self.is_admin(message):
            return await self._route_admin(message.text)
        return await self._route_participant(message.chat_id, message.text)

    async def _route_admin(self, text: str) -> str:
        command = parse_admin_command(text)
        if command is None:
            raise UnhandledCommandError("not responding to this case")
        return await self.execute(command)

    async def execute(self, command: AdminCommand) -> str:
        """Run an already parsed admin command and return its reply."""
        try:
            if command.kind is CommandKind.START_RAFFLE:
                await self.engine.start_raffle(command.giftcards, command.secret_code)
                return Replies.RAFFLE_STARTED
            if command.kind is CommandKind.END_RAFFLE:
                report = await self.engine.end_raffle()
                logger.info(f"Raffle ended, {len(report.delivered)} giftcards delivered")
                return Replies.RAFFLE_ENDED
        except DrawingInProgressError:
            return Replies.DRAWING_ALREADY_RUNNING

        if command.kind is CommandKind.PARTICIPANTS_COUNT:
            return str(self.engine.participants_count())
        if command.kind is CommandKind.GIFTCARDS_COUNT:
            return str(self.engine.giftcards_count())
        raise UnhandledCommandError(f"unknown command kind {command.kind}")

    async def _route_participant(self, chat_id: int, text: str) -> str:
        outcome = await self.engine.join(chat_id, text)
        return _JOIN_REPLIES[outcome]

"""Message handler that feeds every Telegram message to the command router."""

from __future__ import annotations

from aiogram import Router, types

from bot.error_handler import log_handler_errors
from services.router import CommandRouter, InboundMessage, parse_chat_scope


def to_inbound(message: types.Message) -> InboundMessage:
    """Convert an aiogram message into the transport-independent record."""
    chat = message.chat
    sender = message.from_user
    chat_type = getattr(chat, "type", None) if chat else None
    return InboundMessage(
        chat_scope=parse_chat_scope(getattr(chat_type, "value", chat_type)),
        user_id=sender.id if sender else None,
        username=sender.username if sender else None,
        chat_id=chat.id if chat else None,
        text=message.text,
    )


class RaffleHandlers:
    def __init__(self, command_router: CommandRouter) -> None:
        self.command_router = command_router
        self.router = Router(name="raffle")
        self._register()

    def setup(self, dispatcher) -> None:
        dispatcher.include_router(self.router)

    def _register(self) -> None:
        self.router.message.register(self.handle_message)

    @log_handler_errors
    async def handle_message(self, message: types.Message) -> None:
        reply = await self.command_router.route(to_inbound(message))
        if reply is not None:
            await message.answer(reply)


def setup_raffle_handlers(dispatcher, command_router: CommandRouter) -> RaffleHandlers:
    handler = RaffleHandlers(command_router)
    handler.setup(dispatcher)
    return handler

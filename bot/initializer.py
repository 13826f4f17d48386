"""Bot initialization module."""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.logger import get_logger

if TYPE_CHECKING:
    from config import Config
    from database.store import RaffleStore

logger = get_logger(__name__)


class BotInitializer:
    """Wires the raffle services to a Telegram bot."""

    def __init__(self, config: Config, store: RaffleStore):
        self.config = config
        self.store = store

    async def initialize(self):
        """Create the bot and register the raffle handler."""
        from bot.raffle_bot import RaffleBot
        from bot.messenger import TelegramMessenger
        from bot.handlers import setup_raffle_handlers
        from services import CommandRouter, DrawingExecutor, RaffleEngine

        bot = RaffleBot(token=self.config.bot_token)

        messenger = TelegramMessenger(bot.bot, rate_limit=self.config.send_rate_limit)
        executor = DrawingExecutor(
            self.store,
            messenger,
            timeout=self.config.delivery_timeout,
            delay=self.config.delivery_delay,
        )
        engine = RaffleEngine(self.store, executor)
        command_router = CommandRouter(
            engine,
            admin_username=self.config.admin_username,
            bot_username=self.config.bot_username or None,
        )
        logger.info("✅ Services initialized")

        setup_raffle_handlers(bot.dispatcher, command_router)
        logger.info(f"✅ Raffle handler registered, admin is @{self.config.admin_username}")

        return bot

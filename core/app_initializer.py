"""Application initialization orchestrator."""

from __future__ import annotations

from contextlib import suppress
from typing import Optional

from config import Config, load_config
from core.logger import get_logger
from database.store import RaffleStore

logger = get_logger(__name__)


class ApplicationInitializer:
    """Orchestrates application initialization and lifecycle."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or load_config()
        self.store: Optional[RaffleStore] = None
        self.bot = None

    async def initialize(self) -> None:
        """Validate configuration, open the store and build the bot.

        Raises:
            ConfigurationError: If required settings are missing
            StoreError: If the raffle store cannot be opened
        """
        self.config.validate()
        await self._init_store()
        await self._init_bot()

    async def run(self) -> None:
        """Poll Telegram until the process is stopped."""
        try:
            logger.info("🤖 Telegram bot started")
            await self.bot.start()
        finally:
            await self.cleanup()

    async def cleanup(self) -> None:
        """Cleanup resources."""
        with suppress(Exception):
            if self.bot:
                await self.bot.stop()
        with suppress(Exception):
            if self.store:
                await self.store.close()

    async def _init_store(self) -> None:
        self.store = await RaffleStore.open(
            self.config.store_path,
            busy_timeout_ms=self.config.db_busy_timeout,
        )
        logger.info(f"✅ Raffle store opened at {self.config.store_path}")

    async def _init_bot(self) -> None:
        from bot.initializer import BotInitializer
        self.bot = await BotInitializer(self.config, self.store).initialize()
        logger.info("✅ Bot initialized successfully")

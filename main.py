"""Application entry point."""

from __future__ import annotations

import asyncio
from typing import Optional

from config import Config, load_config
from core import setup_logger, get_logger, RaffleBotError
from core.app_initializer import ApplicationInitializer

logger = get_logger("app")


async def main(config: Optional[Config] = None) -> None:
    """Main application entry point."""
    app = ApplicationInitializer(config)
    await app.initialize()
    await app.run()


def run() -> None:
    config = load_config()

    # Setup logging on the root logger so every module logger shares it
    setup_logger(
        level=config.log_level,
        log_file=config.log_file or None,
        colored=True
    )

    try:
        asyncio.run(main(config))
    except KeyboardInterrupt:
        logger.info("Application stopped by user")
    except RaffleBotError as e:
        logger.error(f"Application failed to start: {e}")
        raise SystemExit(1)
    except Exception as e:
        logger.error(f"Application failed: {e}", exc_info=True)
        raise SystemExit(1)


if __name__ == "__main__":
    run()

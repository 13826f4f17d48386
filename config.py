"""Application configuration module.

Reads settings from environment variables (and an optional ``.env`` file).
Configuration is loaded once at startup and never changes afterwards.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from core.constants import DrawingDefaults, StoreDefaults, TelegramLimits
from core.exceptions import ConfigurationError


def _get_int(name: str, default: int) -> int:
    """Get integer from environment variable."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from exc


def _get_float(name: str, default: float) -> float:
    """Get float from environment variable."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from exc


def _get_str(name: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.getenv(name, default).strip()


def _normalize_username(value: str) -> str:
    """Telegram usernames are often written with a leading ``@``."""
    return value[1:] if value.startswith("@") else value


@dataclass(frozen=True)
class Config:
    bot_token: str
    admin_username: str
    bot_username: str
    store_path: str
    delivery_timeout: float
    delivery_delay_ms: int
    send_rate_limit: int
    db_busy_timeout: int
    log_level: str
    log_file: str

    @property
    def delivery_delay(self) -> float:
        """Pause between two winners, in seconds."""
        return self.delivery_delay_ms / 1000

    def validate(self) -> None:
        """Raise ConfigurationError if the bot cannot run with these settings."""
        if not self.bot_token:
            raise ConfigurationError("BOT_TOKEN is not set")
        if not self.admin_username:
            raise ConfigurationError("ADMIN_USERNAME is not set")
        if not self.store_path:
            raise ConfigurationError("STORE_PATH is empty")
        if self.delivery_timeout <= 0:
            raise ConfigurationError("DELIVERY_TIMEOUT must be positive")
        if self.delivery_delay_ms < 0:
            raise ConfigurationError("DELIVERY_DELAY_MS must not be negative")
        if self.send_rate_limit <= 0:
            raise ConfigurationError("SEND_RATE_LIMIT must be positive")


def load_config() -> Config:
    """Load application configuration from environment variables.

    Returns:
        Config: Application configuration (not yet validated)
    """
    load_dotenv()
    return Config(
        bot_token=_get_str("BOT_TOKEN"),
        admin_username=_normalize_username(_get_str("ADMIN_USERNAME")),
        bot_username=_normalize_username(_get_str("BOT_USERNAME")),
        store_path=_get_str("STORE_PATH", StoreDefaults.PATH),
        delivery_timeout=_get_float("DELIVERY_TIMEOUT", DrawingDefaults.DELIVERY_TIMEOUT),
        delivery_delay_ms=_get_int("DELIVERY_DELAY_MS", int(DrawingDefaults.DELIVERY_DELAY * 1000)),
        send_rate_limit=_get_int("SEND_RATE_LIMIT", TelegramLimits.SEND_RATE_LIMIT),
        db_busy_timeout=_get_int("DB_BUSY_TIMEOUT", StoreDefaults.BUSY_TIMEOUT),
        log_level=_get_str("LOG_LEVEL", "INFO"),
        log_file=_get_str("LOG_FILE", "logs/raffle.log"),
    )

"""Core application components."""

# Leaf modules only; core.app_initializer imports config and database
from core.logger import setup_logger, get_logger
from core.constants import (
    ChatScope,
    CommandMarkers,
    DrawingDefaults,
    GiftcardRules,
    Replies,
    StoreDefaults,
    TelegramLimits,
)
from core.exceptions import (
    RaffleBotError,
    ConfigurationError,
    StoreError,
    MessageError,
    MessageFormatError,
    UnhandledCommandError,
    RaffleError,
    DrawingInProgressError,
    DeliveryError,
    DeliveryTimeoutError,
)

__all__ = [
    # Logging
    'setup_logger',
    'get_logger',
    # Constants
    'ChatScope',
    'CommandMarkers',
    'DrawingDefaults',
    'GiftcardRules',
    'Replies',
    'StoreDefaults',
    'TelegramLimits',
    # Exceptions
    'RaffleBotError',
    'ConfigurationError',
    'StoreError',
    'MessageError',
    'MessageFormatError',
    'UnhandledCommandError',
    'RaffleError',
    'DrawingInProgressError',
    'DeliveryError',
    'DeliveryTimeoutError',
]

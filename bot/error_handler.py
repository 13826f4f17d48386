"""Centralized error handling for bot handlers."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable

from aiogram import types

from core import get_logger
from core.exceptions import MessageError, StoreError

logger = get_logger(__name__)


def _event_context(event: Any) -> dict:
    if isinstance(event, types.Message):
        return {
            "user_id": event.from_user.id if event.from_user else None,
            "chat_id": event.chat.id if event.chat else None,
        }
    return {"user_id": None, "chat_id": None}


def log_handler_errors(func: Callable) -> Callable:
    """Decorator that logs handler failures instead of replying.

    Dropped messages (bad format, unknown admin command) are logged at
    WARNING. Persistence failures and anything unexpected are logged at
    ERROR with the traceback. The user never receives a reply for these.

    Usage:
        @log_handler_errors
        async def handle_message(self, message):
            ...
    """
    @wraps(func)
    async def wrapper(self, event: Any, *args, **kwargs):
        try:
            return await func(self, event, *args, **kwargs)
        except MessageError as e:
            context = _event_context(event)
            logger.warning(
                f"Dropped message in {func.__name__} "
                f"(user={context['user_id']}, chat={context['chat_id']}): {e}"
            )
        except StoreError as e:
            logger.error(f"Persistence failure in {func.__name__}: {e}", extra=_event_context(event))
        except Exception as e:
            logger.error(f"Error in {func.__name__}: {e}", exc_info=True, extra=_event_context(event))
        return None

    return wrapper

"""
Rate-limited logging utilities.

Retry warnings for a flapping transport can repeat on every call. This
module suppresses repeats of the same message for a while so the log stays
readable.
"""
import logging
from typing import Optional

from cachetools import TTLCache

# Configure logger
logger = logging.getLogger(__name__)

# Messages seen recently, keyed by level and text; entries expire after the TTL
_recent_messages = TTLCache(maxsize=256, ttl=60)


def rate_limited_log(
    message: str,
    level: str = "warning",
    logger_instance: Optional[logging.Logger] = None
) -> bool:
    """
    Log a message unless the same message was logged within the last minute.

    Args:
        message: Message to log
        level: Log level (debug, info, warning, error, critical)
        logger_instance: Logger to use (defaults to module logger)

    Returns:
        True if the message was emitted, False if it was suppressed
    """
    log_instance = logger_instance or logger
    log_method = getattr(log_instance, level.lower(), log_instance.warning)

    key = f"{level}:{message}"
    if key in _recent_messages:
        return False

    log_method(message)
    _recent_messages[key] = True
    return True


def reset_rate_limit() -> None:
    """Forget every recently logged message."""
    _recent_messages.clear()

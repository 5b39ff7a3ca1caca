"""
Retry logic with exponential backoff for transport requests.
"""
import asyncio
import dataclasses
import logging
import math
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, TypeVar

from ._rate_limited_log import rate_limited_log
from .exceptions import ErrorKind, GuildsSdkError, to_guilds_sdk_error

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Accepted camelCase spellings of the option names
_OPTION_ALIASES = {
    "initialDelayMs": "initial_delay_ms",
    "maxDelayMs": "max_delay_ms",
    "backoffMultiplier": "backoff_multiplier",
    "retryableError": "retryable_error",
}

_sleep = asyncio.sleep


@dataclass(frozen=True)
class RetryOptions:
    """
    Configuration for retry behavior.

    Attributes:
        attempts: Maximum number of attempts, at least 1
        initial_delay_ms: Delay before the second attempt, in milliseconds
        max_delay_ms: Upper bound for any single delay, in milliseconds
        backoff_multiplier: Factor applied to the delay after each failed attempt
        retryable_error: Predicate deciding whether an error justifies another
            attempt. ``None`` treats every error as retryable.
    """
    attempts: int = 3
    initial_delay_ms: float = 150
    max_delay_ms: float = 1_000
    backoff_multiplier: float = 2
    retryable_error: Optional[Callable[[BaseException], bool]] = None

    def __post_init__(self):
        if isinstance(self.attempts, bool) or not isinstance(self.attempts, int) or self.attempts < 1:
            raise GuildsSdkError(ErrorKind.CONFIG_ERROR, f"attempts must be an integer >= 1, got {self.attempts!r}")
        if self.initial_delay_ms < 0 or self.max_delay_ms < 0:
            raise GuildsSdkError(ErrorKind.CONFIG_ERROR, "retry delays must be >= 0")
        if not math.isfinite(self.max_delay_ms):
            raise GuildsSdkError(ErrorKind.CONFIG_ERROR, "max_delay_ms must be finite")
        if self.backoff_multiplier <= 0:
            raise GuildsSdkError(ErrorKind.CONFIG_ERROR, "backoff_multiplier must be > 0")

    @classmethod
    def from_overrides(cls, overrides: Any = None) -> "RetryOptions":
        """
        Build options from a partial override, filling the rest with defaults.

        Args:
            overrides: ``None``, a ``RetryOptions``, a pydantic model or a mapping
                of option names (snake_case or camelCase) to values. ``None``
                values are ignored.

        Returns:
            Resolved options

        Raises:
            GuildsSdkError: CONFIG_ERROR for unknown option names or invalid values
        """
        if overrides is None:
            return DEFAULT_RETRY_OPTIONS
        if isinstance(overrides, RetryOptions):
            return overrides
        if hasattr(overrides, "model_dump"):
            overrides = overrides.model_dump()
        if not isinstance(overrides, Mapping):
            raise GuildsSdkError(ErrorKind.CONFIG_ERROR, f"Unsupported retry options: {overrides!r}")

        known = {f.name for f in dataclasses.fields(cls)}
        fields: Dict[str, Any] = {}
        for key, value in overrides.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise GuildsSdkError(ErrorKind.CONFIG_ERROR, f"Unknown retry option: {key}")
            if value is not None:
                fields[name] = value
        return dataclasses.replace(DEFAULT_RETRY_OPTIONS, **fields)

    def get_delay(self, attempt: int) -> int:
        """
        Calculate the delay after a failed attempt.

        Args:
            attempt: The attempt that just failed (1-indexed)

        Returns:
            Delay in milliseconds, rounded half up and capped at ``max_delay_ms``
        """
        cap = int(self.max_delay_ms)
        # Compare in log space first; the raw power overflows for large attempts
        if self.initial_delay_ms > 0 and self.backoff_multiplier > 1:
            log_delay = math.log(self.initial_delay_ms) + (attempt - 1) * math.log(self.backoff_multiplier)
            if log_delay >= math.log(cap + 1):
                return cap
        delay = math.floor(self.initial_delay_ms * self.backoff_multiplier ** (attempt - 1) + 0.5)
        return min(cap, delay)

    def is_retryable(self, error: BaseException) -> bool:
        if self.retryable_error is None:
            return True
        return bool(self.retryable_error(error))


DEFAULT_RETRY_OPTIONS = RetryOptions()


async def with_retry(
    operation_name: str,
    fn: Callable[[], Awaitable[T]],
    options: Any = None,
) -> T:
    """
    Run ``fn`` until it succeeds or the retry budget is spent.

    Args:
        operation_name: Label used in log lines and error messages only
        fn: Zero-argument coroutine function performing one attempt
        options: Retry options or a partial override of the defaults

    Returns:
        The value returned by the first successful attempt

    Raises:
        GuildsSdkError: RETRY_EXHAUSTED wrapping the last failure (normalized
            to TRANSPORT_ERROR unless already tagged) when the last attempt
            fails or an error is not retryable
    """
    cfg = RetryOptions.from_overrides(options)
    last_error: Optional[BaseException] = None
    attempt = 0

    for attempt in range(1, cfg.attempts + 1):
        try:
            return await fn()
        except Exception as e:
            last_error = e
            if not cfg.is_retryable(e) or attempt == cfg.attempts:
                break

            delay_ms = cfg.get_delay(attempt)
            rate_limited_log(
                f"Operation '{operation_name}' failed (attempt {attempt}/{cfg.attempts}), "
                f"retrying in {delay_ms}ms: {e}",
                logger_instance=logger,
            )
            await _sleep(delay_ms / 1000)

    logger.error(f"Operation '{operation_name}' failed after {attempt} attempts: {last_error}")
    raise GuildsSdkError(
        ErrorKind.RETRY_EXHAUSTED,
        f"Operation '{operation_name}' failed after {attempt} attempts",
        to_guilds_sdk_error(last_error, ErrorKind.TRANSPORT_ERROR),
    )

"""
Exceptions for the Guilds SDK.

Every failure raised by the SDK is a ``GuildsSdkError`` tagged with one of the
``ErrorKind`` values below. The kind set is closed.
"""
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """
    Error kinds reported by the Guilds SDK.

    Callers can branch on the kind instead of on exception classes:
    ``INVALID_INPUT``, ``MISSING_ADDRESS`` and ``CONFIG_ERROR`` mean the
    caller must fix something, ``RETRY_EXHAUSTED`` and ``TRANSPORT_ERROR``
    are transient, ``CONTRACT_CALL_FAILED`` means the remote call failed.
    """
    INVALID_INPUT = "INVALID_INPUT"
    NETWORK_MISMATCH = "NETWORK_MISMATCH"
    MISSING_ADDRESS = "MISSING_ADDRESS"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    CONTRACT_CALL_FAILED = "CONTRACT_CALL_FAILED"
    RETRY_EXHAUSTED = "RETRY_EXHAUSTED"
    CONFIG_ERROR = "CONFIG_ERROR"


_INPUT_KINDS = frozenset({ErrorKind.INVALID_INPUT, ErrorKind.MISSING_ADDRESS, ErrorKind.CONFIG_ERROR})
_TRANSIENT_KINDS = frozenset({ErrorKind.RETRY_EXHAUSTED, ErrorKind.TRANSPORT_ERROR})


class GuildsSdkError(Exception):
    """
    Error raised by the Guilds SDK.

    Attributes:
        kind: The ``ErrorKind`` tag
        message: Human-readable description
        details: The wrapped original failure, if any
    """

    def __init__(self, kind: ErrorKind, message: str, details: Optional[Any] = None):
        self.kind = ErrorKind(kind)
        self.message = message
        self.details = details
        super().__init__(message)
        if isinstance(details, BaseException):
            self.__cause__ = details

    def __repr__(self) -> str:
        return f"GuildsSdkError({self.kind.value}, {self.message!r})"

    def is_input_error(self) -> bool:
        """True when the caller has to fix its input or configuration."""
        return self.kind in _INPUT_KINDS

    def is_transient(self) -> bool:
        """True when retrying later may succeed."""
        return self.kind in _TRANSIENT_KINDS


def to_guilds_sdk_error(error: Any, fallback: ErrorKind) -> GuildsSdkError:
    """
    Coerce an arbitrary failure into a ``GuildsSdkError``.

    Errors that are already tagged pass through unchanged. Anything else is
    wrapped with the ``fallback`` kind and kept as ``details``.

    Args:
        error: The failure to normalize
        fallback: Kind to use when ``error`` is not already tagged

    Returns:
        A ``GuildsSdkError``
    """
    if isinstance(error, GuildsSdkError):
        return error
    message = str(error) if isinstance(error, BaseException) else "Unknown SDK error"
    return GuildsSdkError(fallback, message, error)

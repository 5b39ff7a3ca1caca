"""
In-memory transport implementation for the Guilds SDK.

This module provides a transport that never leaves the process. It records
every request it receives and answers with canned responses, which makes it
suitable for tests, examples and offline development.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from ..models import InvokeResult
from .transport import CallRequest, InvokeRequest

# Configure logger
logger = logging.getLogger(__name__)

DEFAULT_GUILD_RESULT = ("0x111", "0x222", "0x333")


@dataclass(frozen=True)
class InvokeLog:
    """One recorded ``invoke`` request and the hash it was answered with."""
    contract_address: str
    entrypoint: str
    calldata: Tuple[str, ...]
    transaction_hash: str
    created_at_iso: str


class StubTransport:
    """
    A transport that keeps everything in memory.

    Read-only requests are answered from per-entrypoint responses set with
    ``set_call_response``. Entrypoints without a configured response get the
    default response (``["0x0"]`` unless changed). Each ``invoke`` returns a
    deterministic hash ``0xmock`` followed by an 8-digit hex counter.

    ``fail_next(n)`` makes the next ``n`` requests raise ``ConnectionError``,
    simulating a flaky network.
    """

    def __init__(self, default_response: Optional[Sequence[str]] = None):
        """
        Initialize the stub transport.

        Args:
            default_response: Words returned for entrypoints without a configured response
        """
        self.calls: List[CallRequest] = []
        self.invokes: List[InvokeRequest] = []
        self._responses: Dict[str, List[str]] = {
            "get_guild": list(DEFAULT_GUILD_RESULT),
            "get_governor_address": [DEFAULT_GUILD_RESULT[2]],
            "get_token_address": [DEFAULT_GUILD_RESULT[1]],
        }
        self._default_response = list(default_response) if default_response is not None else ["0x0"]
        self._invoke_log: List[InvokeLog] = []
        self._pending_failures = 0

    def set_call_response(self, response: Sequence[str], entrypoint: Optional[str] = None) -> None:
        """
        Configure the words returned by ``call``.

        Args:
            response: Words to return
            entrypoint: Entrypoint the response applies to; all entrypoints when omitted
        """
        if entrypoint is None:
            self._responses.clear()
            self._default_response = list(response)
        else:
            self._responses[entrypoint] = list(response)

    def fail_next(self, count: int = 1) -> None:
        """Make the next ``count`` requests fail with ``ConnectionError``."""
        self._pending_failures = count

    @property
    def request_count(self) -> int:
        """Total number of requests seen, failed ones included."""
        return len(self.calls) + len(self.invokes)

    def _maybe_fail(self, request: CallRequest) -> None:
        if self._pending_failures > 0:
            self._pending_failures -= 1
            logger.debug(f"Simulating transport failure for {request.entrypoint}")
            raise ConnectionError(f"Simulated transport failure for {request.entrypoint}")

    async def call(self, request: CallRequest) -> List[str]:
        """
        Answer a read-only request (stubbed).

        Returns:
            A copy of the configured response words

        Raises:
            ConnectionError: If a failure was scheduled with ``fail_next``
        """
        self.calls.append(request)
        self._maybe_fail(request)
        response = self._responses.get(request.entrypoint, self._default_response)
        logger.debug(f"StubTransport.call {request.entrypoint} -> {response}")
        return list(response)

    async def invoke(self, request: InvokeRequest) -> InvokeResult:
        """
        Record a state-mutating request (stubbed).

        Returns:
            An ``InvokeResult`` with a deterministic transaction hash

        Raises:
            ConnectionError: If a failure was scheduled with ``fail_next``
        """
        self.invokes.append(request)
        self._maybe_fail(request)
        tx_hash = f"0xmock{len(self._invoke_log) + 1:08x}"
        self._invoke_log.insert(0, InvokeLog(
            contract_address=request.contract_address,
            entrypoint=request.entrypoint,
            calldata=tuple(request.calldata),
            transaction_hash=tx_hash,
            created_at_iso=datetime.now(timezone.utc).isoformat(),
        ))
        logger.info(f"Simulated {request.entrypoint} on {request.contract_address}: {tx_hash}")
        return InvokeResult(transaction_hash=tx_hash)

    def get_state(self) -> Tuple[InvokeLog, ...]:
        """Return the successful invocations, newest first."""
        return tuple(self._invoke_log)

"""
Transport boundary for the Guilds SDK.

The SDK never talks to a network itself. Callers inject an object that
implements ``ContractTransport``: an async ``call`` for read-only requests
and an async ``invoke`` for state-mutating ones. Any object with these two
coroutines qualifies; subclassing is not required.
"""
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Protocol, Tuple, Union, runtime_checkable

from ..exceptions import ErrorKind, GuildsSdkError
from ..models import InvokeResult


@dataclass(frozen=True)
class CallRequest:
    """
    A read-only request to a contract entrypoint.

    Constructed once per encode and consumed once by the transport.
    """
    contract_address: str
    entrypoint: str
    calldata: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Freeze list input so the request cannot be mutated by the transport
        object.__setattr__(self, "calldata", tuple(self.calldata))


@dataclass(frozen=True)
class InvokeRequest(CallRequest):
    """A state-mutating request, with an optional fee ceiling."""
    max_fee: Optional[int] = None


@runtime_checkable
class ContractTransport(Protocol):
    """Protocol for injected contract transports"""

    async def call(self, request: CallRequest) -> List[str]:
        """Execute a read-only request and return the response words"""
        ...

    async def invoke(self, request: InvokeRequest) -> Union[InvokeResult, Mapping[str, Any]]:
        """Submit a state-mutating request and return its transaction hash"""
        ...


def coerce_invoke_result(raw: Any) -> InvokeResult:
    """
    Convert whatever a transport returned from ``invoke`` into an ``InvokeResult``.

    Accepts an ``InvokeResult``, an object with a ``transaction_hash``
    attribute, or a mapping keyed by ``transactionHash``/``transaction_hash``.

    Raises:
        GuildsSdkError: TRANSPORT_ERROR if no transaction hash can be found
    """
    if isinstance(raw, InvokeResult):
        return raw
    if isinstance(raw, Mapping):
        tx_hash = raw.get("transactionHash", raw.get("transaction_hash"))
    else:
        tx_hash = getattr(raw, "transaction_hash", None)
    if not isinstance(tx_hash, str):
        raise GuildsSdkError(
            ErrorKind.TRANSPORT_ERROR,
            f"Transport returned no transaction hash: {raw!r}"
        )
    return InvokeResult(transaction_hash=tx_hash)

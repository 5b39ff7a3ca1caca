"""
Bindings for the guild and governor contracts.

Variable-length arrays are encoded as a length word followed by the
elements. The treasury action always carries its calldata count, even
when it is ``0x0``.
"""
import logging
from typing import List, Optional, Sequence

from ..exceptions import ErrorKind, GuildsSdkError
from ..models import (
    GovernanceActionParams,
    InvokeResult,
    ShareActionParams,
    TreasuryActionParams,
    VoteParams,
)
from ..transport.transport import CallRequest, ContractTransport, InvokeRequest, coerce_invoke_result
from ..utils import encode_integer, encode_length

logger = logging.getLogger(__name__)

VOTE_SUPPORT_VALUES = (0, 1, 2)


def encode_propose(params: GovernanceActionParams) -> List[str]:
    """
    Encode ``propose`` calldata.

    Layout: targets, values and calldatas, each length-prefixed, then the
    description as the last word (not length-prefixed).
    """
    return [
        encode_length(params.targets),
        *params.targets,
        encode_length(params.values),
        *[encode_integer(v, "values") for v in params.values],
        encode_length(params.calldatas),
        *params.calldatas,
        params.description,
    ]


def encode_vote(params: VoteParams) -> List[str]:
    """Encode ``cast_vote`` calldata: proposal id, support."""
    if params.support not in VOTE_SUPPORT_VALUES:
        raise GuildsSdkError(ErrorKind.INVALID_INPUT, f"support must be 0, 1 or 2, got {params.support}")
    return [encode_integer(params.proposal_id, "proposal_id"), encode_integer(params.support, "support")]


def encode_core_action(params: TreasuryActionParams) -> List[str]:
    """
    Encode ``execute_core_action`` calldata.

    Layout: action type, target, token, amount, calldata count, calldata.
    """
    return [
        encode_integer(params.action_type, "action_type"),
        params.target,
        params.token,
        encode_integer(params.amount, "amount"),
        encode_length(params.calldata),
        *params.calldata,
    ]


def encode_share_amount(params: ShareActionParams) -> List[str]:
    """Encode ``buy_shares``/``redeem_shares`` calldata: amount."""
    return [encode_integer(params.amount, "amount")]


class GuildBindings:
    """
    Access to guild and governor entrypoints through a transport.

    Mutating entrypoints take calldata already produced by the encoders
    above, so callers can validate and encode before anything is sent.
    """

    def __init__(self, transport: ContractTransport):
        self.transport = transport

    async def _invoke(self, contract: str, entrypoint: str, calldata: Sequence[str]) -> InvokeResult:
        request = InvokeRequest(contract_address=contract, entrypoint=entrypoint, calldata=tuple(calldata))
        logger.debug(f"Invoking {entrypoint} on {contract} with {len(request.calldata)} words")
        return coerce_invoke_result(await self.transport.invoke(request))

    async def _read_address(self, contract: str, entrypoint: str) -> Optional[str]:
        raw = await self.transport.call(CallRequest(contract_address=contract, entrypoint=entrypoint))
        return raw[0] if raw else None

    async def set_governor_address(self, guild: str, governor: str) -> InvokeResult:
        return await self._invoke(guild, "set_governor_address", [governor])

    async def get_governor_address(self, guild: str) -> Optional[str]:
        return await self._read_address(guild, "get_governor_address")

    async def get_token_address(self, guild: str) -> Optional[str]:
        return await self._read_address(guild, "get_token_address")

    async def submit(self, contract: str, entrypoint: str, calldata: Sequence[str]) -> InvokeResult:
        """Send already-encoded calldata to ``entrypoint`` on ``contract``."""
        return await self._invoke(contract, entrypoint, calldata)

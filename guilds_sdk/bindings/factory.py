"""
Bindings for the guild factory contract.

The encoders turn typed parameters into calldata words. Word order is the
wire contract with the deployed factory and must not change.
"""
import logging
from typing import List, Optional, Sequence

from ..models import CreateGuildParams, GuildAddresses, InvokeResult
from ..transport.transport import CallRequest, ContractTransport, InvokeRequest, coerce_invoke_result
from ..utils import encode_integer

logger = logging.getLogger(__name__)

# Words that decode to False in boolean query responses
FALSE_WORDS = frozenset({"0x0", "0"})


def encode_create_guild(params: CreateGuildParams) -> List[str]:
    """
    Encode ``create_guild`` calldata.

    Layout: name, ticker, deposit token, deposit amount, initial token
    supply, then the five governor settings.
    """
    governor = params.governor_config
    return [
        params.name,
        params.ticker,
        params.deposit_token,
        encode_integer(params.deposit_amount, "deposit_amount"),
        encode_integer(params.initial_token_supply, "initial_token_supply"),
        encode_integer(governor.voting_delay, "voting_delay"),
        encode_integer(governor.voting_period, "voting_period"),
        encode_integer(governor.proposal_threshold, "proposal_threshold"),
        encode_integer(governor.quorum_bps, "quorum_bps"),
        encode_integer(governor.timelock_delay, "timelock_delay"),
    ]


def decode_guild_addresses(words: Sequence[str]) -> GuildAddresses:
    """
    Decode a ``get_guild`` response.

    Reads word 0 as the guild, word 1 as the token and word 2 as the
    governor. A short response leaves the missing fields as ``None``;
    callers must check them before use.
    """
    def _word(index: int) -> Optional[str]:
        return words[index] if index < len(words) else None

    return GuildAddresses(guild=_word(0), token=_word(1), governor=_word(2))


def decode_bool(word: str) -> bool:
    """Decode a boolean word: ``0x0`` and ``0`` are False, anything else is True."""
    return word not in FALSE_WORDS


class FactoryBindings:
    """Typed access to the guild factory entrypoints through a transport."""

    def __init__(self, transport: ContractTransport):
        self.transport = transport

    async def submit_create_guild(self, factory: str, calldata: Sequence[str]) -> InvokeResult:
        """Send already-encoded ``create_guild`` calldata."""
        request = InvokeRequest(contract_address=factory, entrypoint="create_guild", calldata=tuple(calldata))
        logger.debug(f"Invoking create_guild on {factory}")
        return coerce_invoke_result(await self.transport.invoke(request))

    async def get_guild(self, factory: str, guild_address: str) -> List[str]:
        request = CallRequest(contract_address=factory, entrypoint="get_guild", calldata=(guild_address,))
        return list(await self.transport.call(request))

    async def is_name_taken(self, factory: str, name: str) -> bool:
        return await self._bool_query(factory, "is_name_taken", name)

    async def is_ticker_taken(self, factory: str, ticker: str) -> bool:
        return await self._bool_query(factory, "is_ticker_taken", ticker)

    async def _bool_query(self, factory: str, entrypoint: str, word: str) -> bool:
        raw = await self.transport.call(
            CallRequest(contract_address=factory, entrypoint=entrypoint, calldata=(word,))
        )
        return decode_bool(raw[0] if raw else "0x0")

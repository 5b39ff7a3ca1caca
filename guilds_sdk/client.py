"""
GuildsClient - Main client for the guilds contracts.
"""
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .bindings.factory import FactoryBindings, decode_guild_addresses, encode_create_guild
from .bindings.guild import GuildBindings, encode_core_action, encode_propose, encode_share_amount, encode_vote
from .config import ClientOptions, NetworkAddressBook, NetworkConfig
from .exceptions import ErrorKind, GuildsSdkError, to_guilds_sdk_error
from .models import (
    CreateGuildParams,
    GovernanceActionParams,
    GuildAddresses,
    InvokeResult,
    ShareActionParams,
    TreasuryActionParams,
    VoteParams,
    WireGuildAddressesParams,
)
from .retry import RetryOptions, with_retry
from .transport.transport import ContractTransport
from .utils import assert_address

T = TypeVar('T')
M = TypeVar('M', bound=BaseModel)


def _coerce_params(model: Type[M], params: Union[M, Dict[str, Any]]) -> M:
    """Accept either a params model or a plain dict for it."""
    if isinstance(params, model):
        return params
    try:
        return model.model_validate(params)
    except ValidationError as e:
        raise GuildsSdkError(ErrorKind.INVALID_INPUT, f"Invalid {model.__name__}: {e}", e) from e


class GuildsClient:
    """
    Client for the guild factory, guild and governor contracts.

    Each operation validates its input locally, encodes calldata, and sends
    it through the injected transport under the retry policy. Transport
    failures surface as ``GuildsSdkError``:

    - ``INVALID_INPUT`` / ``MISSING_ADDRESS``: raised before anything is sent
    - ``RETRY_EXHAUSTED``: every attempt failed; ``details`` holds the last cause
    - ``CONTRACT_CALL_FAILED``: any other failure of the remote call

    To use this client, you'll need:
    - A transport with async ``call`` and ``invoke`` methods
    - A network name, and a factory address when the network has no default
    """

    def __init__(
        self,
        transport: ContractTransport,
        options: Union[ClientOptions, Dict[str, Any]],
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the GuildsClient

        Args:
            transport: Object implementing async ``call`` and ``invoke``
            options: Network name, optional address book override and optional retry override
            logger: Optional logger instance to use for debug/info logging

        Raises:
            GuildsSdkError: CONFIG_ERROR if the options or retry settings are invalid
        """
        opts = ClientOptions.parse(options)
        self.network = opts.network
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self.retry = RetryOptions.from_overrides(opts.retry)

        # Explicit options win over the network defaults, field by field.
        # The factory keeps only the explicit option; the environment and
        # file defaults are consulted when an operation needs it.
        defaults = NetworkConfig.get_address_book(opts.network)
        override = opts.addresses or NetworkAddressBook()
        self.addresses = NetworkAddressBook(
            factory=override.factory,
            guild_template=override.guild_template or defaults.guild_template,
            token_template=override.token_template or defaults.token_template,
            governor_template=override.governor_template or defaults.governor_template,
        )

        self.factory = FactoryBindings(transport)
        self.guild = GuildBindings(transport)
        self.logger.debug(f"GuildsClient created for network '{self.network}'")

    async def _dispatch(self, operation: str, fn: Callable[[], Awaitable[T]]) -> T:
        """Run ``fn`` under the retry policy and normalize failures."""
        try:
            return await with_retry(operation, fn, self.retry)
        except Exception as e:
            self.logger.error(f"{operation} failed: {e}")
            raise to_guilds_sdk_error(e, ErrorKind.CONTRACT_CALL_FAILED)

    def _require_factory_address(self) -> str:
        """
        Resolve the factory address at first use.

        Precedence: ``options.addresses.factory``, then the
        ``<NETWORK>_FACTORY_ADDRESS`` environment variable, then the
        bundled address book.

        Raises:
            GuildsSdkError: MISSING_ADDRESS if no address is configured,
                INVALID_INPUT if the configured address is malformed
        """
        factory = NetworkConfig.get_factory_address(self.network, override=self.addresses.factory)
        if not factory:
            raise GuildsSdkError(
                ErrorKind.MISSING_ADDRESS,
                f"Missing factory address for network '{self.network}'. Provide options.addresses.factory."
            )
        return assert_address(factory, "factory")

    def _validate_create_guild_params(self, params: CreateGuildParams) -> None:
        if not params.name or not params.ticker:
            raise GuildsSdkError(ErrorKind.INVALID_INPUT, "name and ticker are required")
        assert_address(params.deposit_token, "deposit_token")
        if params.deposit_amount < 0 or params.initial_token_supply < 0:
            raise GuildsSdkError(
                ErrorKind.INVALID_INPUT,
                "deposit_amount and initial_token_supply must be >= 0"
            )

    async def create_guild(self, params: Union[CreateGuildParams, Dict[str, Any]]) -> InvokeResult:
        """
        Deploy a new guild through the factory.

        Args:
            params: Guild name, ticker, deposit and governor settings

        Returns:
            The transaction hash of the deployment

        Raises:
            GuildsSdkError: MISSING_ADDRESS, INVALID_INPUT, RETRY_EXHAUSTED or CONTRACT_CALL_FAILED
        """
        factory = self._require_factory_address()
        params = _coerce_params(CreateGuildParams, params)
        self._validate_create_guild_params(params)
        calldata = encode_create_guild(params)
        return await self._dispatch(
            "create_guild", lambda: self.factory.submit_create_guild(factory, calldata)
        )

    def register_addresses(
        self, addresses: Union[WireGuildAddressesParams, Dict[str, Any]]
    ) -> WireGuildAddressesParams:
        """
        Validate a guild/token/governor address triple supplied by the caller.

        Raises:
            GuildsSdkError: INVALID_INPUT if any address is malformed
        """
        addresses = _coerce_params(WireGuildAddressesParams, addresses)
        assert_address(addresses.guild, "guild")
        assert_address(addresses.token, "token")
        assert_address(addresses.governor, "governor")
        return addresses

    async def resolve_guild_addresses(self, guild_address: str) -> GuildAddresses:
        """
        Look up the token and governor deployed with a guild.

        The response is decoded positionally. A short response yields
        ``None`` fields instead of an error.
        """
        factory = self._require_factory_address()
        assert_address(guild_address, "guild_address")

        async def _resolve() -> GuildAddresses:
            raw = await self.factory.get_guild(factory, guild_address)
            return decode_guild_addresses(raw)

        return await self._dispatch("resolve_guild_addresses", _resolve)

    async def is_name_taken(self, name: str) -> bool:
        """Check whether a guild name is already registered with the factory."""
        factory = self._require_factory_address()
        if not name:
            raise GuildsSdkError(ErrorKind.INVALID_INPUT, "name is required")
        return await self._dispatch("is_name_taken", lambda: self.factory.is_name_taken(factory, name))

    async def is_ticker_taken(self, ticker: str) -> bool:
        """Check whether a guild ticker is already registered with the factory."""
        factory = self._require_factory_address()
        if not ticker:
            raise GuildsSdkError(ErrorKind.INVALID_INPUT, "ticker is required")
        return await self._dispatch("is_ticker_taken", lambda: self.factory.is_ticker_taken(factory, ticker))

    async def governance_action(
        self, params: Union[GovernanceActionParams, Dict[str, Any]]
    ) -> InvokeResult:
        """
        Submit a governance proposal to a guild's governor.

        ``targets``, ``values`` and ``calldatas`` are parallel arrays and must
        have the same length.
        """
        params = _coerce_params(GovernanceActionParams, params)
        assert_address(params.governor, "governor")
        for target in params.targets:
            assert_address(target, "targets")
        if not len(params.targets) == len(params.values) == len(params.calldatas):
            raise GuildsSdkError(
                ErrorKind.INVALID_INPUT,
                "targets, values and calldatas must have the same length"
            )
        calldata = encode_propose(params)
        return await self._dispatch(
            "governance_action", lambda: self.guild.submit(params.governor, "propose", calldata)
        )

    async def vote(self, params: Union[VoteParams, Dict[str, Any]]) -> InvokeResult:
        """Cast a vote on a proposal."""
        params = _coerce_params(VoteParams, params)
        assert_address(params.governor, "governor")
        calldata = encode_vote(params)
        return await self._dispatch(
            "vote", lambda: self.guild.submit(params.governor, "cast_vote", calldata)
        )

    async def treasury_action(
        self, params: Union[TreasuryActionParams, Dict[str, Any]]
    ) -> InvokeResult:
        """Execute a core treasury action on a guild."""
        params = _coerce_params(TreasuryActionParams, params)
        assert_address(params.guild, "guild")
        assert_address(params.target, "target")
        assert_address(params.token, "token")
        calldata = encode_core_action(params)
        return await self._dispatch(
            "treasury_action", lambda: self.guild.submit(params.guild, "execute_core_action", calldata)
        )

    async def buy_shares(self, params: Union[ShareActionParams, Dict[str, Any]]) -> InvokeResult:
        """Buy guild shares."""
        params = _coerce_params(ShareActionParams, params)
        assert_address(params.guild, "guild")
        calldata = encode_share_amount(params)
        return await self._dispatch(
            "buy_shares", lambda: self.guild.submit(params.guild, "buy_shares", calldata)
        )

    async def redeem_shares(self, params: Union[ShareActionParams, Dict[str, Any]]) -> InvokeResult:
        """Redeem guild shares."""
        params = _coerce_params(ShareActionParams, params)
        assert_address(params.guild, "guild")
        calldata = encode_share_amount(params)
        return await self._dispatch(
            "redeem_shares", lambda: self.guild.submit(params.guild, "redeem_shares", calldata)
        )

    async def set_governor_address(self, guild: str, governor: str) -> InvokeResult:
        """Point a guild at a new governor contract."""
        assert_address(guild, "guild")
        assert_address(governor, "governor")
        return await self._dispatch(
            "set_governor_address", lambda: self.guild.set_governor_address(guild, governor)
        )

    async def get_governor_address(self, guild: str) -> Optional[str]:
        """Read a guild's governor address; ``None`` on an empty response."""
        assert_address(guild, "guild")
        return await self._dispatch("get_governor_address", lambda: self.guild.get_governor_address(guild))

    async def get_token_address(self, guild: str) -> Optional[str]:
        """Read a guild's token address; ``None`` on an empty response."""
        assert_address(guild, "guild")
        return await self._dispatch("get_token_address", lambda: self.guild.get_token_address(guild))


def create_guilds_client(
    transport: ContractTransport,
    options: Union[ClientOptions, Dict[str, Any]],
    logger: Optional[logging.Logger] = None
) -> GuildsClient:
    """Create a ``GuildsClient``; see its constructor for arguments."""
    return GuildsClient(transport, options, logger=logger)

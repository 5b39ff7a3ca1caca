"""
Guilds SDK - typed client for the guild factory, guild and governor contracts.
"""
from .version import __version__
from .client import GuildsClient, create_guilds_client
from .config import ClientOptions, GuildsNetwork, NetworkAddressBook, NetworkConfig, RetrySettings
from .exceptions import ErrorKind, GuildsSdkError, to_guilds_sdk_error
from .models import (
    CreateGuildParams,
    GovernanceActionParams,
    GovernorConfig,
    GuildAddresses,
    InvokeResult,
    ShareActionParams,
    TreasuryActionParams,
    VoteParams,
    WireGuildAddressesParams,
)
from .retry import DEFAULT_RETRY_OPTIONS, RetryOptions, with_retry
from .transport import CallRequest, ContractTransport, InvokeRequest, StubTransport
from .utils import assert_address, encode_integer, is_hex_address, validate_address

__all__ = [
    "__version__",
    "GuildsClient",
    "create_guilds_client",
    "ClientOptions",
    "GuildsNetwork",
    "NetworkAddressBook",
    "NetworkConfig",
    "RetrySettings",
    "ErrorKind",
    "GuildsSdkError",
    "to_guilds_sdk_error",
    "CreateGuildParams",
    "GovernanceActionParams",
    "GovernorConfig",
    "GuildAddresses",
    "InvokeResult",
    "ShareActionParams",
    "TreasuryActionParams",
    "VoteParams",
    "WireGuildAddressesParams",
    "DEFAULT_RETRY_OPTIONS",
    "RetryOptions",
    "with_retry",
    "CallRequest",
    "ContractTransport",
    "InvokeRequest",
    "StubTransport",
    "assert_address",
    "encode_integer",
    "is_hex_address",
    "validate_address",
]

"""
Network configuration for the Guilds SDK.

Default address books live in ``networks.json`` next to this module. Client
options are pydantic models so they can be built from plain dicts.
"""
import importlib.resources
import json
import os
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ErrorKind, GuildsSdkError


class GuildsNetwork(str, Enum):
    """Networks with a bundled default address book"""
    MAINNET = "mainnet"
    SEPOLIA = "sepolia"
    LOCAL = "local"


class NetworkAddressBook(BaseModel):
    """Well-known contract addresses for one network. Every field is optional."""
    factory: Optional[str] = None
    guild_template: Optional[str] = Field(None, alias="guildTemplate")
    token_template: Optional[str] = Field(None, alias="tokenTemplate")
    governor_template: Optional[str] = Field(None, alias="governorTemplate")

    class Config:
        populate_by_name = True
        frozen = True


class RetrySettings(BaseModel):
    """Retry override accepted at client construction. Unset fields keep the defaults."""
    attempts: Optional[int] = None
    initial_delay_ms: Optional[float] = Field(None, alias="initialDelayMs")
    max_delay_ms: Optional[float] = Field(None, alias="maxDelayMs")
    backoff_multiplier: Optional[float] = Field(None, alias="backoffMultiplier")

    class Config:
        populate_by_name = True
        frozen = True


class ClientOptions(BaseModel):
    """Options for ``GuildsClient``"""
    network: str
    addresses: Optional[NetworkAddressBook] = None
    retry: Optional[RetrySettings] = None

    class Config:
        populate_by_name = True
        frozen = True

    @field_validator("network", mode="before")
    @classmethod
    def _network_name(cls, value: Any) -> Any:
        return value.value if isinstance(value, GuildsNetwork) else value

    @classmethod
    def parse(cls, options: Any) -> "ClientOptions":
        """
        Build options from a ``ClientOptions`` instance or a plain mapping.

        Raises:
            GuildsSdkError: CONFIG_ERROR if the options do not validate
        """
        if isinstance(options, ClientOptions):
            return options
        if isinstance(options, Mapping):
            try:
                return cls.model_validate(dict(options))
            except ValidationError as e:
                raise GuildsSdkError(ErrorKind.CONFIG_ERROR, f"Invalid client options: {e}", e) from e
        raise GuildsSdkError(ErrorKind.CONFIG_ERROR, f"Unsupported client options: {options!r}")


class NetworkConfig:
    """
    Access to the bundled per-network address books.

    The JSON file is read once and cached on the class.
    """
    _networks_cache: Optional[Dict[str, Dict[str, Any]]] = None

    @classmethod
    def load_networks(cls) -> Dict[str, Dict[str, Any]]:
        """
        Load network configurations from the bundled JSON file.

        Returns:
            Mapping of network name to its raw address book

        Raises:
            GuildsSdkError: CONFIG_ERROR if the file is missing or malformed
        """
        if cls._networks_cache is None:
            try:
                resource = importlib.resources.files("guilds_sdk").joinpath("networks.json")
                with resource.open("r", encoding="utf-8") as f:
                    cls._networks_cache = json.load(f)
            except (OSError, ValueError) as e:
                raise GuildsSdkError(ErrorKind.CONFIG_ERROR, f"Failed to load networks.json: {e}", e) from e
        return cls._networks_cache

    @classmethod
    def get_network(cls, network: str) -> Dict[str, Any]:
        """
        Get the raw configuration for a network.

        Raises:
            ValueError: If the network is not known, listing the available ones
        """
        networks = cls.load_networks()
        if network not in networks:
            available = ", ".join(sorted(networks))
            raise ValueError(f"Network '{network}' not found. Available networks: {available}")
        return networks[network]

    @classmethod
    def get_address_book(cls, network: str) -> NetworkAddressBook:
        """
        Get the default address book for a network.

        Unknown networks get an empty address book, so a missing address is
        only reported when an operation needs it.
        """
        raw = cls.load_networks().get(network) or {}
        try:
            return NetworkAddressBook.model_validate(raw)
        except ValidationError as e:
            raise GuildsSdkError(ErrorKind.CONFIG_ERROR, f"Invalid address book for '{network}': {e}", e) from e

    @classmethod
    def get_factory_address(cls, network: str, override: Optional[str] = None) -> Optional[str]:
        """
        Get the factory address for a network.

        Precedence: ``override``, then the ``<NETWORK>_FACTORY_ADDRESS``
        environment variable, then the bundled address book.
        """
        if override:
            return override
        env_var = f"{network.upper().replace('-', '_')}_FACTORY_ADDRESS"
        env_value = os.environ.get(env_var)
        if env_value:
            return env_value
        return cls.get_address_book(network).factory

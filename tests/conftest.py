"""
Pytest fixtures for the Guilds SDK tests.
"""
import pytest

import guilds_sdk.retry as retry_module
from guilds_sdk._rate_limited_log import reset_rate_limit
from guilds_sdk.client import GuildsClient
from guilds_sdk.config import NetworkConfig
from guilds_sdk.models import CreateGuildParams, GovernorConfig
from guilds_sdk.transport import StubTransport

# Constants for testing
TEST_FACTORY = "0xabc"
TEST_DEPOSIT_TOKEN = "0xdef"
TEST_GUILD = "0x111"
TEST_TOKEN = "0x222"
TEST_GOVERNOR = "0x333"


# ─────────────────────────────────────────────────────────────────────────
#  INSTANT BACKOFF FOR TESTS
# ─────────────────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def sleep_calls(monkeypatch):
    """Make retry backoff instantaneous and record the requested delays (seconds)."""
    calls = []

    async def _fake_sleep(seconds):
        calls.append(seconds)

    monkeypatch.setattr(retry_module, "_sleep", _fake_sleep)
    return calls


@pytest.fixture(autouse=True)
def _clean_state(monkeypatch):
    """Reset class-level caches and drop factory address env overrides."""
    NetworkConfig._networks_cache = None
    reset_rate_limit()
    for name in ("MAINNET", "SEPOLIA", "LOCAL", "DEVNET"):
        monkeypatch.delenv(f"{name}_FACTORY_ADDRESS", raising=False)
    yield
    NetworkConfig._networks_cache = None


@pytest.fixture
def transport():
    return StubTransport()


@pytest.fixture
def client(transport):
    """Client on the local network with a configured factory and a single attempt."""
    return GuildsClient(transport, {
        "network": "local",
        "addresses": {"factory": TEST_FACTORY},
        "retry": {"attempts": 1},
    })


@pytest.fixture
def create_guild_params():
    return CreateGuildParams(
        name="GuildOne",
        ticker="G1",
        deposit_token=TEST_DEPOSIT_TOKEN,
        deposit_amount=10,
        initial_token_supply=1_000,
        governor_config=GovernorConfig(
            voting_delay=1,
            voting_period=10,
            proposal_threshold=1,
            quorum_bps=1000,
            timelock_delay=1,
        ),
    )

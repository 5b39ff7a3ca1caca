"""
Tests for the calldata encoders, response decoders and binding classes.
"""
import pytest

from guilds_sdk.bindings.factory import (
    FactoryBindings,
    decode_bool,
    decode_guild_addresses,
    encode_create_guild,
)
from guilds_sdk.bindings.guild import (
    GuildBindings,
    encode_core_action,
    encode_propose,
    encode_share_amount,
    encode_vote,
)
from guilds_sdk.exceptions import ErrorKind, GuildsSdkError
from guilds_sdk.models import (
    GovernanceActionParams,
    GuildAddresses,
    ShareActionParams,
    TreasuryActionParams,
    VoteParams,
)
from guilds_sdk.transport import StubTransport

from conftest import TEST_FACTORY, TEST_GOVERNOR, TEST_GUILD


def test_encode_create_guild(create_guild_params):
    assert encode_create_guild(create_guild_params) == [
        "GuildOne",
        "G1",
        "0xdef",
        "0xa",
        "0x3e8",
        "0x1",
        "0xa",
        "0x1",
        "0x3e8",
        "0x1",
    ]


def test_encode_propose_length_prefixes_each_array():
    params = GovernanceActionParams(
        governor=TEST_GOVERNOR,
        targets=["0x111", "0x444"],
        values=[0, 255],
        calldatas=["0x0", "0x12"],
        description="Set policy",
    )
    assert encode_propose(params) == [
        "0x2", "0x111", "0x444",
        "0x2", "0x0", "0xff",
        "0x2", "0x0", "0x12",
        "Set policy",
    ]


def test_encode_propose_empty_arrays():
    params = GovernanceActionParams(governor=TEST_GOVERNOR, description="noop")
    assert encode_propose(params) == ["0x0", "0x0", "0x0", "noop"]


def test_encode_vote():
    assert encode_vote(VoteParams(governor=TEST_GOVERNOR, proposal_id=1, support=1)) == ["0x1", "0x1"]
    assert encode_vote(VoteParams(governor=TEST_GOVERNOR, proposal_id=255, support=0)) == ["0xff", "0x0"]


def test_encode_vote_rejects_unknown_support():
    with pytest.raises(GuildsSdkError) as exc_info:
        encode_vote(VoteParams(governor=TEST_GOVERNOR, proposal_id=1, support=3))
    assert exc_info.value.kind == ErrorKind.INVALID_INPUT


def test_encode_core_action_with_calldata():
    params = TreasuryActionParams(
        guild=TEST_GUILD, action_type=1, target="0x444", token="0x555", amount=50,
        calldata=["0x1", "0x2"],
    )
    assert encode_core_action(params) == ["0x1", "0x444", "0x555", "0x32", "0x2", "0x1", "0x2"]


def test_encode_core_action_empty_calldata_keeps_count():
    params = TreasuryActionParams(
        guild=TEST_GUILD, action_type=1, target="0x444", token="0x555", amount=50, calldata=[],
    )
    assert encode_core_action(params) == ["0x1", "0x444", "0x555", "0x32", "0x0"]


def test_encode_share_amount_negative():
    with pytest.raises(GuildsSdkError) as exc_info:
        encode_share_amount(ShareActionParams(guild=TEST_GUILD, amount=-1))
    assert exc_info.value.kind == ErrorKind.INVALID_INPUT


def test_decode_guild_addresses():
    assert decode_guild_addresses(["0x111", "0x222", "0x333"]) == GuildAddresses(
        guild="0x111", token="0x222", governor="0x333"
    )


def test_decode_guild_addresses_short_response_is_lenient():
    """Short responses are not rejected; missing fields read as None"""
    decoded = decode_guild_addresses(["0x111"])
    assert decoded.guild == "0x111"
    assert decoded.token is None
    assert decoded.governor is None
    assert decode_guild_addresses([]) == GuildAddresses()


def test_decode_guild_addresses_ignores_extra_words():
    decoded = decode_guild_addresses(["0x1a", "0x2b", "0x3c", "0x4d"])
    assert (decoded.guild, decoded.token, decoded.governor) == ("0x1a", "0x2b", "0x3c")


@pytest.mark.parametrize("word, expected", [
    ("0x0", False),
    ("0", False),
    ("0x1", True),
    ("0x00", True),
    ("1", True),
    ("", True),
    ("false", True),
])
def test_decode_bool(word, expected):
    assert decode_bool(word) is expected


@pytest.mark.asyncio
async def test_factory_bindings_dispatch(create_guild_params):
    transport = StubTransport()
    factory = FactoryBindings(transport)

    result = await factory.submit_create_guild(TEST_FACTORY, encode_create_guild(create_guild_params))
    raw = await factory.get_guild(TEST_FACTORY, TEST_GUILD)

    assert result.transaction_hash == "0xmock00000001"
    assert transport.invokes[0].contract_address == TEST_FACTORY
    assert transport.invokes[0].entrypoint == "create_guild"
    assert transport.invokes[0].calldata == tuple(encode_create_guild(create_guild_params))
    assert raw == ["0x111", "0x222", "0x333"]
    assert transport.calls[0].entrypoint == "get_guild"
    assert transport.calls[0].calldata == (TEST_GUILD,)


@pytest.mark.asyncio
async def test_factory_bool_queries():
    transport = StubTransport()
    transport.set_call_response(["0x1"], entrypoint="is_name_taken")
    transport.set_call_response([], entrypoint="is_ticker_taken")
    factory = FactoryBindings(transport)

    assert await factory.is_name_taken(TEST_FACTORY, "GuildOne") is True
    # An empty response reads as false
    assert await factory.is_ticker_taken(TEST_FACTORY, "G1") is False
    assert [c.calldata for c in transport.calls] == [("GuildOne",), ("G1",)]


@pytest.mark.asyncio
async def test_guild_bindings_dispatch():
    transport = StubTransport()
    guild = GuildBindings(transport)

    await guild.submit(TEST_GOVERNOR, "propose", encode_propose(GovernanceActionParams(
        governor=TEST_GOVERNOR, targets=["0x111"], values=[0], calldatas=["0x0"], description="Set policy"
    )))
    await guild.submit(TEST_GOVERNOR, "cast_vote", encode_vote(VoteParams(governor=TEST_GOVERNOR, proposal_id=1, support=1)))
    await guild.submit(TEST_GUILD, "execute_core_action", encode_core_action(TreasuryActionParams(
        guild=TEST_GUILD, action_type=1, target="0x444", token="0x555", amount=50
    )))
    await guild.submit(TEST_GUILD, "buy_shares", encode_share_amount(ShareActionParams(guild=TEST_GUILD, amount=5)))
    result = await guild.set_governor_address(TEST_GUILD, "0x999")

    assert [(r.contract_address, r.entrypoint) for r in transport.invokes] == [
        (TEST_GOVERNOR, "propose"),
        (TEST_GOVERNOR, "cast_vote"),
        (TEST_GUILD, "execute_core_action"),
        (TEST_GUILD, "buy_shares"),
        (TEST_GUILD, "set_governor_address"),
    ]
    assert transport.invokes[1].calldata == ("0x1", "0x1")
    assert transport.invokes[3].calldata == ("0x5",)
    assert transport.invokes[-1].calldata == ("0x999",)
    assert result.transaction_hash == "0xmock00000005"


@pytest.mark.asyncio
async def test_guild_bindings_address_reads():
    transport = StubTransport()
    guild = GuildBindings(transport)

    assert await guild.get_governor_address(TEST_GUILD) == "0x333"
    assert await guild.get_token_address(TEST_GUILD) == "0x222"
    assert transport.calls[0].calldata == ()

    transport.set_call_response([], entrypoint="get_token_address")
    assert await guild.get_token_address(TEST_GUILD) is None

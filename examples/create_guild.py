#!/usr/bin/env python3
"""
Example of deploying a guild with the Guilds SDK.

The in-memory StubTransport stands in for a real node connection, so this
script runs offline. Swap in any object with async ``call``/``invoke``
methods to talk to a deployed factory.

Usage:
    python create_guild.py
"""
import asyncio
import logging
import os

from guilds_sdk import StubTransport, __version__, create_guilds_client


async def main():
    """
    Demonstrate basic usage of the GuildsClient.

    This example shows how to:
    1. Initialize the client with a transport
    2. Check that the name and ticker are free
    3. Deploy a guild and look up its token and governor
    """
    logging.basicConfig(level=logging.INFO)
    factory = os.environ.get("FACTORY_ADDRESS", "0xabc")

    transport = StubTransport()
    client = create_guilds_client(transport, {
        "network": "local",
        "addresses": {"factory": factory},
    })
    print(f"Guilds SDK v{__version__} on network '{client.network}'")

    if await client.is_name_taken("GuildOne") or await client.is_ticker_taken("G1"):
        print("Name or ticker already registered")
        return

    tx = await client.create_guild({
        "name": "GuildOne",
        "ticker": "G1",
        "depositToken": "0xdef",
        "depositAmount": 10,
        "initialTokenSupply": 1_000,
        "governorConfig": {
            "votingDelay": 1,
            "votingPeriod": 10,
            "proposalThreshold": 1,
            "quorumBps": 1_000,
            "timelockDelay": 1,
        },
    })
    print(f"Transaction hash: {tx.transaction_hash}")

    addresses = await client.resolve_guild_addresses("0x111")
    print(f"Guild: {addresses.guild}")
    print(f"Token: {addresses.token}")
    print(f"Governor: {addresses.governor}")


if __name__ == "__main__":
    asyncio.run(main())

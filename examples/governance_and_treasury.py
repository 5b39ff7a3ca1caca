#!/usr/bin/env python3
"""
Example of governance and treasury operations with the Guilds SDK.

Submits a proposal, votes on it and executes a treasury action against an
in-memory transport, then prints what was sent.
"""
import asyncio

from guilds_sdk import (
    GovernanceActionParams,
    GuildsSdkError,
    StubTransport,
    TreasuryActionParams,
    VoteParams,
    create_guilds_client,
)


async def main():
    transport = StubTransport()
    client = create_guilds_client(transport, {
        "network": "sepolia",
        "addresses": {"factory": "0xabc"},
        "retry": {"attempts": 5, "initialDelayMs": 100},
    })

    try:
        await client.governance_action(GovernanceActionParams(
            governor="0x333",
            targets=["0x111"],
            values=[0],
            calldatas=["0x0"],
            description="Set policy",
        ))
        await client.vote(VoteParams(governor="0x333", proposal_id=1, support=1))
        await client.treasury_action(TreasuryActionParams(
            guild="0x111",
            action_type=1,
            target="0x444",
            token="0x555",
            amount=50,
            calldata=[],
        ))
    except GuildsSdkError as e:
        print(f"{e.kind.value}: {e.message}")
        return

    for entry in reversed(transport.get_state()):
        print(f"{entry.transaction_hash} {entry.entrypoint}({', '.join(entry.calldata)})")


if __name__ == "__main__":
    asyncio.run(main())

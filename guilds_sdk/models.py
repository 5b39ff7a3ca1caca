"""
Data models for the Guilds SDK.

Parameter models only describe shapes. Value checks (address format,
non-negative amounts) are done by the client so they surface as
``INVALID_INPUT`` errors before anything is sent to the transport.
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class GovernorConfig(BaseModel):
    """Governor settings passed to ``create_guild``"""
    voting_delay: int = Field(..., alias="votingDelay")
    voting_period: int = Field(..., alias="votingPeriod")
    proposal_threshold: int = Field(..., alias="proposalThreshold")
    quorum_bps: int = Field(..., alias="quorumBps")
    timelock_delay: int = Field(..., alias="timelockDelay")

    class Config:
        populate_by_name = True
        frozen = True


class CreateGuildParams(BaseModel):
    """Parameters for deploying a new guild through the factory"""
    name: str
    ticker: str
    deposit_token: str = Field(..., alias="depositToken")
    deposit_amount: int = Field(..., alias="depositAmount")
    initial_token_supply: int = Field(..., alias="initialTokenSupply")
    governor_config: GovernorConfig = Field(..., alias="governorConfig")

    class Config:
        populate_by_name = True
        frozen = True


class GuildAddresses(BaseModel):
    """
    Addresses of a deployed guild, decoded positionally from ``get_guild``.

    Fields are ``None`` when the transport returned a short response.
    """
    guild: Optional[str] = None
    token: Optional[str] = None
    governor: Optional[str] = None

    class Config:
        frozen = True


class WireGuildAddressesParams(BaseModel):
    """Caller-supplied guild, token and governor addresses"""
    guild: str
    token: str
    governor: str

    class Config:
        frozen = True


class GovernanceActionParams(BaseModel):
    """A governance proposal: parallel targets/values/calldatas plus a description"""
    governor: str
    targets: List[str] = Field(default_factory=list)
    values: List[int] = Field(default_factory=list)
    calldatas: List[str] = Field(default_factory=list)
    description: str = ""

    class Config:
        frozen = True


class VoteParams(BaseModel):
    """A vote on a proposal. ``support`` is 0 (against), 1 (for) or 2 (abstain)"""
    governor: str
    proposal_id: int = Field(..., alias="proposalId")
    support: int

    class Config:
        populate_by_name = True
        frozen = True


class TreasuryActionParams(BaseModel):
    """A core treasury action executed by a guild"""
    guild: str
    action_type: int = Field(..., alias="actionType")
    target: str
    token: str
    amount: int
    calldata: List[str] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        frozen = True


class ShareActionParams(BaseModel):
    """Buy or redeem an amount of guild shares"""
    guild: str
    amount: int

    class Config:
        frozen = True


class InvokeResult(BaseModel):
    """Result of a state-mutating request"""
    transaction_hash: str = Field(..., alias="transactionHash")

    class Config:
        populate_by_name = True
        frozen = True

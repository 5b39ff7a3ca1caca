"""
Contract bindings for the Guilds SDK.

Calldata encoders, response decoders and thin binding classes for the
factory, guild and governor contracts.
"""
from .factory import FactoryBindings, encode_create_guild, decode_guild_addresses, decode_bool
from .guild import GuildBindings, encode_propose, encode_vote, encode_core_action, encode_share_amount

__all__ = ['FactoryBindings', 'GuildBindings', 'encode_create_guild', 'decode_guild_addresses',
           'decode_bool', 'encode_propose', 'encode_vote', 'encode_core_action', 'encode_share_amount']

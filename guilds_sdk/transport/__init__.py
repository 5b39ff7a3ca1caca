"""
Transport module for the Guilds SDK.

Defines the request types and the ``ContractTransport`` protocol that
injected transports satisfy, plus an in-memory ``StubTransport``.
"""
from .transport import CallRequest, InvokeRequest, ContractTransport, coerce_invoke_result
from .stub_transport import StubTransport, InvokeLog

__all__ = ['CallRequest', 'InvokeRequest', 'ContractTransport', 'coerce_invoke_result',
           'StubTransport', 'InvokeLog']

"""
RPC - Transport layer for the Nodara SDK.

Provides the generic async JSON-RPC client, reply decoding,
and the error types raised by every SDK call.

Uses httpx for HTTP.
"""

from .client import RpcClient
from .errors import NetworkError, NodaraError, RpcError
from .response import RpcFailure, RpcOutcome, RpcSuccess, decode_response

__all__ = [
    "RpcClient",
    "NodaraError",
    "RpcError",
    "NetworkError",
    "RpcSuccess",
    "RpcFailure",
    "RpcOutcome",
    "decode_response",
]

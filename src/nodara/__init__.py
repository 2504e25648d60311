__all__ = [
    # Clients
    "RpcClient",
    "GovernanceClient",
    # Governance method names
    "SUBMIT_PROPOSAL",
    "VOTE_PROPOSAL",
    "EXECUTE_PROPOSAL",
    # Reply decoding
    "RpcSuccess",
    "RpcFailure",
    "RpcOutcome",
    "decode_response",
    # Errors
    "NodaraError",
    "RpcError",
    "NetworkError",
    # Config
    "DEFAULT_API_URL",
    "get_api_url",
]

from .config import DEFAULT_API_URL, get_api_url
from .governance.client import (
    EXECUTE_PROPOSAL,
    SUBMIT_PROPOSAL,
    VOTE_PROPOSAL,
    GovernanceClient,
)
from .rpc.client import RpcClient
from .rpc.errors import NetworkError, NodaraError, RpcError
from .rpc.response import RpcFailure, RpcOutcome, RpcSuccess, decode_response

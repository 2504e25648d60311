"""
Response decoding for Nodara JSON-RPC replies.

A reply is decoded into exactly one of two outcomes:

- RpcSuccess: 2xx status and no truthy ``error`` field; carries the decoded body.
- RpcFailure: non-2xx status or a truthy ``error`` field; carries the
  server's error text, or "Unknown error" when the server gave none.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

UNKNOWN_ERROR = "Unknown error"


@dataclass(frozen=True)
class RpcSuccess:
    payload: Any


@dataclass(frozen=True)
class RpcFailure:
    message: str
    status_code: Optional[int] = None


RpcOutcome = Union[RpcSuccess, RpcFailure]


def _error_text(error: Any) -> str:
    # JSON-RPC 2.0 style nodes send {"code": ..., "message": ...}
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return str(error)


def decode_response(status_code: int, body: Any) -> RpcOutcome:
    """
    Classify a decoded reply body.

    Args:
        status_code: HTTP status of the reply
        body: JSON-decoded reply body

    Returns:
        RpcSuccess or RpcFailure
    """
    error = body.get("error") if isinstance(body, dict) else None

    if error:
        return RpcFailure(message=_error_text(error), status_code=status_code)
    if not 200 <= status_code < 300:
        return RpcFailure(message=UNKNOWN_ERROR, status_code=status_code)
    return RpcSuccess(payload=body)


__all__ = ["RpcSuccess", "RpcFailure", "RpcOutcome", "UNKNOWN_ERROR", "decode_response"]

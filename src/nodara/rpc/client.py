"""
JSON-RPC Client for Nodara nodes.

Posts {"method", "params"} bodies with httpx and classifies the reply.
Every call is independent: a fresh AsyncClient per request, no retries,
no caching.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Sequence

import httpx

from .errors import NetworkError, RpcError
from .response import RpcFailure, decode_response

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

_HEADERS = {"Content-Type": "application/json"}


class RpcClient:
    """
    Generic client for a single Nodara RPC endpoint.

    The endpoint is fixed at construction and never validated up front;
    an empty or malformed URL surfaces as NetworkError on the first call.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._endpoint = endpoint
        self._timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self._endpoint!r})"

    async def invoke(self, method: str, params: Sequence[Any]) -> Any:
        """
        Make a single RPC call.

        Args:
            method: RPC method name (e.g., "nodara_voteProposal")
            params: Positional parameters, JSON-serializable

        Returns:
            The decoded response body

        Raises:
            RpcError: If the node replied with a non-2xx status or an error field
            NetworkError: If serialization, transport or body parsing failed
        """
        logger.debug("RPC call %s -> %s", method, self._endpoint)

        try:
            body = json.dumps({"method": method, "params": list(params)}, allow_nan=False)
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(self._endpoint, content=body, headers=_HEADERS)
            data = response.json()
        except Exception as exc:  # noqa: BLE001
            logger.warning("RPC call %s failed before a reply was decoded: %s", method, exc)
            raise NetworkError(exc, method=method) from exc

        outcome = decode_response(response.status_code, data)
        if isinstance(outcome, RpcFailure):
            logger.warning(
                "RPC call %s rejected (status=%s): %s",
                method,
                outcome.status_code,
                outcome.message,
            )
            raise RpcError(outcome.message, method=method, status_code=outcome.status_code)

        logger.debug("RPC call %s succeeded (status=%s)", method, response.status_code)
        return outcome.payload

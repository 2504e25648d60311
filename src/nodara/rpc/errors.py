from __future__ import annotations

from typing import Optional


class NodaraError(RuntimeError):
    exit_code: int = 1


class RpcError(NodaraError):
    """The node replied, but the reply signals failure."""

    exit_code = 2

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(f"RPC Error: {message}")
        self.message = message
        self.method = method
        self.status_code = status_code


class NetworkError(NodaraError):
    """The call could not be completed as a well-formed RPC exchange."""

    exit_code = 3

    def __init__(self, cause: BaseException, method: Optional[str] = None) -> None:
        super().__init__(f"Network Error: {str(cause) or type(cause).__name__}")
        self.cause = cause
        self.method = method


__all__ = ["NodaraError", "RpcError", "NetworkError"]

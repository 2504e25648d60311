"""Shared fixtures: a fake Nodara node behind httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest


class FakeNode:
    """Records every request and answers with a canned reply."""

    def __init__(self, status_code: int = 200, body: Any = None, raw: bytes | None = None) -> None:
        self.status_code = status_code
        self.body = {"result": "ok"} if body is None else body
        self.raw = raw
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def payloads(self) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture()
def fake_node() -> Callable[..., FakeNode]:
    """Factory for FakeNode instances."""
    return FakeNode

"""Shared fixtures: an in-memory Transport and clients wired to it."""

import asyncio
import json
from collections.abc import Mapping
from typing import Any

import pytest

from kloudflare import Kloudflare, TransportResponse


class FakeTransport:
    """Transport that records every call and replies with a canned response."""

    def __init__(
        self,
        status_code: int = 200,
        *,
        json_body: Any = None,
        content: bytes = b"",
        delay: float = 0.0,
    ) -> None:
        if json_body is not None:
            content = json.dumps(json_body).encode("utf-8")
        self.status_code = status_code
        self.content = content
        self.delay = delay
        self.calls: list[dict[str, Any]] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.cancelled = 0
        self.closed = False

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> TransportResponse:
        self.calls.append({"method": method, "url": url, "headers": dict(headers), "body": body})
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled += 1
            raise
        finally:
            self.in_flight -= 1
        return TransportResponse(status_code=self.status_code, content=self.content)

    async def aclose(self) -> None:
        self.closed = True

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]

    @property
    def last_json(self) -> Any:
        return json.loads(self.last["body"])


def ok(result: Any, **extra: Any) -> dict[str, Any]:
    """A successful envelope around ``result``."""
    return {"errors": [], "messages": [], "success": True, "result": result, **extra}


@pytest.fixture
def make_transport():
    """Factory for FakeTransport instances."""
    return FakeTransport


@pytest.fixture
def make_client():
    """Factory returning ``(client, transport)`` for a canned response."""

    def _make(status_code: int = 200, *, json_body: Any = None, content: bytes = b"", **kwargs: Any):
        transport = FakeTransport(status_code, json_body=json_body, content=content)
        kwargs.setdefault("api_token", "test-token")
        return Kloudflare(transport=transport, **kwargs), transport

    return _make


@pytest.fixture
def envelope():
    """Build a successful envelope body."""
    return ok

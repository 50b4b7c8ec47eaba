"""Shared HTTP transport configuration.

The dispatcher in ``kloudflare.client`` only depends on the ``Transport``
protocol. ``HttpxTransport`` is the implementation used unless another one is
injected.
"""

import platform
from collections.abc import Mapping
from typing import Protocol, runtime_checkable

import httpx
from pydantic import BaseModel, Field

from kloudflare._version import __version__
from kloudflare.exceptions import TransportError, TransportTimeoutError

ROOT_URL = "https://api.cloudflare.com/client/v4"
PARALLEL_COUNT = 16
DEFAULT_TIMEOUT = 30.0
DEFAULT_CONNECT_TIMEOUT = 10.0


class TransportResponse(BaseModel):
    """Raw outcome of one HTTP exchange."""

    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)
    content: bytes = b""

    model_config = {"frozen": True}


@runtime_checkable
class Transport(Protocol):
    """Sends one HTTP request. Must be safe for concurrent use."""

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> TransportResponse: ...

    async def aclose(self) -> None: ...


def user_agent() -> str:
    """Build the User-Agent string identifying the SDK and host platform."""
    return (
        f"Kloudflare/{__version__}, "
        f"{platform.system()} {platform.release()} {platform.machine()}, "
        f"Python/{platform.python_version()}"
    )


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    max_connections: int = PARALLEL_COUNT,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        timeout: Read/write/pool timeout in seconds.
        max_connections: Upper bound on concurrent connections.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout, connect=min(timeout, DEFAULT_CONNECT_TIMEOUT)),
        limits=httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_connections,
        ),
        follow_redirects=True,
    )


class HttpxTransport:
    """Transport backed by a single shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_connections: int = PARALLEL_COUNT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds.
            max_connections: Bounded parallelism cap for the connection pool.
            client: Pre-built client to use instead of creating one.
        """
        self._client = client or create_http_client(timeout=timeout, max_connections=max_connections)

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> TransportResponse:
        try:
            response = await self._client.request(method, url, headers=dict(headers), content=body)
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(f"{method} {url} timed out") from e
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            content=response.content,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

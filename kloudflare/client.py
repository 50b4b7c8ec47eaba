"""Authenticated entry point for the Cloudflare REST API.

Example usage:
    from kloudflare import Kloudflare

    async with Kloudflare(api_token="your-api-token") as cf:
        account = await cf.accounts.get("account-id")
        members = await cf.members.list("account-id")
"""

import json
import os
from collections.abc import Callable, Mapping
from functools import cache, cached_property
from types import MappingProxyType
from typing import Any, TypeVar

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from kloudflare._internal.http import (
    DEFAULT_TIMEOUT,
    PARALLEL_COUNT,
    ROOT_URL,
    HttpxTransport,
    Transport,
    TransportResponse,
    user_agent,
)
from kloudflare._internal.redaction import redact_headers
from kloudflare.exceptions import (
    AuthenticationError,
    DecodeError,
    EmptyResultError,
    EnvelopeError,
    HttpStatusError,
    KloudflareConfigError,
)
from kloudflare.models.envelope import Envelope
from kloudflare.query import append_parameters
from kloudflare.resources.accounts import AccountsResource
from kloudflare.resources.audit_logs import AuditLogsResource
from kloudflare.resources.custom_pages import CustomPagesResource
from kloudflare.resources.dns_analytics import DNSAnalyticsResource
from kloudflare.resources.members import MembersResource
from kloudflare.resources.roles import RolesResource
from kloudflare.resources.users import UserResource

T = TypeVar("T")


class ApiRequest(BaseModel):
    """One request as it will be dispatched.

    Built fresh for every call. Customizers return a modified copy via
    ``model_copy(update=...)``; headers set here override the client's
    standing headers and ``params`` are appended to the path's query string.
    """

    path: str
    method: str = "GET"
    body: Any = None
    headers: dict[str, str] = Field(default_factory=dict)
    params: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}


RequestCustomizer = Callable[[ApiRequest], ApiRequest]


class Kloudflare:
    """Client for the Cloudflare API.

    Credentials come in one of two shapes: an API token (sent as
    ``Authorization: Bearer``) or an email/API key pair (sent as
    ``X-Auth-Email``/``X-Auth-Key``). Whatever is supplied is attached; when
    both shapes are given all three headers are sent and the API decides.

    Headers are composed once at construction and never change. The transport
    is shared by every request issued through this client and may be used by
    many concurrent tasks. Constructing a client performs no network I/O.
    """

    def __init__(
        self,
        api_token: str | None = None,
        *,
        email: str | None = None,
        api_key: str | None = None,
        transport: Transport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
        on_init: Callable[["Kloudflare"], None] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_token: API token for ``Authorization: Bearer`` authentication.
            email: Account email, paired with ``api_key``.
            api_key: Global API key, paired with ``email``.
            transport: Transport to send requests through. Defaults to an
                ``HttpxTransport`` capped at ``PARALLEL_COUNT`` connections.
            timeout: Request timeout in seconds for the default transport.
            debug: Print request/response details to stderr.
            on_init: Called with the new client once construction finishes.
        """
        self._email = email
        self._api_key = api_key
        self._api_token = api_token
        self._debug = debug
        self._headers = MappingProxyType(self._compose_headers())
        self._transport: Transport = transport or HttpxTransport(
            timeout=timeout,
            max_connections=PARALLEL_COUNT,
        )

        if on_init is not None:
            on_init(self)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Kloudflare":
        """Create a client from environment variables.

        Environment variables:
            CLOUDFLARE_API_TOKEN: API token.
            CLOUDFLARE_EMAIL: Account email (with CLOUDFLARE_API_KEY).
            CLOUDFLARE_API_KEY: Global API key (with CLOUDFLARE_EMAIL).
            KLOUDFLARE_DEBUG: Set to "1" to enable debug logging.
            KLOUDFLARE_TIMEOUT_MS: Request timeout in milliseconds.

        Args:
            **kwargs: Passed through to the constructor (e.g. ``transport``).

        Raises:
            KloudflareConfigError: If KLOUDFLARE_TIMEOUT_MS is not an integer.
        """
        timeout_ms = os.environ.get("KLOUDFLARE_TIMEOUT_MS")
        if timeout_ms is not None and "timeout" not in kwargs:
            try:
                kwargs["timeout"] = int(timeout_ms) / 1000
            except ValueError as e:
                raise KloudflareConfigError(
                    f"KLOUDFLARE_TIMEOUT_MS must be an integer, got {timeout_ms!r}"
                ) from e

        kwargs.setdefault("debug", os.environ.get("KLOUDFLARE_DEBUG", "") == "1")

        return cls(
            api_token=os.environ.get("CLOUDFLARE_API_TOKEN"),
            email=os.environ.get("CLOUDFLARE_EMAIL"),
            api_key=os.environ.get("CLOUDFLARE_API_KEY"),
            **kwargs,
        )

    def _compose_headers(self) -> dict[str, str]:
        headers = {"User-Agent": user_agent()}
        if self._email is not None:
            headers["X-Auth-Email"] = self._email
        if self._api_key is not None:
            headers["X-Auth-Key"] = self._api_key
        if self._api_token is not None:
            headers["Authorization"] = f"Bearer {self._api_token}"
        return headers

    @property
    def email(self) -> str | None:
        return self._email

    @property
    def api_token(self) -> str | None:
        return self._api_token

    @property
    def headers(self) -> Mapping[str, str]:
        """Standing headers sent with every request (read-only)."""
        return self._headers

    @property
    def transport(self) -> Transport:
        return self._transport

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            import sys

            print(f"[kloudflare] {message}", file=sys.stderr)

    async def aclose(self) -> None:
        """Close the underlying transport."""
        await self._transport.aclose()

    async def __aenter__(self) -> "Kloudflare":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # =========================================================================
    # Dispatch
    # =========================================================================

    async def request(
        self,
        path: str,
        result_type: type[T] = Any,  # type: ignore[assignment]
        *,
        method: str = "GET",
        body: Any = None,
        customize: RequestCustomizer | None = None,
    ) -> Envelope[T] | None:
        """Send a request and return the decoded envelope.

        Args:
            path: Path appended verbatim to ``ROOT_URL`` (e.g. ``/accounts``).
            result_type: Type the envelope's ``result`` is decoded into.
            method: HTTP method.
            body: Request payload. Pydantic models are sent by wire name with
                unset (None) fields omitted; anything else is JSON-encoded.
                ``None`` sends no body at all.
            customize: Returns an adjusted copy of the request before it is sent.

        Returns:
            The envelope, or None if the API answered 404.

        Raises:
            AuthenticationError: The API answered 403.
            HttpStatusError: Any other non-2xx status.
            DecodeError: A 2xx body was not a well-formed envelope.
            EnvelopeError: The envelope reported ``success: false``.
            TransportError: The request could not be sent.
        """
        api_request = ApiRequest(path=path, method=method.upper(), body=body)
        if customize is not None:
            api_request = customize(api_request)

        url = f"{ROOT_URL}{api_request.path}"
        if api_request.params:
            url = _append_query(url, api_request.params)
        headers = {**self._headers, **api_request.headers}

        content: bytes | None = None
        if api_request.body is not None:
            content = _encode_body(api_request.body)
            if not any(name.lower() == "content-type" for name in headers):
                headers["Content-Type"] = "application/json"

        self._log_debug(f"{api_request.method} {url} headers={redact_headers(headers)}")
        response = await self._transport.send(api_request.method, url, headers, content)
        self._log_debug(f"{api_request.method} {url} -> {response.status_code}")

        return self._classify(response, result_type)

    def _classify(self, response: TransportResponse, result_type: Any) -> Envelope[Any] | None:
        status = response.status_code

        if status == 404:
            return None
        if status == 403:
            raise AuthenticationError()
        if not 200 <= status < 300:
            raise HttpStatusError(status)

        # The result is only typed once success is known; on failure it is meaningless.
        try:
            envelope = Envelope[Any].model_validate_json(response.content)
        except ValidationError as e:
            self._log_debug(f"Envelope decode failed: {e.error_count()} error(s)")
            raise DecodeError(f"Response body is not a valid envelope: {e}", status_code=status) from e

        if not envelope.success:
            raise EnvelopeError(envelope.errors, status_code=status)
        if envelope.result is None or result_type is Any:
            return envelope

        try:
            result = _result_adapter(result_type).validate_python(envelope.result)
        except ValidationError as e:
            self._log_debug(f"Result decode failed: {e.error_count()} error(s)")
            raise DecodeError(f"Envelope result is not a valid {result_type}: {e}", status_code=status) from e

        return Envelope[result_type].model_construct(
            errors=envelope.errors,
            messages=envelope.messages,
            success=envelope.success,
            result=result,
            result_info=envelope.result_info,
        )

    async def execute_or_none(
        self,
        path: str,
        result_type: type[T] = Any,  # type: ignore[assignment]
        *,
        method: str = "GET",
        body: Any = None,
        customize: RequestCustomizer | None = None,
    ) -> T | None:
        """Like ``execute`` but returns None when the resource does not exist (404).

        Raises:
            EmptyResultError: The envelope succeeded but carried no result.
        """
        envelope = await self.request(path, result_type, method=method, body=body, customize=customize)
        if envelope is None:
            return None
        if envelope.result is None:
            raise EmptyResultError()
        return envelope.result

    async def execute(
        self,
        path: str,
        result_type: type[T] = Any,  # type: ignore[assignment]
        *,
        method: str = "GET",
        body: Any = None,
        customize: RequestCustomizer | None = None,
    ) -> T:
        """Send a request and return the envelope's result.

        Raises:
            EmptyResultError: The API answered 404, or the envelope carried no result.
            AuthenticationError: The API answered 403.
            HttpStatusError: Any other non-2xx status.
            DecodeError: A 2xx body was not a well-formed envelope.
            EnvelopeError: The envelope reported ``success: false``.
        """
        result = await self.execute_or_none(path, result_type, method=method, body=body, customize=customize)
        if result is None:
            raise EmptyResultError("No result returned (404 Not Found)", status_code=404)
        return result

    # =========================================================================
    # Convenience Methods
    # =========================================================================

    async def get(
        self,
        path: str,
        result_type: type[T] = Any,  # type: ignore[assignment]
        *,
        customize: RequestCustomizer | None = None,
    ) -> T:
        return await self.execute(path, result_type, method="GET", customize=customize)

    async def post(
        self,
        path: str,
        result_type: type[T] = Any,  # type: ignore[assignment]
        body: Any = None,
        *,
        customize: RequestCustomizer | None = None,
    ) -> T:
        return await self.execute(path, result_type, method="POST", body=body, customize=customize)

    async def put(
        self,
        path: str,
        result_type: type[T] = Any,  # type: ignore[assignment]
        body: Any = None,
        *,
        customize: RequestCustomizer | None = None,
    ) -> T:
        return await self.execute(path, result_type, method="PUT", body=body, customize=customize)

    async def patch(
        self,
        path: str,
        result_type: type[T] = Any,  # type: ignore[assignment]
        body: Any = None,
        *,
        customize: RequestCustomizer | None = None,
    ) -> T:
        return await self.execute(path, result_type, method="PATCH", body=body, customize=customize)

    async def delete(
        self,
        path: str,
        result_type: type[T] = Any,  # type: ignore[assignment]
        *,
        customize: RequestCustomizer | None = None,
    ) -> T:
        return await self.execute(path, result_type, method="DELETE", customize=customize)

    # =========================================================================
    # Resources
    # =========================================================================

    @cached_property
    def accounts(self) -> AccountsResource:
        return AccountsResource(self)

    @cached_property
    def members(self) -> MembersResource:
        return MembersResource(self)

    @cached_property
    def roles(self) -> RolesResource:
        return RolesResource(self)

    @cached_property
    def user(self) -> UserResource:
        return UserResource(self)

    @cached_property
    def custom_pages(self) -> CustomPagesResource:
        return CustomPagesResource(self)

    @cached_property
    def dns_analytics(self) -> DNSAnalyticsResource:
        return DNSAnalyticsResource(self)

    @cached_property
    def audit_logs(self) -> AuditLogsResource:
        return AuditLogsResource(self)


def _encode_body(body: Any) -> bytes:
    if isinstance(body, BaseModel):
        return body.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
    return json.dumps(body).encode("utf-8")


def _append_query(url: str, params: Mapping[str, Any]) -> str:
    query = append_parameters("", params)
    if query and "?" in url:
        # Path already carries a query string; continue it.
        query = "&" + query[1:]
    return url + query


@cache
def _result_adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)

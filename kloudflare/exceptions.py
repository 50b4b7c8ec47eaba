"""Public exceptions for the Kloudflare SDK."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kloudflare.models.envelope import ResponseInfo


class KloudflareError(Exception):
    """Base exception for all Kloudflare SDK errors."""


class KloudflareAPIError(KloudflareError):
    """Error from the Cloudflare API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(KloudflareAPIError):
    """The API rejected the supplied credentials (HTTP 403)."""

    def __init__(self) -> None:
        super().__init__(
            "Request failed with status code 403: Forbidden. "
            "Check your API token, email, and API key.",
            status_code=403,
        )


class HttpStatusError(KloudflareAPIError):
    """Non-2xx response other than 403 and 404."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Request failed with status code {status_code}", status_code=status_code)


class DecodeError(KloudflareAPIError):
    """A 2xx response body was not a well-formed envelope."""


class EnvelopeError(KloudflareAPIError):
    """The envelope was decoded but reported ``success: false``."""

    def __init__(self, errors: "list[ResponseInfo]", status_code: int | None = None) -> None:
        if errors:
            detail = "; ".join(f"{e.status}: {e.message}" for e in errors)
        else:
            detail = "no error details"
        super().__init__(f"Request was not successful ({detail})", status_code=status_code)
        self.errors = list(errors)


class EmptyResultError(KloudflareAPIError):
    """No result was returned where one was expected."""

    def __init__(self, message: str = "No result returned", status_code: int | None = None) -> None:
        super().__init__(message, status_code=status_code)


class TransportError(KloudflareError):
    """The request could not be sent or the response could not be read."""


class TransportTimeoutError(TransportError):
    """The transport gave up waiting on the network."""


class KloudflareConfigError(KloudflareError):
    """Configuration error (malformed env vars, invalid config)."""

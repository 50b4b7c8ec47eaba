"""Kloudflare: async client for the Cloudflare REST API.

Public API:
    Kloudflare - Authenticated client and request dispatcher
    Envelope, ResponseInfo, ResultInfo - Response envelope models
    PageParams, PageDirection - Pagination parameters
    append_parameter, append_parameters - Query-string helpers

Internal (not for direct use):
    _internal.http - Transport protocol and httpx implementation
"""

from kloudflare._internal.http import (
    PARALLEL_COUNT,
    ROOT_URL,
    HttpxTransport,
    Transport,
    TransportResponse,
)
from kloudflare._version import __version__
from kloudflare.client import ApiRequest, Kloudflare
from kloudflare.exceptions import (
    AuthenticationError,
    DecodeError,
    EmptyResultError,
    EnvelopeError,
    HttpStatusError,
    KloudflareAPIError,
    KloudflareConfigError,
    KloudflareError,
    TransportError,
    TransportTimeoutError,
)
from kloudflare.models import (
    Envelope,
    Id,
    Key,
    PageDirection,
    PageParams,
    ResponseInfo,
    ResultInfo,
)
from kloudflare.query import append_parameter, append_parameters

__all__ = [
    "__version__",
    "Kloudflare",
    "ApiRequest",
    "ROOT_URL",
    "PARALLEL_COUNT",
    "Transport",
    "TransportResponse",
    "HttpxTransport",
    "KloudflareError",
    "KloudflareAPIError",
    "AuthenticationError",
    "HttpStatusError",
    "DecodeError",
    "EnvelopeError",
    "EmptyResultError",
    "TransportError",
    "TransportTimeoutError",
    "KloudflareConfigError",
    "Envelope",
    "ResponseInfo",
    "ResultInfo",
    "Id",
    "Key",
    "PageDirection",
    "PageParams",
    "append_parameter",
    "append_parameters",
]

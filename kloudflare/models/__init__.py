"""Public models shared by every Kloudflare resource."""

from kloudflare.models.envelope import Envelope, Id, Key, ResponseInfo, ResultInfo
from kloudflare.models.pagination import PageDirection, PageParams

__all__ = [
    "Envelope",
    "Id",
    "Key",
    "ResponseInfo",
    "ResultInfo",
    "PageDirection",
    "PageParams",
]

"""Account audit logs."""

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from kloudflare.models.pagination import PageDirection
from kloudflare.query import append_parameters
from kloudflare.resources.accounts import Account

if TYPE_CHECKING:
    from kloudflare.client import Kloudflare

DEFAULT_AUDIT_LOG_LIMIT = 100


class IdAndName(BaseModel):
    id: str
    name: str = ""


class AuditLogAction(BaseModel):
    description: str = ""
    result: str = ""
    time: str = ""
    type: str = ""


class AuditLogActor(BaseModel):
    """Who performed the action. ``context`` is e.g. ``dash`` or ``api_token``."""

    id: str
    context: str = "dash"
    type: str = "account"
    name: str = ""
    email: str | None = None
    ip_address: str | None = None
    token_name: str | None = None
    token_id: str | None = None


class AuditLogConnection(BaseModel):
    """Raw request/response details for the logged action."""

    cf_ray_id: str
    method: str
    status_code: int
    uri: str
    user_agent: str | None = None


class AuditLogResource(BaseModel):
    id: str
    product: str
    type: str
    request: dict[str, str] = Field(default_factory=dict)
    response: dict[str, str] = Field(default_factory=dict)
    scope: dict[str, str] = Field(default_factory=dict)


class AuditLogEntry(BaseModel):
    id: str
    account: Account | None = None
    action: AuditLogAction | None = None
    actor: AuditLogActor | None = None
    raw: AuditLogConnection | None = None
    resource: AuditLogResource | None = None
    zone: IdAndName | None = None


class AuditLogsResource:
    def __init__(self, client: "Kloudflare") -> None:
        self._client = client

    async def list(
        self,
        account_id: str,
        before: str,
        after: str,
        direction: PageDirection = PageDirection.DESCENDING,
        limit: int = DEFAULT_AUDIT_LOG_LIMIT,
    ) -> list[AuditLogEntry]:
        """Fetch audit log entries between ``after`` and ``before`` (ISO 8601)."""
        path = append_parameters(
            f"/accounts/{account_id}/logs/audit",
            {"before": before, "after": after, "direction": direction, "limit": limit},
        )
        return await self._client.get(path, list[AuditLogEntry])

"""Account roles."""

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from kloudflare.client import Kloudflare


class PermissionGrant(BaseModel):
    read: bool = False
    write: bool = False


class RolePermissions(BaseModel):
    """Grants per permission area (``lb`` is load balancing)."""

    analytics: PermissionGrant = Field(default_factory=PermissionGrant)
    billing: PermissionGrant = Field(default_factory=PermissionGrant)
    cache_purge: PermissionGrant = Field(default_factory=PermissionGrant)
    dns: PermissionGrant = Field(default_factory=PermissionGrant)
    dns_records: PermissionGrant = Field(default_factory=PermissionGrant)
    lb: PermissionGrant = Field(default_factory=PermissionGrant)
    logs: PermissionGrant = Field(default_factory=PermissionGrant)
    organization: PermissionGrant = Field(default_factory=PermissionGrant)
    ssl: PermissionGrant = Field(default_factory=PermissionGrant)
    waf: PermissionGrant = Field(default_factory=PermissionGrant)
    zone_settings: PermissionGrant = Field(default_factory=PermissionGrant)
    zones: PermissionGrant = Field(default_factory=PermissionGrant)


class Role(BaseModel):
    id: str
    name: str
    description: str = ""
    permissions: RolePermissions = Field(default_factory=RolePermissions)


class RolesResource:
    def __init__(self, client: "Kloudflare") -> None:
        self._client = client

    async def get(self, account_id: str, role_id: str) -> Role:
        return await self._client.get(f"/accounts/{account_id}/roles/{role_id}", Role)

    async def list(self, account_id: str) -> list[Role]:
        return await self._client.get(f"/accounts/{account_id}/roles", list[Role])

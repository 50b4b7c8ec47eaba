"""Accounts the authenticated user can access."""

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from kloudflare.models.envelope import Id
from kloudflare.models.pagination import PageParams
from kloudflare.query import append_parameter

if TYPE_CHECKING:
    from kloudflare.client import Kloudflare


class AccountType(str, Enum):
    STANDARD = "standard"
    ENTERPRISE = "enterprise"


class AccountSettings(BaseModel):
    abuse_contact_email: str | None = None
    enforce_twofactor: bool = False


class Account(BaseModel):
    """An account record.

    ``created_on`` is an ISO 8601 timestamp string as returned by the API.
    """

    id: str
    name: str
    created_on: str | None = None
    settings: AccountSettings = Field(default_factory=AccountSettings)


class CreateAccount(BaseModel):
    """Payload for creating an account.

    ``unit`` is the tenant unit to create the account under (tenant admins only).
    """

    name: str
    type: AccountType = AccountType.STANDARD
    unit: Id | None = None

    model_config = {"frozen": True}


class UpdateAccount(BaseModel):
    name: str
    settings: AccountSettings = Field(default_factory=AccountSettings)

    model_config = {"frozen": True}


class AccountsResource:
    """Endpoints under ``/accounts``."""

    def __init__(self, client: "Kloudflare") -> None:
        self._client = client

    async def create(self, details: CreateAccount) -> Account:
        return await self._client.post("/accounts", Account, details)

    async def get(self, account_id: str) -> Account:
        return await self._client.get(f"/accounts/{account_id}", Account)

    async def delete(self, account_id: str) -> Id:
        return await self._client.delete(f"/accounts/{account_id}", Id)

    async def list(
        self,
        name: str | None = None,
        page_params: PageParams = PageParams(),
    ) -> list[Account]:
        """List accounts, optionally filtered by ``name``."""
        path = append_parameter(f"/accounts?{page_params}", "name", name)
        return await self._client.get(path, list[Account])

    async def update(self, account_id: str, details: UpdateAccount) -> Account:
        return await self._client.put(f"/accounts/{account_id}", Account, details)

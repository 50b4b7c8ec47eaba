"""Custom error and challenge pages for an account or zone."""

from enum import Enum
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel

if TYPE_CHECKING:
    from kloudflare.client import Kloudflare

Scope = Literal["accounts", "zones"]


class CustomPageState(str, Enum):
    DEFAULT = "default"
    CUSTOMIZED = "customized"


class UpdateCustomPage(BaseModel):
    state: CustomPageState = CustomPageState.DEFAULT
    url: str = ""

    model_config = {"frozen": True}


class CustomPagesResource:
    """Endpoints under ``/{accounts|zones}/{id}/custom_pages``."""

    def __init__(self, client: "Kloudflare") -> None:
        self._client = client

    async def get(self, scope: Scope, scope_id: str, page_id: str) -> dict[str, Any]:
        return await self._client.get(f"/{scope}/{scope_id}/custom_pages/{page_id}", dict[str, Any])

    async def update(
        self, scope: Scope, scope_id: str, page_id: str, update: UpdateCustomPage
    ) -> dict[str, Any]:
        return await self._client.put(
            f"/{scope}/{scope_id}/custom_pages/{page_id}", dict[str, Any], update
        )

    async def list(self, scope: Scope, scope_id: str) -> list[dict[str, Any]]:
        return await self._client.get(f"/{scope}/{scope_id}/custom_pages", list[dict[str, Any]])

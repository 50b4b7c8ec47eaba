"""Account members, their roles and policies.

Request bodies that come in sibling shapes (members granted roles versus
members granted policies) are tagged unions on ``kind``. The tag selects the
shape locally and is never sent to the API.
"""

from enum import Enum
from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter

from kloudflare.models.envelope import Id, Key
from kloudflare.models.pagination import PageParams
from kloudflare.query import append_parameters
from kloudflare.resources.roles import Role

if TYPE_CHECKING:
    from kloudflare.client import Kloudflare

# =============================================================================
# Records
# =============================================================================


class MemberStatus(str, Enum):
    ACCEPTED = "accepted"
    PENDING = "pending"
    REJECTED = "rejected"


class MemberSort(str, Enum):
    """Fields a member listing can be ordered by."""

    FIRST_NAME = "user.first_name"
    LAST_NAME = "user.last_name"
    EMAIL = "user.email"
    STATUS = "status"


class MemberInfo(BaseModel):
    email: str
    id: str = ""
    first_name: str = ""
    last_name: str = ""
    two_factor_authentication_enabled: bool = False


class PolicyPermissionGroup(BaseModel):
    id: str
    meta: dict[str, str] = Field(default_factory=dict)
    name: str = ""


class PolicyResourceGroupScope(BaseModel):
    key: str
    objects: list[Key] = Field(default_factory=list)


class PolicyResourceGroup(BaseModel):
    id: str
    scope: list[PolicyResourceGroupScope] = Field(default_factory=list)
    meta: dict[str, str] = Field(default_factory=dict)
    name: str = ""


class Policy(BaseModel):
    """An access policy. ``access`` is ``allow`` or ``deny``."""

    id: str
    access: str
    permission_groups: list[PolicyPermissionGroup] = Field(default_factory=list)
    resource_groups: list[PolicyResourceGroup] = Field(default_factory=list)


class Member(BaseModel):
    id: str
    roles: list[Role] = Field(default_factory=list)
    policies: list[Policy] = Field(default_factory=list)
    status: MemberStatus = MemberStatus.PENDING
    user: MemberInfo | None = None


# =============================================================================
# Request Bodies
# =============================================================================


class CreateMemberWithRoles(BaseModel):
    """Invite a member and grant them roles (by role id)."""

    kind: Literal["roles"] = Field(default="roles", exclude=True)
    email: str
    status: MemberStatus = MemberStatus.PENDING
    roles: tuple[str, ...] = ()

    model_config = {"frozen": True}


class CreateMemberWithPolicies(BaseModel):
    """Invite a member and grant them access policies."""

    kind: Literal["policies"] = Field(default="policies", exclude=True)
    email: str
    status: MemberStatus = MemberStatus.PENDING
    policies: tuple[Policy, ...] = ()

    model_config = {"frozen": True}


CreateMember = Annotated[
    CreateMemberWithRoles | CreateMemberWithPolicies,
    Field(discriminator="kind"),
]


class UpdateMemberWithRoles(BaseModel):
    kind: Literal["roles"] = Field(default="roles", exclude=True)
    roles: tuple[str, ...] = ()
    status: MemberStatus | None = None
    user: MemberInfo | None = None

    model_config = {"frozen": True}


class UpdateMemberWithPolicies(BaseModel):
    kind: Literal["policies"] = Field(default="policies", exclude=True)
    policies: tuple[Policy, ...] = ()

    model_config = {"frozen": True}


UpdateMember = Annotated[
    UpdateMemberWithRoles | UpdateMemberWithPolicies,
    Field(discriminator="kind"),
]

create_member_adapter: TypeAdapter[CreateMember] = TypeAdapter(CreateMember)
update_member_adapter: TypeAdapter[UpdateMember] = TypeAdapter(UpdateMember)


# =============================================================================
# Endpoints
# =============================================================================


class MembersResource:
    """Endpoints under ``/accounts/{account_id}/members``."""

    def __init__(self, client: "Kloudflare") -> None:
        self._client = client

    async def add(self, account_id: str, member: CreateMember) -> Member:
        """Invite a member. Either shape of ``CreateMember`` is accepted."""
        return await self._client.post(f"/accounts/{account_id}/members", Member, member)

    async def get(self, account_id: str, member_id: str) -> Member:
        return await self._client.get(f"/accounts/{account_id}/members/{member_id}", Member)

    async def remove(self, account_id: str, member_id: str) -> Id:
        return await self._client.delete(f"/accounts/{account_id}/members/{member_id}", Id)

    async def update(self, account_id: str, member_id: str, member: UpdateMember) -> Member:
        return await self._client.put(f"/accounts/{account_id}/members/{member_id}", Member, member)

    async def list(
        self,
        account_id: str,
        order: MemberSort | None = None,
        status: MemberStatus | None = None,
        page_params: PageParams = PageParams(),
    ) -> list[Member]:
        path = append_parameters(
            f"/accounts/{account_id}/members",
            {**page_params.to_query(), "order": order, "status": status},
        )
        return await self._client.get(path, list[Member])

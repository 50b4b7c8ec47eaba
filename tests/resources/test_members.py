"""Tests for the members resource."""

import pytest

from kloudflare import ROOT_URL, EmptyResultError, PageParams
from kloudflare.resources.members import (
    CreateMemberWithPolicies,
    CreateMemberWithRoles,
    Member,
    MemberSort,
    MemberStatus,
    Policy,
    UpdateMemberWithPolicies,
    UpdateMemberWithRoles,
    create_member_adapter,
    update_member_adapter,
)

MEMBER = {
    "id": "mem-1",
    "status": "accepted",
    "roles": [
        {
            "id": "role-1",
            "name": "Admin",
            "description": "Administrator",
            "permissions": {"dns": {"read": True, "write": True}},
        }
    ],
    "policies": [
        {
            "id": "pol-1",
            "access": "allow",
            "permission_groups": [{"id": "pg-1", "meta": {"k": "v"}, "name": "Group"}],
            "resource_groups": [
                {"id": "rg-1", "scope": [{"key": "com.cloudflare.api.account", "objects": [{"key": "*"}]}]}
            ],
        }
    ],
    "user": {"email": "member@example.com", "first_name": "Ada", "two_factor_authentication_enabled": True},
}


class TestMemberModel:
    def test_parse(self):
        member = Member.model_validate(MEMBER)
        assert member.status is MemberStatus.ACCEPTED
        assert member.roles[0].permissions.dns.write is True
        assert member.roles[0].permissions.billing.read is False
        assert member.policies[0].resource_groups[0].scope[0].objects[0].key == "*"
        assert member.user.first_name == "Ada"

    def test_defaults(self):
        member = Member(id="m")
        assert member.status is MemberStatus.PENDING
        assert member.roles == []


class TestTaggedBodies:
    """Sibling request shapes are a tagged union on ``kind``."""

    def test_decode_roles_shape(self):
        body = create_member_adapter.validate_python({"kind": "roles", "email": "a@b.c", "roles": ["r1"]})
        assert isinstance(body, CreateMemberWithRoles)
        assert body.roles == ("r1",)

    def test_decode_policies_shape(self):
        body = create_member_adapter.validate_python(
            {"kind": "policies", "email": "a@b.c", "policies": [{"id": "p", "access": "allow"}]}
        )
        assert isinstance(body, CreateMemberWithPolicies)

    def test_unknown_tag_rejected(self):
        with pytest.raises(ValueError):
            create_member_adapter.validate_python({"kind": "groups", "email": "a@b.c"})

    def test_tag_not_serialized(self):
        body = CreateMemberWithRoles(email="a@b.c", roles=("r1",))
        assert create_member_adapter.dump_python(body, mode="json") == {
            "email": "a@b.c",
            "status": "pending",
            "roles": ["r1"],
        }

    def test_update_shapes(self):
        body = update_member_adapter.validate_python({"kind": "policies", "policies": []})
        assert isinstance(body, UpdateMemberWithPolicies)


class TestMembersResource:
    @pytest.mark.asyncio
    async def test_add_with_roles(self, make_client, envelope):
        client, transport = make_client(json_body=envelope(MEMBER))
        member = await client.members.add("acc-1", CreateMemberWithRoles(email="a@b.c", roles=("r1", "r2")))
        assert member.id == "mem-1"
        assert transport.last["url"] == f"{ROOT_URL}/accounts/acc-1/members"
        assert transport.last_json == {"email": "a@b.c", "status": "pending", "roles": ["r1", "r2"]}

    @pytest.mark.asyncio
    async def test_add_with_policies(self, make_client, envelope):
        client, transport = make_client(json_body=envelope(MEMBER))
        await client.members.add(
            "acc-1",
            CreateMemberWithPolicies(email="a@b.c", policies=(Policy(id="p", access="allow"),)),
        )
        assert transport.last_json == {
            "email": "a@b.c",
            "status": "pending",
            "policies": [{"id": "p", "access": "allow", "permission_groups": [], "resource_groups": []}],
        }

    @pytest.mark.asyncio
    async def test_get(self, make_client, envelope):
        client, transport = make_client(json_body=envelope(MEMBER))
        await client.members.get("acc-1", "mem-1")
        assert transport.last["url"] == f"{ROOT_URL}/accounts/acc-1/members/mem-1"

    @pytest.mark.asyncio
    async def test_get_missing(self, make_client):
        client, _ = make_client(404)
        with pytest.raises(EmptyResultError) as exc_info:
            await client.members.get("acc-1", "nope")
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_remove(self, make_client, envelope):
        client, transport = make_client(json_body=envelope({"id": "mem-1"}))
        result = await client.members.remove("acc-1", "mem-1")
        assert result.id == "mem-1"
        assert transport.last["method"] == "DELETE"

    @pytest.mark.asyncio
    async def test_update_roles(self, make_client, envelope):
        client, transport = make_client(json_body=envelope(MEMBER))
        await client.members.update(
            "acc-1", "mem-1", UpdateMemberWithRoles(roles=("r1",), status=MemberStatus.ACCEPTED)
        )
        assert transport.last["method"] == "PUT"
        assert transport.last["url"] == f"{ROOT_URL}/accounts/acc-1/members/mem-1"
        assert transport.last_json == {"roles": ["r1"], "status": "accepted"}

    @pytest.mark.asyncio
    async def test_list_query(self, make_client, envelope):
        client, transport = make_client(json_body=envelope([MEMBER]))
        members = await client.members.list(
            "acc-1", order=MemberSort.EMAIL, page_params=PageParams(page=2)
        )
        assert len(members) == 1
        assert transport.last["url"] == (
            f"{ROOT_URL}/accounts/acc-1/members?direction=desc&page=2&per_page=20&order=user.email"
        )

    @pytest.mark.asyncio
    async def test_list_status_filter(self, make_client, envelope):
        client, transport = make_client(json_body=envelope([]))
        await client.members.list("acc-1", status=MemberStatus.PENDING)
        assert transport.last["url"].endswith("per_page=20&status=pending")

"""Unit tests for collaborator roster use cases."""

import pytest

from collab.application.usecase.member import (
    AddMemberRequest,
    AddMemberUseCase,
    ListMembersRequest,
    ListMembersUseCase,
    RemoveMemberRequest,
    RemoveMemberUseCase,
)
from collab.domain.error import NotAuthorizedError, NotFoundError
from collab.domain.repository import ObjectiveRepository
from collab.domain.service import ActivityService
from collab.domain.value import ActivityKind, ResourceId, ShareRole
from tests.fixtures import OWNER_ID, seed_objective
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _add(env, email="ann@example.com", role="viewer", user_id=OWNER_ID):
    use_case = await env.get(AddMemberUseCase)
    return await use_case.execute(
        AddMemberRequest(
            user_id=user_id, resource_id="obj-1", email=email, role=role
        )
    )


class TestAddMember:
    """Tests for AddMemberUseCase."""

    @pytest.mark.asyncio
    async def test_owner_adds_member(self, unit_env):
        """The member is listed and the feed shows an invite entry."""
        await seed_objective(await unit_env.get(ObjectiveRepository))

        response = await _add(unit_env, role="editor")

        assert response.member.email == "ann@example.com"
        assert response.member.role == ShareRole.EDITOR
        activity = await (await unit_env.get(ActivityService)).list_recent(
            ResourceId("obj-1")
        )
        assert [a.kind for a in activity] == [ActivityKind.INVITE]

    @pytest.mark.asyncio
    async def test_non_owner_rejected(self, unit_env):
        await seed_objective(await unit_env.get(ObjectiveRepository))

        with pytest.raises(NotAuthorizedError):
            await _add(unit_env, user_id="someone-else")

    @pytest.mark.asyncio
    async def test_unknown_objective(self, unit_env):
        with pytest.raises(NotFoundError):
            await _add(unit_env)


class TestListAndRemoveMembers:
    """Tests for ListMembersUseCase and RemoveMemberUseCase."""

    @pytest.mark.asyncio
    async def test_list_then_remove(self, unit_env):
        await seed_objective(await unit_env.get(ObjectiveRepository))
        await _add(unit_env)
        list_use_case = await unit_env.get(ListMembersUseCase)
        remove_use_case = await unit_env.get(RemoveMemberUseCase)
        list_request = ListMembersRequest(user_id=OWNER_ID, resource_id="obj-1")

        listed = await list_use_case.execute(list_request)
        removed = await remove_use_case.execute(
            RemoveMemberRequest(
                user_id=OWNER_ID, resource_id="obj-1", email="ann@example.com"
            )
        )

        assert [m.email for m in listed.members] == ["ann@example.com"]
        assert removed.removed is True
        assert (await list_use_case.execute(list_request)).members == []

    @pytest.mark.asyncio
    async def test_non_owner_can_not_list(self, unit_env):
        await seed_objective(await unit_env.get(ObjectiveRepository))
        use_case = await unit_env.get(ListMembersUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                ListMembersRequest(user_id="someone-else", resource_id="obj-1")
            )

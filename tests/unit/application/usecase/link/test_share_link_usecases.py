"""Unit tests for share link use cases."""

from datetime import timedelta

import pytest

from collab.application.usecase.link import (
    CreateShareLinkRequest,
    CreateShareLinkUseCase,
    ListLinkAccessRequest,
    ListLinkAccessUseCase,
    ListShareLinksRequest,
    ListShareLinksUseCase,
    RevokeShareLinkRequest,
    RevokeShareLinkUseCase,
)
from collab.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from collab.domain.repository import ObjectiveRepository
from collab.domain.service import ActivityService, RedemptionService
from collab.domain.value import ActivityKind, ResourceId, ShareRole, ShareToken
from tests.fixtures import OWNER_ID, seed_objective
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _create(env, role="viewer", user_id=OWNER_ID, resource_id="obj-1"):
    use_case = await env.get(CreateShareLinkUseCase)
    return await use_case.execute(
        CreateShareLinkRequest(user_id=user_id, resource_id=resource_id, role=role)
    )


async def _activity_kinds(env) -> list[ActivityKind]:
    service = await env.get(ActivityService)
    return [a.kind for a in await service.list_recent(ResourceId("obj-1"))]


class TestCreateShareLink:
    """Tests for CreateShareLinkUseCase."""

    @pytest.mark.asyncio
    async def test_returns_share_url(self, unit_env):
        """The response carries a frontend URL ending in the token."""
        await seed_objective(await unit_env.get(ObjectiveRepository))

        response = await _create(unit_env)

        assert response.url == f"http://localhost:5173/share/{response.link.token}"
        assert response.link.role == ShareRole.VIEWER
        assert response.link.revoked is False

    @pytest.mark.asyncio
    async def test_idempotent_with_single_activity_entry(self, unit_env):
        """Repeated issuance returns one URL and logs one creation."""
        await seed_objective(await unit_env.get(ObjectiveRepository))

        first = await _create(unit_env)
        second = await _create(unit_env)

        assert first.url == second.url
        assert await _activity_kinds(unit_env) == [ActivityKind.LINK_CREATED]

    @pytest.mark.asyncio
    async def test_non_owner_rejected(self, unit_env):
        await seed_objective(await unit_env.get(ObjectiveRepository))

        with pytest.raises(NotAuthorizedError):
            await _create(unit_env, user_id="someone-else")

    @pytest.mark.asyncio
    async def test_unknown_objective(self, unit_env):
        with pytest.raises(NotFoundError):
            await _create(unit_env, resource_id="missing")

    @pytest.mark.asyncio
    async def test_invalid_role(self, unit_env):
        """Roles other than viewer and editor are a validation error."""
        await seed_objective(await unit_env.get(ObjectiveRepository))

        with pytest.raises(ValidationError) as exc_info:
            await _create(unit_env, role="admin")

        assert exc_info.value.field == "role"

    @pytest.mark.asyncio
    async def test_expiry_in_days(self, unit_env):
        """expires_in_days sets an expiry on a newly minted link."""
        await seed_objective(await unit_env.get(ObjectiveRepository))
        use_case = await unit_env.get(CreateShareLinkUseCase)

        response = await use_case.execute(
            CreateShareLinkRequest(
                user_id=OWNER_ID, resource_id="obj-1", role="editor", expires_in_days=3
            )
        )

        link = response.link
        assert link.expires_at - link.created_at == timedelta(days=3)


class TestRevokeShareLink:
    """Tests for RevokeShareLinkUseCase."""

    @pytest.mark.asyncio
    async def test_revoke_by_role(self, unit_env):
        """Revoking by role kills the token and the next issue is new."""
        await seed_objective(await unit_env.get(ObjectiveRepository))
        created = await _create(unit_env)
        use_case = await unit_env.get(RevokeShareLinkUseCase)

        response = await use_case.execute(
            RevokeShareLinkRequest(user_id=OWNER_ID, resource_id="obj-1", role="viewer")
        )

        assert response.revoked is True
        assert response.link.token == created.link.token
        reissued = await _create(unit_env)
        assert reissued.link.token != created.link.token

    @pytest.mark.asyncio
    async def test_revoke_by_token_twice(self, unit_env):
        """The second revoke succeeds but reports nothing changed."""
        await seed_objective(await unit_env.get(ObjectiveRepository))
        created = await _create(unit_env)
        use_case = await unit_env.get(RevokeShareLinkUseCase)
        request = RevokeShareLinkRequest(user_id=OWNER_ID, token=created.link.token)

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert (first.revoked, second.revoked) == (True, False)
        assert second.link.revoked is True
        kinds = await _activity_kinds(unit_env)
        assert kinds.count(ActivityKind.LINK_REVOKED) == 1

    @pytest.mark.asyncio
    async def test_revoke_nothing_active(self, unit_env):
        await seed_objective(await unit_env.get(ObjectiveRepository))
        use_case = await unit_env.get(RevokeShareLinkUseCase)

        response = await use_case.execute(
            RevokeShareLinkRequest(user_id=OWNER_ID, resource_id="obj-1", role="editor")
        )

        assert response.revoked is False
        assert response.link is None

    @pytest.mark.asyncio
    async def test_revoke_unknown_token(self, unit_env):
        use_case = await unit_env.get(RevokeShareLinkUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                RevokeShareLinkRequest(user_id=OWNER_ID, token="never-issued")
            )

    @pytest.mark.asyncio
    async def test_revoke_by_token_requires_owner(self, unit_env):
        await seed_objective(await unit_env.get(ObjectiveRepository))
        created = await _create(unit_env)
        use_case = await unit_env.get(RevokeShareLinkUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                RevokeShareLinkRequest(user_id="intruder", token=created.link.token)
            )

    @pytest.mark.asyncio
    async def test_requires_token_or_role(self, unit_env):
        use_case = await unit_env.get(RevokeShareLinkUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(RevokeShareLinkRequest(user_id=OWNER_ID))


class TestListing:
    """Tests for ListShareLinksUseCase and ListLinkAccessUseCase."""

    @pytest.mark.asyncio
    async def test_list_links_and_access(self, unit_env):
        await seed_objective(await unit_env.get(ObjectiveRepository))
        created = await _create(unit_env, role="editor")
        redemption = await unit_env.get(RedemptionService)
        await redemption.resolve(ShareToken(created.link.token), "guest@example.com")

        links = await (await unit_env.get(ListShareLinksUseCase)).execute(
            ListShareLinksRequest(user_id=OWNER_ID, resource_id="obj-1")
        )
        access = await (await unit_env.get(ListLinkAccessUseCase)).execute(
            ListLinkAccessRequest(
                user_id=OWNER_ID,
                resource_id="obj-1",
                link_id=created.link.link_id,
            )
        )

        assert links.total == 1
        assert links.links[0].token == created.link.token
        assert [r.email for r in access.records] == ["guest@example.com"]

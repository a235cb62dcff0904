"""Integration tests for the PostgreSQL share link and invite repositories.

Require a migrated database at ``DATABASE__URL``.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from collab.domain.error import ActiveLinkConflictError
from collab.domain.model.invite import Invite
from collab.domain.model.share_link import ShareLink
from collab.domain.repository import (
    InviteRepository,
    ObjectiveRepository,
    ShareLinkRepository,
)
from collab.domain.value import (
    Email,
    InviteId,
    ResourceId,
    ShareLinkId,
    ShareRole,
    ShareToken,
)
from collab.util.token import generate_token
from tests.fixtures import seed_objective
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})


def _link(resource_id: ResourceId, role: ShareRole = ShareRole.VIEWER) -> ShareLink:
    return ShareLink(
        id=ShareLinkId(uuid4()),
        resource_id=resource_id,
        role=role,
        token=ShareToken(generate_token()),
    )


async def _objective(env) -> ResourceId:
    # Unique per test: the database outlives the test run
    objective = await seed_objective(
        await env.get(ObjectiveRepository), objective_id=f"it-{uuid4().hex[:12]}"
    )
    return objective.id


class TestShareLinkRepositoryIntegration:
    """Integration tests for PostgresShareLinkRepository."""

    @pytest.mark.asyncio
    async def test_create_and_find_by_token(self, integration_env):
        repo = await integration_env.get(ShareLinkRepository)
        resource_id = await _objective(integration_env)
        link = await repo.create(_link(resource_id))

        found = await repo.find_by_token(link.token)

        assert found is not None
        assert found.id == link.id
        assert found.resource_id == resource_id
        assert found.revoked is False

    @pytest.mark.asyncio
    async def test_second_active_link_conflicts(self, integration_env):
        """The partial unique index allows one active link per pair."""
        repo = await integration_env.get(ShareLinkRepository)
        resource_id = await _objective(integration_env)
        first = await repo.create(_link(resource_id))

        with pytest.raises(ActiveLinkConflictError):
            await repo.create(_link(resource_id))

        assert (await repo.find_active(resource_id, ShareRole.VIEWER)).id == first.id

    @pytest.mark.asyncio
    async def test_revoked_link_frees_the_pair(self, integration_env):
        repo = await integration_env.get(ShareLinkRepository)
        resource_id = await _objective(integration_env)
        first = await repo.create(_link(resource_id))

        revoked = await repo.mark_revoked(first.id)
        second = await repo.create(_link(resource_id))

        assert revoked.revoked is True
        assert second.id != first.id
        assert len(await repo.find_by_resource(resource_id)) == 2

    @pytest.mark.asyncio
    async def test_roles_do_not_conflict(self, integration_env):
        repo = await integration_env.get(ShareLinkRepository)
        resource_id = await _objective(integration_env)

        await repo.create(_link(resource_id, ShareRole.VIEWER))
        await repo.create(_link(resource_id, ShareRole.EDITOR))

        assert await repo.find_active(resource_id, ShareRole.EDITOR) is not None


class TestInviteRepositoryIntegration:
    """Integration tests for PostgresInviteRepository."""

    @pytest.mark.asyncio
    async def test_mark_used_only_once(self, integration_env):
        """The conditional update consumes a single-use invite once."""
        repo = await integration_env.get(InviteRepository)
        resource_id = await _objective(integration_env)
        now = datetime.now(timezone.utc)
        invite = await repo.save(
            Invite(
                id=InviteId(uuid4()),
                resource_id=resource_id,
                email=Email("guest@example.com"),
                role=ShareRole.VIEWER,
                token=ShareToken(generate_token()),
                expires_at=now + timedelta(days=7),
                single_use=True,
            )
        )

        first = await repo.mark_used(invite.id, now)
        second = await repo.mark_used(invite.id, now)

        assert first is not None
        assert first.used_at is not None
        assert second is None
        assert (await repo.find_by_token(invite.token)).used_at is not None

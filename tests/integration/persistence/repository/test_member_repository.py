"""Integration tests for the PostgreSQL collaborator roster repository.

Require a migrated database at ``DATABASE__URL``.
"""

from uuid import uuid4

import pytest

from collab.domain.model.member import CollabMember
from collab.domain.repository import MemberRepository, ObjectiveRepository
from collab.domain.value import Email, MemberId, ResourceId, ShareRole
from tests.fixtures import seed_objective
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})


def _member(resource_id: ResourceId, role: ShareRole) -> CollabMember:
    return CollabMember(
        id=MemberId(uuid4()),
        resource_id=resource_id,
        email=Email("ann@example.com"),
        role=role,
    )


class TestMemberRepositoryIntegration:
    """Integration tests for PostgresMemberRepository."""

    @pytest.mark.asyncio
    async def test_upsert_keeps_one_row_per_email(self, integration_env):
        objective = await seed_objective(
            await integration_env.get(ObjectiveRepository),
            objective_id=f"it-{uuid4().hex[:12]}",
        )
        repo = await integration_env.get(MemberRepository)

        first = await repo.upsert(_member(objective.id, ShareRole.VIEWER))
        second = await repo.upsert(_member(objective.id, ShareRole.EDITOR))

        assert second.id == first.id
        assert second.role == ShareRole.EDITOR
        assert len(await repo.find_by_resource(objective.id)) == 1

        assert await repo.remove(objective.id, Email("ann@example.com")) is True
        assert await repo.remove(objective.id, Email("ann@example.com")) is False

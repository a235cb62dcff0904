"""Unit tests for LinkService."""

import asyncio
from datetime import timedelta

import pytest

from collab.config import SharingSettings
from collab.domain.error import NotFoundError
from collab.domain.service import LinkService
from collab.domain.value import ResourceId, ShareRole, ShareToken, UserId
from collab.persistence.repository.inmemory import InMemoryShareLinkRepository
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

OBJ = ResourceId("obj-1")


class SlowLookupShareLinkRepository(InMemoryShareLinkRepository):
    """Yields to the event loop during lookups so issuers interleave."""

    async def find_active(self, resource_id, role):
        result = await super().find_active(resource_id, role)
        await asyncio.sleep(0.01)
        return result


@pytest.fixture
def link_repo():
    return InMemoryShareLinkRepository()


@pytest.fixture
def link_service(link_repo, clock):
    return LinkService(link_repo, SharingSettings(), clock=clock)


class TestGetOrCreateLink:
    """Tests for get_or_create_link."""

    @pytest.mark.asyncio
    async def test_first_call_mints_link(self, link_service):
        """A fresh pair gets a new, non-revoked link with a 40 char token."""
        link = await link_service.get_or_create_link(
            OBJ, ShareRole.VIEWER, created_by=UserId("owner-1")
        )

        assert link.resource_id == OBJ
        assert link.role == ShareRole.VIEWER
        assert link.revoked is False
        assert link.expires_at is None
        assert len(link.token.root) == 40
        assert link.created_by == "owner-1"

    @pytest.mark.asyncio
    async def test_repeated_calls_return_same_link(self, link_service):
        """Issuing twice for the same pair returns the same token."""
        first = await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)
        second = await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)

        assert first.id == second.id
        assert first.token == second.token

    @pytest.mark.asyncio
    async def test_roles_get_distinct_links(self, link_service):
        """Viewer and editor links of one objective are independent."""
        viewer = await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)
        editor = await link_service.get_or_create_link(OBJ, ShareRole.EDITOR)

        assert viewer.token != editor.token
        assert editor.role == ShareRole.EDITOR

    @pytest.mark.asyncio
    async def test_revoke_then_reissue_mints_new_token(self, link_service, link_repo):
        """After revocation the next issuance returns a different token."""
        first = await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)
        await link_service.revoke(first.token)

        second = await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)

        assert second.token != first.token
        assert second.revoked is False
        old = await link_repo.find_by_token(first.token)
        assert old is not None
        assert old.revoked is True

    @pytest.mark.asyncio
    async def test_expiry_measured_from_clock(self, link_service, clock):
        """A lifetime is counted from the service clock, not wall time."""
        link = await link_service.get_or_create_link(
            OBJ, ShareRole.VIEWER, expires_in=timedelta(days=1)
        )

        assert link.created_at == clock()
        assert link.expires_at == clock() + timedelta(days=1)

    @pytest.mark.asyncio
    async def test_expired_link_is_retired(self, link_service, link_repo, clock):
        """An expired active link is revoked and replaced on next issuance."""
        first = await link_service.get_or_create_link(
            OBJ, ShareRole.VIEWER, expires_in=timedelta(days=1)
        )
        clock.advance(days=2)

        second = await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)

        assert second.id != first.id
        retired = await link_repo.find_by_id(first.id)
        assert retired.revoked is True

    @pytest.mark.asyncio
    async def test_concurrent_issuance_converges(self, clock):
        """Simultaneous first issuances all return one link."""
        repo = SlowLookupShareLinkRepository()
        service = LinkService(repo, SharingSettings(), clock=clock)

        links = await asyncio.gather(
            *(service.get_or_create_link(OBJ, ShareRole.VIEWER) for _ in range(5))
        )

        assert len({link.token for link in links}) == 1
        assert len(await repo.find_by_resource(OBJ)) == 1

    @pytest.mark.asyncio
    async def test_resolves_from_container(self, unit_env):
        """The DI container wires LinkService with in-memory storage."""
        service = await unit_env.get(LinkService)

        link = await service.get_or_create_link(ResourceId("obj-9"), ShareRole.EDITOR)

        assert link.role == ShareRole.EDITOR


class TestRevoke:
    """Tests for revoke and revoke_active."""

    @pytest.mark.asyncio
    async def test_revoke_is_idempotent(self, link_service):
        """Revoking twice leaves the link revoked without error."""
        link = await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)

        first = await link_service.revoke(link.token)
        second = await link_service.revoke(link.token)

        assert first.revoked is True
        assert second.revoked is True
        assert second.id == link.id

    @pytest.mark.asyncio
    async def test_revoke_unknown_token(self, link_service):
        """Revoking a token that was never issued raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await link_service.revoke(ShareToken("nope"))

    @pytest.mark.asyncio
    async def test_revoke_active_only_touches_role(self, link_service):
        """Revoking the viewer link leaves the editor link active."""
        await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)
        editor = await link_service.get_or_create_link(OBJ, ShareRole.EDITOR)

        revoked = await link_service.revoke_active(OBJ, ShareRole.VIEWER)

        assert revoked is not None
        assert revoked.role == ShareRole.VIEWER
        assert await link_service.get_active_link(OBJ, ShareRole.EDITOR) == editor

    @pytest.mark.asyncio
    async def test_revoke_active_without_link(self, link_service):
        """Nothing active means nothing revoked."""
        assert await link_service.revoke_active(OBJ, ShareRole.EDITOR) is None


class TestQueries:
    """Tests for lookups."""

    @pytest.mark.asyncio
    async def test_get_active_link_ignores_expired(self, link_service, clock):
        """An expired link is not reported as active."""
        await link_service.get_or_create_link(
            OBJ, ShareRole.VIEWER, expires_in=timedelta(hours=1)
        )
        clock.advance(hours=2)

        assert await link_service.get_active_link(OBJ, ShareRole.VIEWER) is None

    @pytest.mark.asyncio
    async def test_list_links_includes_revoked(self, link_service, clock):
        """Listing keeps revoked links for the audit trail, newest first."""
        first = await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)
        await link_service.revoke(first.token)
        clock.advance(minutes=1)
        second = await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)

        links = await link_service.list_links(OBJ)

        assert [link.id for link in links] == [second.id, first.id]

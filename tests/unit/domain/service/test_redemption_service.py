"""Unit tests for RedemptionService."""

from datetime import timedelta

import pytest

from collab.config import SharingSettings
from collab.domain.error import (
    AccessDeniedError,
    InvalidTokenError,
    LinkRevokedError,
    RoleMismatchError,
    TokenExpiredError,
)
from collab.domain.service import LinkService, RedemptionService
from collab.domain.value import GuestAction, ResourceId, ShareRole, ShareToken
from collab.persistence.repository.inmemory import (
    InMemoryAccessRecordRepository,
    InMemoryShareLinkRepository,
)

OBJ = ResourceId("obj-1")


@pytest.fixture
def link_repo():
    return InMemoryShareLinkRepository()


@pytest.fixture
def access_repo():
    return InMemoryAccessRecordRepository()


@pytest.fixture
def link_service(link_repo, clock):
    return LinkService(link_repo, SharingSettings(), clock=clock)


@pytest.fixture
def redemption_service(link_repo, access_repo, clock):
    return RedemptionService(link_repo, access_repo, clock=clock)


class TestResolve:
    """Tests for resolve."""

    @pytest.mark.asyncio
    async def test_resolves_active_link(self, link_service, redemption_service):
        """An active token resolves to its resource and role."""
        link = await link_service.get_or_create_link(OBJ, ShareRole.EDITOR)

        resolved = await redemption_service.resolve(link.token)

        assert resolved.resource_id == OBJ
        assert resolved.role == ShareRole.EDITOR

    @pytest.mark.asyncio
    async def test_unknown_token(self, redemption_service):
        """A token that was never issued is rejected as not found."""
        with pytest.raises(InvalidTokenError):
            await redemption_service.resolve(ShareToken("x" * 40))

    @pytest.mark.asyncio
    async def test_revoked_link_rejected(self, link_service, redemption_service):
        """A revoked token no longer resolves."""
        link = await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)
        await redemption_service.resolve(link.token)

        await link_service.revoke(link.token)

        with pytest.raises(LinkRevokedError):
            await redemption_service.resolve(link.token)

    @pytest.mark.asyncio
    async def test_revocation_is_permanent(self, link_service, redemption_service):
        """Reissuing for the pair does not bring the old token back."""
        old = await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)
        await link_service.revoke(old.token)
        new = await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)

        assert (await redemption_service.resolve(new.token)).id == new.id
        with pytest.raises(LinkRevokedError):
            await redemption_service.resolve(old.token)

    @pytest.mark.asyncio
    async def test_expired_link_stays_rejected(
        self, link_service, redemption_service, clock
    ):
        """Once past expiry a link fails now and at every later time."""
        link = await link_service.get_or_create_link(
            OBJ, ShareRole.VIEWER, expires_in=timedelta(hours=1)
        )
        await redemption_service.resolve(link.token)

        clock.advance(hours=1)
        with pytest.raises(TokenExpiredError):
            await redemption_service.resolve(link.token)

        clock.advance(days=30)
        with pytest.raises(TokenExpiredError):
            await redemption_service.resolve(link.token)

    @pytest.mark.asyncio
    async def test_revoked_wins_over_expired(
        self, link_service, redemption_service, clock
    ):
        """Revocation is reported before expiry."""
        link = await link_service.get_or_create_link(
            OBJ, ShareRole.VIEWER, expires_in=timedelta(hours=1)
        )
        await link_service.revoke(link.token)
        clock.advance(days=1)

        with pytest.raises(LinkRevokedError):
            await redemption_service.resolve(link.token)

    @pytest.mark.asyncio
    async def test_records_access(
        self, link_service, redemption_service, access_repo, clock
    ):
        """Each successful resolution appends an access record."""
        link = await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)

        await redemption_service.resolve(link.token)
        clock.advance(minutes=5)
        await redemption_service.resolve(link.token, email="guest@example.com")

        records = await redemption_service.list_access(link.id)
        assert [r.email for r in records] == ["guest@example.com", None]
        assert records[0].accessed_at == clock()

    @pytest.mark.asyncio
    async def test_rejection_records_nothing(
        self, link_service, redemption_service, access_repo
    ):
        """Failed resolutions leave the access trail untouched."""
        link = await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)
        await link_service.revoke(link.token)

        with pytest.raises(AccessDeniedError):
            await redemption_service.resolve(link.token)

        assert await access_repo.find_by_link(link.id) == []


class TestAuthorize:
    """Tests for authorize."""

    @pytest.mark.asyncio
    async def test_viewer_may_comment(self, link_service, redemption_service):
        """Viewer links allow commenting."""
        link = await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)

        authorized = await redemption_service.authorize(
            link.token, GuestAction.COMMENT
        )

        assert authorized.id == link.id

    @pytest.mark.asyncio
    async def test_viewer_may_not_edit(self, link_service, redemption_service):
        """Viewer links never allow edits."""
        link = await link_service.get_or_create_link(OBJ, ShareRole.VIEWER)

        with pytest.raises(RoleMismatchError):
            await redemption_service.authorize(link.token, GuestAction.EDIT)

    @pytest.mark.asyncio
    async def test_editor_may_edit(self, link_service, redemption_service):
        """Editor links allow edits."""
        link = await link_service.get_or_create_link(OBJ, ShareRole.EDITOR)

        await redemption_service.authorize(link.token, GuestAction.EDIT)

    @pytest.mark.asyncio
    async def test_revoked_between_open_and_write(
        self, link_service, redemption_service
    ):
        """A link revoked after the page was opened blocks the next write."""
        link = await link_service.get_or_create_link(OBJ, ShareRole.EDITOR)
        await redemption_service.resolve(link.token)

        await link_service.revoke(link.token)

        with pytest.raises(LinkRevokedError):
            await redemption_service.authorize(link.token, GuestAction.COMMENT)

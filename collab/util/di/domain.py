"""Domain layer DI providers."""

from dishka import Scope, provide

from collab.config import AuthSettings, SharingSettings
from collab.domain.repository import (
    AccessRecordRepository,
    ActivityRepository,
    CommentRepository,
    InviteRepository,
    LocalShareStore,
    MemberRepository,
    ObjectiveRepository,
    ShareLinkRepository,
)
from collab.domain.service import (
    ActivityService,
    CommentService,
    InviteService,
    JWTService,
    LinkService,
    LocalShareService,
    MemberService,
    ObjectiveService,
    RedemptionService,
)
from collab.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_link_service(
        self,
        link_repository: ShareLinkRepository,
        sharing_settings: SharingSettings,
    ) -> LinkService:
        """Provide share link domain service."""
        return LinkService(
            link_repository=link_repository, sharing_settings=sharing_settings
        )

    @provide
    def get_redemption_service(
        self,
        link_repository: ShareLinkRepository,
        access_record_repository: AccessRecordRepository,
    ) -> RedemptionService:
        """Provide redemption domain service."""
        return RedemptionService(
            link_repository=link_repository,
            access_record_repository=access_record_repository,
        )

    @provide
    def get_invite_service(
        self,
        invite_repository: InviteRepository,
        sharing_settings: SharingSettings,
    ) -> InviteService:
        """Provide invite domain service."""
        return InviteService(
            invite_repository=invite_repository, sharing_settings=sharing_settings
        )

    @provide
    def get_objective_service(
        self, objective_repository: ObjectiveRepository
    ) -> ObjectiveService:
        """Provide objective domain service."""
        return ObjectiveService(objective_repository=objective_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_activity_service(
        self, activity_repository: ActivityRepository
    ) -> ActivityService:
        """Provide activity domain service."""
        return ActivityService(activity_repository=activity_repository)

    @provide
    def get_local_share_service(
        self, store: LocalShareStore, sharing_settings: SharingSettings
    ) -> LocalShareService:
        """Provide local share domain service."""
        return LocalShareService(store=store, sharing_settings=sharing_settings)

    @provide
    def get_member_service(
        self,
        member_repository: MemberRepository,
        activity_service: ActivityService,
    ) -> MemberService:
        """Provide collaborator roster domain service."""
        return MemberService(
            member_repository=member_repository, activity_service=activity_service
        )

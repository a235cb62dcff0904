"""Application layer DI providers."""

from dishka import Scope, provide

from collab.application.usecase.activity import GetActivityUseCase
from collab.application.usecase.invite import (
    CreateInviteUseCase,
    ListInvitesUseCase,
    RedeemInviteUseCase,
)
from collab.application.usecase.link import (
    CreateShareLinkUseCase,
    ListLinkAccessUseCase,
    ListShareLinksUseCase,
    RevokeShareLinkUseCase,
)
from collab.application.usecase.member import (
    AddMemberUseCase,
    ListMembersUseCase,
    RemoveMemberUseCase,
)
from collab.application.usecase.share import (
    EditSharedObjectiveUseCase,
    OpenSharedObjectiveUseCase,
    PostLinkCommentUseCase,
)
from collab.config import Settings
from collab.domain.service import (
    ActivityService,
    CommentService,
    InviteService,
    LinkService,
    MemberService,
    ObjectiveService,
    RedemptionService,
)
from collab.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Share link use cases (owner)
    @provide
    def get_create_share_link_use_case(
        self,
        link_service: LinkService,
        objective_service: ObjectiveService,
        activity_service: ActivityService,
        settings: Settings,
    ) -> CreateShareLinkUseCase:
        """Provide create share link use case."""
        return CreateShareLinkUseCase(
            link_service=link_service,
            objective_service=objective_service,
            activity_service=activity_service,
            settings=settings,
        )

    @provide
    def get_list_share_links_use_case(
        self,
        link_service: LinkService,
        objective_service: ObjectiveService,
        settings: Settings,
    ) -> ListShareLinksUseCase:
        """Provide list share links use case."""
        return ListShareLinksUseCase(
            link_service=link_service,
            objective_service=objective_service,
            settings=settings,
        )

    @provide
    def get_revoke_share_link_use_case(
        self,
        link_service: LinkService,
        objective_service: ObjectiveService,
        activity_service: ActivityService,
        settings: Settings,
    ) -> RevokeShareLinkUseCase:
        """Provide revoke share link use case."""
        return RevokeShareLinkUseCase(
            link_service=link_service,
            objective_service=objective_service,
            activity_service=activity_service,
            settings=settings,
        )

    @provide
    def get_list_link_access_use_case(
        self,
        link_service: LinkService,
        redemption_service: RedemptionService,
        objective_service: ObjectiveService,
    ) -> ListLinkAccessUseCase:
        """Provide list link access use case."""
        return ListLinkAccessUseCase(
            link_service=link_service,
            redemption_service=redemption_service,
            objective_service=objective_service,
        )

    # Share link use cases (guest)
    @provide
    def get_open_shared_objective_use_case(
        self,
        redemption_service: RedemptionService,
        objective_service: ObjectiveService,
        comment_service: CommentService,
    ) -> OpenSharedObjectiveUseCase:
        """Provide open shared objective use case."""
        return OpenSharedObjectiveUseCase(
            redemption_service=redemption_service,
            objective_service=objective_service,
            comment_service=comment_service,
        )

    @provide
    def get_post_link_comment_use_case(
        self,
        redemption_service: RedemptionService,
        comment_service: CommentService,
        activity_service: ActivityService,
    ) -> PostLinkCommentUseCase:
        """Provide post link comment use case."""
        return PostLinkCommentUseCase(
            redemption_service=redemption_service,
            comment_service=comment_service,
            activity_service=activity_service,
        )

    @provide
    def get_edit_shared_objective_use_case(
        self,
        redemption_service: RedemptionService,
        objective_service: ObjectiveService,
        activity_service: ActivityService,
    ) -> EditSharedObjectiveUseCase:
        """Provide edit shared objective use case."""
        return EditSharedObjectiveUseCase(
            redemption_service=redemption_service,
            objective_service=objective_service,
            activity_service=activity_service,
        )

    # Invite use cases
    @provide
    def get_create_invite_use_case(
        self,
        invite_service: InviteService,
        objective_service: ObjectiveService,
        activity_service: ActivityService,
        settings: Settings,
    ) -> CreateInviteUseCase:
        """Provide create invite use case."""
        return CreateInviteUseCase(
            invite_service=invite_service,
            objective_service=objective_service,
            activity_service=activity_service,
            settings=settings,
        )

    @provide
    def get_list_invites_use_case(
        self,
        invite_service: InviteService,
        objective_service: ObjectiveService,
        settings: Settings,
    ) -> ListInvitesUseCase:
        """Provide list invites use case."""
        return ListInvitesUseCase(
            invite_service=invite_service,
            objective_service=objective_service,
            settings=settings,
        )

    @provide
    def get_redeem_invite_use_case(
        self,
        invite_service: InviteService,
        comment_service: CommentService,
        activity_service: ActivityService,
    ) -> RedeemInviteUseCase:
        """Provide redeem invite use case."""
        return RedeemInviteUseCase(
            invite_service=invite_service,
            comment_service=comment_service,
            activity_service=activity_service,
        )

    # Activity use cases
    @provide
    def get_activity_use_case(
        self,
        activity_service: ActivityService,
        objective_service: ObjectiveService,
    ) -> GetActivityUseCase:
        """Provide get activity use case."""
        return GetActivityUseCase(
            activity_service=activity_service,
            objective_service=objective_service,
        )

    # Member use cases
    @provide
    def get_list_members_use_case(
        self,
        member_service: MemberService,
        objective_service: ObjectiveService,
    ) -> ListMembersUseCase:
        """Provide list members use case."""
        return ListMembersUseCase(
            member_service=member_service,
            objective_service=objective_service,
        )

    @provide
    def get_add_member_use_case(
        self,
        member_service: MemberService,
        objective_service: ObjectiveService,
    ) -> AddMemberUseCase:
        """Provide add member use case."""
        return AddMemberUseCase(
            member_service=member_service,
            objective_service=objective_service,
        )

    @provide
    def get_remove_member_use_case(
        self,
        member_service: MemberService,
        objective_service: ObjectiveService,
    ) -> RemoveMemberUseCase:
        """Provide remove member use case."""
        return RemoveMemberUseCase(
            member_service=member_service,
            objective_service=objective_service,
        )

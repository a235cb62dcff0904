"""Guest-facing share link use cases."""

from collab.application.usecase.share.edit_shared_objective import (
    EditSharedObjectiveRequest,
    EditSharedObjectiveResponse,
    EditSharedObjectiveUseCase,
    ObjectiveChanges,
)
from collab.application.usecase.share.open_shared_objective import (
    CommentItem,
    ObjectiveView,
    OpenSharedObjectiveRequest,
    OpenSharedObjectiveResponse,
    OpenSharedObjectiveUseCase,
)
from collab.application.usecase.share.post_link_comment import (
    PostLinkCommentRequest,
    PostLinkCommentResponse,
    PostLinkCommentUseCase,
)

__all__ = [
    "CommentItem",
    "EditSharedObjectiveRequest",
    "EditSharedObjectiveResponse",
    "EditSharedObjectiveUseCase",
    "ObjectiveChanges",
    "ObjectiveView",
    "OpenSharedObjectiveRequest",
    "OpenSharedObjectiveResponse",
    "OpenSharedObjectiveUseCase",
    "PostLinkCommentRequest",
    "PostLinkCommentResponse",
    "PostLinkCommentUseCase",
]

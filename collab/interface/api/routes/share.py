"""Shared objective routes (guest-facing).

No authentication: the token in the path is the capability. Every
rejection renders the same "Access Restricted" response.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from collab.application.usecase.share import (
    EditSharedObjectiveRequest,
    EditSharedObjectiveResponse,
    EditSharedObjectiveUseCase,
    ObjectiveChanges,
    OpenSharedObjectiveRequest,
    OpenSharedObjectiveResponse,
    OpenSharedObjectiveUseCase,
    PostLinkCommentRequest,
    PostLinkCommentResponse,
    PostLinkCommentUseCase,
)

router = APIRouter(prefix="/share", tags=["share"], route_class=DishkaRoute)


class PostCommentAPIRequest(BaseModel):
    """API request for a guest comment."""

    body: str = Field(max_length=10000)
    email: str | None = None


@router.get("/{token}", response_model=OpenSharedObjectiveResponse)
async def open_shared_objective(
    token: str,
    open_use_case: FromDishka[OpenSharedObjectiveUseCase],
    email: str | None = Query(default=None, max_length=255),
) -> OpenSharedObjectiveResponse:
    """Render the shared objective at the link's role.

    Records an access entry for the link.
    """
    return await open_use_case.execute(
        OpenSharedObjectiveRequest(token=token, email=email)
    )


@router.post(
    "/{token}/comments",
    response_model=PostLinkCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_comment(
    token: str,
    request: PostCommentAPIRequest,
    comment_use_case: FromDishka[PostLinkCommentUseCase],
) -> PostLinkCommentResponse:
    """Post a comment as a link holder. The token is re-checked first."""
    return await comment_use_case.execute(
        PostLinkCommentRequest(token=token, body=request.body, email=request.email)
    )


@router.patch("/{token}/objective", response_model=EditSharedObjectiveResponse)
async def edit_objective(
    token: str,
    changes: ObjectiveChanges,
    edit_use_case: FromDishka[EditSharedObjectiveUseCase],
) -> EditSharedObjectiveResponse:
    """Edit the shared objective. Requires an editor link."""
    return await edit_use_case.execute(
        EditSharedObjectiveRequest(token=token, changes=changes)
    )

"""Edit a shared objective through an editor link."""

from datetime import date

import logfire
from pydantic import BaseModel, Field

from collab.application.usecase.base import BaseUseCase
from collab.application.usecase.share.open_shared_objective import ObjectiveView
from collab.domain.error import InvalidTokenError, ValidationError
from collab.domain.service import ActivityService, ObjectiveService, RedemptionService
from collab.domain.service.base import parse_token
from collab.domain.value import (
    ActivityKind,
    GuestAction,
    ObjectivePriority,
    ObjectiveStatus,
)


class ObjectiveChanges(BaseModel):
    """Fields an editor may change. Unset fields are left alone."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    description: str | None = None
    status: ObjectiveStatus | None = None
    priority: ObjectivePriority | None = None
    completion_percentage: int | None = Field(default=None, ge=0, le=100)
    target_date: date | None = None


class EditSharedObjectiveRequest(BaseModel):
    """Guest edit request."""

    token: str
    changes: ObjectiveChanges


class EditSharedObjectiveResponse(BaseModel):
    """Objective after the edit."""

    objective: ObjectiveView


class EditSharedObjectiveUseCase(BaseUseCase):
    """Use case for an editor link holder updating the objective."""

    def __init__(
        self,
        redemption_service: RedemptionService,
        objective_service: ObjectiveService,
        activity_service: ActivityService,
    ) -> None:
        self.redemption_service = redemption_service
        self.objective_service = objective_service
        self.activity_service = activity_service

    async def execute(
        self, request: EditSharedObjectiveRequest
    ) -> EditSharedObjectiveResponse:
        """Execute guest edit flow.

        Raises:
            AccessDeniedError: If the token is invalid
            RoleMismatchError: If the link is a viewer link
            ValidationError: If no change is given or a value is invalid
        """
        token = parse_token(request.token)
        changes = request.changes.model_dump(exclude_unset=True)
        if not changes:
            raise ValidationError("changes", "No changes supplied")

        with logfire.span("edit_shared_objective", fields=sorted(changes)):
            link = await self.redemption_service.authorize(token, GuestAction.EDIT)

            objective = await self.objective_service.get_objective(link.resource_id)
            if objective is None:
                raise InvalidTokenError()

            updated = await self.objective_service.apply_edit(objective, changes)

            data = {"fields": sorted(changes), "via": "link"}
            if "status" in changes and changes["status"] is not None:
                data["status"] = updated.status.value
            await self.activity_service.record(
                link.resource_id, ActivityKind.STATUS, data
            )

            return EditSharedObjectiveResponse(
                objective=ObjectiveView.from_objective(updated)
            )

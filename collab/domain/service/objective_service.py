"""Objective domain service."""

from typing import Any

import logfire
from pydantic import ValidationError as PydanticValidationError

from collab.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from collab.domain.model.objective import Objective
from collab.domain.repository import ObjectiveRepository
from collab.domain.value import ResourceId, UserId
from collab.util.clock import Clock, utc_now

from .base import Service

# Fields a guest editor may change; ownership and timestamps are not editable
EDITABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "status",
        "priority",
        "completion_percentage",
        "target_date",
    }
)


class ObjectiveService(Service):
    """Domain service for the shared objective resource."""

    def __init__(
        self, objective_repository: ObjectiveRepository, clock: Clock = utc_now
    ) -> None:
        """Initialize objective service.

        Args:
            objective_repository: Objective repository
            clock: Time source for ``updated_at``
        """
        self.objective_repository = objective_repository
        self.clock = clock

    async def get_objective(self, objective_id: ResourceId) -> Objective | None:
        """Get objective by ID.

        Args:
            objective_id: Objective ID

        Returns:
            Objective if found, None otherwise
        """
        with logfire.span(
            "objective_service.get_objective", objective_id=objective_id.root
        ):
            objective = await self.objective_repository.find_by_id(objective_id)
            if objective:
                logfire.info("Objective found", objective_id=objective_id.root)
            else:
                logfire.warn("Objective not found", objective_id=objective_id.root)
            return objective

    async def require_objective(self, objective_id: ResourceId) -> Objective:
        """Get objective by ID or raise NotFoundError."""
        objective = await self.get_objective(objective_id)
        if objective is None:
            raise NotFoundError("Objective", objective_id.root)
        return objective

    async def require_owned(
        self, objective_id: ResourceId, user_id: UserId
    ) -> Objective:
        """Get an objective the user owns.

        Raises:
            NotFoundError: If the objective does not exist
            NotAuthorizedError: If the user is not the owner
        """
        objective = await self.require_objective(objective_id)
        if objective.owner_id != user_id:
            logfire.warn(
                "Objective ownership check failed",
                objective_id=objective_id.root,
                user_id=user_id,
            )
            raise NotAuthorizedError("objective", objective_id.root, user_id)
        return objective

    async def save_objective(self, objective: Objective) -> Objective:
        """Save objective (create or update)."""
        with logfire.span(
            "objective_service.save_objective", objective_id=objective.id.root
        ):
            saved = await self.objective_repository.save(objective)
            logfire.info("Objective saved", objective_id=objective.id.root)
            return saved

    async def apply_edit(
        self, objective: Objective, changes: dict[str, Any]
    ) -> Objective:
        """Apply a partial edit to an objective.

        Args:
            objective: Current objective
            changes: Field name to new value, restricted to editable fields

        Returns:
            The updated, persisted objective

        Raises:
            ValidationError: If a field is not editable or a value is invalid
        """
        with logfire.span(
            "objective_service.apply_edit",
            objective_id=objective.id.root,
            fields=sorted(changes),
        ):
            for field in changes:
                if field not in EDITABLE_FIELDS:
                    raise ValidationError(field, f"Field '{field}' can not be edited")

            data = objective.model_dump()
            data.update(changes)
            data["updated_at"] = self.clock()

            try:
                updated = Objective.model_validate(data)
            except PydanticValidationError as e:
                error = e.errors()[0]
                field = str(error["loc"][0]) if error["loc"] else "objective"
                raise ValidationError(field, f"Invalid {field}: {error['msg']}")

            return await self.save_objective(updated)

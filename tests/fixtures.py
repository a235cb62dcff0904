"""Shared test data builders."""

from collab.domain.model.objective import Objective
from collab.domain.repository import ObjectiveRepository
from collab.domain.value import ResourceId, UserId

OWNER_ID = "owner-1"
OWNER_EMAIL = "owner@example.com"


async def seed_objective(
    objective_repo: ObjectiveRepository,
    objective_id: str = "obj-1",
    owner_id: str = OWNER_ID,
    title: str = "Grow weekly active users",
) -> Objective:
    """Save an objective owned by ``owner_id``."""
    return await objective_repo.save(
        Objective(
            id=ResourceId(objective_id),
            owner_id=UserId(owner_id),
            title=title,
        )
    )

"""In-memory objective repository for testing."""

from typing import Optional

from collab.domain.model.objective import Objective
from collab.domain.repository.objective import ObjectiveRepository
from collab.domain.value import ResourceId


class InMemoryObjectiveRepository(ObjectiveRepository):
    """In-memory implementation of ObjectiveRepository for testing."""

    def __init__(self) -> None:
        self._objectives: dict[str, Objective] = {}

    async def find_by_id(self, objective_id: ResourceId) -> Optional[Objective]:
        """Find an objective by ID."""
        return self._objectives.get(objective_id.root)

    async def save(self, objective: Objective) -> Objective:
        """Save an objective (create or update)."""
        self._objectives[objective.id.root] = objective
        return objective

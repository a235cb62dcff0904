"""Objective repository interface."""

from abc import ABC, abstractmethod

from collab.domain.model.objective import Objective
from collab.domain.value import ResourceId


class ObjectiveRepository(ABC):
    """Repository for the shared Objective resource."""

    @abstractmethod
    async def find_by_id(self, objective_id: ResourceId) -> Objective | None:
        """Find an objective by ID.

        Args:
            objective_id: The objective's identifier

        Returns:
            The objective if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, objective: Objective) -> Objective:
        """Save an objective (create or update).

        Args:
            objective: The objective to save

        Returns:
            The saved objective
        """
        pass

"""Access record repository interface."""

from abc import ABC, abstractmethod

from collab.domain.model.access_record import AccessRecord
from collab.domain.value import ShareLinkId


class AccessRecordRepository(ABC):
    """Append-only store of link redemptions."""

    @abstractmethod
    async def append(self, record: AccessRecord) -> AccessRecord:
        """Append an access record.

        Args:
            record: The record to append

        Returns:
            The stored record
        """
        pass

    @abstractmethod
    async def find_by_link(
        self, link_id: ShareLinkId, limit: int = 100
    ) -> list[AccessRecord]:
        """Find access records for a link, newest first.

        Args:
            link_id: The link
            limit: Maximum number of results

        Returns:
            List of access records
        """
        pass

"""In-memory access record repository for testing."""

from collab.domain.model.access_record import AccessRecord
from collab.domain.repository.access_record import AccessRecordRepository
from collab.domain.value import ShareLinkId


class InMemoryAccessRecordRepository(AccessRecordRepository):
    """In-memory implementation of AccessRecordRepository for testing."""

    def __init__(self) -> None:
        self._records: list[AccessRecord] = []

    async def append(self, record: AccessRecord) -> AccessRecord:
        """Append an access record."""
        self._records.append(record)
        return record

    async def find_by_link(
        self, link_id: ShareLinkId, limit: int = 100
    ) -> list[AccessRecord]:
        """Find access records for a link, newest first."""
        matches = [r for r in self._records if r.link_id == link_id]
        matches.sort(key=lambda r: r.accessed_at, reverse=True)
        return matches[:limit]

"""In-memory repository implementations for testing."""

from .access_record import InMemoryAccessRecordRepository
from .activity import InMemoryActivityRepository
from .comment import InMemoryCommentRepository
from .invite import InMemoryInviteRepository
from .member import InMemoryMemberRepository
from .objective import InMemoryObjectiveRepository
from .share_link import InMemoryShareLinkRepository

__all__ = [
    "InMemoryAccessRecordRepository",
    "InMemoryActivityRepository",
    "InMemoryCommentRepository",
    "InMemoryInviteRepository",
    "InMemoryMemberRepository",
    "InMemoryObjectiveRepository",
    "InMemoryShareLinkRepository",
]

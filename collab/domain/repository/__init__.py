"""Repository interfaces for the sharing domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from collab.domain.repository.access_record import AccessRecordRepository
from collab.domain.repository.activity import ActivityRepository
from collab.domain.repository.comment import CommentRepository
from collab.domain.repository.invite import InviteRepository
from collab.domain.repository.local_share import LocalShareStore
from collab.domain.repository.member import MemberRepository
from collab.domain.repository.objective import ObjectiveRepository
from collab.domain.repository.share_link import ShareLinkRepository

__all__ = [
    "AccessRecordRepository",
    "ActivityRepository",
    "CommentRepository",
    "InviteRepository",
    "LocalShareStore",
    "MemberRepository",
    "ObjectiveRepository",
    "ShareLinkRepository",
]

"""PostgreSQL repository implementations."""

from collab.persistence.repository.access_record import (
    PostgresAccessRecordRepository,
)
from collab.persistence.repository.activity import PostgresActivityRepository
from collab.persistence.repository.comment import PostgresCommentRepository
from collab.persistence.repository.invite import PostgresInviteRepository
from collab.persistence.repository.member import PostgresMemberRepository
from collab.persistence.repository.objective import PostgresObjectiveRepository
from collab.persistence.repository.share_link import PostgresShareLinkRepository

__all__ = [
    "PostgresShareLinkRepository",
    "PostgresAccessRecordRepository",
    "PostgresInviteRepository",
    "PostgresMemberRepository",
    "PostgresObjectiveRepository",
    "PostgresCommentRepository",
    "PostgresActivityRepository",
]

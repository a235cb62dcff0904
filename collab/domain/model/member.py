"""Collaborator roster entry.

Members are named collaborators on an objective. Unlike link and invite
holders they are listed to the owner by email. The owner is never a member
row: ownership lives on the objective.
"""

from datetime import datetime

from pydantic import Field

from collab.domain.model.common import DomainModel
from collab.domain.value import Email, MemberId, ResourceId, ShareRole
from collab.util.clock import utc_now


class CollabMember(DomainModel):
    """Collaborator on an objective.

    Business rules:
    - An email appears at most once per objective
    - Re-adding an existing email changes its role and keeps ``joined_at``
    """

    id: MemberId
    resource_id: ResourceId
    email: Email
    role: ShareRole
    joined_at: datetime = Field(default_factory=utc_now)

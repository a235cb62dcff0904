"""Domain model entities for objective sharing."""

from collab.domain.model.access_record import AccessRecord
from collab.domain.model.activity import Activity
from collab.domain.model.comment import Comment
from collab.domain.model.invite import Invite
from collab.domain.model.local_share import AcceptedShare, LocalShareData
from collab.domain.model.member import CollabMember
from collab.domain.model.objective import Objective
from collab.domain.model.share_link import ShareLink

__all__ = [
    "AcceptedShare",
    "AccessRecord",
    "Activity",
    "CollabMember",
    "Comment",
    "Invite",
    "LocalShareData",
    "Objective",
    "ShareLink",
]

"""Domain services."""

from .activity_service import ActivityService
from .base import Service
from .comment_service import CommentService
from .invite_service import InviteService
from .jwt_service import JWTService
from .link_service import LinkService
from .local_share_service import LocalShareService
from .member_service import MemberService
from .objective_service import ObjectiveService
from .redemption_service import RedemptionService

__all__ = [
    "ActivityService",
    "CommentService",
    "InviteService",
    "JWTService",
    "LinkService",
    "LocalShareService",
    "MemberService",
    "ObjectiveService",
    "RedemptionService",
    "Service",
]

"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Tables name the shared
resource ``objective_id``; the domain calls it ``resource_id``.
"""

from typing import Any, Dict
from uuid import UUID

from collab.domain.model import (
    AccessRecord,
    Activity,
    CollabMember,
    Comment,
    Invite,
    Objective,
    ShareLink,
)
from collab.domain.value import (
    AccessRecordId,
    ActivityId,
    ActivityKind,
    CommentId,
    Email,
    InviteId,
    MemberId,
    ObjectivePriority,
    ObjectiveStatus,
    ResourceId,
    ShareLinkId,
    ShareRole,
    ShareToken,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_share_link(row: Dict[str, Any]) -> ShareLink:
    """Convert database row to ShareLink domain model.

    Args:
        row: Database row as dict

    Returns:
        ShareLink domain model
    """
    return ShareLink(
        id=ShareLinkId(_uuid(row["id"])),
        resource_id=ResourceId(row["objective_id"]),
        role=ShareRole(row["role"]),
        token=ShareToken(row["token"]),
        revoked=row["revoked"],
        expires_at=row.get("expires_at"),
        created_at=row["created_at"],
        created_by=UserId(row["created_by"]) if row.get("created_by") else None,
    )


def share_link_to_dict(link: ShareLink) -> Dict[str, Any]:
    """Convert ShareLink domain model to database dict.

    Args:
        link: ShareLink domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": link.id,
        "objective_id": link.resource_id.root,
        "role": link.role.value,
        "token": link.token.root,
        "revoked": link.revoked,
        "expires_at": link.expires_at,
        "created_at": link.created_at,
        "created_by": link.created_by,
    }


def row_to_access_record(row: Dict[str, Any]) -> AccessRecord:
    """Convert database row to AccessRecord domain model."""
    return AccessRecord(
        id=AccessRecordId(_uuid(row["id"])),
        link_id=ShareLinkId(_uuid(row["link_id"])),
        email=row.get("email"),
        accessed_at=row["accessed_at"],
    )


def access_record_to_dict(record: AccessRecord) -> Dict[str, Any]:
    """Convert AccessRecord domain model to database dict."""
    return record.model_dump()


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    return Invite(
        id=InviteId(_uuid(row["id"])),
        resource_id=ResourceId(row["objective_id"]),
        email=Email(row["email"]),
        role=ShareRole(row["role"]),
        token=ShareToken(row["token"]),
        expires_at=row["expires_at"],
        used_at=row.get("used_at"),
        single_use=row["single_use"],
        created_at=row["created_at"],
        invited_by=UserId(row["invited_by"]) if row.get("invited_by") else None,
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    Args:
        invite: Invite domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": invite.id,
        "objective_id": invite.resource_id.root,
        "email": invite.email.root,
        "role": invite.role.value,
        "token": invite.token.root,
        "expires_at": invite.expires_at,
        "used_at": invite.used_at,
        "single_use": invite.single_use,
        "created_at": invite.created_at,
        "invited_by": invite.invited_by,
    }


def row_to_objective(row: Dict[str, Any]) -> Objective:
    """Convert database row to Objective domain model."""
    return Objective(
        id=ResourceId(row["id"]),
        owner_id=UserId(row["owner_id"]),
        title=row["title"],
        description=row.get("description"),
        status=ObjectiveStatus(row["status"]),
        priority=ObjectivePriority(row["priority"]),
        completion_percentage=row["completion_percentage"],
        target_date=row.get("target_date"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def objective_to_dict(objective: Objective) -> Dict[str, Any]:
    """Convert Objective domain model to database dict."""
    data = objective.model_dump()
    data["status"] = objective.status.value
    data["priority"] = objective.priority.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        resource_id=ResourceId(row["objective_id"]),
        author_id=UserId(row["author_id"]) if row.get("author_id") else None,
        author_email=row["author_email"],
        body=row["body"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return {
        "id": comment.id,
        "objective_id": comment.resource_id.root,
        "author_id": comment.author_id,
        "author_email": comment.author_email,
        "body": comment.body,
        "created_at": comment.created_at,
    }


def row_to_activity(row: Dict[str, Any]) -> Activity:
    """Convert database row to Activity domain model."""
    return Activity(
        id=ActivityId(_uuid(row["id"])),
        resource_id=ResourceId(row["objective_id"]),
        kind=ActivityKind(row["kind"]),
        data=row.get("data") or {},
        created_at=row["created_at"],
    )


def activity_to_dict(activity: Activity) -> Dict[str, Any]:
    """Convert Activity domain model to database dict."""
    return {
        "id": activity.id,
        "objective_id": activity.resource_id.root,
        "kind": activity.kind.value,
        "data": activity.data,
        "created_at": activity.created_at,
    }


def row_to_member(row: Dict[str, Any]) -> CollabMember:
    """Convert database row to CollabMember domain model."""
    return CollabMember(
        id=MemberId(_uuid(row["id"])),
        resource_id=ResourceId(row["objective_id"]),
        email=Email(row["email"]),
        role=ShareRole(row["role"]),
        joined_at=row["joined_at"],
    )


def member_to_dict(member: CollabMember) -> Dict[str, Any]:
    """Convert CollabMember domain model to database dict."""
    return {
        "id": member.id,
        "objective_id": member.resource_id.root,
        "email": member.email.root,
        "role": member.role.value,
        "joined_at": member.joined_at,
    }

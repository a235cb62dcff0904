"""Collaborator roster use cases."""

from collab.application.usecase.member.add_member import (
    AddMemberRequest,
    AddMemberResponse,
    AddMemberUseCase,
)
from collab.application.usecase.member.list_members import (
    ListMembersRequest,
    ListMembersResponse,
    ListMembersUseCase,
    MemberItem,
)
from collab.application.usecase.member.remove_member import (
    RemoveMemberRequest,
    RemoveMemberResponse,
    RemoveMemberUseCase,
)

__all__ = [
    "AddMemberRequest",
    "AddMemberResponse",
    "AddMemberUseCase",
    "ListMembersRequest",
    "ListMembersResponse",
    "ListMembersUseCase",
    "MemberItem",
    "RemoveMemberRequest",
    "RemoveMemberResponse",
    "RemoveMemberUseCase",
]

"""Share link use cases."""

from collab.application.usecase.link.create_share_link import (
    CreateShareLinkRequest,
    CreateShareLinkResponse,
    CreateShareLinkUseCase,
    LinkItem,
)
from collab.application.usecase.link.list_link_access import (
    ListLinkAccessRequest,
    ListLinkAccessResponse,
    ListLinkAccessUseCase,
)
from collab.application.usecase.link.list_share_links import (
    ListShareLinksRequest,
    ListShareLinksResponse,
    ListShareLinksUseCase,
)
from collab.application.usecase.link.revoke_share_link import (
    RevokeShareLinkRequest,
    RevokeShareLinkResponse,
    RevokeShareLinkUseCase,
)

__all__ = [
    "CreateShareLinkRequest",
    "CreateShareLinkResponse",
    "CreateShareLinkUseCase",
    "LinkItem",
    "ListLinkAccessRequest",
    "ListLinkAccessResponse",
    "ListLinkAccessUseCase",
    "ListShareLinksRequest",
    "ListShareLinksResponse",
    "ListShareLinksUseCase",
    "RevokeShareLinkRequest",
    "RevokeShareLinkResponse",
    "RevokeShareLinkUseCase",
]

"""Local capability domain service.

Mirrors link issuance, acceptance and revocation against a client-local
store. Nothing here is checked by a server: any holder of a resource id can
write an acceptance. Use it for demos and offline work only.
"""

import logfire

from collab.config import SharingSettings
from collab.domain.model.local_share import AcceptedShare, LocalShareData
from collab.domain.repository import LocalShareStore
from collab.domain.value import ShareRole
from collab.util.token import generate_token

from .base import Service


class LocalShareService(Service):
    """Read-modify-write operations over a ``LocalShareStore``.

    Each read-modify-write holds the store via ``writing()``.
    """

    def __init__(
        self, store: LocalShareStore, sharing_settings: SharingSettings
    ) -> None:
        """Initialize local share service.

        Args:
            store: Local capability store
            sharing_settings: Token length configuration
        """
        self.store = store
        self.sharing_settings = sharing_settings

    def get_or_create_token(self, resource_id: str, role: ShareRole) -> str:
        """Return the token in the role's slot, minting one if empty."""
        with logfire.span(
            "local_share_service.get_or_create_token",
            resource_id=resource_id,
            role=role.value,
        ), self.store.writing():
            shares = self.store.load()
            data = shares.get(resource_id, LocalShareData())

            existing = data.slot(role)
            if existing:
                return existing

            token = generate_token(self.sharing_settings.token_length)
            if role == ShareRole.VIEWER:
                data.viewer = token
            else:
                data.editor = token

            shares[resource_id] = data
            self.store.save(shares)
            logfire.info(
                "Local share token created", resource_id=resource_id, role=role.value
            )
            return token

    def accept_share(self, token: str, role: ShareRole, resource_id: str) -> bool:
        """Record a share as accepted on this device.

        Accepting a token that is not the one in the role's slot is a no-op.

        Returns:
            True if the token is now accepted, False otherwise
        """
        with logfire.span(
            "local_share_service.accept_share",
            resource_id=resource_id,
            role=role.value,
        ), self.store.writing():
            shares = self.store.load()
            data = shares.get(resource_id)

            if data is None or data.slot(role) != token:
                logfire.warn(
                    "Local share acceptance ignored",
                    resource_id=resource_id,
                    role=role.value,
                )
                return False

            if token not in data.accepted:
                data.accepted.append(token)
                self.store.save(shares)
                logfire.info(
                    "Local share accepted", resource_id=resource_id, role=role.value
                )
            return True

    def revoke_share(self, resource_id: str, token: str) -> bool:
        """Clear the slot holding ``token`` and drop it from ``accepted``.

        Returns:
            True if a slot was cleared
        """
        with (
            logfire.span("local_share_service.revoke_share", resource_id=resource_id),
            self.store.writing(),
        ):
            shares = self.store.load()
            data = shares.get(resource_id)
            if data is None:
                return False

            role = data.role_of(token)
            if role == ShareRole.VIEWER:
                data.viewer = None
            elif role == ShareRole.EDITOR:
                data.editor = None

            data.accepted = [t for t in data.accepted if t != token]
            self.store.save(shares)

            if role:
                logfire.info(
                    "Local share revoked", resource_id=resource_id, role=role.value
                )
            return role is not None

    def list_accepted(self) -> list[AcceptedShare]:
        """List accepted shares whose slot still holds the token."""
        accepted = []
        for resource_id, data in sorted(self.store.load().items()):
            for token in data.accepted:
                role = data.role_of(token)
                if role:
                    accepted.append(
                        AcceptedShare(resource_id=resource_id, role=role, token=token)
                    )
        return accepted

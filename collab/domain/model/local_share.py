"""Local capability records.

These live in a client-side JSON file and are never validated by a server.
Anyone who can write the file can forge an acceptance, so they are a
convenience for demos and offline use, not an access control boundary.
"""

from typing import Optional

from pydantic import BaseModel, Field

from collab.domain.value import ShareRole


class LocalShareData(BaseModel):
    """Role slots and accepted tokens for one resource.

    ``accepted`` only ever holds tokens equal to ``viewer`` or ``editor``.
    """

    viewer: Optional[str] = None
    editor: Optional[str] = None
    accepted: list[str] = Field(default_factory=list)

    def slot(self, role: ShareRole) -> Optional[str]:
        """Token currently stored for ``role``."""
        return self.viewer if role == ShareRole.VIEWER else self.editor

    def role_of(self, token: str) -> Optional[ShareRole]:
        """Role whose slot holds ``token``, if any."""
        if self.viewer == token:
            return ShareRole.VIEWER
        if self.editor == token:
            return ShareRole.EDITOR
        return None


class AcceptedShare(BaseModel):
    """A share that was accepted on this device."""

    resource_id: str
    role: ShareRole
    token: str

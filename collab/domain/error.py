"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised for malformed owner-facing input. The message names the field.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on a resource they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to share {resource} {resource_id}"
        )


class AccessDeniedError(DomainError):
    """Base for capability token rejections.

    ``reason`` is the precise cause for internal logs. Guest-facing callers
    must not expose it, so that probing tokens reveals nothing.
    """

    reason: str = "denied"

    def __init__(self, message: str | None = None):
        super().__init__(message or f"Access denied: {self.reason}")


class InvalidTokenError(AccessDeniedError):
    """No link or invite matches the presented token."""

    reason = "not_found"


class LinkRevokedError(AccessDeniedError):
    """The share link has been revoked."""

    reason = "revoked"


class TokenExpiredError(AccessDeniedError):
    """The link or invite is past its expiry."""

    reason = "expired"


class InviteAlreadyUsedError(AccessDeniedError):
    """A single-use invite has already been redeemed."""

    reason = "used"


class RoleMismatchError(AccessDeniedError):
    """The token's role does not grant the requested action."""

    reason = "role_mismatch"

    def __init__(self, role: str, action: str):
        self.role = role
        self.action = action
        super().__init__(f"Role '{role}' does not allow '{action}'")


class ActiveLinkConflictError(DomainError):
    """A non-revoked link already exists for this resource and role.

    Raised by repositories when a concurrent writer won the race.
    """

    def __init__(self, resource_id: str, role: str):
        self.resource_id = resource_id
        self.role = role
        super().__init__(f"Active {role} link already exists for {resource_id}")


class StorageError(DomainError):
    """The backing store is unavailable or timed out.

    Never an authorization outcome; surfaced as a 5xx.
    """

    pass

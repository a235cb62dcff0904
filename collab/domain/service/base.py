"""Base service class and shared parsing helpers for domain services."""

from pydantic import ValidationError as PydanticValidationError

from collab.domain.error import InvalidTokenError, ValidationError
from collab.domain.value import Email, ResourceId, ShareRole, ShareToken


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def parse_resource_id(raw: str) -> ResourceId:
    """Parse an owner-supplied resource id.

    Raises:
        ValidationError: If the id is malformed
    """
    try:
        return ResourceId(raw)
    except ValueError:
        raise ValidationError(
            "resource_id",
            "Resource id must be 1-128 characters: letters, digits, '-' or '_'",
        )


def parse_role(raw: str | ShareRole) -> ShareRole:
    """Parse an owner-supplied role.

    Raises:
        ValidationError: If the role is not viewer or editor
    """
    try:
        return ShareRole(raw)
    except ValueError:
        raise ValidationError("role", 'Role must be either "editor" or "viewer"')


def parse_email(raw: str) -> Email:
    """Parse an owner-supplied email address.

    Raises:
        ValidationError: If the address is malformed or too long
    """
    try:
        return Email(raw)
    except PydanticValidationError as e:
        message = e.errors()[0]["msg"]
        raise ValidationError("email", message.removeprefix("Value error, "))


def parse_token(raw: str) -> ShareToken:
    """Parse a guest-supplied token.

    A token that can not exist is indistinguishable from an unknown one.

    Raises:
        InvalidTokenError: If the token is empty or oversized
    """
    try:
        return ShareToken(raw)
    except ValueError:
        raise InvalidTokenError()

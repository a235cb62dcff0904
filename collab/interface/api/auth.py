"""Owner authentication for API routes."""

from fastapi import HTTPException, status

from collab.domain.service import JWTService
from collab.util.jwt import JWTError, TokenPayload


def require_owner(jwt_service: JWTService, auth_token: str | None) -> TokenPayload:
    """Verify the ``auth_token`` cookie of an owner-facing request.

    Raises:
        HTTPException: 401 if the cookie is missing, invalid or expired
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return jwt_service.verify_token(auth_token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )

"""JWT login and auth dependencies (get_current_user, require_admin)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from wastetrack.core.config import get_settings
from wastetrack.core.database import get_db
from wastetrack.core.errors import InvalidCredentials, TokenExpired, TokenInvalid
from wastetrack.core.security import create_access_token, verify_access_token
from wastetrack.schemas.auth import CurrentUser, LoginRequest, LoginResponse, LoginUser
from wastetrack.services.credentials import (
    FallbackCredentials,
    get_fallback_credentials,
    resolve_user,
)

router = APIRouter()
security = HTTPBearer(auto_error=False)


def fallback_credentials() -> FallbackCredentials | None:
    """Dependency: the built-in fallback accounts, or None when disabled."""
    if not get_settings().fallback_users_enabled:
        return None
    return get_fallback_credentials()


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    fallback: Annotated[FallbackCredentials | None, Depends(fallback_credentials)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns a JWT and the user profile.
    Include the token in the Authorization header as: Bearer <token>
    """
    try:
        user = resolve_user(db, body.username, body.password, fallback)
    except InvalidCredentials as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        ) from e
    token = create_access_token(sub=user.id, role=user.role, username=user.username)
    return LoginResponse(
        token=token,
        user=LoginUser(id=user.id, username=user.username, name=user.name, role=user.role),
    )


def _has_scheme_and_value(authorization: str | None) -> bool:
    """True for '<scheme> <value>' headers, whatever the scheme."""
    parts = (authorization or "").split(maxsplit=1)
    return len(parts) == 2


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the identity it carries.

    401 when the header is missing, empty or a bare value; 403 when a token is
    presented but is invalid, expired or uses a scheme other than Bearer.
    The user store is not queried.
    """
    forbidden = HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Invalid or expired token",
    )
    if credentials is None:
        if _has_scheme_and_value(request.headers.get("Authorization")):
            raise forbidden
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied: token required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        claims = verify_access_token(credentials.credentials)
    except (TokenInvalid, TokenExpired) as e:
        raise forbidden from e
    return CurrentUser(id=claims.user_id, username=claims.username, role=claims.role)


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for operators."""
    if current_user.role != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user

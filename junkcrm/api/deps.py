"""
API Dependencies Module

This module provides FastAPI dependency functions for authentication and authorization.
A request's role comes from a signed bearer token when one is sent, otherwise
(when ALLOW_ROLE_HEADER is enabled) from the X-User-Role header. Each protected
route declares an allow-list of roles through RoleChecker.
"""
from typing import List, Optional
from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlmodel import Session

from junkcrm.core.config import settings
from junkcrm.core.security import decode_access_token
from junkcrm.db.session import get_db
from junkcrm.models.user import User, UserRole

# auto_error=False lets requests without a token fall through to the role header
reusable_bearer = HTTPBearer(auto_error=False)


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_request_role(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(reusable_bearer),
    x_user_role: Optional[str] = Header(default=None),
) -> Optional[UserRole]:
    """
    Resolve the role the current request acts under.

    Returns:
        UserRole, or None when the request declares no recognizable role

    Raises:
        HTTPException 401: If a bearer token is sent but fails verification
    """
    if credentials is not None:
        try:
            payload = decode_access_token(credentials.credentials)
            return UserRole(payload["role"])
        except (JWTError, ValueError):
            raise _credentials_exception()

    if settings.ALLOW_ROLE_HEADER and x_user_role:
        try:
            return UserRole(x_user_role.strip().lower())
        except ValueError:
            return None
    return None


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(reusable_bearer),
    db: Session = Depends(get_db),
) -> User:
    """
    Dependency that loads the user named by the bearer token.

    Raises:
        HTTPException 401: If no token is sent or it fails verification
        HTTPException 404: If the user referenced in the token no longer exists
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError:
        raise _credentials_exception()

    user = db.get(User, payload.get("sub"))
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


class RoleChecker:
    """
    Dependency factory for checking request roles.

    Usage: Depends(RoleChecker([UserRole.ADMIN, UserRole.DISPATCHER]))
    """
    def __init__(self, allowed_roles: List[UserRole]):
        self.allowed_roles = allowed_roles

    def __call__(self, role: Optional[UserRole] = Depends(get_request_role)) -> Optional[UserRole]:
        if role is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Missing or invalid role",
            )
        if role not in self.allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Requires role: {', '.join(r.value for r in self.allowed_roles)}",
            )
        return role


class CoreRoleChecker(RoleChecker):
    """
    Role check for customers, jobs, quotes and transactions.

    These routes stay open unless PROTECT_CORE_ROUTES is enabled.
    """
    def __call__(self, role: Optional[UserRole] = Depends(get_request_role)) -> Optional[UserRole]:
        if not settings.PROTECT_CORE_ROUTES:
            return role
        return super().__call__(role)


READ_ROLES = [UserRole.ADMIN, UserRole.DISPATCHER, UserRole.FIELD]
WRITE_ROLES = [UserRole.ADMIN, UserRole.DISPATCHER]
ADMIN_ONLY = [UserRole.ADMIN]

allow_read = RoleChecker(READ_ROLES)
allow_write = RoleChecker(WRITE_ROLES)
allow_admin = RoleChecker(ADMIN_ONLY)

core_read = CoreRoleChecker(READ_ROLES)
core_write = CoreRoleChecker(WRITE_ROLES)

"""
User Management Endpoints Module

Admin-only listing of accounts and role changes.
"""
import logging
from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
from junkcrm.api import deps
from junkcrm.db import storage
from junkcrm.db.session import get_db
from junkcrm.schemas.user import UserRead, UserRoleUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[UserRead])
def read_users(
    db: Session = Depends(get_db),
    role=Depends(deps.allow_admin),
) -> Any:
    """
    Retrieve all users ordered by username.

    Only administrators can access this endpoint.
    """
    return storage.users.list(db)


@router.patch("/{user_id}/role", response_model=UserRead)
def update_user_role(
    user_id: str,
    role_in: UserRoleUpdate,
    db: Session = Depends(get_db),
    role=Depends(deps.allow_admin),
) -> Any:
    """
    Change a user's role.

    Only administrators can change roles. Tokens issued before the change keep
    the old role until they expire.

    Raises:
        HTTPException 404: If the user doesn't exist
    """
    user = storage.users.update_role(db, user_id, role_in.role)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    logger.info("Changed role of %s to %s", user.username, user.role)
    return user

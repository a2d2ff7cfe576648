"""
Authentication Endpoints Module

This module provides user registration and login. The first account created
in an empty system becomes the admin; after that only an admin may add users.
Login returns a signed bearer token whose role claim the role gate trusts.
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session
from junkcrm.api import deps
from junkcrm.core.security import create_access_token, get_password_hash, verify_password
from junkcrm.db import storage
from junkcrm.db.session import get_db
from junkcrm.models.user import User, UserRole
from junkcrm.schemas.auth import LoginResponse, UserLogin, UserRegister
from junkcrm.schemas.user import UserRead

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(
    user_in: UserRegister,
    db: Session = Depends(get_db),
    caller_role: Optional[UserRole] = Depends(deps.get_request_role),
):
    """
    Register a new user account.

    The password is hashed before storage. The very first user is always made
    an admin. Once any user exists, only an admin caller may register more,
    and may pick their role (default: dispatcher).

    Returns:
        UserRead: id, username and role of the new user

    Raises:
        HTTPException 409: If the username is already taken
        HTTPException 403: If users exist and the caller is not an admin
    """
    # Check if username is already registered
    if storage.users.get_by_username(db, user_in.username):
        raise HTTPException(status_code=409, detail="Username already exists")

    user_count = storage.users.count(db)
    if user_count > 0 and caller_role != UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only admins can create additional users",
        )

    role = UserRole.ADMIN if user_count == 0 else (user_in.role or UserRole.DISPATCHER)
    try:
        user = storage.users.create(db, {
            "username": user_in.username,
            "password": get_password_hash(user_in.password),
            "role": role,
        })
    except IntegrityError:
        # Lost a race with another registration of the same username
        db.rollback()
        raise HTTPException(status_code=409, detail="Username already exists")

    logger.info("Registered user %s with role %s", user.username, user.role)
    return user


@router.post("/login", response_model=LoginResponse)
def login(user_in: UserLogin, db: Session = Depends(get_db)):
    """
    Authenticate a user and issue an access token.

    Returns:
        LoginResponse: The user's id, username and role plus a bearer token

    Raises:
        HTTPException 401: If credentials are invalid
    """
    user = storage.users.get_by_username(db, user_in.username)

    # Verify user exists and password is correct
    if not user or not verify_password(user_in.password, user.password):
        logger.warning("Failed login for %s", user_in.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(subject=user.id, role=UserRole(user.role).value, username=user.username)
    return {
        "id": user.id,
        "username": user.username,
        "role": user.role,
        "access_token": access_token,
        "token_type": "bearer",
    }


@router.get("/me", response_model=UserRead)
def read_user_me(current_user: User = Depends(deps.get_current_user)):
    """
    Get the account behind the bearer token.
    """
    return current_user

"""
User Model Module

This module defines the User model and UserRole enumeration for authentication
and authorization throughout the application.
"""
from enum import Enum
from sqlmodel import SQLModel, Field, AutoString
import uuid


class UserRole(str, Enum):
    """
    Roles a request can act under.

    The set is flat rather than a hierarchy, but every route that admits
    dispatchers or field crew also admits admins:
    - ADMIN: Owner/office manager, full access including user management
    - DISPATCHER: Office staff scheduling jobs, leads and invoices
    - FIELD: Crew members with read access to the board
    """
    ADMIN = "admin"
    DISPATCHER = "dispatcher"
    FIELD = "field"


class User(SQLModel, table=True):
    """
    User model representing an account that can log in to the dashboard.

    Attributes:
        id: Unique identifier (UUID) automatically generated for each user
        username: Login name (required, unique, indexed)
        password: bcrypt hash of the user's password
        role: The single UserRole assigned to this user
    """
    __tablename__ = "users"

    # Primary key - auto-generated UUID for global uniqueness
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)

    # Authentication fields
    username: str = Field(unique=True, index=True, nullable=False)
    password: str = Field(nullable=False)  # Hashed password (bcrypt)

    # Authorization
    role: UserRole = Field(default=UserRole.DISPATCHER, sa_type=AutoString, nullable=False)

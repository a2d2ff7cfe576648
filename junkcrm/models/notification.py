"""
Notification Model Module

Notifications feed the dashboard's bell menu. They are append-only apart from
the read flag and the admin's bulk clear.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from sqlmodel import SQLModel, Field, AutoString

from junkcrm.models.base import UTCTimestamp, utcnow


class NotificationType(str, Enum):
    info = "info"
    success = "success"
    warning = "warning"
    error = "error"
    lead = "lead"


class NotificationBase(SQLModel):
    type: NotificationType = Field(sa_type=AutoString, nullable=False)
    title: str = Field(nullable=False)
    message: str = Field(nullable=False)


class Notification(NotificationBase, table=True):
    """
    Notification table model.

    Attributes:
        id: Auto-incrementing primary key
        read: Whether the notification has been seen (server-managed)
        createdAt: When the notification was raised
        updatedAt: Refreshed when the read flag changes
    """
    __tablename__ = "notifications"

    id: Optional[int] = Field(default=None, primary_key=True)
    read: bool = Field(default=False, nullable=False)

    createdAt: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp, nullable=False, index=True)
    updatedAt: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp, nullable=False)


class NotificationCreate(NotificationBase):
    """Schema for creating a notification. `read` always starts false."""
    pass


class NotificationRead(NotificationBase):
    id: int
    read: bool
    createdAt: datetime
    updatedAt: datetime

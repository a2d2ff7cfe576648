"""
Notification Endpoints Module

Feeds the dashboard's notification bell. Every role may read and acknowledge
notifications, admins and dispatchers may post them, and only admins may
clear the whole list.
"""
from typing import Any, Dict, List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from junkcrm.api import deps
from junkcrm.db import storage
from junkcrm.db.session import get_db
from junkcrm.models.notification import NotificationCreate, NotificationRead

router = APIRouter()


@router.get("", response_model=List[NotificationRead])
def list_notifications(
    db: Session = Depends(get_db),
    role=Depends(deps.allow_read),
):
    """
    Retrieve all notifications, newest first.
    """
    return storage.notifications.list(db)


@router.post("", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def create_notification(
    notification_in: NotificationCreate,
    db: Session = Depends(get_db),
    role=Depends(deps.allow_write),
):
    return storage.notifications.create(db, notification_in)


@router.post("/read-all", response_model=Dict[str, Any])
def mark_all_notifications_read(
    db: Session = Depends(get_db),
    role=Depends(deps.allow_read),
):
    """
    Mark every unread notification as read.

    Returns:
        dict: {"updated": <number of notifications changed>}
    """
    return {"updated": storage.notifications.mark_all_read(db)}


@router.post("/{notification_id}/read", response_model=NotificationRead)
def mark_notification_read(
    notification_id: int,
    db: Session = Depends(get_db),
    role=Depends(deps.allow_read),
):
    notification = storage.notifications.mark_read(db, notification_id)
    if not notification:
        raise HTTPException(status_code=404, detail="Notification not found")
    return notification


@router.delete("", response_model=Dict[str, Any])
def clear_notifications(
    db: Session = Depends(get_db),
    role=Depends(deps.allow_admin),
):
    """
    Delete all notifications. Admins only.

    Returns:
        dict: {"deleted": <number of notifications removed>}
    """
    return {"deleted": storage.notifications.clear(db)}

"""
Milestone notifications raised by the API itself.

Each one is a separate insert made after the triggering write has committed.
"""
import logging
from decimal import Decimal
from typing import Optional

from sqlmodel import Session

from junkcrm.core.config import settings
from junkcrm.db import storage
from junkcrm.models.invoice import Invoice, InvoiceStatus
from junkcrm.models.lead import Lead, LeadStage
from junkcrm.models.notification import Notification, NotificationCreate, NotificationType

logger = logging.getLogger(__name__)


def format_currency(amount: Optional[Decimal]) -> str:
    return f"${Decimal(amount or 0):,.2f}"


def notify(db: Session, type: NotificationType, title: str, message: str) -> Optional[Notification]:
    if not settings.AUTO_NOTIFICATIONS:
        return None
    notification = storage.notifications.create(
        db, NotificationCreate(type=type, title=title, message=message)
    )
    logger.info("Notification raised: %s", title, extra={"notification_id": notification.id})
    return notification


def lead_created(db: Session, lead: Lead) -> None:
    notify(db, NotificationType.lead, "New lead logged", f"{lead.name} added to the pipeline")


def lead_updated(db: Session, lead: Lead, previous_stage: str) -> None:
    if lead.stage == LeadStage.won and previous_stage != LeadStage.won:
        notify(
            db,
            NotificationType.lead,
            "Lead won",
            f"{lead.name} marked as won. Convert to job + invoice?",
        )


def invoice_updated(db: Session, invoice: Invoice, previous_status: str) -> None:
    if invoice.status == InvoiceStatus.paid and previous_status != InvoiceStatus.paid:
        notify(
            db,
            NotificationType.success,
            "Invoice paid",
            f"{invoice.customerName} paid {format_currency(invoice.amount)}",
        )

"""
Invoice Model Module

Invoices bill a customer for a job. Status changes are made by the office;
nothing moves an invoice to Overdue automatically.
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Optional, Tuple

from pydantic import field_serializer
from sqlmodel import SQLModel, Field, AutoString

from junkcrm.models.base import PatchModel, UTCDatetime, UTCTimestamp, money, utcnow


class InvoiceStatus(str, Enum):
    draft = "Draft"
    sent = "Sent"
    paid = "Paid"
    overdue = "Overdue"


class InvoiceBase(SQLModel):
    """
    Base properties for an Invoice.

    Attributes:
        customerId: Optional soft reference to the billed customer
        jobId: Optional soft reference to the job being billed
        customerName: Name printed on the invoice (required)
        jobTitle: Short description of the work
        amount: Amount due (required)
        status: Draft, Sent, Paid or Overdue
        dueDate: When payment is due
    """
    customerId: Optional[int] = Field(default=None, index=True)
    jobId: Optional[int] = Field(default=None, index=True)
    customerName: str = Field(nullable=False)
    jobTitle: Optional[str] = None
    amount: Decimal = Field(max_digits=10, decimal_places=2, nullable=False)
    status: InvoiceStatus = Field(default=InvoiceStatus.draft, sa_type=AutoString, nullable=False)
    dueDate: Optional[UTCDatetime] = Field(default=None, sa_type=UTCTimestamp)


class Invoice(InvoiceBase, table=True):
    """
    Invoice table model.
    """
    __tablename__ = "invoices"

    id: Optional[int] = Field(default=None, primary_key=True)

    # Invoices are ordered by issue time rather than creation time
    issuedAt: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp, nullable=False, index=True)
    updatedAt: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp, nullable=False)


class InvoiceCreate(InvoiceBase):
    """Schema for creating an invoice."""
    pass


class InvoiceUpdate(PatchModel):
    """Schema for updating an invoice."""
    not_null_fields: ClassVar[Tuple[str, ...]] = ("customerName", "amount", "status")

    customerId: Optional[int] = None
    jobId: Optional[int] = None
    customerName: Optional[str] = None
    jobTitle: Optional[str] = None
    amount: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    status: Optional[InvoiceStatus] = None
    dueDate: Optional[UTCDatetime] = None


class InvoiceRead(InvoiceBase):
    """Schema for reading an invoice."""
    id: int
    issuedAt: datetime
    updatedAt: datetime

    @field_serializer("amount")
    def serialize_amount(self, value: Decimal) -> str:
        return money(value)

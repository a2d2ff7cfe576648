"""
Quote Model Module

Quotes carry the line-item labels picked in the estimate calculator and the
total the dashboard computed. See junkcrm.core.pricing for how calculator
quotes are re-priced on create.
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import ClassVar, List, Optional, Tuple

from pydantic import field_serializer
from sqlmodel import SQLModel, Field, AutoString, Column, JSON

from junkcrm.models.base import PatchModel, UTCDatetime, UTCTimestamp, money, utcnow


class QuoteStatus(str, Enum):
    draft = "Draft"
    sent = "Sent"
    accepted = "Accepted"
    expired = "Expired"


class QuoteBase(SQLModel):
    """
    Base properties for a Quote.
    """
    customerId: Optional[int] = Field(default=None, index=True)
    customerName: str = Field(nullable=False)
    customerEmail: Optional[str] = None
    customerPhone: Optional[str] = None

    # Ordered line-item labels, e.g. ["1/4 Truck Load", "Mattress Disposal"]
    items: List[str] = Field(sa_column=Column(JSON, nullable=False))

    total: Decimal = Field(max_digits=10, decimal_places=2, nullable=False)
    status: QuoteStatus = Field(default=QuoteStatus.draft, sa_type=AutoString, nullable=False)
    validUntil: Optional[UTCDatetime] = Field(default=None, sa_type=UTCTimestamp)


class Quote(QuoteBase, table=True):
    """
    Quote table model.
    """
    __tablename__ = "quotes"

    id: Optional[int] = Field(default=None, primary_key=True)

    createdAt: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp, nullable=False)
    updatedAt: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp, nullable=False)


class QuoteCreate(QuoteBase):
    """Schema for creating a quote."""
    pass


class QuoteUpdate(PatchModel):
    """Schema for updating a quote."""
    not_null_fields: ClassVar[Tuple[str, ...]] = ("customerName", "items", "total", "status")

    customerId: Optional[int] = None
    customerName: Optional[str] = None
    customerEmail: Optional[str] = None
    customerPhone: Optional[str] = None
    items: Optional[List[str]] = None
    total: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    status: Optional[QuoteStatus] = None
    validUntil: Optional[UTCDatetime] = None


class QuoteRead(QuoteBase):
    """Schema for reading a quote."""
    id: int
    createdAt: datetime
    updatedAt: datetime

    @field_serializer("total")
    def serialize_total(self, value: Decimal) -> str:
        return money(value)

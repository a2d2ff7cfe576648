"""
Customer Model Module

This module defines the Customer model and its create/update/read schemas.
Customers are shared records: every job, quote and invoice may point at one,
but those references are soft and survive the customer being deleted.
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import ClassVar, List, Optional, Tuple

from pydantic import field_serializer
from sqlmodel import SQLModel, Field, AutoString, Column, JSON

from junkcrm.models.base import PatchModel, UTCDatetime, UTCTimestamp, money, utcnow


class CustomerType(str, Enum):
    residential = "Residential"
    commercial = "Commercial"
    realtor = "Realtor/Broker"
    contractor = "Contractor"


class CustomerBase(SQLModel):
    """
    Client-supplied customer fields.
    """
    # Required display name
    name: str = Field(nullable=False)

    # Contact details - stored exactly as given ("" and null are different)
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    zipCode: Optional[str] = None

    type: CustomerType = Field(default=CustomerType.residential, sa_type=AutoString, nullable=False)

    # Ordered list of free-form labels, stored as a JSON array
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    notes: Optional[str] = None
    lastService: Optional[UTCDatetime] = Field(default=None, sa_type=UTCTimestamp)


class Customer(CustomerBase, table=True):
    """
    Customer table model.

    Attributes:
        id: Auto-incrementing primary key
        totalSpent: Lifetime spend, managed by the server (never set on create)
        createdAt: When the customer was created
        updatedAt: Refreshed by storage on every write
    """
    __tablename__ = "customers"

    id: Optional[int] = Field(default=None, primary_key=True)

    totalSpent: Decimal = Field(default=Decimal("0.00"), max_digits=10, decimal_places=2)

    # Audit timestamps
    createdAt: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp, nullable=False)
    updatedAt: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp, nullable=False)


class CustomerCreate(CustomerBase):
    """Schema for creating a customer. Server-managed fields are not accepted."""
    pass


class CustomerUpdate(PatchModel):
    """Schema for partially updating a customer."""
    not_null_fields: ClassVar[Tuple[str, ...]] = ("name", "type", "tags", "totalSpent")

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    zipCode: Optional[str] = None
    type: Optional[CustomerType] = None
    tags: Optional[List[str]] = None
    notes: Optional[str] = None
    totalSpent: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    lastService: Optional[UTCDatetime] = None


class CustomerRead(CustomerBase):
    """Schema for reading a customer."""
    id: int
    totalSpent: Decimal
    createdAt: datetime
    updatedAt: datetime

    @field_serializer("totalSpent")
    def serialize_total_spent(self, value: Decimal) -> str:
        return money(value)

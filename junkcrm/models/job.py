"""
Job Model Module

A job is one scheduled pickup. It keeps a snapshot of the customer's name and
address so it still reads correctly after the customer record is deleted.
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Optional, Tuple

from pydantic import field_serializer
from sqlmodel import SQLModel, Field, AutoString

from junkcrm.models.base import PatchModel, UTCDatetime, UTCTimestamp, money, utcnow


class JobStatus(str, Enum):
    pending = "Pending"
    scheduled = "Scheduled"
    in_progress = "In Progress"
    completed = "Completed"


class JobBase(SQLModel):
    """
    Base properties for a Job.
    """
    # Soft reference - no cascade when the customer goes away
    customerId: Optional[int] = Field(default=None, index=True)
    customerName: str = Field(nullable=False)
    address: str = Field(nullable=False)

    # Scheduled pickup time
    date: UTCDatetime = Field(sa_type=UTCTimestamp, nullable=False, index=True)

    status: JobStatus = Field(default=JobStatus.pending, sa_type=AutoString, nullable=False)

    # Service type, e.g. "Full Truck Load", "Garage Cleanout"
    type: str = Field(nullable=False)

    price: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    notes: Optional[str] = None


class Job(JobBase, table=True):
    """
    Job table model.
    """
    __tablename__ = "jobs"

    id: Optional[int] = Field(default=None, primary_key=True)

    createdAt: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp, nullable=False)
    updatedAt: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp, nullable=False)


class JobCreate(JobBase):
    """Schema for creating a job."""
    pass


class JobUpdate(PatchModel):
    """Schema for updating a job."""
    not_null_fields: ClassVar[Tuple[str, ...]] = ("customerName", "address", "date", "status", "type")

    customerId: Optional[int] = None
    customerName: Optional[str] = None
    address: Optional[str] = None
    date: Optional[UTCDatetime] = None
    status: Optional[JobStatus] = None
    type: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    notes: Optional[str] = None


class JobRead(JobBase):
    """Schema for reading a job."""
    id: int
    createdAt: datetime
    updatedAt: datetime

    @field_serializer("price")
    def serialize_price(self, value: Optional[Decimal]) -> Optional[str]:
        return money(value)

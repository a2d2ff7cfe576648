"""
Lead Model Module

Leads are prospective customers moving through the sales pipeline.
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Optional, Tuple

from pydantic import field_serializer
from sqlmodel import SQLModel, Field, AutoString

from junkcrm.models.base import PatchModel, UTCTimestamp, money, utcnow


class LeadStage(str, Enum):
    new = "New"
    contacted = "Contacted"
    qualified = "Qualified"
    won = "Won"
    lost = "Lost"


class LeadBase(SQLModel):
    """
    Base properties for a Lead.
    """
    name: str = Field(nullable=False)
    stage: LeadStage = Field(default=LeadStage.new, sa_type=AutoString, nullable=False)

    # Estimated deal size
    value: Decimal = Field(default=Decimal("0.00"), max_digits=10, decimal_places=2, nullable=False)

    nextStep: Optional[str] = None
    source: Optional[str] = None  # e.g. "Google", "Referral", "Yard sign"


class Lead(LeadBase, table=True):
    """
    Lead table model.
    """
    __tablename__ = "leads"

    id: Optional[int] = Field(default=None, primary_key=True)

    createdAt: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp, nullable=False)
    updatedAt: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp, nullable=False, index=True)


class LeadCreate(LeadBase):
    pass


class LeadUpdate(PatchModel):
    not_null_fields: ClassVar[Tuple[str, ...]] = ("name", "stage", "value")

    name: Optional[str] = None
    stage: Optional[LeadStage] = None
    value: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    nextStep: Optional[str] = None
    source: Optional[str] = None


class LeadRead(LeadBase):
    id: int
    createdAt: datetime
    updatedAt: datetime

    @field_serializer("value")
    def serialize_value(self, value: Decimal) -> str:
        return money(value)

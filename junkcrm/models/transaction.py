"""
Transaction Model Module

Income and expense entries. Revenue, expense and profit figures are derived
from these rows; transactions are only ever added or deleted over the API.
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import field_serializer
from sqlmodel import SQLModel, Field, AutoString

from junkcrm.models.base import UTCDatetime, UTCTimestamp, money, utcnow


class TransactionType(str, Enum):
    income = "income"
    expense = "expense"


class TransactionBase(SQLModel):
    """
    Base properties for a Transaction.
    """
    jobId: Optional[int] = Field(default=None, index=True)
    description: str = Field(nullable=False)

    # Always positive; `type` says which way the money moved
    amount: Decimal = Field(max_digits=10, decimal_places=2, nullable=False)
    type: TransactionType = Field(sa_type=AutoString, nullable=False)

    category: Optional[str] = None  # e.g. "Dump Fee", "Fuel", "Job"
    date: UTCDatetime = Field(default_factory=utcnow, sa_type=UTCTimestamp, nullable=False, index=True)


class Transaction(TransactionBase, table=True):
    """
    Transaction table model.
    """
    __tablename__ = "transactions"

    id: Optional[int] = Field(default=None, primary_key=True)

    createdAt: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp, nullable=False)
    updatedAt: datetime = Field(default_factory=utcnow, sa_type=UTCTimestamp, nullable=False)


class TransactionCreate(TransactionBase):
    """Schema for creating a transaction. `date` defaults to now."""
    pass


class TransactionRead(TransactionBase):
    id: int
    createdAt: datetime
    updatedAt: datetime

    @field_serializer("amount")
    def serialize_amount(self, value: Decimal) -> str:
        return money(value)

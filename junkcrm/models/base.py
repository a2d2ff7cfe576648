"""
Shared model helpers: timestamps, money formatting and the PATCH schema base.

Every timestamp the API handles is an aware UTC datetime. Client input without
an offset is taken as UTC, input with one is converted; columns store naive
UTC and hand back aware values on load, whatever the database driver does.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, ClassVar, Optional, Tuple

from pydantic import AfterValidator, model_validator
from sqlalchemy import DateTime
from sqlalchemy.dialects import mysql
from sqlalchemy.types import TypeDecorator
from sqlmodel import SQLModel

CENTS = Decimal("0.01")


def as_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime, or convert an aware one to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Request-side datetime: always lands in the model as aware UTC
UTCDatetime = Annotated[datetime, AfterValidator(as_utc)]


class UTCTimestamp(TypeDecorator):
    """DateTime column holding naive UTC, returned as aware UTC."""
    impl = DateTime
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "mysql":
            # Keep microseconds so updatedAt can advance within one second
            return dialect.type_descriptor(mysql.DATETIME(fsp=6))
        return dialect.type_descriptor(DateTime())

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return as_utc(value).replace(tzinfo=None)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return as_utc(value)


def money(value: Optional[Decimal]) -> Optional[str]:
    """Render a decimal amount as a fixed-point string with two fraction digits."""
    if value is None:
        return None
    return str(Decimal(value).quantize(CENTS))


class PatchModel(SQLModel):
    """
    Base for partial-update schemas.

    Every field is optional so any subset may be sent. Columns listed in
    `not_null_fields` may be omitted but not explicitly set to null.
    """
    not_null_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_for_required(self):
        nulled = [
            name for name in self.not_null_fields
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self

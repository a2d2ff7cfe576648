"""
Storage Interface Module

One store per entity wrapping the SQLModel session calls the endpoints need.
Every operation is a single-row (or single-table) write with its own commit;
nothing here spans entities in one transaction, and concurrent updates of the
same row are last-write-wins.
"""
from datetime import datetime, timedelta
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from sqlalchemy import func
from sqlmodel import Session, SQLModel, select

from junkcrm.models.base import as_utc, utcnow
from junkcrm.models.customer import Customer
from junkcrm.models.invoice import Invoice
from junkcrm.models.job import Job
from junkcrm.models.lead import Lead
from junkcrm.models.notification import Notification
from junkcrm.models.quote import Quote
from junkcrm.models.transaction import Transaction
from junkcrm.models.user import User, UserRole

ModelT = TypeVar("ModelT", bound=SQLModel)


def touch(obj: SQLModel) -> None:
    """Refresh updatedAt, always moving it strictly forward."""
    now = utcnow()
    previous = getattr(obj, "updatedAt", None)
    if previous is not None:
        previous = as_utc(previous)
    if previous is not None and now <= previous:
        now = previous + timedelta(microseconds=1)
    obj.updatedAt = now


class EntityStore(Generic[ModelT]):
    """
    Generic CRUD operations for one table.

    Args:
        model: The SQLModel table class
        order_field: Column listed newest-first by `list`
    """

    def __init__(self, model: Type[ModelT], order_field: Any):
        self.model = model
        self.order_field = order_field

    def _ordered(self, statement):
        return statement.order_by(self.order_field.desc(), self.model.id.desc())

    def list(self, db: Session) -> List[ModelT]:
        return list(db.exec(self._ordered(select(self.model))).all())

    def get(self, db: Session, id: Any) -> Optional[ModelT]:
        return db.get(self.model, id)

    def create(self, db: Session, data: Union[SQLModel, Dict[str, Any]]) -> ModelT:
        """
        Persist a validated insert schema and return the stored row.

        The id, timestamps and any other server-managed columns take their
        table defaults; the refreshed row carries what the database stored.
        """
        obj = self.model.model_validate(data)
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def update(self, db: Session, id: Any, changes: Dict[str, Any]) -> Optional[ModelT]:
        """
        Merge `changes` into the row with this id.

        Keys absent from `changes` keep their stored value; an explicit None
        clears the column. Returns None if the id does not exist.
        """
        obj = db.get(self.model, id)
        if obj is None:
            return None
        for key, value in changes.items():
            setattr(obj, key, value)
        if hasattr(obj, "updatedAt"):
            touch(obj)
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def delete(self, db: Session, id: Any) -> bool:
        """Hard-delete a row. Returns False (never raises) when it is missing."""
        obj = db.get(self.model, id)
        if obj is None:
            return False
        db.delete(obj)
        db.commit()
        return True


class UserStore(EntityStore[User]):
    def __init__(self):
        super().__init__(User, User.username)

    def _ordered(self, statement):
        return statement.order_by(User.username)

    def get_by_username(self, db: Session, username: str) -> Optional[User]:
        return db.exec(select(User).where(User.username == username)).first()

    def count(self, db: Session) -> int:
        return db.exec(select(func.count()).select_from(User)).one()

    def update_role(self, db: Session, id: str, role: UserRole) -> Optional[User]:
        return self.update(db, id, {"role": role})


class JobStore(EntityStore[Job]):
    def __init__(self):
        super().__init__(Job, Job.date)

    def by_customer(self, db: Session, customer_id: int) -> List[Job]:
        statement = select(Job).where(Job.customerId == customer_id)
        return list(db.exec(self._ordered(statement)).all())


class TransactionStore(EntityStore[Transaction]):
    def __init__(self):
        super().__init__(Transaction, Transaction.date)

    def by_date_range(self, db: Session, start: datetime, end: datetime) -> List[Transaction]:
        """Transactions dated within [start, end], newest first. Naive bounds are UTC."""
        statement = select(Transaction).where(Transaction.date >= start, Transaction.date <= end)
        return list(db.exec(self._ordered(statement)).all())


class NotificationStore(EntityStore[Notification]):
    def __init__(self):
        super().__init__(Notification, Notification.createdAt)

    def mark_read(self, db: Session, id: int) -> Optional[Notification]:
        return self.update(db, id, {"read": True})

    def mark_all_read(self, db: Session) -> int:
        """Flag every unread notification as read. Returns how many changed."""
        unread = db.exec(select(Notification).where(Notification.read == False)).all()  # noqa: E712
        for notification in unread:
            notification.read = True
            touch(notification)
            db.add(notification)
        db.commit()
        return len(unread)

    def clear(self, db: Session) -> int:
        """Delete every notification. Returns how many were removed."""
        rows = db.exec(select(Notification)).all()
        for notification in rows:
            db.delete(notification)
        db.commit()
        return len(rows)


users = UserStore()
customers: EntityStore[Customer] = EntityStore(Customer, Customer.createdAt)
jobs = JobStore()
quotes: EntityStore[Quote] = EntityStore(Quote, Quote.createdAt)
leads: EntityStore[Lead] = EntityStore(Lead, Lead.updatedAt)
invoices: EntityStore[Invoice] = EntityStore(Invoice, Invoice.issuedAt)
notifications = NotificationStore()
transactions = TransactionStore()

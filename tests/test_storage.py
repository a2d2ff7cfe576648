from datetime import datetime, timedelta, timezone
from decimal import Decimal

from sqlmodel import Session

from junkcrm.db import storage
from junkcrm.db.session import engine
from junkcrm.models import Notification, NotificationType, Transaction
from junkcrm.models.customer import Customer, CustomerCreate
from junkcrm.models.transaction import TransactionCreate
from junkcrm.models.user import UserRole


class TestEntityStore:
    """Generic CRUD behaviour shared by every table"""

    def test_create_assigns_server_fields(self, session):
        customer = storage.customers.create(session, CustomerCreate(name="Jane Doe"))
        assert customer.id is not None
        assert customer.totalSpent == Decimal("0.00")
        assert customer.tags == []
        assert customer.createdAt is not None

    def test_list_newest_first(self, session):
        first = storage.customers.create(session, CustomerCreate(name="First"))
        second = storage.customers.create(session, CustomerCreate(name="Second"))
        ids = [c.id for c in storage.customers.list(session)]
        assert ids == [second.id, first.id]

    def test_update_merges_and_advances_updated_at(self, session):
        customer = storage.customers.create(session, CustomerCreate(name="Jane", phone="555-0100"))
        before = customer.updatedAt

        updated = storage.customers.update(session, customer.id, {"city": "Austin"})
        assert updated.city == "Austin"
        assert updated.phone == "555-0100"
        assert updated.updatedAt > before

        first_update = updated.updatedAt
        again = storage.customers.update(session, customer.id, {"phone": None})
        assert again.phone is None
        assert again.updatedAt > first_update

    def test_update_missing(self, session):
        assert storage.customers.update(session, 999, {"name": "Nobody"}) is None

    def test_delete(self, session):
        customer = storage.customers.create(session, CustomerCreate(name="Jane"))
        assert storage.customers.delete(session, customer.id) is True
        assert storage.customers.get(session, customer.id) is None
        assert storage.customers.delete(session, customer.id) is False


class TestUserStore:
    def test_count_and_lookup(self, session):
        assert storage.users.count(session) == 0
        storage.users.create(session, {"username": "owner", "password": "x", "role": UserRole.ADMIN})
        assert storage.users.count(session) == 1
        assert storage.users.get_by_username(session, "owner").role == UserRole.ADMIN
        assert storage.users.get_by_username(session, "nobody") is None


class TestTransactionStore:
    def test_date_range_is_inclusive(self, session):
        for day in (1, 15, 31):
            storage.transactions.create(session, TransactionCreate(
                description=f"Day {day}", amount=Decimal("10"), type="income",
                date=datetime(2024, 1, day),
            ))
        rows = storage.transactions.by_date_range(session, datetime(2024, 1, 1), datetime(2024, 1, 15))
        assert [r.description for r in rows] == ["Day 15", "Day 1"]


class TestNotificationStore:
    def _add(self, session, read=False):
        notification = Notification(type=NotificationType.info, title="t", message="m", read=read)
        session.add(notification)
        session.commit()
        session.refresh(notification)
        return notification

    def test_mark_all_read_counts_only_unread(self, session):
        self._add(session)
        self._add(session)
        self._add(session, read=True)
        assert storage.notifications.mark_all_read(session) == 2
        assert all(n.read for n in storage.notifications.list(session))
        assert storage.notifications.mark_all_read(session) == 0

    def test_clear(self, session):
        self._add(session)
        self._add(session)
        assert storage.notifications.clear(session) == 2
        assert storage.notifications.list(session) == []


class TestTimestamps:
    """Stored datetimes come back as aware UTC"""

    def test_server_timestamps_are_utc(self, session):
        customer = storage.customers.create(session, CustomerCreate(name="Jane"))
        assert customer.createdAt.tzinfo is not None
        assert customer.createdAt.utcoffset() == timedelta(0)

    def test_reloaded_row_can_be_updated(self, session):
        customer = storage.customers.create(session, CustomerCreate(name="Jane"))

        with Session(engine) as other:
            loaded = other.get(Customer, customer.id)
            assert loaded.updatedAt.utcoffset() == timedelta(0)
            previous = loaded.updatedAt
            updated = storage.customers.update(other, customer.id, {"city": "Austin"})
            assert updated.updatedAt > previous

    def test_offsets_are_converted_to_utc(self, session):
        local = timezone(timedelta(hours=5))
        transaction = storage.transactions.create(session, TransactionCreate(
            description="Offset", amount=Decimal("10"), type="income",
            date=datetime(2024, 1, 10, 5, 0, tzinfo=local),
        ))
        with Session(engine) as other:
            stored = other.get(Transaction, transaction.id)
            assert stored.date == datetime(2024, 1, 10, 0, 0, tzinfo=timezone.utc)

    def test_naive_input_is_taken_as_utc(self, session):
        transaction = storage.transactions.create(session, TransactionCreate(
            description="Naive", amount=Decimal("10"), type="income", date=datetime(2024, 1, 10, 8, 30),
        ))
        assert transaction.date == datetime(2024, 1, 10, 8, 30, tzinfo=timezone.utc)

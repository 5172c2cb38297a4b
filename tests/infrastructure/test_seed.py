"""Tests for the development seed data."""

import itertools
import uuid
from decimal import Decimal

from sqlalchemy import func, select

from orders.domain.model.user import User
from orders.domain.model.value_objects import OrderStatus, new_id
from orders.infrastructure.persistence.database import build_engine, build_session_factory
from orders.infrastructure.persistence.models import OrderModel, ProductModel, UserModel
from orders.infrastructure.seed import build_sample_users, generate_email, initialize


def _counts(session_factory) -> tuple[int, int, int]:
    with session_factory() as session:
        return tuple(
            session.scalar(select(func.count()).select_from(model))
            for model in (UserModel, OrderModel, ProductModel)
        )


def _sequential_ids():
    counter = itertools.count(1)
    return lambda: uuid.UUID(int=next(counter))


class TestBuildSampleUsers:

    def test_shape(self):
        users = build_sample_users()
        assert len(users) == 10
        assert [u.name for u in users][:3] == ["User 1", "User 2", "User 3"]
        assert all(len(u.orders) == 2 for u in users)
        orders = [o for u in users for o in u.orders]
        assert all(len(o.products) == 3 for o in orders)
        assert all(o.status == OrderStatus.COMPLETED for o in orders)
        assert all(o.total == Decimal("60.00") for o in orders)
        assert [p.price for p in orders[0].products] == [
            Decimal("10.00"),
            Decimal("20.00"),
            Decimal("30.00"),
        ]

    def test_email_derived_from_id(self):
        user_id = uuid.UUID("12345678-1234-5678-1234-567812345678")
        assert generate_email(user_id) == "user_12345678123456781234567812345678@example.com"

    def test_deterministic_with_id_factory(self):
        first = build_sample_users(_sequential_ids())
        second = build_sample_users(_sequential_ids())
        assert [u.id for u in first] == [u.id for u in second]
        assert first[0].email == second[0].email


class TestInitialize:

    def test_seeds_empty_store(self, engine, session_factory):
        report = initialize(engine, session_factory)

        assert report.skipped is False
        assert (report.users, report.orders, report.products) == (10, 20, 60)
        assert _counts(session_factory) == (10, 20, 60)

    def test_every_order_totals_sixty(self, engine, session_factory):
        initialize(engine, session_factory)
        with session_factory() as session:
            totals = session.scalars(select(OrderModel.total)).all()
        assert totals == [Decimal("60.00")] * 20

    def test_second_run_writes_nothing(self, engine, session_factory):
        initialize(engine, session_factory)
        report = initialize(engine, session_factory)

        assert report.skipped is True
        assert (report.users, report.orders, report.products) == (0, 0, 0)
        assert _counts(session_factory) == (10, 20, 60)

    def test_creates_schema_when_missing(self):
        fresh = build_engine("sqlite://")
        try:
            report = initialize(fresh, build_session_factory(fresh))
            assert report.users == 10
        finally:
            fresh.dispose()

    def test_skips_store_with_any_user(self, engine, session_factory, uow):
        with uow() as u:
            u.users.save(User(id=new_id(), name="Existing", email="e@example.com"))

        assert initialize(engine, session_factory).skipped is True
        assert _counts(session_factory) == (1, 0, 0)

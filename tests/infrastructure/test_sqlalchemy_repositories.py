"""Round-trip tests for the SQLAlchemy repositories against in-memory SQLite."""

from decimal import Decimal

import pytest
from sqlalchemy import select, text
from sqlalchemy.exc import IntegrityError

from orders.domain.exceptions import CorruptAggregateError, ValidationError
from orders.domain.model.order import Order
from orders.domain.model.product import Product
from orders.domain.model.user import User
from orders.domain.model.value_objects import OrderStatus, new_id
from orders.domain.repository.order_repository import OrderRepository
from orders.domain.repository.user_repository import UserRepository
from orders.infrastructure.persistence.models import OrderLineModel, OrderModel, ProductModel


def _user(name: str = "Alice") -> User:
    return User(id=new_id(), name=name, email=f"{name.lower()}@example.com")


def _order_for(user: User, *prices: str, status=OrderStatus.PENDING) -> Order:
    order = Order(id=new_id(), user_id=user.id, status=status)
    for i, price in enumerate(prices, start=1):
        order.add_product(Product(id=new_id(), name=f"Product {i}", price=price))
    return order


class TestUserRepository:

    def test_save_and_load(self, uow):
        user = _user()
        with uow() as u:
            u.users.save(user)

        with uow() as u:
            loaded = u.users.get_by_id(user.id)

        assert loaded == user
        assert loaded.name == "Alice"
        assert loaded.email == "alice@example.com"
        assert loaded.orders == ()

    def test_missing_user_is_none(self, uow):
        with uow() as u:
            assert u.users.get_by_id(new_id()) is None

    def test_saves_tracked_orders_in_order(self, uow):
        user = _user()
        first = _order_for(user, "1.00")
        second = _order_for(user, "2.00", "3.00")
        user.add_order(first)
        user.add_order(second)
        with uow() as u:
            u.users.save(user)

        with uow() as u:
            loaded = u.users.get_by_id(user.id)

        assert [o.id for o in loaded.orders] == [first.id, second.id]
        assert loaded.orders[1].total == Decimal("5.00")

    def test_list_all_and_count(self, uow):
        with uow() as u:
            u.users.save(_user("Bob"))
            u.users.save(_user("Alice"))

        with uow() as u:
            assert u.users.count() == 2
            assert [x.name for x in u.users.list_all()] == ["Alice", "Bob"]

    def test_delete_cascades_to_orders_and_products(self, uow, session_factory):
        user = _user()
        user.add_order(_order_for(user, "1.00", "2.00"))
        with uow() as u:
            u.users.save(user)

        with uow() as u:
            u.users.delete(user.id)

        with session_factory() as session:
            assert session.scalars(select(OrderModel)).all() == []
            assert session.scalars(select(ProductModel)).all() == []
            assert session.scalars(select(OrderLineModel)).all() == []


class TestOrderRepository:

    def test_round_trip(self, uow):
        user = _user()
        order = _order_for(user, "10.00", "20.00", "30.00")
        with uow() as u:
            u.users.save(user)
            u.orders.save(order)

        with uow() as u:
            loaded = u.orders.get_by_id(order.id)

        assert loaded == order
        assert loaded.user_id == user.id
        assert loaded.total == Decimal("60.00")
        assert [p.name for p in loaded.products] == ["Product 1", "Product 2", "Product 3"]
        assert all(p.order_id == order.id for p in loaded.products)

    def test_status_survives_round_trip(self, uow):
        user = _user()
        order = _order_for(user, status=OrderStatus.COMPLETED)
        with uow() as u:
            u.users.save(user)
            u.orders.save(order)

        with uow() as u:
            assert u.orders.get_by_id(order.id).status == OrderStatus.COMPLETED

    def test_status_stored_as_text(self, uow, session_factory):
        user = _user()
        order = _order_for(user, status=OrderStatus.COMPLETED)
        with uow() as u:
            u.users.save(user)
            u.orders.save(order)

        with session_factory() as session:
            raw = session.execute(text("SELECT status FROM orders")).scalar_one()
        assert raw == "Completed"

    def test_update_appends_products(self, uow):
        user = _user()
        order = _order_for(user, "1.00")
        with uow() as u:
            u.users.save(user)
            u.orders.save(order)

        with uow() as u:
            loaded = u.orders.get_by_id(order.id)
            loaded.add_product(Product(id=new_id(), name="Extra", price="4.00"))
            loaded.pay()
            u.orders.save(loaded)

        with uow() as u:
            again = u.orders.get_by_id(order.id)
        assert again.total == Decimal("5.00")
        assert again.status == OrderStatus.PAID
        assert [p.name for p in again.products] == ["Product 1", "Extra"]

    def test_list_by_user(self, uow):
        alice, bob = _user("Alice"), _user("Bob")
        a1, a2, b1 = _order_for(alice), _order_for(alice), _order_for(bob)
        with uow() as u:
            u.users.save(alice)
            u.users.save(bob)
            for order in (a1, a2, b1):
                u.orders.save(order)

        with uow() as u:
            assert [o.id for o in u.orders.list_by_user(alice.id)] == [a1.id, a2.id]

    def test_unknown_user_violates_foreign_key(self, uow):
        order = Order(id=new_id(), user_id=new_id())
        with pytest.raises(IntegrityError):
            with uow() as u:
                u.orders.save(order)

    def test_rollback_on_error(self, uow):
        user = _user()
        with pytest.raises(RuntimeError):
            with uow() as u:
                u.users.save(user)
                raise RuntimeError("boom")

        with uow() as u:
            assert u.users.get_by_id(user.id) is None

    def test_total_below_product_sum_is_corrupt(self, uow, session_factory):
        user = _user()
        order = _order_for(user, "10.00")
        with uow() as u:
            u.users.save(user)
            u.orders.save(order)

        with session_factory.begin() as session:
            session.execute(text("UPDATE orders SET total = 1"))

        with uow() as u:
            with pytest.raises(CorruptAggregateError, match="below its product sum"):
                u.orders.get_by_id(order.id)

    def test_opening_total_survives_round_trip(self, uow):
        user = _user()
        order = Order(id=new_id(), user_id=user.id, total="7.00")
        with uow() as u:
            u.users.save(user)
            u.orders.save(order)

        with uow() as u:
            assert u.orders.get_by_id(order.id).total == Decimal("7.00")

    def test_product_added_twice_survives_round_trip(self, uow, session_factory):
        user = _user()
        order = Order(id=new_id(), user_id=user.id)
        widget = Product(id=new_id(), name="Widget", price="10.00")
        order.add_product(widget)
        order.add_product(widget)
        with uow() as u:
            u.users.save(user)
            u.orders.save(order)

        with uow() as u:
            loaded = u.orders.get_by_id(order.id)

        assert len(loaded.products) == 2
        assert loaded.products[0] == loaded.products[1] == widget
        assert loaded.total == Decimal("20.00")
        with session_factory() as session:
            assert len(session.scalars(select(ProductModel)).all()) == 1
            assert len(session.scalars(select(OrderLineModel)).all()) == 2

    def test_duplicate_added_after_reload_is_kept(self, uow):
        user = _user()
        order = _order_for(user, "3.00")
        with uow() as u:
            u.users.save(user)
            u.orders.save(order)

        with uow() as u:
            loaded = u.orders.get_by_id(order.id)
            loaded.add_product(loaded.products[0])
            u.orders.save(loaded)

        with uow() as u:
            again = u.orders.get_by_id(order.id)
        assert [p.name for p in again.products] == ["Product 1", "Product 1"]
        assert again.total == Decimal("6.00")

    def test_line_for_product_of_other_order_is_corrupt(self, uow, session_factory):
        user = _user()
        order = _order_for(user, "1.00")
        other = _order_for(user)
        with uow() as u:
            u.users.save(user)
            u.orders.save(order)
            u.orders.save(other)

        with session_factory.begin() as session:
            session.execute(
                text("UPDATE products SET order_id = :other"), {"other": other.id.hex}
            )

        with uow() as u:
            with pytest.raises(CorruptAggregateError, match="points at unknown product"):
                u.orders.get_by_id(order.id)

    def test_cent_amounts_round_trip_exactly(self, uow):
        user = _user()
        order = _order_for(user, "0.01", "0.01", "19.99")
        with uow() as u:
            u.users.save(user)
            u.orders.save(order)

        with uow() as u:
            loaded = u.orders.get_by_id(order.id)
        assert loaded.total == Decimal("20.01")
        assert loaded.total == sum(p.price for p in loaded.products)

    def test_sub_cent_price_never_reaches_storage(self):
        with pytest.raises(ValidationError, match="more than 2 decimal places"):
            Product(id=new_id(), name="Fraction", price="0.006")


class TestUnitOfWork:

    def test_exposes_domain_repositories(self, uow):
        with uow() as u:
            assert isinstance(u.users, UserRepository)
            assert isinstance(u.orders, OrderRepository)

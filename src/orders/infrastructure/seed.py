"""Development seed data.

On an empty store, creates a fixed sample graph:
10 users x 2 orders x 3 products, prices 10.00, 20.00, 30.00 per order.
Does nothing if any user already exists.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import Engine
from sqlalchemy.orm import sessionmaker

from orders.domain.model.order import Order
from orders.domain.model.product import Product
from orders.domain.model.user import User
from orders.domain.model.value_objects import OrderStatus, new_id
from orders.infrastructure.persistence.database import create_schema
from orders.infrastructure.persistence.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

USER_COUNT = 10
ORDERS_PER_USER = 2
PRODUCTS_PER_ORDER = 3
PRICE_STEP = Decimal("10.00")


@dataclass(frozen=True)
class SeedReport:
    users: int = 0
    orders: int = 0
    products: int = 0
    skipped: bool = False


def generate_email(user_id: uuid.UUID) -> str:
    return f"user_{user_id.hex}@example.com"


def build_sample_users(id_factory: Callable[[], uuid.UUID] = new_id) -> list[User]:
    """Build the sample object graph in memory."""
    users: list[User] = []
    for i in range(1, USER_COUNT + 1):
        user_id = id_factory()
        user = User(id=user_id, name=f"User {i}", email=generate_email(user_id))

        for _ in range(ORDERS_PER_USER):
            order = Order(id=id_factory(), user_id=user.id, status=OrderStatus.COMPLETED)
            for k in range(1, PRODUCTS_PER_ORDER + 1):
                order.add_product(
                    Product(
                        id=id_factory(),
                        name=f"Product {k}",
                        price=PRICE_STEP * k,
                        order_id=order.id,
                    )
                )
            user.add_order(order)

        users.append(user)
    return users


def initialize(
    engine: Engine,
    session_factory: sessionmaker,
    id_factory: Callable[[], uuid.UUID] = new_id,
) -> SeedReport:
    """Create the schema and, on an empty store, write the sample graph.

    Everything is committed in a single transaction.
    """
    create_schema(engine)

    with UnitOfWork(session_factory) as uow:
        existing = uow.users.count()
        if existing:
            logger.info("Store already holds %d users; skipping seed", existing)
            return SeedReport(skipped=True)

        users = build_sample_users(id_factory)
        for user in users:
            uow.users.save(user)

    report = SeedReport(
        users=len(users),
        orders=sum(len(u.orders) for u in users),
        products=sum(len(o.products) for u in users for o in u.orders),
    )
    logger.info(
        "Seeded %d users, %d orders, %d products",
        report.users,
        report.orders,
        report.products,
    )
    return report

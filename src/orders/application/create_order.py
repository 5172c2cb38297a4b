"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
The user must exist before an order can reference it.
"""

from __future__ import annotations

import uuid

from orders.application._mapping import order_to_dto
from orders.application.dto import OrderDTO, ProductSpec
from orders.domain.exceptions import EntityNotFoundError
from orders.domain.model.order import Order
from orders.domain.model.product import Product
from orders.domain.model.value_objects import OrderStatus, new_id, parse_id
from orders.domain.repository.order_repository import OrderRepository
from orders.domain.repository.user_repository import UserRepository


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        user_repo: UserRepository,
    ) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo

    def handle(
        self,
        user_id: uuid.UUID | str,
        status: OrderStatus | str = OrderStatus.PENDING,
        product_specs: list[ProductSpec] | None = None,
    ) -> OrderDTO:
        """Create a new order for an existing user.

        Steps:
        1. Resolve the user (fail if not found).
        2. Build Products from the specs; omitted specs mean an empty order.
        3. Let the Order aggregate validate and total everything.
        4. Persist and return a DTO.
        """
        uid = parse_id(user_id, "UserId")
        user = self._user_repo.get_by_id(uid)
        if user is None:
            raise EntityNotFoundError(f"User {uid} not found")

        products = None
        if product_specs is not None:
            products = [
                Product(id=new_id(), name=spec.name, price=spec.price)
                for spec in product_specs
            ]

        order = Order(id=new_id(), user_id=user.id, status=status, products=products)
        user.add_order(order)
        self._order_repo.save(order)
        return order_to_dto(order)

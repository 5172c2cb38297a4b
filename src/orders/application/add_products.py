"""Application service: Add Products use case."""

from __future__ import annotations

import uuid

from orders.application._mapping import order_to_dto
from orders.application.dto import OrderDTO, ProductSpec
from orders.domain.exceptions import EntityNotFoundError, ValidationError
from orders.domain.model.product import Product
from orders.domain.model.value_objects import new_id, parse_id
from orders.domain.repository.order_repository import OrderRepository


class AddProductsHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: uuid.UUID | str, specs: list[ProductSpec]) -> OrderDTO:
        """Append products to an existing order.

        All products are built before the order is touched, so a bad
        spec leaves the stored order unchanged.
        """
        if not specs:
            raise ValidationError("Must specify at least one product")

        oid = parse_id(order_id, "OrderId")
        order = self._order_repo.get_by_id(oid)
        if order is None:
            raise EntityNotFoundError(f"Order {oid} not found")

        products = [Product(id=new_id(), name=s.name, price=s.price) for s in specs]
        order.add_products(products)
        self._order_repo.save(order)
        return order_to_dto(order)

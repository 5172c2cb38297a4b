"""Application service: Change Order Status use case.

Pay, complete and cancel all follow the same load / transition / save
shape; the Order aggregate decides whether the move is legal.
"""

from __future__ import annotations

import uuid

from orders.application._mapping import order_to_dto
from orders.application.dto import OrderDTO
from orders.domain.exceptions import EntityNotFoundError
from orders.domain.model.value_objects import OrderStatus, parse_id
from orders.domain.repository.order_repository import OrderRepository


class ChangeOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: uuid.UUID | str, target: OrderStatus | str) -> OrderDTO:
        oid = parse_id(order_id, "OrderId")
        order = self._order_repo.get_by_id(oid)
        if order is None:
            raise EntityNotFoundError(f"Order {oid} not found")

        target = OrderStatus.parse(target)
        if target == OrderStatus.CANCELLED:
            order.cancel()
        else:
            order.transition_to(target)

        self._order_repo.save(order)
        return order_to_dto(order)

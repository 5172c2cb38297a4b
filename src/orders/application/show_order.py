"""Application service: Show Order use case (query)."""

from __future__ import annotations

import uuid

from orders.application._mapping import order_to_dto
from orders.application.dto import OrderDTO
from orders.domain.exceptions import EntityNotFoundError
from orders.domain.model.value_objects import parse_id
from orders.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: uuid.UUID | str) -> OrderDTO:
        oid = parse_id(order_id, "OrderId")
        order = self._order_repo.get_by_id(oid)
        if order is None:
            raise EntityNotFoundError(f"Order {oid} not found")
        return order_to_dto(order)

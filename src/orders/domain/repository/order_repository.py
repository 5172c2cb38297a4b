"""Abstract repository for Order aggregate."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from orders.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: uuid.UUID) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_by_user(self, user_id: uuid.UUID) -> list[Order]:
        """Return every order placed by a user."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order and its products."""

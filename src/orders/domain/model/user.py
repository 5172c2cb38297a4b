"""User entity.

A user places orders but does not control their lifecycle: each Order
is its own aggregate and only references the user by id.  The ``orders``
view is for navigation.
"""

from __future__ import annotations

import uuid

from orders.domain.exceptions import MissingArgumentError, ValidationError
from orders.domain.model.order import Order
from orders.domain.model.value_objects import require_id, require_text


class User:

    def __init__(self, id: uuid.UUID, name: str, email: str) -> None:
        self._id = require_id(id, "Id")
        self._name = require_text(name, "Name")
        self._email = require_text(email, "Email")
        self._orders: list[Order] = []

    @classmethod
    def reconstitute(
        cls,
        id: uuid.UUID,
        name: str,
        email: str,
        orders: list[Order] | None = None,
    ) -> User:
        """Rebuild a persisted user without re-validating.

        Reserved for the persistence mappers.
        """
        user = cls.__new__(cls)
        user._id = id
        user._name = name
        user._email = email
        user._orders = list(orders or [])
        return user

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    def add_order(self, order: Order) -> None:
        """Track an order placed by this user."""
        if order is None:
            raise MissingArgumentError("order cannot be None")
        if order.user_id != self._id:
            raise ValidationError(
                f"Order {order.id} belongs to user {order.user_id}, not {self._id}"
            )
        self._orders.append(order)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, name={self._name!r}, email={self._email!r})"

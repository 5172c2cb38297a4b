"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its products.  All mutation of
the product collection, the running total and the status goes through
methods on this class.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from decimal import Decimal

from orders.domain.exceptions import MissingArgumentError, ValidationError
from orders.domain.model.product import Product
from orders.domain.model.value_objects import (
    ZERO,
    OrderStatus,
    require_id,
    to_amount,
)

# Legal status changes after construction.  Completed and Cancelled are terminal.
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PAID, OrderStatus.CANCELLED}),
    OrderStatus.PAID: frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED}),
    OrderStatus.CANCELLED: frozenset(),
    OrderStatus.COMPLETED: frozenset(),
}


class Order:
    """Aggregate root for orders.

    ``total`` starts at the supplied opening amount (zero by default) and
    grows by each product's price as products are added.  Products passed
    to the constructor are added the same way, so the total never lags
    behind the collection.

    Any status may be supplied at construction; afterwards only the
    transitions in ``ALLOWED_TRANSITIONS`` are accepted.
    """

    def __init__(
        self,
        id: uuid.UUID,
        user_id: uuid.UUID,
        status: OrderStatus | str = OrderStatus.PENDING,
        products: Iterable[Product] | None = None,
        total: str | int | float | Decimal = ZERO,
    ) -> None:
        self._id = require_id(id, "Id")
        self._user_id = require_id(user_id, "UserId")
        self._status = OrderStatus.parse(status)

        initial = list(products) if products is not None else []
        if products is not None and not initial:
            raise ValidationError("Products cannot be empty")

        self._total = to_amount(total, "Total")
        self._products: list[Product] = []
        self.add_products(initial)

    @classmethod
    def reconstitute(
        cls,
        id: uuid.UUID,
        user_id: uuid.UUID,
        status: OrderStatus,
        products: list[Product],
        total: Decimal,
    ) -> Order:
        """Rebuild a persisted order without re-validating or re-summing.

        Reserved for the persistence mappers.
        """
        order = cls.__new__(cls)
        order._id = id
        order._user_id = user_id
        order._status = status
        order._products = list(products)
        order._total = total
        return order

    # --- Read access ----------------------------------------------------------

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def user_id(self) -> uuid.UUID:
        return self._user_id

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    @property
    def total(self) -> Decimal:
        return self._total

    # --- Product collection ---------------------------------------------------

    def add_product(self, product: Product) -> None:
        """Attach *product* to this order and add its price to the total.

        Duplicates are not filtered: adding the same product twice counts
        its price twice.
        """
        if product is None:
            raise MissingArgumentError("product cannot be None")
        product._assign_to(self._id)
        self._products.append(product)
        self._total += product.price

    def add_products(self, products: Iterable[Product]) -> None:
        """Add each product in order.

        Not atomic: if one product is rejected, the ones before it stay
        attached.
        """
        if products is None:
            raise MissingArgumentError("products cannot be None")
        for product in products:
            self.add_product(product)

    # --- State transitions ----------------------------------------------------

    def transition_to(self, target: OrderStatus | str) -> None:
        target = OrderStatus.parse(target)
        if target not in ALLOWED_TRANSITIONS[self._status]:
            raise ValidationError(
                f"Cannot move order from {self._status.value} to {target.value}"
            )
        self._status = target

    def pay(self) -> None:
        """Transition Pending -> Paid."""
        self.transition_to(OrderStatus.PAID)

    def complete(self) -> None:
        """Transition Paid -> Completed."""
        self.transition_to(OrderStatus.COMPLETED)

    def cancel(self) -> None:
        """Transition Pending|Paid -> Cancelled."""
        if self._status == OrderStatus.CANCELLED:
            raise ValidationError("Order is already cancelled")
        self.transition_to(OrderStatus.CANCELLED)

    # --- Identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Order(id={self._id}, user_id={self._user_id}, "
            f"status={self._status.value}, total={self._total}, "
            f"products={len(self._products)})"
        )

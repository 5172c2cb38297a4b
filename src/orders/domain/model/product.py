"""Product entity.

Products belong to exactly one order once attached. The order reference
is a plain foreign key: only the owning Order aggregate may set it, via
``Order.add_product``.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from orders.domain.exceptions import ValidationError
from orders.domain.model.value_objects import require_id, require_text, to_amount


class Product:
    """A priced item inside an order."""

    def __init__(
        self,
        id: uuid.UUID,
        name: str,
        price: str | int | float | Decimal,
        order_id: uuid.UUID | None = None,
    ) -> None:
        self._id = require_id(id, "Id")
        self._name = require_text(name, "Name")
        self._price = to_amount(price, "Price")
        self._order_id = require_id(order_id, "OrderId") if order_id is not None else None

    @classmethod
    def reconstitute(
        cls,
        id: uuid.UUID,
        name: str,
        price: Decimal,
        order_id: uuid.UUID | None,
    ) -> Product:
        """Rebuild a persisted product without re-validating.

        Reserved for the persistence mappers.
        """
        product = cls.__new__(cls)
        product._id = id
        product._name = name
        product._price = price
        product._order_id = order_id
        return product

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def order_id(self) -> uuid.UUID | None:
        return self._order_id

    def _assign_to(self, order_id: uuid.UUID) -> None:
        """Point this product at its owning order (aggregate use only)."""
        require_id(order_id, "OrderId")
        if self._order_id is not None and self._order_id != order_id:
            raise ValidationError(
                f"Product {self._id} already belongs to order {self._order_id}"
            )
        self._order_id = order_id

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Product(id={self._id}, name={self._name!r}, price={self._price})"

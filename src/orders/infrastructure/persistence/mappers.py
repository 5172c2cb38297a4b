"""Static mappers for domain entities <-> database models.

The mappers are the only callers of the entities' ``reconstitute``
factories.  ``Order.total`` is copied to the row as-is and never
recomputed here.
"""

from __future__ import annotations

from decimal import Decimal

from orders.domain.exceptions import CorruptAggregateError
from orders.domain.model.order import Order
from orders.domain.model.product import Product
from orders.domain.model.user import User
from orders.infrastructure.persistence.models import (
    OrderLineModel,
    OrderModel,
    ProductModel,
    UserModel,
)


class ProductMapper:

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        return Product.reconstitute(
            id=model.id,
            name=model.name,
            price=Decimal(model.price),
            order_id=model.order_id,
        )


class OrderMapper:
    """Order <-> OrderModel, including the nested products and lines."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert a row (with products and lines) to an Order aggregate.

        The product sequence comes from the lines, so a product added
        twice reads back twice.  The stored total is an opening amount
        plus every product price, so it can never be smaller than the
        products alone.

        Raises:
            CorruptAggregateError: if a line points at a product of
                another order, or the stored total is below the sum of
                the stored product prices.
        """
        by_id = {p.id: ProductMapper.to_domain(p) for p in model.products}
        products = []
        for line in model.lines:
            product = by_id.get(line.product_id)
            if product is None:
                raise CorruptAggregateError(
                    f"Order {model.id} line {line.position} points at unknown "
                    f"product {line.product_id}"
                )
            products.append(product)

        total = Decimal(model.total)
        product_sum = sum((p.price for p in products), Decimal("0"))
        if total < product_sum:
            raise CorruptAggregateError(
                f"Order {model.id} total {total} is below its product sum {product_sum}"
            )
        return Order.reconstitute(
            id=model.id,
            user_id=model.user_id,
            status=model.status,
            products=products,
            total=total,
        )

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> OrderModel:
        """Copy an Order onto a new or existing row.

        Each distinct product is one ``products`` row; every entry of the
        product sequence is one ``order_lines`` row pointing at it.
        """
        model.id = entity.id
        model.user_id = entity.user_id
        model.status = entity.status
        model.total = entity.total

        existing = {p.id: p for p in model.products}
        rows: dict = {}
        for product in entity.products:
            if product.id in rows:
                continue
            row = existing.get(product.id)
            if row is None:
                row = ProductModel(id=product.id)
            row.order_id = entity.id
            row.name = product.name
            row.price = product.price
            rows[product.id] = row
        model.products = list(rows.values())

        existing_lines = {line.position: line for line in model.lines}
        lines = []
        for position, product in enumerate(entity.products):
            line = existing_lines.get(position)
            if line is None:
                line = OrderLineModel(position=position)
            line.product = rows[product.id]
            lines.append(line)
        model.lines = lines
        return model


class UserMapper:

    @staticmethod
    def to_domain(model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            orders=[OrderMapper.to_domain(o) for o in model.orders],
        )

    @staticmethod
    def update_persistence(entity: User, model: UserModel) -> UserModel:
        model.id = entity.id
        model.name = entity.name
        model.email = entity.email
        return model

"""Domain -> DTO conversion shared by the use cases."""

from __future__ import annotations

from decimal import Decimal

from orders.application.dto import OrderDTO, ProductDTO, UserDTO
from orders.domain.model.order import Order
from orders.domain.model.user import User


def format_money(amount: Decimal) -> str:
    return f"${amount:.2f}"


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=str(order.id),
        user_id=str(order.user_id),
        status=order.status.value,
        products=[
            ProductDTO(id=str(p.id), name=p.name, price=format_money(p.price))
            for p in order.products
        ],
        total=format_money(order.total),
    )


def user_to_dto(user: User) -> UserDTO:
    return UserDTO(
        id=str(user.id),
        name=user.name,
        email=user.email,
        order_count=len(user.orders),
    )

"""SQLAlchemy implementation of OrderRepository.

Writes are flushed but not committed; the surrounding UnitOfWork owns
the transaction.
"""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from orders.domain.model.order import Order
from orders.domain.repository.order_repository import OrderRepository
from orders.infrastructure.persistence.mappers import OrderMapper
from orders.infrastructure.persistence.models import OrderModel

logger = logging.getLogger(__name__)

_WITH_PRODUCTS = (selectinload(OrderModel.products), selectinload(OrderModel.lines))


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: uuid.UUID) -> Order | None:
        model = self._session.get(
            OrderModel,
            order_id,
            options=_WITH_PRODUCTS,
            populate_existing=True,
        )
        if model is None:
            return None
        return OrderMapper.to_domain(model)

    def list_by_user(self, user_id: uuid.UUID) -> list[Order]:
        stmt = (
            select(OrderModel)
            .where(OrderModel.user_id == user_id)
            .options(*_WITH_PRODUCTS)
            .order_by(OrderModel.position)
            .execution_options(populate_existing=True)
        )
        return [OrderMapper.to_domain(m) for m in self._session.scalars(stmt)]

    def save(self, order: Order) -> None:
        stage_order(self._session, order)
        self._session.flush()
        logger.debug("Saved order %s (%d products)", order.id, len(order.products))


def stage_order(session: Session, order: Order, position: int | None = None) -> OrderModel:
    """Upsert *order* into the session without flushing.

    New orders go to the end of their user's list unless *position* is given.
    """
    model = session.get(OrderModel, order.id)
    if model is None:
        model = OrderModel()
        if position is None:
            position = session.scalar(
                select(func.count())
                .select_from(OrderModel)
                .where(OrderModel.user_id == order.user_id)
            )
        session.add(model)
    if position is not None:
        model.position = position
    return OrderMapper.update_persistence(order, model)

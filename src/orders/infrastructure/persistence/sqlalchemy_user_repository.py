"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from orders.domain.model.user import User
from orders.domain.repository.user_repository import UserRepository
from orders.infrastructure.persistence.mappers import UserMapper
from orders.infrastructure.persistence.models import OrderModel, UserModel
from orders.infrastructure.persistence.sqlalchemy_order_repository import stage_order

logger = logging.getLogger(__name__)

_WITH_ORDERS = (
    selectinload(UserModel.orders).selectinload(OrderModel.products),
    selectinload(UserModel.orders).selectinload(OrderModel.lines),
)


class SqlAlchemyUserRepository(UserRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- UserRepository interface ---------------------------------------------

    def get_by_id(self, user_id: uuid.UUID) -> User | None:
        model = self._session.get(
            UserModel, user_id, options=_WITH_ORDERS, populate_existing=True
        )
        if model is None:
            return None
        return UserMapper.to_domain(model)

    def list_all(self) -> list[User]:
        stmt = (
            select(UserModel)
            .options(*_WITH_ORDERS)
            .order_by(UserModel.name)
            .execution_options(populate_existing=True)
        )
        return [UserMapper.to_domain(m) for m in self._session.scalars(stmt)]

    def count(self) -> int:
        return self._session.scalar(select(func.count()).select_from(UserModel))

    def save(self, user: User) -> None:
        model = self._session.get(UserModel, user.id)
        if model is None:
            model = UserModel()
            self._session.add(model)
        UserMapper.update_persistence(user, model)
        # The user row must exist before its orders reference it.
        self._session.flush()

        for position, order in enumerate(user.orders):
            stage_order(self._session, order, position=position)
        self._session.flush()
        logger.debug("Saved user %s (%d orders)", user.id, len(user.orders))

    def delete(self, user_id: uuid.UUID) -> None:
        model = self._session.get(UserModel, user_id)
        if model is None:
            return
        self._session.delete(model)
        self._session.flush()
        logger.debug("Deleted user %s", user_id)

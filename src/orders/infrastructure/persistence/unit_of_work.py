"""Unit of Work: one session, one transaction, per command."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session, sessionmaker

from orders.domain.repository.order_repository import OrderRepository
from orders.domain.repository.user_repository import UserRepository
from orders.infrastructure.persistence.sqlalchemy_order_repository import (
    SqlAlchemyOrderRepository,
)
from orders.infrastructure.persistence.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)

logger = logging.getLogger(__name__)


class UnitOfWork:
    """Commit on clean exit, roll back on exception, always close.

    Usage::

        with UnitOfWork(session_factory) as uow:
            uow.users.save(user)
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None
        self.users: UserRepository | None = None
        self.orders: OrderRepository | None = None

    def __enter__(self) -> UnitOfWork:
        self._session = self._session_factory()
        self.users = SqlAlchemyUserRepository(self._session)
        self.orders = SqlAlchemyOrderRepository(self._session)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            if exc_type is None:
                self.commit()
            else:
                logger.debug("Rolling back after %s", exc_type.__name__)
                self.rollback()
        finally:
            self._session.close()
            self._session = None

    def commit(self) -> None:
        if self._session is None:
            raise RuntimeError("UnitOfWork not started. Use it as a context manager.")
        self._session.commit()

    def rollback(self) -> None:
        if self._session is None:
            raise RuntimeError("UnitOfWork not started. Use it as a context manager.")
        self._session.rollback()

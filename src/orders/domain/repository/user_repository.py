"""Abstract repository for User.

Defined in the domain layer so the domain never depends on
infrastructure. The SQLAlchemy implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from orders.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: uuid.UUID) -> User | None:
        """Return a user (with their orders), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user, ordered by name."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored users."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user, along with their tracked orders."""

    @abstractmethod
    def delete(self, user_id: uuid.UUID) -> None:
        """Remove a user; their orders go with them."""

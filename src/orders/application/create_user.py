"""Application service: Create User use case."""

from __future__ import annotations

from orders.application._mapping import user_to_dto
from orders.application.dto import UserDTO
from orders.domain.model.user import User
from orders.domain.model.value_objects import new_id
from orders.domain.repository.user_repository import UserRepository


class CreateUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, name: str, email: str) -> UserDTO:
        """Register a new user. The User constructor validates the fields."""
        user = User(id=new_id(), name=name, email=email)
        self._user_repo.save(user)
        return user_to_dto(user)

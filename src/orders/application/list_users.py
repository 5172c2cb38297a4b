"""Application service: List Users use case (query)."""

from __future__ import annotations

from orders.application._mapping import user_to_dto
from orders.application.dto import UserDTO
from orders.domain.repository.user_repository import UserRepository


class ListUsersHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self) -> list[UserDTO]:
        return [user_to_dto(user) for user in self._user_repo.list_all()]

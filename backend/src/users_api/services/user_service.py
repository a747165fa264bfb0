from __future__ import annotations

import logging

from users_api.infra.repositories.user_repository import UserRecord, UserRepository
from users_api.services.results import UserLookup, UserNotFound

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def list_users(self) -> list[UserRecord]:
        return self._repository.list()

    def lookup_user(self, user_id: int) -> UserLookup:
        """Return the user, or a ``UserNotFound`` value instead of raising."""
        user = self._repository.find(user_id)
        if user is None:
            logger.debug("User lookup missed for id %s", user_id)
            return UserNotFound(user_id)
        return user

    def get_user(self, user_id: int) -> UserRecord:
        return self._repository.get(user_id)

    def create_user(self, username: str, name: str, email: str) -> UserRecord:
        user = self._repository.create(username=username, name=name, email=email)
        logger.info("Created user %s (%s)", user.id, user.username)
        return user

    def update_user(
        self,
        user_id: int,
        *,
        username: str | None = None,
        name: str | None = None,
        email: str | None = None,
    ) -> UserRecord:
        return self._repository.update(user_id, username=username, name=name, email=email)

    def delete_user(self, user_id: int) -> None:
        self._repository.delete(user_id)
        logger.info("Deleted user %s", user_id)

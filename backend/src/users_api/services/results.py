from __future__ import annotations

from dataclasses import dataclass

from users_api.infra.repositories.user_repository import UserRecord
from users_api.services.errors import UserNotFoundError


@dataclass(frozen=True)
class UserNotFound:
    """Non-raising outcome of a user lookup that matched nothing."""

    identifier: int

    def to_error(self) -> UserNotFoundError:
        return UserNotFoundError(self.identifier)


UserLookup = UserRecord | UserNotFound

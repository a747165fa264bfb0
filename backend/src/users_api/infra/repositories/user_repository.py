from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from itertools import count
from threading import Lock
from typing import Protocol

from users_api.services.errors import ConflictError, UserNotFoundError


@dataclass
class UserRecord:
    id: int
    username: str
    name: str
    email: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class UserRepository(Protocol):
    def list(self) -> list[UserRecord]: ...

    def find(self, user_id: int) -> UserRecord | None: ...

    def get(self, user_id: int) -> UserRecord: ...

    def create(self, username: str, name: str, email: str) -> UserRecord: ...

    def update(
        self,
        user_id: int,
        *,
        username: str | None = None,
        name: str | None = None,
        email: str | None = None,
    ) -> UserRecord: ...

    def delete(self, user_id: int) -> None: ...


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._lock = Lock()
        self._ids = count(1)
        self._users: dict[int, UserRecord] = {}

    def list(self) -> list[UserRecord]:
        with self._lock:
            snapshot = list(self._users.values())
        return sorted(snapshot, key=lambda user: user.id)

    def find(self, user_id: int) -> UserRecord | None:
        return self._users.get(user_id)

    def get(self, user_id: int) -> UserRecord:
        user = self.find(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def create(self, username: str, name: str, email: str) -> UserRecord:
        username, email = username.strip(), email.strip()
        with self._lock:
            self._ensure_unique(username=username, email=email)
            now = datetime.now(timezone.utc)
            user = UserRecord(
                id=next(self._ids),
                username=username,
                name=name.strip(),
                email=email,
                created_at=now,
                updated_at=now,
            )
            self._users[user.id] = user
        return user

    def update(
        self,
        user_id: int,
        *,
        username: str | None = None,
        name: str | None = None,
        email: str | None = None,
    ) -> UserRecord:
        with self._lock:
            user = self.get(user_id)
            username = username.strip() if username is not None else None
            email = email.strip() if email is not None else None
            self._ensure_unique(username=username, email=email, exclude_id=user_id)
            if username is not None:
                user.username = username
            if name is not None:
                user.name = name.strip()
            if email is not None:
                user.email = email
            user.updated_at = datetime.now(timezone.utc)
            return user

    def delete(self, user_id: int) -> None:
        with self._lock:
            if user_id not in self._users:
                raise UserNotFoundError(user_id)
            del self._users[user_id]

    def _ensure_unique(
        self,
        *,
        username: str | None,
        email: str | None,
        exclude_id: int | None = None,
    ) -> None:
        for user in self._users.values():
            if user.id == exclude_id:
                continue
            if username is not None and user.username == username:
                raise ConflictError(f"Username '{username}' is already taken")
            if email is not None and user.email == email:
                raise ConflictError(f"Email '{email}' is already registered")

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from users_api.infra.db.models import UserModel
from users_api.infra.repositories.user_repository import UserRecord, UserRepository
from users_api.services.errors import ConflictError, UserNotFoundError

MIN_USER_ID = -(2**63)
MAX_USER_ID = 2**63 - 1


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive timestamps
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SqlUserRepository(UserRepository):
    def __init__(self, db: Session) -> None:
        self._db = db

    def _to_record(self, model: UserModel) -> UserRecord:
        return UserRecord(
            id=model.id,
            username=model.username,
            name=model.name,
            email=model.email,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    def _fetch(self, user_id: int) -> UserModel | None:
        # ids past BIGINT cannot be stored, so they cannot exist
        if not MIN_USER_ID <= user_id <= MAX_USER_ID:
            return None
        return self._db.get(UserModel, user_id)

    def _load(self, user_id: int) -> UserModel:
        model = self._fetch(user_id)
        if model is None:
            raise UserNotFoundError(user_id)
        return model

    def _commit(self, model: UserModel) -> None:
        try:
            self._db.commit()
        except IntegrityError as exc:
            self._db.rollback()
            raise ConflictError("Username or email is already in use") from exc
        self._db.refresh(model)

    def list(self) -> list[UserRecord]:
        rows = self._db.scalars(select(UserModel).order_by(UserModel.id.asc())).all()
        return [self._to_record(row) for row in rows]

    def find(self, user_id: int) -> UserRecord | None:
        row = self._fetch(user_id)
        if row is None:
            return None
        return self._to_record(row)

    def get(self, user_id: int) -> UserRecord:
        return self._to_record(self._load(user_id))

    def create(self, username: str, name: str, email: str) -> UserRecord:
        model = UserModel(username=username.strip(), name=name.strip(), email=email.strip())
        self._db.add(model)
        self._commit(model)
        return self._to_record(model)

    def update(
        self,
        user_id: int,
        *,
        username: str | None = None,
        name: str | None = None,
        email: str | None = None,
    ) -> UserRecord:
        model = self._load(user_id)

        if username is not None:
            model.username = username.strip()
        if name is not None:
            model.name = name.strip()
        if email is not None:
            model.email = email.strip()

        self._db.add(model)
        self._commit(model)
        return self._to_record(model)

    def delete(self, user_id: int) -> None:
        model = self._load(user_id)
        self._db.delete(model)
        self._db.commit()

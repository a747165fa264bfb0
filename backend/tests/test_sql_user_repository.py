from collections.abc import Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from users_api.infra.db.models import Base
from users_api.infra.repositories.sql_user_repository import SqlUserRepository
from users_api.services.errors import ConflictError, UserNotFoundError


@pytest.fixture
def repository() -> Iterator[SqlUserRepository]:
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    session_factory = sessionmaker(bind=engine, autoflush=False, class_=Session)
    with session_factory() as db:
        yield SqlUserRepository(db)
    engine.dispose()


def test_sql_repository_crud_flow(repository: SqlUserRepository) -> None:
    created = repository.create(username="alan", name="Alan Turing", email="alan@example.com")
    assert created.id >= 1
    assert created.created_at.tzinfo is not None

    assert repository.get(created.id).username == "alan"
    assert [user.id for user in repository.list()] == [created.id]

    updated = repository.update(created.id, name="A. M. Turing")
    assert updated.name == "A. M. Turing"

    repository.delete(created.id)
    assert repository.list() == []
    assert repository.find(created.id) is None


def test_sql_repository_raises_user_not_found(repository: SqlUserRepository) -> None:
    with pytest.raises(UserNotFoundError) as excinfo:
        repository.get(42)
    assert str(excinfo.value) == "Could not find the user with id 42"

    with pytest.raises(UserNotFoundError):
        repository.update(42, name="Nobody")
    with pytest.raises(UserNotFoundError):
        repository.delete(42)


def test_sql_repository_rejects_duplicates(repository: SqlUserRepository) -> None:
    repository.create(username="barbara", name="Barbara Liskov", email="barbara@example.com")

    with pytest.raises(ConflictError):
        repository.create(username="barbara", name="Someone", email="someone@example.com")

    assert len(repository.list()) == 1


@pytest.mark.parametrize("user_id", [2**63, 2**64, -(2**63) - 1])
def test_sql_repository_treats_out_of_range_ids_as_missing(
    repository: SqlUserRepository, user_id: int
) -> None:
    assert repository.find(user_id) is None

    with pytest.raises(UserNotFoundError) as excinfo:
        repository.get(user_id)
    assert excinfo.value.identifier == user_id

    with pytest.raises(UserNotFoundError):
        repository.update(user_id, name="Nobody")
    with pytest.raises(UserNotFoundError):
        repository.delete(user_id)

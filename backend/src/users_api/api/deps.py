from __future__ import annotations

from collections.abc import Generator

from users_api.infra.repositories.user_repository import InMemoryUserRepository
from users_api.services.user_service import UserService
from users_api.settings import load_settings

settings = load_settings()

# Process-wide store so users survive across requests in memory mode.
_shared_users = InMemoryUserRepository()


def _memory_user_service() -> UserService:
    return UserService(repository=_shared_users)


def _sql_user_service() -> Generator[UserService, None, None]:
    """Yield a service bound to one request-scoped SQLAlchemy session."""
    from users_api.infra.db.session import SessionLocal
    from users_api.infra.repositories.sql_user_repository import SqlUserRepository

    with SessionLocal() as db:
        yield UserService(repository=SqlUserRepository(db))


get_user_service = _sql_user_service if settings.db_backend == "postgres" else _memory_user_service

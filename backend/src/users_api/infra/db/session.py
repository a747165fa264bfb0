from __future__ import annotations

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from users_api.infra.db.models import Base
from users_api.settings import load_settings

logger = logging.getLogger(__name__)

settings = load_settings()

if not settings.database_url:
    raise RuntimeError(
        "DB_BACKEND=postgres needs DATABASE_URL to reach the database holding the users table"
    )

engine = create_engine(settings.database_url, pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, class_=Session)


def create_schema() -> None:
    """Create the users table on first start; existing tables are left alone."""
    logger.info("Ensuring users schema on %s", engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=engine)


from __future__ import annotations

import logging

from sqlalchemy.engine import Engine

from app.db.base import Base
from app.db.engine import get_engine
from app.db.seed import seed_advertisements
from app.db.session import get_sessionmaker

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """Create ORM tables (dev-friendly; prefer Alembic in production)."""

    Base.metadata.create_all(bind=engine)


def bootstrap(database_url: str | None = None) -> int:
    """Create the schema and reconcile seed rows. Returns rows inserted."""

    SessionLocal = get_sessionmaker(database_url)
    init_db(get_engine(database_url))

    with SessionLocal() as session:
        inserted = seed_advertisements(session)

    logger.info("Database bootstrap complete (seeded=%d)", inserted)
    return inserted

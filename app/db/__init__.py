from app.db.base import Base
from app.db.engine import get_engine
from app.db.init_db import bootstrap, init_db
from app.db.session import get_db_session, get_sessionmaker

# Ensure ORM models are registered on Base.metadata when importing app.db.
from app.db import models as _models  # noqa: F401

__all__ = [
    "Base",
    "bootstrap",
    "get_engine",
    "get_sessionmaker",
    "get_db_session",
    "init_db",
]

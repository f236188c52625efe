from __future__ import annotations

from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import ROLE_ADMIN, ROLE_USER, build_access_token
from app.db import Base, get_db_session
from app.main import create_app


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    # One shared in-memory database per test.
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    with session_factory() as session:
        yield session


@pytest.fixture
def client(session_factory: sessionmaker[Session]) -> TestClient:
    app = create_app()

    def _override_db_session() -> Generator[Session, None, None]:
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db_session] = _override_db_session
    return TestClient(app)


def _auth_headers(*roles: str) -> dict[str, str]:
    token = build_access_token(subject="tester", roles=roles)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return _auth_headers(ROLE_ADMIN)


@pytest.fixture
def user_headers() -> dict[str, str]:
    return _auth_headers(ROLE_USER)


@pytest.fixture
def make_headers() -> Callable[..., dict[str, str]]:
    return _auth_headers

import os

os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_DEMO", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from firmdesk.core.config import settings
from firmdesk.core.deps import get_db, get_session_factory
from firmdesk.db.base import Base
from firmdesk.main import app

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(bind=test_engine, autoflush=False, autocommit=False)


def override_get_db():
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def session_factory():
    Base.metadata.create_all(bind=test_engine)
    yield TestSessionLocal
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture()
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(session_factory, monkeypatch):
    # one connection is shared by every session, so submit rows one at a time
    monkeypatch.setattr(settings, "BULK_MAX_WORKERS", 1)
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.state.diagnostics.clear()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def csv_file(text: str, name: str = "upload.csv"):
    return {"file": (name, text.encode("utf-8"), "text/csv")}

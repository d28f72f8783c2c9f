import os

import pytest
from fastapi.testclient import TestClient

# settings are read at import time; keep the module-level app off disk
os.environ.setdefault("DATABASE_URL", "sqlite://")

from exercise_api.database import SessionFactory, build_engine  # noqa: E402
from exercise_api.main import create_app  # noqa: E402


@pytest.fixture()
def session_factory():
    """A fresh in-memory database with the tables created."""
    factory = SessionFactory(build_engine("sqlite://", echo=False))
    factory.create_all()
    yield factory
    factory.engine.dispose()


@pytest.fixture()
def client(session_factory):
    return TestClient(create_app(session_factory))

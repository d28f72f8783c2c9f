"""Database engine and session factory.

This module configures the SQLModel/SQLAlchemy engine from the
application settings and wraps it in a `SessionFactory` that is built
once at process start and handed explicitly to each DAO. Tests build
their own factory on an in-memory database.
"""

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from . import models  # noqa: F401  registers the tables on SQLModel.metadata
from .config import IN_MEMORY_URLS, settings


def build_engine(url: str = None, echo: bool = None):
    """Create an engine for `url` (defaults to `settings.DATABASE_URL`).

    SQLite engines are created with `check_same_thread=False` because the
    web layer runs DAO calls on a threadpool. In-memory SQLite URLs use a
    single shared connection so every session sees the same database.
    """
    url = url or settings.DATABASE_URL
    echo = settings.SQL_ECHO if echo is None else echo
    kwargs = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in IN_MEMORY_URLS:
            kwargs["poolclass"] = StaticPool
    return create_engine(url, echo=echo, **kwargs)


class SessionFactory:
    """Open storage sessions bound to a single engine.

    Sessions are created with `expire_on_commit=False` so entities handed
    back by a DAO stay readable after their session has been closed.
    """
    def __init__(self, engine):
        self.engine = engine

    def __call__(self) -> Session:
        return Session(self.engine, expire_on_commit=False)

    def create_all(self):
        """Create database tables using SQLModel metadata.

        There is no migration tool; tables are created when missing and
        existing tables are left untouched.
        """
        SQLModel.metadata.create_all(self.engine)

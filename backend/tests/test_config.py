import pytest

from exercise_api.config import DEFAULT_DB_URL, Settings


def test_defaults(monkeypatch):
    for name in ("ENV", "DATABASE_URL", "SQL_ECHO", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.ENV == "dev"
    assert s.DATABASE_URL == DEFAULT_DB_URL
    assert s.SQL_ECHO is False
    assert s.LOG_LEVEL == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:////tmp/exercises.db")
    monkeypatch.setenv("SQL_ECHO", "TRUE")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = Settings()
    assert s.DATABASE_URL == "sqlite:////tmp/exercises.db"
    assert s.SQL_ECHO is True
    assert s.LOG_LEVEL == "DEBUG"


def test_in_memory_database_rejected_outside_dev(monkeypatch):
    monkeypatch.setenv("ENV", "prod")
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    with pytest.raises(RuntimeError):
        Settings()

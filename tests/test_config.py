import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from pydantic import ValidationError

from daily_fitness.config import Config, _norm_db_url


def test_norm_db_url_sqlite_to_aiosqlite() -> None:
    assert _norm_db_url("sqlite:///test.db") == "sqlite+aiosqlite:///test.db"
    assert _norm_db_url("sqlite:///:memory:") == "sqlite+aiosqlite:///:memory:"
    # already using aiosqlite should stay untouched
    assert _norm_db_url("sqlite+aiosqlite:///test.db") == "sqlite+aiosqlite:///test.db"
    assert _norm_db_url("") is None


def test_config_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///fitness.db")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")

    cfg = Config()

    assert cfg.DATABASE_URL == "sqlite+aiosqlite:///fitness.db"
    assert cfg.LOG_LEVEL == "DEBUG"
    assert cfg.PORT == 8080
    assert cfg.allowed_origins == ["https://a.example", "https://b.example"]


def test_config_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Config()

import pytest

from folders_api.core.settings import AppSettings
from folders_api.db.config import Settings


def test_database_url_from_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    s = Settings(POSTGRES_USER="u", POSTGRES_PASSWORD="p", POSTGRES_DB="d", POSTGRES_HOST="db", POSTGRES_PORT=5433)

    assert s.database_url == "postgresql://u:p@db:5433/d"
    assert s.async_database_url == "postgresql+asyncpg://u:p@db:5433/d"


def test_database_url_override_is_normalized_for_postgres():
    s = Settings(DATABASE_URL="postgresql+psycopg2://u:p@h/d")

    assert s.async_database_url == "postgresql+asyncpg://u:p@h/d"


def test_non_postgres_url_is_left_alone():
    s = Settings(DATABASE_URL="sqlite+aiosqlite:///./folders.db")

    assert s.async_database_url == "sqlite+aiosqlite:///./folders.db"


def test_missing_database_configuration(monkeypatch):
    for var in ("DATABASE_URL", "POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_DB"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)

    with pytest.raises(ValueError):
        s.database_url


def test_app_settings_defaults(monkeypatch):
    monkeypatch.delenv("ADMIN_GROUP", raising=False)
    s = AppSettings(_env_file=None)

    assert s.ADMIN_GROUP == "admin"
    assert s.CREATE_TABLES_ON_STARTUP is False


def test_cors_origins_accept_comma_separated_values():
    s = AppSettings(CORS_ORIGINS="https://a.example, https://b.example")

    assert s.CORS_ORIGINS == ["https://a.example", "https://b.example"]

"""Settings — env-driven values and their conversion into core types."""

from blueprints.config import Settings
from blueprints.core.domain_types import FilterName, PersistenceBackend


def test_postgres_url_gets_async_driver():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_sqlite_url_left_alone():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_enum_settings_parse_from_strings():
    settings = Settings(blueprint_filter="undersampling", persistence_backend="memory")
    assert settings.blueprint_filter is FilterName.UNDERSAMPLING
    assert settings.persistence_backend is PersistenceBackend.MEMORY


def test_env_variables_are_read(monkeypatch):
    monkeypatch.setenv("BLUEPRINT_FILTER", "redundancy")
    monkeypatch.setenv("PUBLIC_API_ENABLED", "true")
    settings = Settings()
    assert settings.blueprint_filter is FilterName.REDUNDANCY
    assert settings.public_api_enabled is True


def test_auth_config_skips_users_without_password():
    settings = Settings(
        student_password="s3cret", assistant_password=None,
        auth_issuer="issuer-x", auth_token_ttl_seconds=120,
    )
    config = settings.auth_config()
    assert dict(config.credentials) == {"student": "s3cret"}
    assert config.issuer == "issuer-x"
    assert config.token_ttl_seconds == 120

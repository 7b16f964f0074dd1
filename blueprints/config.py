"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - Core logic receives typed values (FilterName, AuthConfig), never Settings itself

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from blueprints.core.auth_config import AuthConfig, DEFAULT_TOKEN_TTL_SECONDS
from blueprints.core.domain_types import FilterName, PersistenceBackend


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://blueprints:blueprints@db:5432/blueprints"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres provides postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Blueprints
    persistence_backend: PersistenceBackend = PersistenceBackend.SQL
    blueprint_filter: FilterName = FilterName.IDENTITY
    public_api_enabled: bool = False

    # Auth
    auth_issuer: str = "blueprints-api"
    auth_token_ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS
    student_password: str | None = None
    assistant_password: str | None = None

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def auth_config(self) -> AuthConfig:
        """Snapshot auth settings; users without a password are left out."""
        credentials = {
            username: password
            for username, password in (
                ("student", self.student_password),
                ("assistant", self.assistant_password),
            )
            if password
        }
        return AuthConfig(
            issuer=self.auth_issuer,
            token_ttl_seconds=self.auth_token_ttl_seconds,
            credentials=credentials,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()

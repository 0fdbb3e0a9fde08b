"""
Runtime settings for the blog service.

Values come from the process environment, then an optional .env file,
then the defaults below.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings.

    Attributes:
        project_name: Title shown in the OpenAPI schema.
        version: Version reported by /health.
        debug: Serve the interactive docs. Keep off in production.
        log_level: Logging level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL).
        sql_echo: Log every SQL statement issued by the engine.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        rate_limit_enabled: Toggle per-client rate limiting.
        rate_limit_default: Per-client limit applied to every route.

    The storage endpoint is configured by a single connection string,
    ``POSTGRESQL_URL``. When it is absent the DSN is assembled from the
    postgres_* values.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Blogger"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    sql_echo: bool = False
    host: str = "0.0.0.0"
    port: int = 8080
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    postgresql_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "blogger"

    def get_postgresql_url(self) -> str:
        """Return the effective storage connection string.

        Priority:
        1. Explicit `POSTGRESQL_URL`.
        2. DSN built from the postgres_* values (Docker Compose, local setups).
        """
        if self.postgresql_url:
            return self.postgresql_url
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()

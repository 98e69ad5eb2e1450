"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    case_sensitive=True,
    populate_by_name=True,
)

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class PostgreSQLConfig(BaseSettings):
    """PostgreSQL database configuration."""

    model_config = _ENV_CONFIG

    db: str = Field(default="scouts", alias="POSTGRES_DB", description="PostgreSQL database name")
    user: str = Field(default="scouts", alias="POSTGRES_USER", description="PostgreSQL database user")
    password: str = Field(default="scouts", alias="POSTGRES_PASSWORD", description="PostgreSQL database password")
    host: str = Field(default="localhost", alias="POSTGRES_HOST", description="PostgreSQL database host address")
    port: int = Field(default=5432, alias="POSTGRES_PORT", description="PostgreSQL database port number")

    @property
    def url(self) -> str:
        """Async SQLAlchemy URL built from the individual settings."""
        return f"postgresql+asyncpg://{self.user}:{self.password}@{self.host}:{self.port}/{self.db}"


class CORSConfig(BaseSettings):
    """CORS configuration."""

    model_config = _ENV_CONFIG

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = _ENV_CONFIG

    # =====================================================================
    # Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="Server host address to bind to",
        alias="SCOUTS_SERVER_HOST",
    )
    server_port: int = Field(
        default=8080,
        description="Server port number",
        alias="SCOUTS_SERVER_PORT",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="SCOUTS_LOG_LEVEL",
    )
    log_format: Literal["simple", "detailed", "json"] = Field(
        default="detailed",
        description="Log line format",
        alias="SCOUTS_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory of the log file when file logging is enabled",
        alias="SCOUTS_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Write logs to <log_file_dir>/scouts.log in addition to the console",
        alias="SCOUTS_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: Optional[str] = Field(
        default=None,
        description="Database connection URL; built from the POSTGRES_* settings when unset",
        alias="DATABASE_URL",
    )

    # =====================================================================
    # Metrics Configuration
    # =====================================================================
    metrics_enabled: bool = Field(
        default=True,
        description="Record request metrics and expose them on /metrics",
        alias="SCOUTS_METRICS_ENABLED",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def postgres(self) -> PostgreSQLConfig:
        """Get PostgreSQL configuration from environment variables."""
        return PostgreSQLConfig()

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig()

    @property
    def sqlalchemy_url(self) -> str:
        """The database URL the application connects to."""
        return self.database_url or self.postgres.url


settings = Settings()

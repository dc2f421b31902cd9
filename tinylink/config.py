"""Configuration management for TinyLink."""

from typing import Any, Dict, List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # Store settings
    database_url: Optional[str] = Field(
        default=None,
        description=(
            "Store URL; scheme selects the backend (postgresql://, redis://, memory://). "
            "Unset means PostgreSQL built from the PG* settings"
        )
    )

    pghost: Optional[str] = Field(default=None, description="PostgreSQL host when DATABASE_URL is unset")

    pgport: Optional[int] = Field(default=None, description="PostgreSQL port when DATABASE_URL is unset")

    pgdatabase: Optional[str] = Field(default=None, description="PostgreSQL database when DATABASE_URL is unset")

    pguser: Optional[str] = Field(default=None, description="PostgreSQL user when DATABASE_URL is unset")

    pgpassword: Optional[str] = Field(default=None, description="PostgreSQL password when DATABASE_URL is unset")

    pgsslmode: Optional[str] = Field(
        default=None,
        description="'disable' turns SSL off; any other value requires SSL without verification"
    )

    create_tables: bool = Field(
        default=True,
        description="Create the links table on startup (PostgreSQL)"
    )

    pool_min_size: int = Field(default=1, ge=0, description="Minimum PostgreSQL pool size")

    pool_max_size: int = Field(default=10, ge=1, description="Maximum PostgreSQL pool size")

    store_timeout_seconds: int = Field(
        default=30,
        ge=1,
        description="Store connect/command timeout in seconds"
    )

    redis_prefix: str = Field(
        default="tinylink",
        description="Key namespace when the store is Redis"
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=3000,
        description="Port to listen on"
    )

    cors_origins: List[str] = Field(
        default=["*"],
        description="Origins allowed by CORS"
    )

    # Link settings
    base_url: Optional[str] = Field(
        default=None,
        description="Public base URL for short links (defaults to http://localhost:<port>)"
    )

    code_length: int = Field(
        default=7,
        ge=6,
        le=8,
        description="Length of generated short codes"
    )

    max_generation_attempts: int = Field(
        default=10,
        ge=1,
        description="Maximum attempts when generating a unique short code"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @property
    def resolved_base_url(self) -> str:
        """Base URL used for shortUrl, without trailing slash."""
        if self.base_url:
            return self.base_url.rstrip("/")
        return f"http://localhost:{self.port}"

    @property
    def postgres_connect_kwargs(self) -> Dict[str, Any]:
        """PG* settings that were set, as asyncpg connect arguments.

        asyncpg falls back to its own PG* environment lookup for the rest.
        """
        fields = {
            "host": self.pghost,
            "port": self.pgport,
            "database": self.pgdatabase,
            "user": self.pguser,
            "password": self.pgpassword,
        }
        return {key: value for key, value in fields.items() if value is not None}


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()

"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from urllib.parse import quote_plus

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Profile Editor")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    static_dir: Path = Field(
        default=Path(__file__).resolve().parent.parent / "static",
        description="Directory holding the browser frontend",
    )

    # MongoDB
    mongo_host: str = Field(default="localhost")
    mongo_port: int = Field(default=27017)
    mongo_username: str = Field(
        default="admin",
        description="Leave empty to connect without authentication",
    )
    mongo_password: str = Field(default="password")
    mongo_database: str = Field(default="profile_app")
    mongo_collection: str = Field(default="profiles")
    mongo_timeout_ms: int = Field(
        default=2000,
        description="Server selection timeout; bounds the startup connectivity check",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def mongo_url(self) -> str:
        """Build the MongoDB connection URL from host, port and credentials."""
        if self.mongo_username:
            credentials = (
                f"{quote_plus(self.mongo_username)}:{quote_plus(self.mongo_password)}@"
            )
        else:
            credentials = ""
        return f"mongodb://{credentials}{self.mongo_host}:{self.mongo_port}/"

    # Rate Limiting
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable/disable rate limiting (disable for tests)",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()

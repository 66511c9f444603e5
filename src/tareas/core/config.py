"""Configuration management for Tareas.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded at application
startup and is immutable during runtime.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SECRET_KEY = "change-me-in-production-use-openssl-rand-hex-32"


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TAREAS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "Tareas"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 3000

    # Storage Settings
    data_dir: str = "./data"
    users_file: str = "users.json"
    tasks_file: str = "tareas.json"

    # Security Settings
    secret_key: str = Field(
        default=DEFAULT_SECRET_KEY,
        description="Secret key for JWT token signing",
    )
    jwt_algorithm: Literal["HS256", "HS384", "HS512"] = "HS256"
    access_token_expire_minutes: int = Field(default=60, gt=0)

    # Argon2 work factor
    password_time_cost: int = Field(default=3, ge=1)
    password_memory_cost: int = Field(default=65536, ge=8)  # KiB
    password_parallelism: int = Field(default=4, ge=1)

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Reject an empty signing secret."""
        if not v.strip():
            raise ValueError("secret_key must not be empty")
        return v

    @model_validator(mode="after")
    def validate_argon2_parameters(self) -> "Settings":
        """Argon2 needs at least 8 KiB of memory per lane."""
        if self.password_memory_cost < 8 * self.password_parallelism:
            raise ValueError("password_memory_cost must be at least 8 * password_parallelism")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"

    @property
    def uses_default_secret(self) -> bool:
        """Whether the signing secret is still the shipped placeholder."""
        return self.secret_key == DEFAULT_SECRET_KEY

    @property
    def users_path(self) -> Path:
        """Path of the users snapshot file."""
        return Path(self.data_dir) / self.users_file

    @property
    def tasks_path(self) -> Path:
        """Path of the tasks snapshot file."""
        return Path(self.data_dir) / self.tasks_file


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call. Settings are loaded once at startup.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()

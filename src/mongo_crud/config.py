"""Configuration management for the user CRUD service."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Checks for ENV_FILE environment variable first, then defaults to
    .env in the project root.

    Returns:
        Path to the .env file
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    # src/mongo_crud/config.py -> project root is two levels above the package
    project_dir = Path(__file__).parent.parent.parent
    return str(project_dir / ".env")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "mongo-crud"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "info"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    database_name: str = "mongo_crud"
    users_collection: str = "users"

    # Timeouts (seconds)
    connect_timeout_seconds: float = 10
    operation_timeout_seconds: float = 5

    # Answer 500 instead of 400 when DELETE receives a malformed id
    legacy_invalid_id_status: bool = False

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
    )


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()

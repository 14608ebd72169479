# gaudi\shared\config.py
from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class RepositoryBackend(str, Enum):
    MEMORY = "memory"
    SQLALCHEMY = "sqlalchemy"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic; every field can be
    overridden through the environment or a .env file.
    """

    # --- Application Meta ---
    APP_NAME: str = "gaudi"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "gaudi"

    # --- Persistence ---
    REPOSITORY_BACKEND: RepositoryBackend = RepositoryBackend.MEMORY
    DATABASE_URL: str = "sqlite:///./gaudi.db"
    DATABASE_ECHO: bool = False

    # --- Use Case Execution ---
    # When enabled, use cases built by the container raise UseCaseFailedError
    # instead of returning failure Responses.
    RAISE_ON_FAILURE: bool = False
    WITH_TRACEBACK: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..validators.config_validators import to_lowercase, to_uppercase


class Settings(BaseSettings):
    """
    Application settings loaded from the environment (and an optional .env file).

    Every field has a default so the service starts with no configuration at all.
    """

    # Environment
    ENV: Literal["development", "testing", "staging", "production"] = "development"
    APP_NAME: str = "employee-directory"

    # HTTP
    API_V1_PREFIX: str = "/api/v1"
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Employees
    DEFAULT_DEPARTMENT: str = "general"

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("/var/log/employee-directory")
    LOG_MAX_BYTES: int = 10_000_000  # 10 MB
    LOG_BACKUP_COUNT: int = 5

    # --- Validators ---
    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str | None) -> str | None:
        """
        Upper-case LOG_LEVEL before the Literal check, so `LOG_LEVEL=debug` is accepted.
        """
        return to_uppercase(v)

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str | None) -> str | None:
        """
        Lower-case LOG_FORMAT before the Literal check.
        """
        return to_lowercase(v)

    @field_validator("DEFAULT_DEPARTMENT")
    @classmethod
    def department_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("DEFAULT_DEPARTMENT must not be empty")
        return v

    model_config = SettingsConfigDict(
        # .env next to the project root (two levels above this package)
        env_file=str(Path(__file__).resolve().parents[3] / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Settings never change during a process lifetime; tests call get_settings.cache_clear().
@lru_cache()
def get_settings() -> Settings:
    return Settings()

# weaviate_community/config.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .auth import AuthApiKey

DEFAULT_TIMEOUT_S = 20.0
DEFAULT_BACKUP_POLL_INTERVAL_S = 1.0


class Settings(BaseSettings):
    # --- Connection ---
    url: str = "http://localhost:8080"
    api_key: Optional[str] = None
    timeout_s: float = Field(default=DEFAULT_TIMEOUT_S, gt=0)

    # --- Backups ---
    backup_poll_interval_s: float = Field(default=DEFAULT_BACKUP_POLL_INTERVAL_S, gt=0)

    # --- Logging ---
    log_level: str = "INFO"

    # WEAVIATE_URL, WEAVIATE_API_KEY, ... ; .env in the working directory is optional
    model_config = SettingsConfigDict(
        env_prefix="WEAVIATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("WEAVIATE_LOG_LEVEL must be a standard logging level name")
        return v


@dataclass(frozen=True)
class ClientConfig:
    base_url: str                         # e.g., "http://localhost:8080"
    auth: AuthApiKey | None = None
    timeout_s: float = DEFAULT_TIMEOUT_S
    backup_poll_interval_s: float = DEFAULT_BACKUP_POLL_INTERVAL_S
    headers: dict[str, str] = field(default_factory=dict)   # e.g. module API keys

    @classmethod
    def from_env(cls, settings: Settings | None = None) -> ClientConfig:
        s = settings or Settings()
        return cls(
            base_url=s.url,
            auth=AuthApiKey(s.api_key) if s.api_key else None,
            timeout_s=s.timeout_s,
            backup_poll_interval_s=s.backup_poll_interval_s,
        )

    def request_headers(self) -> dict[str, str]:
        headers = dict(self.headers)
        if self.auth is not None:
            headers.update(self.auth.headers())
        return headers

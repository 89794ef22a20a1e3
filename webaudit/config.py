# webaudit/config.py
import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Auditor configuration.
    Automatically loaded from environment variables and an optional .env file.
    """

    APP_NAME: str = "WebAudit"

    # ── FETCHING ─────────────────────────────────────────────────────────────
    USER_AGENT: str = Field(
        default="WebAuditBot/1.0 (+https://github.com/webaudit)",
        description="Sent on every audit request so site owners can identify the auditor",
    )
    AUDIT_TIMEOUT_MS: int = Field(default=10_000, gt=0)

    # ── COMPETITOR COMPARISON ────────────────────────────────────────────────
    COMPARE_MAX_CONCURRENCY: int = Field(default=4, ge=1)
    MAX_COMPETITORS: int = Field(default=10, ge=1)

    # ── LOGGING ──────────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = (v or "INFO").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            logger.warning("Unknown LOG_LEVEL %r, falling back to INFO", v)
            return "INFO"
        return level


# Cached singleton to avoid repeated instantiation
@lru_cache()
def get_settings() -> Settings:
    return Settings()

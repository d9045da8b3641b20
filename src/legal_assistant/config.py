"""
Configuration settings for the Legal Assistant service.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development (see .env.example).
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Bufete Jurídico Backend"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # === Gemini Configuration ===
    GEMINI_API_KEY: Optional[str] = None  # AI features are disabled when unset
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_MODEL: str = "gemini-2.5-flash-lite"
    GEMINI_TIMEOUT: int = 30  # seconds

    # === LLM Generation Parameters ===
    LLM_TEMPERATURE: float = 0.3
    LLM_MAX_TOKENS: int = 500
    DETAILED_TEMPERATURE: float = 0.5
    DETAILED_MAX_TOKENS: int = 800

    # === Retry ===
    AI_RETRY_MAX_ATTEMPTS: int = 3
    AI_RETRY_DELAY_MS: float = 1500
    AI_RETRY_BACKOFF_MULTIPLIER: float = 2.0
    RETRY_MAX_DELAY_MS: Optional[float] = None  # No cap by default

    # === Question Filtering ===
    FAQ_MIN_SCORE: int = 2
    AUTO_RESPONSE_MIN_CONFIDENCE: float = 0.5
    PROMPT_TEMPLATES_DIR: Optional[str] = None  # Defaults to the bundled prompts/

    # === HTTP ===
    FRONTEND_URL: str = "http://localhost:5173"
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "https://stackblitz.com",
    ]

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True

    @property
    def ai_configured(self) -> bool:
        """True when a non-blank Gemini API key is present."""
        return bool(self.GEMINI_API_KEY and self.GEMINI_API_KEY.strip())

    @model_validator(mode="after")
    def _check_retry_settings(self) -> "Settings":
        """Reject retry settings the executor would refuse on every request."""
        if self.AI_RETRY_MAX_ATTEMPTS < 1:
            raise ValueError("AI_RETRY_MAX_ATTEMPTS must be >= 1")
        if self.AI_RETRY_DELAY_MS < 0:
            raise ValueError("AI_RETRY_DELAY_MS must be >= 0")
        if self.AI_RETRY_BACKOFF_MULTIPLIER <= 0:
            raise ValueError("AI_RETRY_BACKOFF_MULTIPLIER must be > 0")
        if self.RETRY_MAX_DELAY_MS is not None and self.RETRY_MAX_DELAY_MS < self.AI_RETRY_DELAY_MS:
            raise ValueError(
                f"RETRY_MAX_DELAY_MS={self.RETRY_MAX_DELAY_MS:g} is below "
                f"AI_RETRY_DELAY_MS={self.AI_RETRY_DELAY_MS:g}"
            )
        return self


# Global settings instance
settings = Settings()

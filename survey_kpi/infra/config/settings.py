"""
Application configuration settings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=[".env", "../.env"],
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # OpenAI/LLM
    openai_api_key: str = Field("", alias="OPENAI_API_KEY")
    openai_model: str = Field("gpt-4o-mini", alias="OPENAI_MODEL")
    llm_temperature: float = Field(0.3, alias="OPENAI_TEMPERATURE")
    llm_max_tokens: int = Field(4000, alias="OPENAI_MAX_TOKENS")
    openai_base_url: Optional[str] = Field(None, alias="OPENAI_BASE_URL")
    openai_timeout: float = Field(60.0, alias="OPENAI_TIMEOUT")

    # KPI detection
    kpi_max_attempts: int = Field(3, ge=1, alias="KPI_MAX_ATTEMPTS")
    kpi_retry_initial_delay: float = Field(
        2.0, ge=0, alias="KPI_RETRY_INITIAL_DELAY"
    )  # seconds, doubled after each rate-limited attempt
    kpi_restrict_to_columns: bool = Field(False, alias="KPI_RESTRICT_TO_COLUMNS")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: str = Field("json", alias="LOG_FORMAT")


_settings = None


def get_settings() -> Settings:
    """Get settings instance (useful for dependency injection)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None

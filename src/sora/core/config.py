"""Application configuration via environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_prefix": "SORA_",
        "env_file": ".env",
        "extra": "ignore",
        "frozen": True,
        "populate_by_name": True,
    }

    # API keys — no prefix, so they match provider conventions
    gemini_api_key: str = Field(default="", validation_alias="GEMINI_API_KEY")
    weather_api_key: str = Field(default="", validation_alias="WEATHER_API_KEY")

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=3000, validation_alias="PORT")
    cors_origins_raw: str = Field(default="*", validation_alias="SORA_CORS_ORIGINS")

    # Gemini
    gemini_model: str = "gemini-2.0-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    max_attempts: int = 3

    # OpenWeatherMap
    weather_base_url: str = "https://api.openweathermap.org/data/2.5"

    # Outbound HTTP
    http_timeout: float = 30.0

    # Logging
    log_level: str = "INFO"
    log_file: Path | None = None

    @property
    def cors_origins(self) -> list[str]:
        raw = self.cors_origins_raw.strip()
        if not raw:
            return []
        return [x.strip() for x in raw.split(",") if x.strip()]


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

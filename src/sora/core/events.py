"""App startup/shutdown lifecycle events."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from sora.core.config import Settings
from sora.core.http import make_httpx_client
from sora.core.logging import setup_logging
from sora.llm.gemini import GeminiClient
from sora.weather.client import WeatherClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_file)

    http_client = make_httpx_client(timeout=settings.http_timeout)
    weather_client = WeatherClient(settings, http_client)
    gemini_client = GeminiClient(settings, http_client)
    app.state.weather_client = weather_client
    app.state.gemini_client = gemini_client

    logger.info("Sora backend starting up on port %d", settings.port)
    logger.info("Gemini API key configured: %s", "yes" if gemini_client.is_configured else "no")
    logger.info("Weather API key configured: %s", "yes" if weather_client.is_configured else "no")

    yield

    await http_client.aclose()
    logger.info("Sora backend shutting down")

"""Shared test fixtures."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

from sora.core.config import Settings

# Thursday 2026-01-01 00:00 UTC
JAN_1_2026 = 1767225600
THREE_HOURS = 3 * 60 * 60


def make_response(status_code: int = 200, json_data: Any = None, text: str | None = None) -> httpx.Response:
    """Build a real httpx.Response attached to a dummy request."""
    request = httpx.Request("GET", "https://upstream.test/")
    if text is not None:
        return httpx.Response(status_code, text=text, request=request)
    return httpx.Response(status_code, json=json_data, request=request)


def forecast_entry(dt: int, temp: float, main: str = "Clear", pod: str = "d") -> dict[str, Any]:
    return {
        "dt": dt,
        "main": {"temp": temp, "humidity": 60},
        "weather": [{"main": main, "description": f"{main.lower()} sky"}],
        "wind": {"speed": 5.0},
        "sys": {"pod": pod},
    }


def forecast_payload(
    days: int = 3,
    name: str = "Tokyo",
    timezone_offset: int = 0,
    start: int = JAN_1_2026,
) -> dict[str, Any]:
    """An OpenWeatherMap /forecast payload with 8 three-hourly entries per day."""
    entries = [
        forecast_entry(start + i * THREE_HOURS, 10.4 + i, "Clouds" if i % 8 else "Clear")
        for i in range(days * 8)
    ]
    return {
        "cod": "200",
        "list": entries,
        "city": {"name": name, "timezone": timezone_offset},
    }


def mock_http_client(**methods: Any) -> AsyncMock:
    """An AsyncMock httpx client; pass ``get=``/``post=`` return values or side effects."""
    client = AsyncMock(spec=httpx.AsyncClient)
    for name, value in methods.items():
        if isinstance(value, (list, BaseException)) or (
            isinstance(value, type) and issubclass(value, BaseException)
        ):
            setattr(client, name, AsyncMock(side_effect=value))
        else:
            setattr(client, name, AsyncMock(return_value=value))
    return client


@pytest.fixture
def settings() -> Settings:
    return Settings(
        gemini_api_key="test-gemini-key",
        weather_api_key="test-weather-key",
        log_level="DEBUG",
        _env_file=None,
    )

"""OpenWeatherMap forecast client — current conditions plus a 5-day summary."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx

from sora.core.config import Settings
from sora.core.errors import NotFound, UpstreamUnavailable
from sora.core.logging import truncate
from sora.weather.types import (
    CityName,
    Coordinates,
    DailyForecast,
    Location,
    WeatherSnapshot,
)

logger = logging.getLogger(__name__)

FORECAST_DAYS = 5
MS_TO_KMH = 3.6

# Short weekday labels indexed by datetime.weekday() (Monday == 0)
WEEKDAY_LABELS: dict[str, tuple[str, ...]] = {
    "en": ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    "ja": ("月", "火", "水", "木", "金", "土", "日"),
}


def api_language(lang: str) -> str:
    """Map a client language preference onto one the provider is asked for."""
    return "ja" if lang == "ja" else "en"


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def ms_to_kmh(speed: float) -> int:
    return round_half_up(speed * MS_TO_KMH)


def day_label(timestamp: int, lang: str, utc_offset: int = 0) -> str:
    """Short weekday label for a unix timestamp in the location's local time."""
    local = datetime.fromtimestamp(timestamp, tz=timezone.utc) + timedelta(seconds=utc_offset)
    return WEEKDAY_LABELS[api_language(lang)][local.weekday()]


def summarize_forecast(
    entries: list[dict[str, Any]], lang: str, utc_offset: int = 0
) -> list[DailyForecast]:
    """Keep the first entry seen for each day, up to ``FORECAST_DAYS`` days."""
    days: list[DailyForecast] = []
    seen: set[str] = set()
    for item in entries:
        label = day_label(item["dt"], lang, utc_offset)
        if label in seen:
            continue
        seen.add(label)
        days.append(
            DailyForecast(
                date=label,
                temp=round_half_up(item["main"]["temp"]),
                condition=item["weather"][0]["main"],
            )
        )
        if len(days) >= FORECAST_DAYS:
            break
    return days


def parse_forecast(data: dict[str, Any], lang: str) -> WeatherSnapshot:
    """Reshape a ``/forecast`` payload into a WeatherSnapshot."""
    entries = data["list"]
    current = entries[0]
    city = data["city"]
    utc_offset = int(city.get("timezone") or 0)

    return WeatherSnapshot(
        location=city["name"],
        temperature=round_half_up(current["main"]["temp"]),
        condition=current["weather"][0]["main"],
        description=current["weather"][0].get("description", ""),
        humidity=current["main"]["humidity"],
        wind_speed=ms_to_kmh(current["wind"]["speed"]),
        is_day=(current.get("sys") or {}).get("pod") == "d",
        forecast=summarize_forecast(entries, lang, utc_offset),
    )


class WeatherClient:
    """Looks up forecasts by city name or coordinates."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient) -> None:
        self._settings = settings
        self._client = client

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.weather_api_key)

    @property
    def forecast_url(self) -> str:
        return f"{self._settings.weather_base_url.rstrip('/')}/forecast"

    def build_params(self, location: Location, lang: str = "en") -> dict[str, Any]:
        params: dict[str, Any] = {
            "appid": self._settings.weather_api_key,
            "units": "metric",
            "lang": api_language(lang),
        }
        if isinstance(location, CityName):
            params["q"] = location.name
        elif isinstance(location, Coordinates):
            params["lat"] = location.lat
            params["lon"] = location.lon
        else:
            raise TypeError(f"Unsupported location: {location!r}")
        return params

    async def fetch(self, location: Location, lang: str = "en") -> WeatherSnapshot:
        params = self.build_params(location, lang)

        try:
            response = await self._client.get(self.forecast_url, params=params)
        except httpx.HTTPError as e:
            logger.error("Weather request failed for %s: %s", location, e)
            raise UpstreamUnavailable() from e

        if response.status_code == 404:
            logger.info("Weather provider has no match for %s", location)
            raise NotFound("Location not found")
        if not response.is_success:
            logger.error(
                "Weather API error %d for %s: %s",
                response.status_code,
                location,
                truncate(response.text),
            )
            raise UpstreamUnavailable()

        try:
            return parse_forecast(response.json(), lang)
        except (ValueError, KeyError, IndexError, TypeError, AttributeError, OverflowError, OSError) as e:
            logger.error("Malformed weather payload for %s: %s", location, e)
            raise UpstreamUnavailable() from e

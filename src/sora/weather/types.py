"""Types for weather lookups."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class CityName:
    name: str


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


# A lookup target is exactly one of these.
Location = Union[CityName, Coordinates]


@dataclass
class DailyForecast:
    date: str
    temp: int
    condition: str


@dataclass
class WeatherSnapshot:
    location: str
    temperature: int
    condition: str
    description: str
    humidity: int
    wind_speed: int  # km/h
    is_day: bool
    forecast: list[DailyForecast] = field(default_factory=list)

    def to_api(self) -> dict[str, Any]:
        return {
            "location": self.location,
            "temperature": self.temperature,
            "condition": self.condition,
            "description": self.description,
            "humidity": self.humidity,
            "windSpeed": self.wind_speed,
            "isDay": self.is_day,
            "forecast": [asdict(day) for day in self.forecast],
        }

"""Pydantic request/response models for the API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from sora.core.errors import InvalidRequest
from sora.llm.types import ChatTurn, Role
from sora.weather.types import CityName, Coordinates, Location


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: str


class ErrorResponse(BaseModel):
    error: str


class WeatherQuery(BaseModel):
    city: str | None = None
    q: str | None = None
    lat: float | None = None
    lon: float | None = None
    lang: str = "en"

    def to_location(self) -> Location:
        name = (self.city or self.q or "").strip()
        if name:
            return CityName(name)
        if self.lat is not None and self.lon is not None:
            return Coordinates(lat=self.lat, lon=self.lon)
        raise InvalidRequest("City or coordinates are required")


class DailyForecastBody(BaseModel):
    date: str
    temp: int
    condition: str


class WeatherResponse(BaseModel):
    location: str
    temperature: int
    condition: str
    description: str
    humidity: int
    windSpeed: int
    isDay: bool
    forecast: list[DailyForecastBody] = []


class ExtractCityRequest(BaseModel):
    query: str | None = None
    text: str | None = None


class CityResponse(BaseModel):
    city: str | None


class ChatTurnBody(BaseModel):
    id: str = ""
    role: Role
    text: str
    timestamp: int = 0

    def to_turn(self) -> ChatTurn:
        return ChatTurn(role=self.role, text=self.text, timestamp=self.timestamp, id=self.id)


class ChatRequest(BaseModel):
    message: str | None = None
    weather: dict[str, Any] | None = None
    history: list[ChatTurnBody] = []
    language: str = "en"


class ChatResponse(BaseModel):
    text: str


class TranslateItem(BaseModel):
    id: str
    text: str


class TranslateRequest(BaseModel):
    messages: list[TranslateItem] | None = None
    target_lang_name: str | None = Field(default=None, alias="targetLangName")

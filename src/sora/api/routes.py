"""API routes — health, weather lookup, and the Gemini-backed endpoints."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, Request

from sora.api.schemas import (
    ChatRequest,
    ChatResponse,
    CityResponse,
    ExtractCityRequest,
    HealthResponse,
    TranslateRequest,
    WeatherQuery,
    WeatherResponse,
)
from sora.core.errors import GenerationFailed, InvalidRequest
from sora.llm import prompts
from sora.llm.gemini import GeminiClient
from sora.weather.client import WeatherClient

logger = logging.getLogger(__name__)

router = APIRouter()
api_router = APIRouter(prefix="/api", tags=["api"])


def get_weather_client(request: Request) -> WeatherClient:
    return request.app.state.weather_client


def get_gemini_client(request: Request) -> GeminiClient:
    return request.app.state.gemini_client


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(timestamp=datetime.now(timezone.utc).isoformat())


# -- Weather -----------------------------------------------------------------


async def _lookup_weather(query: WeatherQuery, weather: WeatherClient) -> dict[str, Any]:
    location = query.to_location()
    snapshot = await weather.fetch(location, query.lang)
    return snapshot.to_api()


@api_router.get("/weather", response_model=WeatherResponse)
async def get_weather(
    city: str | None = None,
    q: str | None = None,
    lat: float | None = None,
    lon: float | None = None,
    lang: str = "en",
    weather: WeatherClient = Depends(get_weather_client),
):
    query = WeatherQuery(city=city, q=q, lat=lat, lon=lon, lang=lang)
    return await _lookup_weather(query, weather)


@api_router.post("/weather", response_model=WeatherResponse)
async def post_weather(
    body: WeatherQuery | None = None,
    weather: WeatherClient = Depends(get_weather_client),
):
    return await _lookup_weather(body or WeatherQuery(), weather)


# -- Gemini ------------------------------------------------------------------


@api_router.post("/extract-city", response_model=CityResponse)
async def extract_city(
    body: ExtractCityRequest,
    gemini: GeminiClient = Depends(get_gemini_client),
) -> CityResponse:
    text = (body.query or body.text or "").strip()
    if not text:
        raise InvalidRequest("Query text is required")

    try:
        result = await gemini.generate(prompts.city_extraction_request(text))
    except GenerationFailed as e:
        logger.error("City extraction failed: %s", e)
        raise GenerationFailed("Failed to extract city") from e

    return CityResponse(city=prompts.parse_city(result))


@api_router.post("/chat", response_model=ChatResponse)
async def chat(
    body: ChatRequest,
    gemini: GeminiClient = Depends(get_gemini_client),
) -> ChatResponse:
    message = (body.message or "").strip()
    if not message:
        raise InvalidRequest("Message is required")

    request = prompts.chat_request(
        message,
        weather=body.weather,
        history=[turn.to_turn() for turn in body.history],
        language=body.language,
    )
    try:
        result = await gemini.generate(request)
    except GenerationFailed as e:
        logger.error("Chat generation failed: %s", e)
        raise GenerationFailed("Failed to generate response") from e

    return ChatResponse(text=result or "")


@api_router.post("/translate")
async def translate(
    body: TranslateRequest,
    gemini: GeminiClient = Depends(get_gemini_client),
) -> dict[str, Any]:
    if body.messages is None or not body.target_lang_name:
        raise InvalidRequest("messages and targetLangName are required")
    if not body.messages:
        return {}

    source = {item.id: item.text for item in body.messages}
    try:
        result = await gemini.generate(
            prompts.translation_request(source, body.target_lang_name)
        )
    except GenerationFailed as e:
        logger.error("Translation failed: %s", e)
        raise GenerationFailed("Translation failed") from e

    try:
        translations = json.loads(result or "")
    except ValueError as e:
        logger.error("Translation result is not JSON: %r", result)
        raise GenerationFailed("Translation failed") from e
    if not isinstance(translations, dict):
        logger.error("Translation result is not an object: %r", result)
        raise GenerationFailed("Translation failed")

    return translations

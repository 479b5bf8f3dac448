"""Prompt builders for city extraction, chat, and translation."""

from __future__ import annotations

import json
from typing import Any

from sora.llm.types import ChatTurn, GenerationRequest, Role

NO_CITY = "NONE"

# Quote characters models like to wrap a bare answer in
_QUOTES = "\"'`“”‘’「」『』"

CITY_EXTRACTION_INSTRUCTION = (
    "You extract city names from user messages about weather. "
    "Reply with the city name only, in English, with no punctuation or explanation. "
    f"If the message does not mention a specific city, reply with exactly {NO_CITY}."
)

LANGUAGE_NAMES = {"en": "English", "ja": "Japanese"}


def language_name(code: str) -> str:
    return LANGUAGE_NAMES.get(code, LANGUAGE_NAMES["en"])


def city_extraction_request(text: str) -> GenerationRequest:
    return GenerationRequest(
        prompt=f"Message: {text}\nCity:",
        system_instruction=CITY_EXTRACTION_INSTRUCTION,
    )


def parse_city(result: str | None) -> str | None:
    """Turn the model's answer into a city name, or None when there is none."""
    if result is None:
        return None
    city = result.strip().strip(_QUOTES).strip()
    if not city or city.upper() == NO_CITY:
        return None
    return city


def format_transcript(history: list[ChatTurn]) -> str:
    lines = []
    for turn in history:
        speaker = "User" if turn.role == Role.USER else "Sora"
        lines.append(f"{speaker}: {turn.text}")
    return "\n".join(lines)


def format_weather(weather: dict[str, Any]) -> str:
    lines = [
        f"Location: {weather.get('location', 'unknown')}",
        f"Temperature: {weather.get('temperature', '?')}°C",
        f"Condition: {weather.get('condition', '?')}",
    ]
    if weather.get("description"):
        lines.append(f"Description: {weather['description']}")
    lines += [
        f"Humidity: {weather.get('humidity', '?')}%",
        f"Wind speed: {weather.get('windSpeed', '?')} km/h",
        f"Time of day: {'day' if weather.get('isDay', True) else 'night'}",
    ]
    forecast = weather.get("forecast") or []
    if forecast:
        days = ", ".join(
            f"{d.get('date', '?')} {d.get('temp', '?')}°C {d.get('condition', '?')}"
            for d in forecast
        )
        lines.append(f"Forecast: {days}")
    return "\n".join(lines)


def chat_system_prompt(
    weather: dict[str, Any] | None,
    history: list[ChatTurn],
    language: str,
) -> str:
    """Build Sora's system instruction for a chat turn."""
    sections = [
        "You are Sora, a friendly weather assistant. "
        "Answer questions about the weather and give practical advice "
        "(clothing, umbrellas, outdoor plans). Keep replies short and conversational.",
        f"Always reply in {language_name(language)}.",
    ]
    if weather:
        sections.append("## Current weather\n" + format_weather(weather))
    else:
        sections.append("No weather data is available yet. Ask the user which city they mean.")
    if history:
        sections.append("## Conversation so far\n" + format_transcript(history))
    return "\n\n".join(sections)


def chat_request(
    message: str,
    weather: dict[str, Any] | None,
    history: list[ChatTurn],
    language: str,
) -> GenerationRequest:
    return GenerationRequest(
        prompt=message,
        system_instruction=chat_system_prompt(weather, history, language),
    )


def translation_request(messages: dict[str, str], target_language: str) -> GenerationRequest:
    """Ask for a JSON object mapping each message id to its translation."""
    return GenerationRequest(
        prompt=json.dumps(messages, ensure_ascii=False),
        system_instruction=(
            f"Translate each value of the JSON object into {target_language}. "
            "Return a JSON object with exactly the same keys, where each value is "
            "the translated text. Do not add, drop, or rename keys."
        ),
        json_output=True,
    )

"""Tests for prompt construction and result parsing."""

from __future__ import annotations

import json

import pytest

from sora.llm import prompts
from sora.llm.types import ChatTurn, Role


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Tokyo", "Tokyo"),
        ("  Osaka\n", "Osaka"),
        ('"Paris"', "Paris"),
        ("'New York'", "New York"),
        ("“Kyoto”", "Kyoto"),
        ("NONE", None),
        ("none", None),
        ('"NONE"', None),
        ("", None),
        ("   \n", None),
        (None, None),
    ],
)
def test_parse_city(raw, expected):
    assert prompts.parse_city(raw) == expected


def test_city_extraction_request():
    request = prompts.city_extraction_request("Is it raining in Sapporo?")
    assert "Is it raining in Sapporo?" in request.prompt
    assert "NONE" in request.system_instruction
    assert request.json_output is False


def test_format_transcript():
    history = [
        ChatTurn(role=Role.USER, text="Hi", timestamp=1),
        ChatTurn(role=Role.ASSISTANT, text="Hello!", timestamp=2),
    ]
    assert prompts.format_transcript(history) == "User: Hi\nSora: Hello!"


def test_chat_system_prompt_includes_weather_and_history():
    weather = {
        "location": "Tokyo",
        "temperature": 12,
        "condition": "Clouds",
        "humidity": 70,
        "windSpeed": 14,
        "isDay": False,
        "forecast": [{"date": "Fri", "temp": 13, "condition": "Rain"}],
    }
    history = [ChatTurn(role=Role.USER, text="Should I bring an umbrella?")]

    system = prompts.chat_system_prompt(weather, history, "ja")

    assert "Japanese" in system
    assert "Tokyo" in system
    assert "12°C" in system
    assert "night" in system
    assert "Fri 13°C Rain" in system
    assert "User: Should I bring an umbrella?" in system


def test_chat_system_prompt_without_weather():
    system = prompts.chat_system_prompt(None, [], "en")
    assert "English" in system
    assert "No weather data" in system
    assert "Conversation so far" not in system


def test_chat_request_uses_message_as_prompt():
    request = prompts.chat_request("What should I wear?", None, [], "en")
    assert request.prompt == "What should I wear?"
    assert request.system_instruction


def test_translation_request_is_structured():
    request = prompts.translation_request({"m1": "Hello", "m2": "雨です"}, "French")

    assert request.json_output is True
    assert "French" in request.system_instruction
    assert json.loads(request.prompt) == {"m1": "Hello", "m2": "雨です"}

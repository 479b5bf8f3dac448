"""Types for language-model interactions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass
class ChatTurn:
    role: Role
    text: str
    timestamp: int = 0  # epoch millis, as sent by the front-end
    id: str = ""


@dataclass(frozen=True)
class GenerationRequest:
    prompt: str
    system_instruction: str | None = None
    json_output: bool = False  # structured-output mode

    def to_api(self) -> dict:
        body: dict = {"contents": [{"role": "user", "parts": [{"text": self.prompt}]}]}
        if self.system_instruction:
            body["systemInstruction"] = {"parts": [{"text": self.system_instruction}]}
        if self.json_output:
            body["generationConfig"] = {"responseMimeType": "application/json"}
        return body

"""Error types surfaced to API callers.

Each error carries the HTTP status it maps to and a message that is safe to
return to the client.  Upstream details belong in the log, not in ``message``.
"""

from __future__ import annotations


class SoraError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequest(SoraError):
    status_code = 400
    default_message = "Invalid request"


class NotFound(SoraError):
    status_code = 404
    default_message = "Not found"


class UpstreamUnavailable(SoraError):
    status_code = 500
    default_message = "Weather unavailable"


class GenerationFailed(SoraError):
    status_code = 500
    default_message = "Generation failed"

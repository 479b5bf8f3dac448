"""Outbound httpx client shared by the weather and Gemini clients.

One client is built per process in the app lifespan so both upstream
providers reuse the same connection pool and timeout.
"""

from __future__ import annotations

import ssl
from typing import Any

import httpx

DEFAULT_USER_AGENT = "sora-backend/0.1.0"


def make_httpx_client(timeout: float = 30.0, **kwargs: Any) -> httpx.AsyncClient:
    """Create the ``httpx.AsyncClient`` used for upstream calls.

    Verification uses ``ssl.create_default_context()`` so the system
    certificate store is trusted. Extra keyword arguments go straight to
    ``httpx.AsyncClient``; a ``User-Agent`` header is added unless given.
    """
    kwargs.setdefault("verify", ssl.create_default_context())
    headers = {"User-Agent": DEFAULT_USER_AGENT, **(kwargs.pop("headers", None) or {})}
    return httpx.AsyncClient(timeout=timeout, headers=headers, **kwargs)

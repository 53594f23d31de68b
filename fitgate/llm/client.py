# -*- coding: utf-8 -*-
"""Mistral chat-completions helpers shared by food analysis and chat."""

from __future__ import annotations

import logging
from typing import Any, Dict

import httpx
from fastapi import Depends

from ..config import Settings, get_settings
from ..upstream import ConfigError, get_transport, relay_error

logger = logging.getLogger(__name__)

FALLBACK_ERROR = "Mistral error."


def _concat_text_parts(parts: object) -> str:
    if not isinstance(parts, list):
        return ""
    out: list[str] = []
    for part in parts:
        if not isinstance(part, dict):
            continue
        ptype = part.get("type")
        if ptype and ptype != "text":
            continue
        val = part.get("text")
        if isinstance(val, str) and val:
            out.append(val)
    return "".join(out)


def extract_reply(data: object) -> str:
    """Return ``choices[0].message.content`` as text ("" when absent)."""
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return ""
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    if not isinstance(message, dict):
        return ""
    content = message.get("content")
    if isinstance(content, str):
        return content
    # Newer models may answer with a list of typed chunks.
    return _concat_text_parts(content)


class MistralClient:
    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.api_key = settings.mistral_api_key
        self.base_url = settings.mistral_base_url.rstrip("/")
        self.vision_model = settings.mistral_vision_model
        self.text_model = settings.mistral_text_model
        self.timeout = settings.upstream_timeout
        self._transport = transport

    @property
    def completions_url(self) -> str:
        if self.base_url.endswith("/chat/completions"):
            return self.base_url
        return f"{self.base_url}/chat/completions"

    def require_key(self) -> None:
        if not self.api_key:
            raise ConfigError("Mistral API key is not configured.")

    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def post(self, payload: Dict[str, Any]) -> httpx.Response:
        """POST one chat-completion request and return the raw response."""
        self.require_key()
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.post(self.completions_url, headers=self.headers(), json=payload)
        logger.info("Mistral POST model=%s -> %s", payload.get("model"), resp.status_code)
        return resp

    async def complete(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        resp = await self.post(payload)
        if not resp.is_success:
            raise relay_error(resp, FALLBACK_ERROR)
        return resp.json()


def get_mistral_client(
    settings: Settings = Depends(get_settings),
    transport: httpx.AsyncBaseTransport | None = Depends(get_transport),
) -> MistralClient:
    return MistralClient(settings, transport=transport)

# -*- coding: utf-8 -*-
"""Exercise catalog — ExerciseDB proxy client."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote, urlencode

import httpx

from ..config import Settings
from ..upstream import ConfigError, loads_strict, relay_error

logger = logging.getLogger(__name__)

_FALLBACK_ERROR = "ExerciseDB error."


def build_query(params: Mapping[str, Optional[str]]) -> str:
    """Build ``?offset=..&limit=..`` from the present filters only.

    ``offset``/``limit`` are kept whenever supplied (even empty); the sort
    options are dropped when empty.
    """
    pairs: list[tuple[str, str]] = []
    for key in ("offset", "limit"):
        value = params.get(key)
        if value is not None:
            pairs.append((key, str(value)))
    for key in ("sortMethod", "sortOrder"):
        value = params.get(key)
        if value:
            pairs.append((key, str(value)))
    value = urlencode(pairs)
    return f"?{value}" if value else ""


def _segment(value: str) -> str:
    return quote(str(value), safe="")


class ExerciseDBClient:
    """Forward GET requests to the configured ExerciseDB base URL."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.base_url = settings.exercisedb_base_url
        self.api_key = settings.exercisedb_api_key
        self.host = settings.exercisedb_host
        self.configured = settings.exercisedb_configured
        self.timeout = settings.upstream_timeout
        self._transport = transport

    def _require_config(self) -> str:
        if not self.configured:
            raise ConfigError("ExerciseDB is not configured.")
        return self.base_url[:-1] if self.base_url.endswith("/") else self.base_url

    def headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "X-RapidAPI-Key": self.api_key,
        }
        if self.host:
            headers["X-RapidAPI-Host"] = self.host
        return headers

    def exercises_url(self, params: Mapping[str, Optional[str]]) -> str:
        base = self._require_config()
        query = build_query(params)
        body_part = params.get("bodyPart")
        if body_part:
            return f"{base}/exercises/bodyPart/{_segment(body_part)}{query}"
        return f"{base}/exercises{query}"

    def body_parts_url(self) -> str:
        return f"{self._require_config()}/exercises/bodyPartList"

    def exercise_url(self, exercise_id: str) -> str:
        return f"{self._require_config()}/exercises/exercise/{_segment(exercise_id)}"

    async def _get(self, url: str) -> Any:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.get(url, headers=self.headers())
        logger.info("ExerciseDB GET %s -> %s", url, resp.status_code)
        if not resp.is_success:
            raise relay_error(resp, _FALLBACK_ERROR)
        return loads_strict(resp.text)

    async def list_exercises(self, params: Mapping[str, Optional[str]]) -> Any:
        return await self._get(self.exercises_url(params))

    async def list_body_parts(self) -> Any:
        return await self._get(self.body_parts_url())

    async def get_exercise(self, exercise_id: str) -> Any:
        return await self._get(self.exercise_url(exercise_id))

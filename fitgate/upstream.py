# -*- coding: utf-8 -*-
"""Errors and helpers shared by the outbound API clients."""

from __future__ import annotations

import json
import logging
from typing import Any, Awaitable, TypeVar

import httpx
from fastapi import HTTPException

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConfigError(ValueError):
    """A required credential or URL is not configured; no request was sent."""


class UpstreamError(RuntimeError):
    """The remote service answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __repr__(self) -> str:
        return f"UpstreamError(status_code={self.status_code}, message={self.message!r})"


def relay_error(resp: httpx.Response, fallback: str) -> UpstreamError:
    """Wrap a failed response so its status and body text reach the caller verbatim."""
    text = resp.text or ""
    return UpstreamError(resp.status_code, text or fallback)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def loads_strict(text: str) -> Any:
    """Decode JSON, rejecting the NaN and Infinity literals json.loads allows."""
    return json.loads(text, parse_constant=_reject_constant)


def get_transport() -> httpx.AsyncBaseTransport | None:
    """FastAPI dependency; ``None`` lets httpx open real connections."""
    return None


async def proxy_call(call: Awaitable[T], failure_message: str) -> T:
    """Await an upstream call and translate its failures into HTTP errors.

    Config errors become 400, upstream errors keep their status and text, and
    anything else is logged and reported as a generic 500.
    """
    try:
        return await call
    except ConfigError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except UpstreamError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc
    except Exception as exc:
        logger.exception("upstream call failed: %s", failure_message)
        raise HTTPException(status_code=500, detail=failure_message) from exc

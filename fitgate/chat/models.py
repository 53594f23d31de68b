# -*- coding: utf-8 -*-
"""Chat — Pydantic models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class ChatTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: str
    timestamp: str = Field(default_factory=_utc_now)


class ChatRequest(BaseModel):
    message: Optional[str] = None
    # Prior turns are forwarded to the model as-is.
    history: Optional[List[Any]] = None
    ragQuery: Optional[str] = None
    userId: Optional[str] = None


class ChatResponse(BaseModel):
    reply: str
    rag: List[Dict[str, Any]]


class ChatHistoryResponse(BaseModel):
    history: List[ChatTurn]


class ChatResetRequest(BaseModel):
    userId: Optional[str] = None

# -*- coding: utf-8 -*-
"""Exercise catalog — API endpoints."""

from __future__ import annotations

from typing import Any, Optional

import httpx
from fastapi import APIRouter, Depends, Query

from ..config import Settings, get_settings
from ..upstream import get_transport, proxy_call
from .client import ExerciseDBClient

router = APIRouter(prefix="/exercises", tags=["Exercises"])


def get_exercise_client(
    settings: Settings = Depends(get_settings),
    transport: httpx.AsyncBaseTransport | None = Depends(get_transport),
) -> ExerciseDBClient:
    return ExerciseDBClient(settings, transport=transport)


@router.get("", summary="List exercises (optionally by body part)")
async def list_exercises(
    bodyPart: Optional[str] = Query(default=None),
    offset: Optional[str] = Query(default=None),
    limit: Optional[str] = Query(default=None),
    sortMethod: Optional[str] = Query(default=None),
    sortOrder: Optional[str] = Query(default=None),
    client: ExerciseDBClient = Depends(get_exercise_client),
) -> Any:
    params = {
        "bodyPart": bodyPart,
        "offset": offset,
        "limit": limit,
        "sortMethod": sortMethod,
        "sortOrder": sortOrder,
    }
    return await proxy_call(client.list_exercises(params), "Failed to fetch exercises.")


# Declared before "/{exercise_id}" so the literal path wins.
@router.get("/body-parts", summary="List body parts")
async def list_body_parts(client: ExerciseDBClient = Depends(get_exercise_client)) -> Any:
    return await proxy_call(client.list_body_parts(), "Failed to fetch body parts.")


@router.get("/{exercise_id}", summary="Get a single exercise")
async def get_exercise(exercise_id: str, client: ExerciseDBClient = Depends(get_exercise_client)) -> Any:
    return await proxy_call(client.get_exercise(exercise_id), "Failed to fetch exercise.")

# -*- coding: utf-8 -*-
"""Food analysis — API endpoints."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException

from ..llm.client import MistralClient, get_mistral_client
from ..upstream import proxy_call
from .models import FoodAnalyzeRequest, MacroAnalysis
from .vision import analyze_food

router = APIRouter(prefix="/food", tags=["Food"])


@router.post(
    "/analyze",
    summary="Estimate calories and macros from a meal photo",
    responses={200: {"model": MacroAnalysis}},
)
async def analyze(
    request: Optional[FoodAnalyzeRequest] = None,
    client: MistralClient = Depends(get_mistral_client),
) -> Any:
    image, is_base64 = (request or FoodAnalyzeRequest()).image()
    if not image:
        raise HTTPException(status_code=400, detail="imageUrl is required.")
    return await proxy_call(analyze_food(client, image, is_base64=is_base64), "Food analysis failed.")

# -*- coding: utf-8 -*-
"""Food analysis — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class FoodAnalyzeRequest(BaseModel):
    imageUrl: Optional[str] = Field(None, description="Remote URL or data URI")
    image_url: Optional[str] = Field(None, description="Alias of imageUrl")
    imageBase64: Optional[str] = Field(None, description="Raw base64 without data-url prefix")

    def image(self) -> tuple[str, bool]:
        """Return ``(value, is_base64)`` for the first non-empty image field."""
        if self.imageUrl:
            return self.imageUrl, False
        if self.image_url:
            return self.image_url, False
        if self.imageBase64:
            return self.imageBase64, True
        return "", False


class FoodItem(BaseModel):
    name: str
    calories: Optional[float] = None
    protein_g: Optional[float] = None
    carbs_g: Optional[float] = None
    fat_g: Optional[float] = None


class MacroAnalysis(BaseModel):
    """Shape the vision model is asked to produce; documented, not enforced."""

    items: List[FoodItem] = []
    totalCalories: Optional[float] = None
    protein_g: Optional[float] = None
    carbs_g: Optional[float] = None
    fat_g: Optional[float] = None

# -*- coding: utf-8 -*-
"""
RAG API endpoints for keyword search over the static documents.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from .documents import get_documents
from .ranker import rank

router = APIRouter(prefix="/rag", tags=["RAG"])


class SearchRequest(BaseModel):
    query: Optional[str] = Field(None, description="Search query")


class SearchResponse(BaseModel):
    matches: List[Dict[str, Any]]


@router.post("/search", response_model=SearchResponse)
def search(
    request: Optional[SearchRequest] = None,
    documents: List[Dict[str, Any]] = Depends(get_documents),
):
    """Rank the documents against a query."""
    query = request.query if request else None
    if not query:
        raise HTTPException(status_code=400, detail="query is required.")
    return SearchResponse(matches=rank(documents, query))

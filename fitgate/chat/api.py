# -*- coding: utf-8 -*-
"""Chat — API endpoints (message/history/reset)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException

from ..llm.client import MistralClient, get_mistral_client
from ..rag.documents import get_documents
from ..upstream import proxy_call
from .models import ChatHistoryResponse, ChatRequest, ChatResetRequest, ChatResponse
from .service import chat, resolve_user_id
from .store import ChatSessionStore, get_chat_store

router = APIRouter(prefix="/chat", tags=["Chat"])


@router.post("", response_model=ChatResponse, summary="Send a message to the coach")
async def send_chat_message(
    request: Optional[ChatRequest] = None,
    x_user_id: Optional[str] = Header(default=None),
    client: MistralClient = Depends(get_mistral_client),
    store: ChatSessionStore = Depends(get_chat_store),
    documents: List[Dict[str, Any]] = Depends(get_documents),
):
    body = request or ChatRequest()
    if not body.message:
        raise HTTPException(status_code=400, detail="message is required.")

    result = await proxy_call(
        chat(
            client,
            store,
            documents,
            user_id=resolve_user_id(x_user_id, body.userId),
            message=body.message,
            history=body.history,
            rag_query=body.ragQuery,
        ),
        "Chat failed.",
    )
    return ChatResponse(**result)


@router.get("/history", response_model=ChatHistoryResponse, summary="Get my chat history")
def chat_history(
    x_user_id: Optional[str] = Header(default=None),
    store: ChatSessionStore = Depends(get_chat_store),
):
    return ChatHistoryResponse(history=store.get(resolve_user_id(x_user_id)))


@router.post("/reset", summary="Forget my chat history")
def chat_reset(
    request: Optional[ChatResetRequest] = None,
    x_user_id: Optional[str] = Header(default=None),
    store: ChatSessionStore = Depends(get_chat_store),
):
    store.reset(resolve_user_id(x_user_id, request.userId if request else None))
    return {"ok": True}

# -*- coding: utf-8 -*-
"""Chat — message assembly and the Mistral text-model call."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..llm.client import MistralClient, extract_reply
from ..rag.ranker import rank
from .models import ChatTurn
from .store import ChatSessionStore

ANONYMOUS_USER = "anonymous"
TEMPERATURE = 0.3

SYSTEM_PROMPT = (
    "You are a friendly fitness and nutrition coach. "
    "Give practical, safe, concise advice about training, meals and recovery. "
    "If a question needs a medical professional, say so."
)


def resolve_user_id(header_value: Optional[str], body_value: Optional[str] = None) -> str:
    return header_value or body_value or ANONYMOUS_USER


def context_message(matches: Sequence[Dict[str, Any]]) -> Dict[str, str]:
    lines = "\n".join(f"- {m.get('text', '')}" for m in matches)
    return {"role": "system", "content": f"Use the following context when relevant:\n{lines}"}


def build_messages(
    message: str,
    history: Optional[Sequence[Any]] = None,
    matches: Optional[Sequence[Dict[str, Any]]] = None,
) -> List[Any]:
    messages: List[Any] = [{"role": "system", "content": SYSTEM_PROMPT}]
    if matches:
        messages.append(context_message(matches))
    messages.extend(history or [])
    messages.append({"role": "user", "content": message})
    return messages


async def chat(
    client: MistralClient,
    store: ChatSessionStore,
    documents: Sequence[Dict[str, Any]],
    *,
    user_id: str,
    message: str,
    history: Optional[Sequence[Any]] = None,
    rag_query: Optional[str] = None,
) -> Dict[str, Any]:
    """Answer one message and record the exchange in the user's session."""
    client.require_key()
    user_turn = ChatTurn(role="user", content=message)
    matches = rank(documents, rag_query or message)

    data = await client.complete(
        {
            "model": client.text_model,
            "temperature": TEMPERATURE,
            "messages": build_messages(message, history, matches),
        }
    )
    reply = extract_reply(data)

    store.extend(user_id, [user_turn, ChatTurn(role="assistant", content=reply)])
    return {"reply": reply, "rag": matches}

# -*- coding: utf-8 -*-
"""Chat — per-user session history (process memory only)."""

from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Protocol

from .models import ChatTurn

MAX_TURNS = 40


class ChatSessionStore(Protocol):
    def get(self, user_id: str) -> List[ChatTurn]: ...

    def append(self, user_id: str, turn: ChatTurn) -> None: ...

    def extend(self, user_id: str, turns: Iterable[ChatTurn]) -> None: ...

    def reset(self, user_id: str) -> None: ...


class InMemoryChatSessionStore:
    """Keep the most recent ``max_turns`` turns per user.

    Every operation holds one lock, so concurrent requests for the same user
    cannot lose each other's turns. Turns added by one ``extend`` call stay
    adjacent.
    """

    def __init__(self, max_turns: int = MAX_TURNS) -> None:
        self.max_turns = max_turns
        self._sessions: Dict[str, List[ChatTurn]] = {}
        self._lock = threading.Lock()

    def get(self, user_id: str) -> List[ChatTurn]:
        with self._lock:
            return list(self._sessions.get(user_id, []))

    def append(self, user_id: str, turn: ChatTurn) -> None:
        self.extend(user_id, [turn])

    def extend(self, user_id: str, turns: Iterable[ChatTurn]) -> None:
        with self._lock:
            history = self._sessions.setdefault(user_id, [])
            history.extend(turns)
            if len(history) > self.max_turns:
                del history[: len(history) - self.max_turns]

    def reset(self, user_id: str) -> None:
        with self._lock:
            self._sessions.pop(user_id, None)


chat_store = InMemoryChatSessionStore()


def get_chat_store() -> ChatSessionStore:
    return chat_store

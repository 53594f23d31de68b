# -*- coding: utf-8 -*-
"""Retrieval documents bootstrapped from configuration."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from ..config import settings

logger = logging.getLogger(__name__)

_documents: Optional[List[Dict[str, Any]]] = None


def load_documents(raw: str | None) -> List[Dict[str, Any]]:
    """Parse a JSON array of documents; bad input yields an empty set.

    Entries may be objects with a ``text`` field plus any metadata, or plain
    strings. Anything else is skipped.
    """
    if not raw or not raw.strip():
        return []
    try:
        parsed = json.loads(raw)
    except ValueError as exc:
        logger.warning("RAG_DOCS_JSON is not valid JSON, ignoring: %s", exc)
        return []
    if not isinstance(parsed, list):
        logger.warning("RAG_DOCS_JSON must be a JSON array, got %s", type(parsed).__name__)
        return []

    out: List[Dict[str, Any]] = []
    for entry in parsed:
        if isinstance(entry, str):
            out.append({"text": entry})
        elif isinstance(entry, dict):
            doc = dict(entry)
            if not isinstance(doc.get("text"), str):
                doc["text"] = "" if doc.get("text") is None else str(doc["text"])
            out.append(doc)
    return out


def get_documents() -> List[Dict[str, Any]]:
    """Documents loaded once from ``settings.rag_docs_json``."""
    global _documents
    if _documents is None:
        _documents = load_documents(settings.rag_docs_json)
        logger.info("loaded %d retrieval documents", len(_documents))
    return _documents

# -*- coding: utf-8 -*-
"""
Keyword ranker for the static retrieval documents.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

TOP_K = 5


def tokenize(query: str) -> List[str]:
    """Lower-case, whitespace-split, drop empties and repeats (order kept)."""
    return list(dict.fromkeys(t for t in (query or "").lower().split() if t))


def rank(
    documents: Sequence[Dict[str, Any]],
    query: str,
    top_k: int = TOP_K,
) -> List[Dict[str, Any]]:
    """
    Score documents by how many distinct query tokens they contain.

    Args:
        documents: Retrieval documents, each a dict with a ``text`` field
        query: Free-text query
        top_k: Maximum number of results to return

    Returns:
        Copies of the matching documents with a ``score`` field, best first.
        Documents with equal scores keep their original order.
    """
    tokens = tokenize(query)
    if not tokens or not documents:
        return []

    scored: List[tuple[int, Dict[str, Any]]] = []
    for doc in documents:
        text = str(doc.get("text") or "").lower()
        score = sum(1 for token in tokens if token in text)
        if score > 0:
            scored.append((score, doc))

    # list.sort is stable, reverse included.
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [{**doc, "score": score} for score, doc in scored[:top_k]]

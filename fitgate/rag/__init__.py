# -*- coding: utf-8 -*-
"""Keyword retrieval over the configured documents."""

from .documents import get_documents, load_documents
from .ranker import rank

__all__ = ["get_documents", "load_documents", "rank"]

# -*- coding: utf-8 -*-
"""Food analysis — recover the JSON payload embedded in model output.

Strategies run in order and the first successful parse wins:

1. a fenced code block tagged ``json``;
2. the span from the first ``{`` to the last ``}``.

Output with no ``{ ... }`` span at all degrades to ``{"items": [], "raw": text}``.
Output that has a span which still fails to parse raises :class:`MacroParseError`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from ..upstream import loads_strict

_FENCED_JSON_RE = re.compile(r"```json[ \t]*\r?\n?(.*?)```", re.IGNORECASE | re.DOTALL)


class MacroParseError(ValueError):
    """The model output contains a brace span that is not valid JSON."""

    def __init__(self, message: str, content: str) -> None:
        super().__init__(message)
        self.content = content


@dataclass(frozen=True)
class Extraction:
    ok: bool = False
    value: Any = None
    # The text had the structure this strategy looks for, parsed or not.
    matched: bool = False
    error: str | None = None


def from_fenced_block(text: str) -> Extraction:
    match = _FENCED_JSON_RE.search(text)
    if not match:
        return Extraction()
    try:
        return Extraction(ok=True, value=loads_strict(match.group(1)))
    except ValueError as exc:
        # Not counted as a structural match; the brace span decides that.
        return Extraction(error=str(exc))


def from_brace_span(text: str) -> Extraction:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return Extraction()
    try:
        return Extraction(ok=True, value=loads_strict(text[start : end + 1]), matched=True)
    except ValueError as exc:
        return Extraction(matched=True, error=str(exc))


STRATEGIES: List[Callable[[str], Extraction]] = [from_fenced_block, from_brace_span]


def raw_result(content: str) -> Dict[str, Any]:
    return {"items": [], "raw": content}


def parse_macro_content(content: str) -> Any:
    matched = False
    last_error: str | None = None
    for strategy in STRATEGIES:
        result = strategy(content)
        if result.ok:
            return result.value
        matched = matched or result.matched
        last_error = result.error or last_error
    if not matched:
        return raw_result(content)
    raise MacroParseError(f"Failed to parse model JSON: {last_error}", content)

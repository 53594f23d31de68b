# -*- coding: utf-8 -*-
"""Food analysis — vision model call via the Mistral chat-completions API."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..llm.client import FALLBACK_ERROR, MistralClient, extract_reply
from ..upstream import relay_error
from .extract import MacroParseError, parse_macro_content

logger = logging.getLogger(__name__)

DATA_URI_PREFIX = "data:"

SYSTEM_PROMPT = (
    "You are a nutrition analyst. Return ONLY JSON with keys: "
    "items (array of {name, calories, protein_g, carbs_g, fat_g}), "
    "totalCalories, protein_g, carbs_g, fat_g."
)
USER_PROMPT = "Estimate macros and calories for this meal."
TEMPERATURE = 0.2


def normalize_image(image: str, *, is_base64: bool = False) -> str:
    """Turn a URL, data URI or bare base64 string into one image reference."""
    if image.startswith(DATA_URI_PREFIX):
        return image
    if is_base64:
        return f"data:image/jpeg;base64,{image}"
    return image


def build_payload(model: str, image_ref: Any) -> Dict[str, Any]:
    return {
        "model": model,
        "temperature": TEMPERATURE,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": USER_PROMPT},
                    {"type": "image_url", "image_url": image_ref},
                ],
            },
        ],
    }


async def analyze_food(client: MistralClient, image: str, *, is_base64: bool = False) -> Any:
    """Ask the vision model for a macro breakdown of a meal photo.

    The API accepts ``image_url`` either as a bare string or as ``{"url": ...}``
    depending on the model; the bare string goes first and the object shape is
    tried once, only when the first answer is not a success.
    """
    image_ref = normalize_image(image, is_base64=is_base64)

    resp = await client.post(build_payload(client.vision_model, image_ref))
    if not resp.is_success:
        logger.warning(
            "vision call rejected bare image_url (%s); retrying with object shape",
            resp.status_code,
        )
        resp = await client.post(build_payload(client.vision_model, {"url": image_ref}))
        if not resp.is_success:
            raise relay_error(resp, FALLBACK_ERROR)

    content = extract_reply(resp.json())
    try:
        return parse_macro_content(content)
    except MacroParseError:
        logger.warning("vision output is not valid JSON: %s", content[:800])
        raise

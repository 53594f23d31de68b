from __future__ import annotations

import os
from typing import List, Optional

from dotenv import load_dotenv


load_dotenv()


class Settings:
    """Centralized configuration for the fitness gateway backend."""

    def __init__(self) -> None:
        # ---- ExerciseDB (RapidAPI) ----
        self.exercisedb_base_url: str = os.environ.get("EXERCISEDB_BASE_URL", "")
        self.exercisedb_api_key: str = os.environ.get("EXERCISEDB_API_KEY", "")
        self.exercisedb_host: str = os.environ.get("EXERCISEDB_HOST", "")

        # ---- Mistral (vision + chat) ----
        self.mistral_api_key: str = os.environ.get("MISTRAL_API_KEY", "")
        self.mistral_base_url: str = os.environ.get(
            "MISTRAL_BASE_URL", "https://api.mistral.ai/v1"
        )
        self.mistral_vision_model: str = (
            os.environ.get("MISTRAL_VISION_MODEL") or "mistral-small-latest"
        )
        self.mistral_text_model: str = (
            os.environ.get("MISTRAL_TEXT_MODEL") or "mistral-small-latest"
        )

        # Raw JSON; parsed once by rag.documents at startup.
        self.rag_docs_json: str = os.environ.get("RAG_DOCS_JSON", "[]")

        # 0 disables the outbound timeout entirely.
        timeout = float(os.environ.get("UPSTREAM_TIMEOUT") or "30")
        self.upstream_timeout: Optional[float] = timeout if timeout > 0 else None

        self.log_level: str = (os.environ.get("LOG_LEVEL") or "INFO").upper()
        self.host: str = os.environ.get("FITGATE_HOST") or "127.0.0.1"
        self.port: int = int(os.environ.get("FITGATE_PORT") or "8000")

        cors = os.environ.get("CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]

    @property
    def exercisedb_configured(self) -> bool:
        return bool(self.exercisedb_base_url and self.exercisedb_api_key)


settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency; tests override it with their own ``Settings``."""
    return settings

# -*- coding: utf-8 -*-
"""
Fitness gateway API

ExerciseDB proxy, meal photo macro estimation, and a coaching chat with
keyword retrieval, behind one FastAPI app.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .chat.api import router as chat_router
from .config import settings
from .exercise.api import router as exercise_router
from .food.api import router as food_router
from .rag.api import router as rag_router
from .rag.documents import get_documents

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Fitness Gateway",
    description="ExerciseDB proxy, meal macro estimation and coaching chat",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def _http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def _validation_error(_request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("rejected request: %s", exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request."})


# Retrieval documents are read once, before the first request.
get_documents()

app.include_router(exercise_router)
app.include_router(food_router)
app.include_router(chat_router)
app.include_router(rag_router)


@app.get("/health")
def health_check() -> dict:
    return {"ok": True}


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="[%(asctime)s] %(levelname)s %(name)s - %(message)s",
    )
    uvicorn.run("fitgate.api:app", host=settings.host, port=settings.port, reload=False)

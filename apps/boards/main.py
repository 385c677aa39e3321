"""Boards API - FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps._shared.exceptions import register_exception_handlers
from apps.boards.infrastructure.persistence_postgres.session import dispose_engine
from apps.boards.presentation.http.controllers import board_router, health_router
from apps.boards.setup.config import get_settings
from apps.boards.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 수명주기 관리."""
    setup_logging("DEBUG" if settings.environment == "local" else "INFO")
    logger.info(f"Starting {settings.app_name} ({settings.environment})")

    yield

    logger.info(f"Shutting down {settings.app_name}")
    await dispose_engine()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        description="Board, like and bookmark API",
        docs_url="/boards/docs",
        openapi_url="/boards/openapi.json",
        redoc_url="/boards/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(board_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.boards.main:app",
        host="0.0.0.0",
        port=8001,
        reload=settings.environment == "local",
    )

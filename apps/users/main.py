"""Users API - FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps._shared.exceptions import register_exception_handlers
from apps.users.infrastructure.persistence_postgres.session import dispose_engine
from apps.users.infrastructure.persistence_redis.client import close_redis
from apps.users.presentation.http.controllers import (
    assets_router,
    auth_router,
    availability_router,
    health_router,
)
from apps.users.setup.config import get_settings
from apps.users.setup.dependencies import get_asset_provider_client
from apps.users.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 수명주기 관리."""
    # Startup
    setup_logging("DEBUG" if settings.environment == "local" else "INFO")
    logger.info(f"Starting {settings.app_name} ({settings.environment})")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")
    await get_asset_provider_client().close()
    await close_redis()
    await dispose_engine()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        description="Sign-up, sign-in, token and asset linkage API",
        docs_url="/api/v1/users/docs",
        openapi_url="/api/v1/users/openapi.json",
        redoc_url="/api/v1/users/redoc",
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

    # 라우터 등록
    app.include_router(health_router)  # /health, /ready (prefix 없음)
    app.include_router(auth_router, prefix="/api/v1/users")
    app.include_router(availability_router, prefix="/api/v1/users")
    app.include_router(assets_router, prefix="/api/v1/users")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.users.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "local",
    )

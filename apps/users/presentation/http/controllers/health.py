"""Health controller - Health check endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from apps.users.infrastructure.persistence_redis.client import get_refresh_token_redis
from apps.users.setup.dependencies import SessionDep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


def get_redis():
    return get_refresh_token_redis()


@router.get("/health")
async def health() -> dict:
    """헬스체크 엔드포인트."""
    return {"status": "healthy", "service": "users-api"}


@router.get("/ready")
async def ready(session: SessionDep, redis=Depends(get_redis)) -> JSONResponse:
    """PostgreSQL, Redis 연결을 확인합니다."""
    try:
        await session.execute(text("SELECT 1"))
        await redis.ping()
    except (SQLAlchemyError, RedisError, OSError) as e:
        logger.warning("Readiness check failed", extra={"error": str(e)})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "service": "users-api"},
        )
    return JSONResponse(content={"status": "ready", "service": "users-api"})

"""PostgreSQL Session Management."""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from apps.users.setup.config import get_settings


def get_async_engine() -> AsyncEngine:
    """AsyncEngine 생성.

    환경변수:
        - USERS_DATABASE_URL: PostgreSQL 연결 URL
        - USERS_DB_POOL_SIZE: 풀 크기 (기본: 5)
        - USERS_DB_MAX_OVERFLOW: 최대 오버플로우 (기본: 10)
    """
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=settings.db_pool_recycle,
        pool_pre_ping=True,
        echo=settings.database_echo,
    )


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _get_session_factory() -> async_sessionmaker[AsyncSession]:
    """세션 팩토리 싱글톤."""
    global _engine, _session_factory
    if _session_factory is None:
        _engine = get_async_engine()
        _session_factory = async_sessionmaker(
            _engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI Depends용 세션 제공자.

    커밋되지 않은 변경은 세션 종료 시 롤백됩니다.
    """
    session_factory = _get_session_factory()
    async with session_factory() as session:
        yield session


async def dispose_engine() -> None:
    """엔진 커넥션 풀을 정리합니다."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None

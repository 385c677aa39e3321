"""Redis Client Provider.

리프레시 토큰 저장용 클라이언트를 제공합니다.

Retry 설정:
    - ExponentialBackoff: 지수 백오프 재시도
    - MAX_RETRIES: 3회 재시도
    - ConnectionError, TimeoutError에서 자동 재시도
    - health_check_interval: 30초마다 연결 상태 확인
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError, TimeoutError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

HEALTH_CHECK_INTERVAL = 30  # seconds
MAX_CONNECTIONS = 50
SOCKET_CONNECT_TIMEOUT = 5.0  # seconds
SOCKET_TIMEOUT = 5.0  # seconds
RETRY_ON_ERROR = [ConnectionError, TimeoutError]
MAX_RETRIES = 3

_redis_client: "aioredis.Redis | None" = None


def _build_async_client(redis_url: str) -> "aioredis.Redis":
    """비동기 Redis 클라이언트 생성."""
    import redis.asyncio as aioredis

    retry = Retry(ExponentialBackoff(), retries=MAX_RETRIES)

    return aioredis.from_url(
        redis_url,
        encoding="utf-8",
        decode_responses=True,
        # Health & Keepalive
        health_check_interval=HEALTH_CHECK_INTERVAL,
        socket_keepalive=True,
        # Timeouts
        socket_connect_timeout=SOCKET_CONNECT_TIMEOUT,
        socket_timeout=SOCKET_TIMEOUT,
        # Connection Pool
        max_connections=MAX_CONNECTIONS,
        # Retry on transient errors
        retry=retry,
        retry_on_error=RETRY_ON_ERROR,
    )


def get_refresh_token_redis() -> "aioredis.Redis":
    """리프레시 토큰 저장용 Redis 클라이언트.

    환경변수:
        - USERS_REDIS_URL (default: redis://localhost:6379/0)
    """
    global _redis_client
    if _redis_client is None:
        from apps.users.setup.config import get_settings

        _redis_client = _build_async_client(get_settings().redis_url)
    return _redis_client


async def close_redis() -> None:
    """Redis 연결을 닫습니다."""
    global _redis_client
    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None

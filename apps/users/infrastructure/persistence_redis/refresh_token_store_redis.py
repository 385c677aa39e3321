"""Redis Refresh Token Store.

RefreshTokenOutputPort 포트의 구현체입니다.

키 구조:
    - refresh:token:{token} -> user_id
    - refresh:user:{user_id} -> token

두 키 모두 토큰 만료 시각까지의 TTL을 가집니다.
교체와 소비는 Lua Script로 한 번에 실행되어, 동시 로그인/재발급에도
사용자당 유효한 토큰은 하나입니다.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from apps.users.domain.value_objects import UserId
from apps.users.infrastructure.persistence_redis.constants import (
    REFRESH_TOKEN_KEY_PREFIX,
    REFRESH_USER_KEY_PREFIX,
)

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────
# Lua Scripts
# 이전 토큰 키는 user 키의 값에서 만들어지므로 KEYS로 넘길 수 없습니다 (단일 노드 전제).
# ─────────────────────────────────────────────────────────────────

# 기존 토큰 무효화 + 새 토큰 저장 (원자적)
SAVE_ONLY_ONE_SCRIPT = """
local token_key = KEYS[1]      -- refresh:token:{token}
local user_key = KEYS[2]       -- refresh:user:{user_id}

local token_prefix = ARGV[1]
local refresh_token = ARGV[2]
local user_id = ARGV[3]
local ttl = tonumber(ARGV[4])

local previous = redis.call('GET', user_key)
if previous and previous ~= refresh_token then
    redis.call('DEL', token_prefix .. previous)
end

redis.call('SET', token_key, user_id, 'EX', ttl)
redis.call('SET', user_key, refresh_token, 'EX', ttl)
return 1
"""

# 토큰 소비. user 키가 아직 이 토큰을 가리킬 때만 함께 삭제
CONSUME_SCRIPT = """
local token_key = KEYS[1]      -- refresh:token:{token}

local user_prefix = ARGV[1]
local refresh_token = ARGV[2]

local owner = redis.call('GET', token_key)
if not owner then
    return false
end
redis.call('DEL', token_key)

local user_key = user_prefix .. owner
if redis.call('GET', user_key) == refresh_token then
    redis.call('DEL', user_key)
end
return owner
"""


def _token_key(refresh_token: str) -> str:
    return f"{REFRESH_TOKEN_KEY_PREFIX}{refresh_token}"


def _user_key(user_id: UserId | str) -> str:
    return f"{REFRESH_USER_KEY_PREFIX}{user_id}"


class RedisRefreshTokenStore:
    """Redis 기반 리프레시 토큰 저장소."""

    def __init__(self, redis: "aioredis.Redis") -> None:
        self._redis = redis
        # register_script는 로컬 캐싱만 수행 (EVALSHA, 없으면 EVAL로 재시도)
        self._save_script: Any = redis.register_script(SAVE_ONLY_ONE_SCRIPT)
        self._consume_script: Any = redis.register_script(CONSUME_SCRIPT)

    async def save_only_one_user(
        self,
        user_id: UserId,
        refresh_token: str,
        expires_at: int,
    ) -> None:
        """토큰 저장. 사용자의 이전 토큰은 같은 스크립트 안에서 무효화됩니다."""
        ttl = max(expires_at - int(time.time()), 1)
        await self._save_script(
            keys=[_token_key(refresh_token), _user_key(user_id)],
            args=[REFRESH_TOKEN_KEY_PREFIX, refresh_token, str(user_id), ttl],
        )

    async def delete_by_refresh_token(self, refresh_token: str) -> UserId | None:
        """토큰 소비. 이미 소비되었거나 없는 토큰이면 None."""
        owner = await self._consume_script(
            keys=[_token_key(refresh_token)],
            args=[REFRESH_USER_KEY_PREFIX, refresh_token],
        )
        if owner is None:
            return None

        try:
            return UserId.of(owner)
        except ValueError:
            logger.warning("Malformed refresh token owner", extra={"owner": owner})
            return None

"""Dependency injection setup."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apps._shared.security import TokenableUser, build_auth_user_dependency
from apps.users.application.user.services import UserService
from apps.users.infrastructure.integrations.asset_provider import HttpAssetProviderClient
from apps.users.infrastructure.persistence_postgres.adapters import (
    SqlaNormalUserGateway,
    SqlaTransactionManager,
    SqlaUserGateway,
)
from apps.users.infrastructure.persistence_postgres.session import get_db_session
from apps.users.infrastructure.persistence_redis.client import get_refresh_token_redis
from apps.users.infrastructure.persistence_redis.refresh_token_store_redis import (
    RedisRefreshTokenStore,
)
from apps.users.infrastructure.security import JwtTokenService, PwdlibUserInfoEncoder
from apps.users.setup.config import get_settings

# Type alias for dependency injection
SessionDep = Annotated[AsyncSession, Depends(get_db_session)]

# Authorization: Bearer <access token>
get_current_user = build_auth_user_dependency(get_settings)
CurrentUser = Annotated[TokenableUser, Depends(get_current_user)]


@lru_cache
def get_token_service() -> JwtTokenService:
    """JwtTokenService 싱글톤."""
    settings = get_settings()
    return JwtTokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        access_token_expire_minutes=settings.access_token_expire_minutes,
        refresh_token_expire_minutes=settings.refresh_token_expire_minutes,
    )


@lru_cache
def get_user_info_encoder() -> PwdlibUserInfoEncoder:
    """PwdlibUserInfoEncoder 싱글톤."""
    return PwdlibUserInfoEncoder()


@lru_cache
def get_asset_provider_client() -> HttpAssetProviderClient:
    """HttpAssetProviderClient 싱글톤. 종료 시 main에서 close()."""
    settings = get_settings()
    return HttpAssetProviderClient(
        settings.asset_provider_base_url,
        timeout_seconds=settings.asset_provider_timeout_seconds,
    )


def get_refresh_token_store() -> RedisRefreshTokenStore:
    """RedisRefreshTokenStore 인스턴스를 반환합니다."""
    return RedisRefreshTokenStore(get_refresh_token_redis())


def get_user_service(
    session: SessionDep,
    token_service: JwtTokenService = Depends(get_token_service),
    user_info_encoder: PwdlibUserInfoEncoder = Depends(get_user_info_encoder),
    asset_client: HttpAssetProviderClient = Depends(get_asset_provider_client),
    refresh_token_store: RedisRefreshTokenStore = Depends(get_refresh_token_store),
) -> UserService:
    """요청 단위 UserService 인스턴스를 반환합니다."""
    user_gateway = SqlaUserGateway(session)
    normal_user_gateway = SqlaNormalUserGateway(session)
    return UserService(
        create_user=user_gateway,
        read_user=user_gateway,
        read_normal_user=normal_user_gateway,
        save_user_detail=normal_user_gateway,
        get_assets=asset_client,
        refresh_tokens=refresh_token_store,
        token_issuer=token_service,
        user_info_encoder=user_info_encoder,
        transaction_manager=SqlaTransactionManager(session),
    )

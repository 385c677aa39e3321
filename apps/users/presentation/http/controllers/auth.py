"""Auth controller - Sign up / Sign in / Token endpoints."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Header, status
from fastapi.responses import JSONResponse

from apps._shared.responses import GlobalResponse
from apps._shared.security import parse_bearer
from apps.users.application.user.dto import TokenInfoServiceResponse
from apps.users.application.user.services import UserService
from apps.users.presentation.http.schemas import (
    SignInRequest,
    SignUpRequest,
    TokenInfoResponse,
)
from apps.users.setup.dependencies import get_user_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def get_refresh_token(
    x_refresh_token: Annotated[str | None, Header(alias="X-Refresh-Token")] = None,
    authorization: Annotated[str | None, Header()] = None,
) -> str | None:
    """X-Refresh-Token 헤더, 없으면 Authorization Bearer에서 리프레시 토큰을 꺼냅니다."""
    if x_refresh_token:
        return x_refresh_token
    return parse_bearer(authorization)


def _token_data(response: TokenInfoServiceResponse) -> dict:
    return {"token": TokenInfoResponse.of(response).model_dump(by_alias=True)}


@router.post("/sign-up", status_code=status.HTTP_201_CREATED)
async def sign_up(
    request: SignUpRequest,
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """회원가입 후 토큰을 발급합니다."""
    response = await service.sign_up(request.to_service_request())
    body = GlobalResponse.created("회원가입 성공", _token_data(response))
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=body.model_dump())


@router.post("/sign-in")
async def sign_in(
    request: SignInRequest,
    service: UserService = Depends(get_user_service),
) -> GlobalResponse:
    """로그인 후 토큰을 발급합니다."""
    response = await service.sign_in(request.to_service_request())
    return GlobalResponse.success("로그인 성공", _token_data(response))


@router.post("/reissue", status_code=status.HTTP_201_CREATED)
async def reissue(
    refresh_token: str | None = Depends(get_refresh_token),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """리프레시 토큰으로 토큰 쌍을 재발급합니다."""
    response = await service.reissue(refresh_token)
    body = GlobalResponse.created("토큰 재발급 성공", _token_data(response))
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=body.model_dump())


@router.post("/logout")
async def logout(
    refresh_token: str | None = Depends(get_refresh_token),
    service: UserService = Depends(get_user_service),
) -> GlobalResponse:
    """리프레시 토큰을 폐기합니다."""
    await service.logout(refresh_token)
    return GlobalResponse.success("로그아웃 성공")

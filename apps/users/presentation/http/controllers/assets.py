"""Assets controller - 자산 연결 및 공개 옵션."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from apps._shared.responses import GlobalResponse
from apps.users.application.user.services import UserService
from apps.users.presentation.http.schemas import (
    ConnectAssetInfo,
    ConnectAssetsRequest,
    SetPublicOptionRequest,
)
from apps.users.setup.dependencies import CurrentUser, get_user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/me", tags=["assets"])


@router.post("/assets", status_code=status.HTTP_201_CREATED)
async def connect_assets(
    request: ConnectAssetsRequest,
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """외부 자산 제공자와 연결하고 계좌/카드 목록을 반환합니다."""
    assets = await service.connect_assets(request.to_service_request(user.id))
    body = GlobalResponse.created(
        "자산 연결 성공",
        {"assets": [ConnectAssetInfo.of(asset).model_dump(by_alias=True) for asset in assets]},
    )
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=body.model_dump())


@router.put("/public-option")
async def set_public_option(
    request: SetPublicOptionRequest,
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> GlobalResponse:
    """자산 공개 옵션을 변경합니다."""
    await service.set_public_option(request.to_service_request(user.id))
    return GlobalResponse.success("공개 옵션 변경 성공")

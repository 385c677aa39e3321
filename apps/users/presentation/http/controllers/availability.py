"""Availability controller - 아이디/전화번호 중복 확인."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from apps._shared.responses import GlobalResponse
from apps.users.application.user.services import UserService
from apps.users.presentation.http.schemas import (
    AvailableContactResponse,
    AvailableTofinIdResponse,
)
from apps.users.setup.dependencies import get_user_service

router = APIRouter(tags=["availability"])


@router.get("/tofin-id/availability")
async def is_available_tofin_id(
    tofin_id: str = Query(..., alias="tofinId"),
    service: UserService = Depends(get_user_service),
) -> GlobalResponse:
    response = await service.is_available_tofin_id(tofin_id)
    return GlobalResponse.success(
        "아이디 사용 가능 여부",
        AvailableTofinIdResponse.of(response).model_dump(by_alias=True),
    )


@router.get("/contact/availability")
async def is_available_contact(
    contact: str = Query(...),
    service: UserService = Depends(get_user_service),
) -> GlobalResponse:
    response = await service.is_available_contact(contact)
    return GlobalResponse.success(
        "전화번호 사용 가능 여부",
        AvailableContactResponse.of(response).model_dump(by_alias=True),
    )

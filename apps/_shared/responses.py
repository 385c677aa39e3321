"""Uniform response envelope.

모든 엔드포인트는 ``{"status", "message", "data"}`` 형태로 응답합니다.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class GlobalResponse(BaseModel):
    """공통 성공 응답 래퍼."""

    status: int = Field(..., description="HTTP 상태 코드")
    message: str = Field(..., description="결과 메시지")
    data: dict[str, Any] = Field(default_factory=dict, description="응답 데이터")

    @classmethod
    def success(cls, message: str, data: dict[str, Any] | None = None) -> "GlobalResponse":
        return cls(status=200, message=message, data=data or {})

    @classmethod
    def created(cls, message: str, data: dict[str, Any] | None = None) -> "GlobalResponse":
        return cls(status=201, message=message, data=data or {})


class GlobalExceptionResponse(BaseModel):
    """공통 에러 응답."""

    status: int = Field(..., description="HTTP 상태 코드")
    message: str = Field(..., description="에러 메시지")
    code: str = Field(..., description="에러 코드")

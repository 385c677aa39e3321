"""Base application exceptions.

각 예외는 HTTP 상태 코드와 에러 코드를 함께 가집니다.
"""

from __future__ import annotations


class ApplicationError(Exception):
    """애플리케이션 계층 기본 예외."""

    status_code: int = 400
    code: str = "APPLICATION_ERROR"

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)


class BadRequestError(ApplicationError):
    """잘못된 요청 (형식 오류, 무결성 위반 등)."""

    status_code = 400
    code = "BAD_REQUEST"


class UnauthorizedError(ApplicationError):
    """인증 실패."""

    status_code = 401
    code = "UNAUTHORIZED"


class NotFoundError(ApplicationError):
    """리소스를 찾을 수 없음."""

    status_code = 404
    code = "NOT_FOUND"


class ConflictError(ApplicationError):
    """리소스 충돌 (중복 식별자 등)."""

    status_code = 409
    code = "CONFLICT"


class ExternalServiceError(ApplicationError):
    """외부 시스템 호출 실패."""

    status_code = 502
    code = "EXTERNAL_SERVICE_ERROR"

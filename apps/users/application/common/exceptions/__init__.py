"""Application Exceptions.

HTTP 상태 코드를 가진 공통 예외를 그대로 사용합니다.
"""

from apps._shared.exceptions import (
    ApplicationError,
    BadRequestError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    UnauthorizedError,
)

__all__ = [
    "ApplicationError",
    "BadRequestError",
    "ConflictError",
    "ExternalServiceError",
    "NotFoundError",
    "UnauthorizedError",
]

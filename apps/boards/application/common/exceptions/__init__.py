"""Application Exceptions."""

from apps._shared.exceptions import (
    ApplicationError,
    BadRequestError,
    NotFoundError,
    UnauthorizedError,
)


class InvalidCategoryError(BadRequestError):
    """존재하지 않는 카테고리로 게시글을 작성할 때 발생."""

    def __init__(self) -> None:
        super().__init__("Invalid category Id")


__all__ = [
    "ApplicationError",
    "BadRequestError",
    "InvalidCategoryError",
    "NotFoundError",
    "UnauthorizedError",
]

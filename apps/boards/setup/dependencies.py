"""Dependency injection setup."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apps._shared.security import TokenableUser, build_auth_user_dependency
from apps.boards.application.board.services import BoardInteractionService, BoardService
from apps.boards.infrastructure.persistence_postgres.adapters import (
    SqlaBoardCommandGateway,
    SqlaBoardInteractionGateway,
    SqlaBoardQueryGateway,
    SqlaTransactionManager,
)
from apps.boards.infrastructure.persistence_postgres.session import get_db_session
from apps.boards.setup.config import get_settings

SessionDep = Annotated[AsyncSession, Depends(get_db_session)]

get_current_user = build_auth_user_dependency(get_settings)
CurrentUser = Annotated[TokenableUser, Depends(get_current_user)]


def get_board_service(session: SessionDep) -> BoardService:
    """요청 단위 BoardService 인스턴스를 반환합니다."""
    return BoardService(
        board_command=SqlaBoardCommandGateway(session),
        board_query=SqlaBoardQueryGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )


def get_board_interaction_service(session: SessionDep) -> BoardInteractionService:
    """요청 단위 BoardInteractionService 인스턴스를 반환합니다."""
    return BoardInteractionService(
        board_query=SqlaBoardQueryGateway(session),
        interactions=SqlaBoardInteractionGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )

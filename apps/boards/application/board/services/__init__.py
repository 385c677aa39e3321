"""Board services."""

from apps.boards.application.board.services.board_interaction_service import (
    BoardInteractionService,
)
from apps.boards.application.board.services.board_service import BoardService

__all__ = ["BoardService", "BoardInteractionService"]

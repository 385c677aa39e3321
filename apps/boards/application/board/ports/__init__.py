"""Board ports."""

from apps.boards.application.board.ports.board_gateway import (
    BoardCommandGateway,
    BoardQueryGateway,
)
from apps.boards.application.board.ports.interaction_gateway import BoardInteractionGateway

__all__ = ["BoardCommandGateway", "BoardQueryGateway", "BoardInteractionGateway"]

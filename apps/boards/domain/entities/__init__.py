"""Domain Entities."""

from apps.boards.domain.entities.board import Board, BoardInteraction, BoardProductTagPK

__all__ = ["Board", "BoardInteraction", "BoardProductTagPK"]

"""Board interaction gateway port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.boards.domain.entities import BoardInteraction


class BoardInteractionGateway(Protocol):
    """좋아요/북마크 레코드 포트."""

    async def add(self, interaction: BoardInteraction) -> None:
        """레코드를 추가합니다. 이미 있으면 아무 일도 하지 않습니다."""
        ...

    async def remove(self, interaction: BoardInteraction) -> bool:
        """레코드를 삭제합니다. 삭제된 레코드가 있었는지 반환합니다."""
        ...

"""Domain Enums."""

from apps.boards.domain.enums.interaction import InteractionKind, InteractionStatus

__all__ = ["InteractionKind", "InteractionStatus"]

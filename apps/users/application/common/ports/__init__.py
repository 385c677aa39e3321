"""Application ports (interfaces)."""

from apps.users.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]

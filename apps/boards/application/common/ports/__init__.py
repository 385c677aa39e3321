"""Common ports."""

from apps.boards.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]

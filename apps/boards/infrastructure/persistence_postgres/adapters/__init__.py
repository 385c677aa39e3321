"""Infrastructure adapters implementing application ports."""

from apps.boards.infrastructure.persistence_postgres.adapters.board_gateway_sqla import (
    SqlaBoardCommandGateway,
    SqlaBoardQueryGateway,
)
from apps.boards.infrastructure.persistence_postgres.adapters.interaction_gateway_sqla import (
    SqlaBoardInteractionGateway,
)
from apps.boards.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)

__all__ = [
    "SqlaBoardCommandGateway",
    "SqlaBoardQueryGateway",
    "SqlaBoardInteractionGateway",
    "SqlaTransactionManager",
]

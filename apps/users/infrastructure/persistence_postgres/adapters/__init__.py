"""Infrastructure adapters implementing application ports."""

from apps.users.infrastructure.persistence_postgres.adapters.normal_user_gateway_sqla import (
    SqlaNormalUserGateway,
)
from apps.users.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)
from apps.users.infrastructure.persistence_postgres.adapters.user_gateway_sqla import (
    SqlaUserGateway,
)

__all__ = [
    "SqlaUserGateway",
    "SqlaNormalUserGateway",
    "SqlaTransactionManager",
]

"""PostgreSQL adapters."""

from apps.oauth_login.infrastructure.persistence_postgres.adapters.state_reference_gateway_sqla import (
    SqlaStateReferenceGateway,
)
from apps.oauth_login.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)

__all__ = ["SqlaStateReferenceGateway", "SqlaTransactionManager"]

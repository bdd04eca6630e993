"""PostgreSQL persistence."""

from apps.oauth_login.infrastructure.persistence_postgres.adapters import (
    SqlaStateReferenceGateway,
    SqlaTransactionManager,
)

__all__ = ["SqlaStateReferenceGateway", "SqlaTransactionManager"]

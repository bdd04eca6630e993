"""Table definitions."""

from apps.oauth_login.infrastructure.persistence_postgres.mappings.oauth_state_reference import (
    metadata,
    oauth_state_references_table,
)

__all__ = ["metadata", "oauth_state_references_table"]

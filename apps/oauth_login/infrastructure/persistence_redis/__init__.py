"""Redis persistence."""

from apps.oauth_login.infrastructure.persistence_redis.adapters import (
    RedisStateReferenceGateway,
    RedisTransactionManager,
)

__all__ = ["RedisStateReferenceGateway", "RedisTransactionManager"]

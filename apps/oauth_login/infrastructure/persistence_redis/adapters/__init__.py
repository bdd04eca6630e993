"""Redis adapters."""

from apps.oauth_login.infrastructure.persistence_redis.adapters.state_reference_gateway_redis import (
    RedisStateReferenceGateway,
)
from apps.oauth_login.infrastructure.persistence_redis.adapters.transaction_manager_redis import (
    RedisTransactionManager,
)

__all__ = ["RedisStateReferenceGateway", "RedisTransactionManager"]

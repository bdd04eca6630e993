"""Common ports."""

from apps.oauth_login.application.common.ports.transaction_manager import (
    TransactionManager,
)

__all__ = ["TransactionManager"]

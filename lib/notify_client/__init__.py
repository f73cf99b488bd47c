from .client import NotificationClient
from .config_types import ClientConfig
from .errors import (
    ApiAuthError,
    ApiError,
    AuthError,
    ConfigError,
    NetworkError,
    NotifyClientError,
    ValidationError,
)
from .types import SubscriptionRecord

__all__ = [
    "NotificationClient",
    "ClientConfig",
    "ApiAuthError",
    "ApiError",
    "AuthError",
    "ConfigError",
    "NetworkError",
    "NotifyClientError",
    "SubscriptionRecord",
    "ValidationError",
]

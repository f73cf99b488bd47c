from __future__ import annotations


class NotifyClientError(Exception):
    """Base client error."""


class ConfigError(NotifyClientError, TypeError):
    """Client configuration is missing or malformed."""


class ValidationError(NotifyClientError, ValueError):
    """Per-call input was rejected before any network interaction."""


class AuthError(NotifyClientError):
    """No usable token, or the service rejected the one we sent."""


class NetworkError(NotifyClientError):
    """Transport/network layer error."""


class ApiError(NotifyClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class ApiAuthError(ApiError, AuthError):
    """401/403 from the notification service."""

"""Public error exports for drivemirror."""

from __future__ import annotations

from .exceptions import (
    ApiError,
    AuthError,
    ConfigError,
    CredentialStoreError,
    DriveMirrorError,
    HttpErrorInfo,
    InvalidArgumentError,
    NetworkError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)

__all__ = [
    "DriveMirrorError",
    "ConfigError",
    "CredentialStoreError",
    "AuthError",
    "PermissionError",
    "InvalidArgumentError",
    "NotFoundError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]

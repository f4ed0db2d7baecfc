"""drivemirror public API."""

from __future__ import annotations

from drivemirror.auth import Authorizer, CredentialStore
from drivemirror.config import MirrorConfig
from drivemirror.controller import DriveController, RemoteDrive
from drivemirror.errors import (
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
from drivemirror.lister import FolderLister
from drivemirror.local import FileSystem, LocalFileSystem
from drivemirror.materializer import FileMaterializer
from drivemirror.mirror import run_mirror
from drivemirror.models import MaterializeResult, MirrorResult, RemoteFile

__all__ = [
    # High-level
    "run_mirror",
    "MirrorConfig",
    "FolderLister",
    "FileMaterializer",
    # Auth
    "Authorizer",
    "CredentialStore",
    # Capabilities
    "DriveController",
    "RemoteDrive",
    "FileSystem",
    "LocalFileSystem",
    # Models
    "RemoteFile",
    "MaterializeResult",
    "MirrorResult",
    # Errors
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

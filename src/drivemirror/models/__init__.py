"""Public model exports for drivemirror."""

from __future__ import annotations

from .file_info import RemoteFile
from .results import (
    MaterializeKind,
    MaterializeResult,
    MaterializeStatus,
    MirrorResult,
)

__all__ = [
    "RemoteFile",
    "MaterializeKind",
    "MaterializeStatus",
    "MaterializeResult",
    "MirrorResult",
]

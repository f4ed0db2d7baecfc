"""Internal controller exports for drivemirror."""

from __future__ import annotations

from .drive_controller import DriveController
from .fields import FILE_FIELDS, LIST_FIELDS
from .remote import RemoteDrive

__all__ = ["DriveController", "RemoteDrive", "FILE_FIELDS", "LIST_FIELDS"]

"""Local filesystem exports for drivemirror."""

from __future__ import annotations

from .filesystem import FileSystem, LocalFileSystem

__all__ = ["FileSystem", "LocalFileSystem"]

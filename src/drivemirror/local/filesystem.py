"""Local filesystem capability used by the materializer."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import BinaryIO, Callable, Protocol


class FileSystem(Protocol):
    """What the materializer needs from local storage."""

    def exists(self, path: Path) -> bool: ...

    def make_dir(self, path: Path) -> None: ...

    def ensure_dir(self, path: Path) -> None: ...

    def write_stream(self, path: Path, writer: Callable[[BinaryIO], None]) -> None: ...


class LocalFileSystem:
    """FileSystem backed by the real disk."""

    def exists(self, path: Path) -> bool:
        return os.path.exists(path)

    def make_dir(self, path: Path) -> None:
        """Create one directory; its parent must already exist."""
        os.mkdir(path)

    def ensure_dir(self, path: Path) -> None:
        os.makedirs(path, exist_ok=True)

    def write_stream(self, path: Path, writer: Callable[[BinaryIO], None]) -> None:
        """
        Let `writer` fill a temp file next to `path`, then move it into place.

        If `writer` raises, the temp file is removed and `path` is left as it
        was, so an interrupted transfer never looks like a finished one.
        """
        path = Path(path)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".part", dir=str(path.parent)
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as f:
                writer(f)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

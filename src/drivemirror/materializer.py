"""Materialize one remote Drive entry on the local filesystem."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Callable, Optional

from drivemirror.config import MirrorConfig
from drivemirror.controller import RemoteDrive
from drivemirror.errors import DriveMirrorError
from drivemirror.local import FileSystem, LocalFileSystem
from drivemirror.models import MaterializeKind, MaterializeResult, RemoteFile
from drivemirror.util.mime import classify

logger = logging.getLogger(__name__)


class FileMaterializer:
    """
    Turn a remote entry into a directory, an exported file or a raw copy.

    Each branch checks whether its target exists first and, if so, does
    nothing but log. The check and the create/write are not atomic.
    """

    def __init__(
        self,
        remote: RemoteDrive,
        config: MirrorConfig,
        *,
        fs: Optional[FileSystem] = None,
    ) -> None:
        self._remote = remote
        self._config = config
        self._fs: FileSystem = fs if fs is not None else LocalFileSystem()

    def target_path(self, kind: MaterializeKind, name: str) -> Path:
        """Local path an entry of `kind` called `name` materializes to."""
        root = self._config.download_root
        if kind == "export":
            return root / (name + self._config.export_extension)
        return root / name

    def materialize(self, file_id: str, display_name: str) -> MaterializeResult:
        """
        Materialize file_id under the download root.

        Never raises for Drive or filesystem failures: they are logged and
        reported as status "failed" so the rest of the run can continue.
        """
        try:
            info = self._remote.get(file_id)
        except DriveMirrorError as exc:
            logger.error("Error getting metadata for %s (%s): %s", display_name, file_id, exc)
            return _failed(file_id, display_name, None, None, exc)

        kind = classify(info.mime_type)
        if kind == "folder":
            return self._materialize_folder(info)
        if kind == "export":
            return self._materialize_export(file_id, display_name)
        return self._materialize_download(file_id, display_name)

    # ----------------------------
    # Branches
    # ----------------------------
    def _materialize_folder(self, info: RemoteFile) -> MaterializeResult:
        # Folders are named after their own metadata, not the listed name.
        name = info.name
        target = self.target_path("folder", name)

        if self._fs.exists(target):
            logger.info("Folder %s already exists at %s", name, target)
            return MaterializeResult(info.file_id, name, "skipped", "folder", target)

        try:
            self._fs.make_dir(target)
        except OSError as exc:
            logger.error("Error creating folder %s at %s: %s", name, target, exc)
            return _failed(info.file_id, name, "folder", target, exc)

        logger.info("Folder %s created at %s", name, target)
        return MaterializeResult(info.file_id, name, "created", "folder", target)

    def _materialize_export(self, file_id: str, name: str) -> MaterializeResult:
        target = self.target_path("export", name)
        mime_type = self._config.export_mime_type

        def write(fh: BinaryIO) -> None:
            self._remote.export_to(file_id, mime_type, fh)

        return self._write_file(
            file_id, name, "export", target, write,
            done=("File %s exported as %s to %s", name, mime_type, target),
        )

    def _materialize_download(self, file_id: str, name: str) -> MaterializeResult:
        target = self.target_path("download", name)

        def write(fh: BinaryIO) -> None:
            self._remote.download_to(file_id, fh)

        return self._write_file(
            file_id, name, "download", target, write,
            done=("File %s downloaded to %s", name, target),
        )

    def _write_file(
        self,
        file_id: str,
        name: str,
        kind: MaterializeKind,
        target: Path,
        writer: Callable[[BinaryIO], None],
        *,
        done: tuple,
    ) -> MaterializeResult:
        if self._fs.exists(target):
            logger.info("File %s already exists at %s", name, target)
            return MaterializeResult(file_id, name, "skipped", kind, target)

        try:
            self._fs.write_stream(target, writer)
        except (DriveMirrorError, OSError) as exc:
            action = "exporting" if kind == "export" else "downloading"
            logger.error("Error %s file %s to %s: %s", action, name, target, exc)
            return _failed(file_id, name, kind, target, exc)

        logger.info(*done)
        return MaterializeResult(file_id, name, "created", kind, target)


def _failed(
    file_id: str,
    name: str,
    kind: Optional[MaterializeKind],
    target: Optional[Path],
    exc: BaseException,
) -> MaterializeResult:
    return MaterializeResult(
        file_id=file_id,
        name=name,
        status="failed",
        kind=kind,
        target=target,
        error_type=type(exc).__name__,
        error_message=str(exc),
    )

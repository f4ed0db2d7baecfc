"""Capability interface for the remote side of a mirror run."""

from __future__ import annotations

from typing import BinaryIO, Protocol

from drivemirror.models import RemoteFile


class RemoteDrive(Protocol):
    """What the lister and materializer need from a remote drive."""

    def get(self, file_id: str) -> RemoteFile: ...

    def list_children(
        self,
        parent_id: str,
        *,
        page_size: int,
        fields: str,
    ) -> list[RemoteFile]: ...

    def export_to(self, file_id: str, mime_type: str, fh: BinaryIO) -> None: ...

    def download_to(self, file_id: str, fh: BinaryIO) -> None: ...

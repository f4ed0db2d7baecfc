"""Mirror run: authorize, list the parent folder, materialize its children."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from drivemirror.auth import Authorizer, authorizer_for
from drivemirror.config import MirrorConfig
from drivemirror.controller import DriveController, RemoteDrive
from drivemirror.errors import ConfigError
from drivemirror.lister import FolderLister
from drivemirror.local import FileSystem, LocalFileSystem
from drivemirror.materializer import FileMaterializer
from drivemirror.models import MirrorResult

logger = logging.getLogger(__name__)


def run_mirror(
    config: Optional[MirrorConfig] = None,
    *,
    authorizer: Optional[Authorizer] = None,
    controller_factory: Optional[Callable[[Any], RemoteDrive]] = None,
    fs: Optional[FileSystem] = None,
) -> MirrorResult:
    """
    Run one mirror pass.

    Raises:
        AuthError / CredentialStoreError: authorization could not complete.
        ConfigError: the download root could not be created.
        DriveMirrorError: the parent folder could not be listed.
    """
    config = config or MirrorConfig.from_cwd()
    fs = fs if fs is not None else LocalFileSystem()

    if authorizer is None:
        authorizer = authorizer_for(
            config.token_file, config.client_secrets_file, config.scopes
        )
    creds = authorizer.authorize()

    factory = controller_factory or DriveController
    remote = factory(creds)

    if config.create_download_root:
        try:
            fs.ensure_dir(config.download_root)
        except OSError as exc:
            raise ConfigError(
                "Failed to create download root",
                details={"download_root": str(config.download_root)},
                cause=exc,
            ) from exc

    materializer = FileMaterializer(remote, config, fs=fs)
    lister = FolderLister(remote, materializer, config)
    return lister.list_files()

"""Run configuration for drivemirror."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

READONLY_SCOPES: tuple[str, ...] = (
    "https://www.googleapis.com/auth/drive.metadata.readonly",
    "https://www.googleapis.com/auth/drive.readonly",
)

TOKEN_FILENAME: str = "token.json"
CLIENT_SECRETS_FILENAME: str = "credentials.json"
DOWNLOAD_DIRNAME: str = "ArchivosDrive"
DEFAULT_PARENT_ID: str = "1Svnuuj1kHuh9L74gJQWJ_pBP50N1Xweh"


@dataclass(slots=True, frozen=True)
class MirrorConfig:
    """
    Everything a mirror run needs, passed explicitly to each component.

    Paths are stored as given; use `from_cwd` to build the usual layout
    (token.json, credentials.json and ArchivosDrive/ in the working directory).
    """

    token_file: Path
    client_secrets_file: Path
    download_root: Path
    scopes: tuple[str, ...] = READONLY_SCOPES
    parent_id: str = DEFAULT_PARENT_ID
    page_size: int = 10
    export_mime_type: str = "application/pdf"
    export_extension: str = ".pdf"
    create_download_root: bool = True

    def __post_init__(self) -> None:
        if not self.scopes or not all(
            isinstance(s, str) and s.strip() for s in self.scopes
        ):
            raise ValueError("MirrorConfig.scopes must be a non-empty sequence of strings")

        for name in ("token_file", "client_secrets_file", "download_root"):
            value = getattr(self, name)
            if not isinstance(value, Path) or not str(value).strip():
                raise ValueError(f"MirrorConfig.{name} must be a non-empty Path")

        if not isinstance(self.parent_id, str) or not self.parent_id.strip():
            raise ValueError("MirrorConfig.parent_id must be a non-empty string")

        # Drive caps pageSize at 1000.
        if not 1 <= self.page_size <= 1000:
            raise ValueError("MirrorConfig.page_size must be between 1 and 1000")

        if not self.export_extension.startswith("."):
            raise ValueError("MirrorConfig.export_extension must start with '.'")

    @classmethod
    def from_cwd(cls, cwd: Optional[str | os.PathLike[str]] = None, **overrides) -> "MirrorConfig":
        """
        Build the default layout rooted at `cwd` (process cwd if omitted).

        Any field, paths included, can be overridden by keyword.
        """
        base = Path(cwd) if cwd is not None else Path.cwd()
        defaults = {
            "token_file": base / TOKEN_FILENAME,
            "client_secrets_file": base / CLIENT_SECRETS_FILENAME,
            "download_root": base / DOWNLOAD_DIRNAME,
        }
        return cls(**dict(defaults, **overrides))

"""Persisted OAuth credentials (token file) for drivemirror."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional, Sequence

from drivemirror.errors import CredentialStoreError

logger = logging.getLogger(__name__)

AUTHORIZED_USER_TYPE = "authorized_user"


class CredentialStore:
    """
    Read and write the authorized-user token file.

    The file holds exactly:
        {"type": "authorized_user", "client_id", "client_secret", "refresh_token"}
    client_id/client_secret come from the application registration file
    (client secrets JSON), which is only ever read.
    """

    def __init__(
        self,
        token_file: Path,
        client_secrets_file: Path,
        scopes: Optional[Sequence[str]] = None,
    ) -> None:
        self._token_file = Path(token_file)
        self._client_secrets_file = Path(client_secrets_file)
        self._scopes = list(scopes) if scopes else None

    @property
    def token_file(self) -> Path:
        return self._token_file

    @property
    def client_secrets_file(self) -> Path:
        return self._client_secrets_file

    def load(self):
        """
        Return credentials from the token file, or None.

        Any failure (missing file, bad JSON, missing keys) means "no prior
        session"; nothing is raised. Token freshness is not checked.

        Returns:
            google.oauth2.credentials.Credentials | None
        """
        from google.oauth2.credentials import Credentials

        try:
            with open(self._token_file, encoding="utf-8") as f:
                info = json.load(f)
            return Credentials.from_authorized_user_info(info, scopes=self._scopes)
        except Exception as exc:
            logger.debug("No usable saved credentials in %s: %s", self._token_file, exc)
            return None

    def save(self, creds) -> None:
        """
        Rewrite the token file from the registration file and creds.refresh_token.

        Raises:
            CredentialStoreError: if the registration file is missing or
                malformed, or the token file cannot be written. In every case
                the existing token file (if any) is left untouched.
        """
        payload = self.to_payload(creds)

        token_dir = self._token_file.parent
        try:
            token_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._token_file.name}.", suffix=".tmp", dir=str(token_dir)
            )
        except OSError as exc:
            raise CredentialStoreError(
                "Failed to save OAuth token file",
                details={"token_file": str(self._token_file)},
                cause=exc,
            ) from exc

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f)
            os.replace(tmp_path, self._token_file)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise CredentialStoreError(
                "Failed to save OAuth token file",
                details={"token_file": str(self._token_file)},
                cause=exc,
            ) from exc

        logger.info("Saved credentials to %s", self._token_file)

    def to_payload(self, creds) -> dict[str, Any]:
        """Build the token file payload for creds (reads the registration file)."""
        key = self._read_client_key()
        return {
            "type": AUTHORIZED_USER_TYPE,
            "client_id": key["client_id"],
            "client_secret": key["client_secret"],
            "refresh_token": getattr(creds, "refresh_token", None),
        }

    def _read_client_key(self) -> dict[str, Any]:
        secrets_file = str(self._client_secrets_file)
        try:
            with open(self._client_secrets_file, encoding="utf-8") as f:
                keys = json.load(f)
        except (OSError, ValueError) as exc:
            raise CredentialStoreError(
                "Failed to read client secrets file",
                details={"client_secrets_file": secrets_file},
                cause=exc,
            ) from exc

        key = None
        if isinstance(keys, dict):
            key = keys.get("installed") or keys.get("web")
        if not isinstance(key, dict):
            raise CredentialStoreError(
                "Client secrets file has no 'installed' or 'web' section",
                details={"client_secrets_file": secrets_file},
            )

        for name in ("client_id", "client_secret"):
            if not isinstance(key.get(name), str) or not key[name]:
                raise CredentialStoreError(
                    f"Client secrets file is missing '{name}'",
                    details={"client_secrets_file": secrets_file},
                )
        return key

"""Produce authorized Drive credentials, interactively if needed."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Optional, Sequence

from drivemirror.errors import AuthError, InvalidArgumentError

from .credential_store import CredentialStore

logger = logging.getLogger(__name__)

# (client_secrets_file, scopes) -> object with run_local_server(port=...)
FlowFactory = Callable[[str, list[str]], Any]


def _installed_app_flow(client_secrets_file: str, scopes: list[str]):
    from google_auth_oauthlib.flow import InstalledAppFlow

    return InstalledAppFlow.from_client_secrets_file(client_secrets_file, scopes=scopes)


class Authorizer:
    """Load saved credentials, or run the installed-app consent flow."""

    def __init__(
        self,
        store: CredentialStore,
        scopes: Sequence[str],
        *,
        flow_factory: Optional[FlowFactory] = None,
    ) -> None:
        if not scopes or not all(isinstance(s, str) and s.strip() for s in scopes):
            raise InvalidArgumentError("scopes must be a non-empty sequence of strings")
        self._store = store
        self._scopes = list(scopes)
        self._flow_factory = flow_factory or _installed_app_flow

    def authorize(self):
        """
        Return OAuth credentials for the configured scopes.

        Saved credentials are returned as-is (an expired or mis-scoped token
        fails on first use). Otherwise the consent flow runs and, when it
        yields a refresh token, the result is persisted.

        Returns:
            google.oauth2.credentials.Credentials

        Raises:
            AuthError: if the consent flow fails.
            CredentialStoreError: if the new credentials cannot be saved.
        """
        creds = self._store.load()
        if creds is not None:
            logger.debug("Using saved credentials from %s", self._store.token_file)
            return creds

        client_secrets = str(self._store.client_secrets_file)
        try:
            flow = self._flow_factory(client_secrets, list(self._scopes))
            creds = flow.run_local_server(port=0)
        except Exception as exc:
            raise AuthError(
                "OAuth authorization flow failed",
                details={
                    "client_secrets_file": client_secrets,
                    "token_file": str(self._store.token_file),
                },
                cause=exc,
            ) from exc

        if getattr(creds, "refresh_token", None):
            self._store.save(creds)
        else:
            logger.warning(
                "No refresh token returned; credentials will not be saved and "
                "authorization will be requested again on the next run"
            )
        return creds


def authorizer_for(
    token_file: Path,
    client_secrets_file: Path,
    scopes: Sequence[str],
    *,
    flow_factory: Optional[FlowFactory] = None,
) -> Authorizer:
    """Convenience constructor wiring a CredentialStore into an Authorizer."""
    store = CredentialStore(token_file, client_secrets_file, scopes)
    return Authorizer(store, scopes, flow_factory=flow_factory)

"""Public auth exports for drivemirror."""

from __future__ import annotations

from .authorizer import Authorizer, authorizer_for
from .credential_store import CredentialStore

__all__ = ["Authorizer", "CredentialStore", "authorizer_for"]

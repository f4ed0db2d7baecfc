"""Data model for Drive items."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class RemoteFile:
    """
    Read-only snapshot of a Drive item as returned by the API.

    Notes:
        - mime_type is "" when the request did not ask for it (the folder
          listing only fetches id and name).
    """

    file_id: str
    name: str
    mime_type: str = ""

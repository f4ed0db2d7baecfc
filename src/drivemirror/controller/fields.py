"""Field definitions for Google Drive API responses."""

from __future__ import annotations

FILE_FIELDS: str = "id,name,mimeType"

# The listing asks for id and name only; mime type is fetched per file.
LIST_FIELDS: str = "nextPageToken, files(id, name)"

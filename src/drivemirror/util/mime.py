from __future__ import annotations

from drivemirror.models import MaterializeKind

FOLDER_MIME: str = "application/vnd.google-apps.folder"
GOOGLE_APP_PREFIX: str = "application/vnd.google-apps."


def is_folder(mime_type: str) -> bool:
    return mime_type == FOLDER_MIME


def is_google_app(mime_type: str) -> bool:
    """
    Returns True if the MIME type is a Google 'apps' type (folders included).

    Google-native documents have no byte representation of their own and must
    be exported before they can be stored locally.
    """
    return mime_type.startswith(GOOGLE_APP_PREFIX)


def classify(mime_type: str) -> MaterializeKind:
    """
    Decide how a Drive item is materialized locally.

    - "folder": Drive folder -> local directory
    - "export": any other Google apps type -> server-side export
    - "download": everything else -> raw bytes
    """
    if is_folder(mime_type):
        return "folder"
    if is_google_app(mime_type):
        return "export"
    return "download"

"""Google Drive API controller (internal use only)."""

from __future__ import annotations

import json
import logging
from typing import Any, BinaryIO, Callable, TypeVar

from drivemirror.errors import (
    ApiError,
    AuthError,
    HttpErrorInfo,
    NetworkError,
    map_http_error,
)
from drivemirror.models import RemoteFile

from .fields import FILE_FIELDS, LIST_FIELDS

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DriveController:
    """
    Drive API v3 controller implementing the RemoteDrive capability.

    Notes:
        - The Drive `service` object is NOT exposed.
        - Requests are executed once; failures are mapped to drivemirror
          errors and raised, never retried.
    """

    def __init__(self, credentials: Any) -> None:
        try:
            from googleapiclient.discovery import build
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                details={"hint": "Install google-api-python-client"},
                cause=exc,
            ) from exc

        try:
            self._service = build(
                "drive", "v3", credentials=credentials, cache_discovery=False
            )
        except Exception as exc:
            raise AuthError("Failed to build Drive service", cause=exc) from exc

    @classmethod
    def from_service(cls, service: Any) -> "DriveController":
        """Create controller from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._service = service
        return obj

    # ----------------------------
    # Public API
    # ----------------------------
    def get(self, file_id: str) -> RemoteFile:
        req = self._service.files().get(fileId=file_id, fields=FILE_FIELDS)
        data = self._execute(req.execute)
        return _file_dict_to_remote_file(data)

    def list_children(
        self,
        parent_id: str,
        *,
        page_size: int = 10,
        fields: str = LIST_FIELDS,
    ) -> list[RemoteFile]:
        """
        List the first page of items directly under parent_id.

        nextPageToken is requested but never followed.
        """
        req = self._service.files().list(
            q=_build_parent_query(parent_id),
            pageSize=page_size,
            fields=fields,
        )
        data = self._execute(req.execute)
        if data.get("nextPageToken"):
            logger.debug("More than %d children under %s; only the first page is read",
                         page_size, parent_id)
        return [_file_dict_to_remote_file(f) for f in data.get("files", []) or []]

    def export_to(self, file_id: str, mime_type: str, fh: BinaryIO) -> None:
        """Export a Google apps document to mime_type and stream it into fh."""
        req = self._service.files().export_media(fileId=file_id, mimeType=mime_type)
        self._stream(req, fh)

    def download_to(self, file_id: str, fh: BinaryIO) -> None:
        """Stream the raw content (alt=media) of file_id into fh."""
        req = self._service.files().get_media(fileId=file_id)
        self._stream(req, fh)

    # ----------------------------
    # Internals
    # ----------------------------
    def _stream(self, request: Any, fh: BinaryIO) -> None:
        try:
            from googleapiclient.http import MediaIoBaseDownload
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                cause=exc,
            ) from exc

        downloader = MediaIoBaseDownload(fd=fh, request=request)
        done = False
        while not done:
            _status, done = self._execute(downloader.next_chunk)

    def _execute(self, func: Callable[[], T]) -> T:
        try:
            return func()
        except Exception as exc:
            raise self._map_exception(exc) from exc

    def _map_exception(self, exc: Exception) -> Exception:
        try:
            from googleapiclient.errors import HttpError
        except Exception:  # pragma: no cover
            HttpError = None  # type: ignore[assignment]

        if HttpError is not None and isinstance(exc, HttpError):
            info = _http_error_to_info(exc)
            return map_http_error(info, cause=exc)

        if isinstance(exc, (OSError, TimeoutError)):
            return NetworkError("Network error", cause=exc)

        return ApiError("Drive API error", cause=exc)


def _build_parent_query(parent_id: str) -> str:
    return f"'{parent_id}' in parents"


def _file_dict_to_remote_file(data: dict[str, Any]) -> RemoteFile:
    file_id = data.get("id")
    name = data.get("name", "")
    mime_type = data.get("mimeType", "")
    return RemoteFile(
        file_id=file_id if isinstance(file_id, str) else "",
        name=name if isinstance(name, str) else "",
        mime_type=mime_type if isinstance(mime_type, str) else "",
    )


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            payload = None
        err = payload.get("error", {}) if isinstance(payload, dict) else {}
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )

"""List the mirrored parent folder and materialize every child."""

from __future__ import annotations

import logging
from collections import Counter

from drivemirror.config import MirrorConfig
from drivemirror.controller import LIST_FIELDS, RemoteDrive
from drivemirror.materializer import FileMaterializer
from drivemirror.models import MirrorResult

logger = logging.getLogger(__name__)


class FolderLister:
    """Drive a FileMaterializer over the first page of the parent's children."""

    def __init__(
        self,
        remote: RemoteDrive,
        materializer: FileMaterializer,
        config: MirrorConfig,
    ) -> None:
        self._remote = remote
        self._materializer = materializer
        self._config = config

    def list_files(self) -> MirrorResult:
        """
        List up to page_size children of the parent folder and materialize them.

        Entries are materialized one after another on the calling thread, so
        the result is complete when this call returns. A listing failure is
        raised; per-file failures are recorded in the result.
        """
        parent_id = self._config.parent_id
        files = self._remote.list_children(
            parent_id,
            page_size=self._config.page_size,
            fields=LIST_FIELDS,
        )
        result = MirrorResult(parent_id=parent_id)
        if not files:
            logger.info("No files found.")
            return result

        logger.info("Files:")
        for f in files:
            logger.info("%s (%s)", f.name, f.file_id)

        result.results = [
            self._materializer.materialize(f.file_id, f.name) for f in files
        ]

        result.summary = dict(Counter(r.status for r in result.results))
        logger.info(
            "Done: %d created, %d skipped, %d failed",
            result.summary.get("created", 0),
            result.summary.get("skipped", 0),
            result.summary.get("failed", 0),
        )
        return result

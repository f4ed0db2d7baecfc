"""Result models for materialize/mirror runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional


MaterializeKind = Literal["folder", "export", "download"]
MaterializeStatus = Literal["created", "skipped", "failed"]


@dataclass(slots=True)
class MaterializeResult:
    """Outcome of materializing a single remote entry."""

    file_id: str
    name: str
    status: MaterializeStatus

    kind: Optional[MaterializeKind] = None
    target: Optional[Path] = None

    error_type: Optional[str] = None
    error_message: Optional[str] = None


@dataclass(slots=True)
class MirrorResult:
    """Aggregate result for one listing + materialization pass."""

    parent_id: str
    results: list[MaterializeResult] = field(default_factory=list)
    summary: dict[str, int] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.summary.get("failed", 0) == 0

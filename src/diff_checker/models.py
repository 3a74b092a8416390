"""Segment models shared by the aligner and rendering helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

SegmentKind = Literal["unchanged", "added", "removed"]

SEGMENT_UNCHANGED: SegmentKind = "unchanged"
SEGMENT_ADDED: SegmentKind = "added"
SEGMENT_REMOVED: SegmentKind = "removed"


@dataclass(frozen=True)
class Segment:
    """One token of a comparison result labeled with how it changed."""

    text: str
    kind: SegmentKind


@dataclass(frozen=True)
class DiffStats:
    """Per-kind segment counts for a comparison result."""

    added: int = 0
    removed: int = 0
    unchanged: int = 0

    @property
    def has_changes(self) -> bool:
        return self.added > 0 or self.removed > 0

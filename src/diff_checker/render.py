"""Helpers for presenting comparison results in the UI."""

from __future__ import annotations

import html
import logging
from typing import Sequence

from diff_checker.compare import summarize_segments
from diff_checker.models import SEGMENT_ADDED, SEGMENT_REMOVED, SEGMENT_UNCHANGED, Segment

LOGGER = logging.getLogger("diff_checker.render")

SEGMENT_TITLES: dict[str, str] = {
    SEGMENT_ADDED: "Added text",
    SEGMENT_REMOVED: "Removed text",
    SEGMENT_UNCHANGED: "Unchanged text",
}

NO_DIFFERENCES_MESSAGE = "No differences found."


def _render_segment(segment: Segment) -> str:
    title = SEGMENT_TITLES[segment.kind]
    text = html.escape(segment.text, quote=False)
    return f'<span class="dc-{segment.kind}" title="{title}">{text}</span>'


def render_segments_html(segments: Sequence[Segment], *, max_segments: int | None = None) -> str:
    """Render segments as one styled ``<span>`` per segment, in order.

    When ``max_segments`` is set and exceeded, the remainder is replaced by a
    truncation notice.
    """
    visible = segments
    omitted = 0
    if max_segments is not None and len(segments) > max_segments:
        visible = segments[:max_segments]
        omitted = len(segments) - max_segments
        LOGGER.warning(
            "render_truncated total_segments=%d rendered=%d omitted=%d",
            len(segments),
            max_segments,
            omitted,
        )

    parts = [_render_segment(segment) for segment in visible]
    if omitted:
        noun = "segment" if omitted == 1 else "segments"
        parts.append(f'<span class="dc-truncated">[{omitted} more {noun} not shown]</span>')
    return "".join(parts)


def describe_result(segments: Sequence[Segment]) -> str:
    """Return a one-line summary for the results header."""
    if not segments:
        return NO_DIFFERENCES_MESSAGE
    stats = summarize_segments(segments)
    return f"{stats.added} added, {stats.removed} removed, {stats.unchanged} unchanged"

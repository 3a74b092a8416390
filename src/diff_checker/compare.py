"""Two-text comparison entrypoint and helpers over comparison results."""

from __future__ import annotations

import logging
from typing import Iterable

from diff_checker.aligner import align
from diff_checker.models import (
    SEGMENT_ADDED,
    SEGMENT_REMOVED,
    SEGMENT_UNCHANGED,
    DiffStats,
    Segment,
)
from diff_checker.tokenizer import is_blank, tokenize

LOGGER = logging.getLogger("diff_checker.compare")


def compare_texts(original: str, modified: str) -> list[Segment]:
    """Compare two texts word by word and return the labeled segments.

    Returns an empty list when both sides are empty or whitespace-only, without
    tokenizing either side.
    """
    if is_blank(original) and is_blank(modified):
        LOGGER.info(
            "compare_texts original_chars=%d modified_chars=%d segments=0 outcome=blank",
            len(original),
            len(modified),
        )
        return []

    left_tokens = tokenize(original)
    right_tokens = tokenize(modified)
    segments = align(left_tokens, right_tokens)
    LOGGER.info(
        "compare_texts original_chars=%d modified_chars=%d left_tokens=%d right_tokens=%d segments=%d outcome=compared",
        len(original),
        len(modified),
        len(left_tokens),
        len(right_tokens),
        len(segments),
    )
    return segments


def _join_kinds(segments: Iterable[Segment], kinds: set[str]) -> str:
    return "".join(segment.text for segment in segments if segment.kind in kinds)


def original_text(segments: Iterable[Segment]) -> str:
    """Rebuild the original side from unchanged and removed segments."""
    return _join_kinds(segments, {SEGMENT_UNCHANGED, SEGMENT_REMOVED})


def modified_text(segments: Iterable[Segment]) -> str:
    """Rebuild the modified side from unchanged and added segments."""
    return _join_kinds(segments, {SEGMENT_UNCHANGED, SEGMENT_ADDED})


def summarize_segments(segments: Iterable[Segment]) -> DiffStats:
    """Count segments per kind."""
    counts = {SEGMENT_ADDED: 0, SEGMENT_REMOVED: 0, SEGMENT_UNCHANGED: 0}
    for segment in segments:
        counts[segment.kind] += 1
    return DiffStats(
        added=counts[SEGMENT_ADDED],
        removed=counts[SEGMENT_REMOVED],
        unchanged=counts[SEGMENT_UNCHANGED],
    )

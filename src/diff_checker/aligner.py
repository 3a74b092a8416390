"""Greedy token alignment with a bounded lookahead window."""

from __future__ import annotations

from typing import Sequence

from diff_checker.models import SEGMENT_ADDED, SEGMENT_REMOVED, SEGMENT_UNCHANGED, Segment

LOOKAHEAD_WINDOW = 4


def _find_ahead(tokens: Sequence[str], start: int, target: str) -> int | None:
    """Return the first index after ``start`` within the window holding ``target``."""
    stop = min(len(tokens), start + 1 + LOOKAHEAD_WINDOW)
    for index in range(start + 1, stop):
        if tokens[index] == target:
            return index
    return None


def align(left: Sequence[str], right: Sequence[str]) -> list[Segment]:
    """Align two token sequences into unchanged, added and removed segments.

    Walks both sequences with one cursor each. On a mismatch it first looks up to
    ``LOOKAHEAD_WINDOW`` tokens ahead on the right for the current left token
    (an insertion run), then ahead on the left for the current right token (a
    deletion run), and otherwise records a one-for-one replacement. This is a
    local heuristic and does not produce a minimal diff.
    """
    result: list[Segment] = []
    i = 0
    j = 0

    while i < len(left) or j < len(right):
        if i >= len(left):
            result.append(Segment(right[j], SEGMENT_ADDED))
            j += 1
            continue
        if j >= len(right):
            result.append(Segment(left[i], SEGMENT_REMOVED))
            i += 1
            continue

        current_left = left[i]
        current_right = right[j]
        if current_left == current_right:
            result.append(Segment(current_left, SEGMENT_UNCHANGED))
            i += 1
            j += 1
            continue

        match_right = _find_ahead(right, j, current_left)
        if match_right is not None:
            result.extend(Segment(token, SEGMENT_ADDED) for token in right[j:match_right])
            result.append(Segment(current_left, SEGMENT_UNCHANGED))
            i += 1
            j = match_right + 1
            continue

        match_left = _find_ahead(left, i, current_right)
        if match_left is not None:
            result.extend(Segment(token, SEGMENT_REMOVED) for token in left[i:match_left])
            result.append(Segment(current_right, SEGMENT_UNCHANGED))
            i = match_left + 1
            j += 1
            continue

        # Removal is emitted before the addition that replaces it.
        result.append(Segment(current_left, SEGMENT_REMOVED))
        result.append(Segment(current_right, SEGMENT_ADDED))
        i += 1
        j += 1

    return result

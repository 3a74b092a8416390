"""Alignment tests for the bounded-lookahead word diff."""

from __future__ import annotations

import pytest

from diff_checker.aligner import LOOKAHEAD_WINDOW, align
from diff_checker.models import Segment
from diff_checker.tokenizer import tokenize


def U(text: str) -> Segment:
    return Segment(text, "unchanged")


def A(text: str) -> Segment:
    return Segment(text, "added")


def R(text: str) -> Segment:
    return Segment(text, "removed")


def test_align_both_empty_returns_no_segments() -> None:
    assert align([], []) == []


def test_align_pure_addition_after_left_is_exhausted() -> None:
    assert align(["a"], ["a", " ", "b"]) == [U("a"), A(" "), A("b")]


def test_align_trailing_removals_after_right_is_exhausted() -> None:
    assert align(["a", "b"], ["a"]) == [U("a"), R("b")]


def test_align_resyncs_by_removing_left_tokens() -> None:
    assert align(["x", "y", "z"], ["y", "z"]) == [R("x"), U("y"), U("z")]


def test_align_resyncs_by_adding_right_tokens() -> None:
    assert align(["y"], ["x", "y"]) == [A("x"), U("y")]


def test_align_falls_back_to_replacement() -> None:
    assert align(["apple"], ["banana"]) == [R("apple"), A("banana")]


def test_align_prefers_insertion_over_deletion_when_both_resync() -> None:
    assert align(["a", "b"], ["b", "a"]) == [A("b"), U("a"), R("b")]


def test_align_uses_first_match_in_window() -> None:
    assert align(["x"], ["p", "x", "x"]) == [A("p"), U("x"), A("x")]


def test_lookahead_window_is_four_tokens() -> None:
    assert LOOKAHEAD_WINDOW == 4


def test_align_finds_match_at_last_window_position() -> None:
    left = ["x", "y"]
    right = ["p", "q", "r", "s", "x", "y"]

    assert align(left, right) == [A("p"), A("q"), A("r"), A("s"), U("x"), U("y")]


def test_align_ignores_right_match_beyond_window() -> None:
    left = ["x", "y"]
    right = ["p", "q", "r", "s", "t", "x", "y"]

    assert align(left, right) == [
        R("x"),
        A("p"),
        R("y"),
        A("q"),
        A("r"),
        A("s"),
        A("t"),
        A("x"),
        A("y"),
    ]


def test_align_finds_left_match_at_last_window_position() -> None:
    left = ["a", "b", "c", "d", "y"]
    right = ["y"]

    assert align(left, right) == [R("a"), R("b"), R("c"), R("d"), U("y")]


def test_align_ignores_left_match_beyond_window() -> None:
    left = ["a", "b", "c", "d", "e", "y"]
    right = ["y"]

    assert align(left, right) == [R("a"), A("y"), R("b"), R("c"), R("d"), R("e"), R("y")]


def test_align_replaces_then_resyncs_later() -> None:
    left = ["x", "c"]
    right = ["a", "b", "c", "d", "e", "x"]

    assert align(left, right) == [R("x"), A("a"), A("b"), U("c"), A("d"), A("e"), A("x")]


def test_align_compares_empty_tokens_like_any_other() -> None:
    assert align([""], ["hi"]) == [R(""), A("hi")]
    assert align([""], [""]) == [U("")]


def test_align_accepts_tuples() -> None:
    assert align(("a", " ", "b"), ("a", " ", "c")) == [U("a"), U(" "), R("b"), A("c")]


def test_align_identity_marks_every_token_unchanged() -> None:
    tokens = tokenize("  the same\ttext, twice \n")

    result = align(tokens, tokens)

    assert result == [U(token) for token in tokens]


@pytest.mark.parametrize(
    ("original", "modified"),
    [
        ("", "hello"),
        ("hello", ""),
        ("the quick brown fox", "the slow brown dog"),
        ("one two three four five six", "six five four three two one"),
        ("a b c d e f g h", "a x b y c z d"),
        ("line one\nline two\n", "line one\nline 2\nline three\n"),
        ("repeat repeat repeat", "repeat"),
    ],
)
def test_align_reconstructs_both_sides_within_length_bounds(original: str, modified: str) -> None:
    left = tokenize(original)
    right = tokenize(modified)

    result = align(left, right)

    assert "".join(s.text for s in result if s.kind in {"unchanged", "removed"}) == original
    assert "".join(s.text for s in result if s.kind in {"unchanged", "added"}) == modified
    assert max(len(left), len(right)) <= len(result) <= len(left) + len(right)

"""Word-level diff checker package."""

from __future__ import annotations

__all__ = [
    "config",
    "models",
    "tokenizer",
    "aligner",
    "compare",
    "render",
]

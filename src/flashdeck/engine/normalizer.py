"""Answer normalization for comparison."""

from __future__ import annotations

import re
import unicodedata
from typing import Optional

_WS_RE = re.compile(r"\s+")


def normalize_answer(text: Optional[str]) -> str:
    """Normalize a typed answer: strip, NFKC, lowercase, drop all whitespace.

    NFKC folds half-width katakana and full-width latin into their
    canonical forms, so "ﾈｺ" and "ネコ" compare equal.
    """
    if not text:
        return ""
    text = text.strip()
    text = unicodedata.normalize("NFKC", text)
    text = text.lower()
    text = _WS_RE.sub("", text)
    # Dropping a space can leave a combining mark next to a base letter
    return unicodedata.normalize("NFKC", text)


def answers_match(guess: Optional[str], expected: Optional[str]) -> bool:
    """Check if a typed answer matches the expected one after normalization."""
    return normalize_answer(guess) == normalize_answer(expected)

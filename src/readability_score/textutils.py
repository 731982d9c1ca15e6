from __future__ import annotations

import re

WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(value: object) -> str:
    """Collapse whitespace runs (line breaks included) into single spaces."""
    if not isinstance(value, str):
        value = str(value)
    normalized = WHITESPACE_RE.sub(" ", value)
    return normalized.strip()


def count_characters(text: str) -> int:
    """Count the characters left once every whitespace run is removed."""
    return len(WHITESPACE_RE.sub("", text))

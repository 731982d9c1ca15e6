from __future__ import annotations

from typing import List

from .models import IndexType

ALL_TOKEN = "all"
ALL_INDICES: tuple[IndexType, ...] = (
    IndexType.ARI,
    IndexType.FK,
    IndexType.SMOG,
    IndexType.CL,
)


class InvalidIndexSelectionError(ValueError):
    """Raised when a selection token names no known readability index."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid index type specified: '{token}'.")
        self.token = token


def parse_selection(token: str) -> List[IndexType]:
    """Map ARI, FK, SMOG, CL or all (any case) to the indices to report."""
    normalized = token.strip().upper()
    if normalized == ALL_TOKEN.upper():
        return list(ALL_INDICES)
    try:
        return [IndexType(normalized)]
    except ValueError:
        raise InvalidIndexSelectionError(token) from None


def is_all_selection(token: str) -> bool:
    return token.strip().lower() == ALL_TOKEN

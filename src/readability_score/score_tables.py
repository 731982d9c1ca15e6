"""
Static score-to-age lookup tables for each readability index.

Each table is an ascending sequence of ``(threshold, ScoreInfo)`` pairs where
the threshold marks the start of the band. Lookups pick the band with the
greatest threshold not above the score and fall back to the lowest band for
scores below every threshold.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Mapping, Sequence, Tuple

from .models import IndexType, ScoreInfo

ScoreTable = Tuple[Tuple[float, ScoreInfo], ...]

_GRADE_LABELS = (
    "First Grade",
    "Second Grade",
    "Third Grade",
    "Fourth Grade",
    "Fifth Grade",
    "Sixth Grade",
    "Seventh Grade",
    "Eighth Grade",
    "Ninth Grade",
    "Tenth Grade",
    "Eleventh Grade",
    "Twelfth Grade",
)

COLLEGE = ScoreInfo(18, 24, "College student")
PROFESSOR = ScoreInfo(24, 99, "Professor")


def _build_table(entries: Sequence[Tuple[float, ScoreInfo]]) -> ScoreTable:
    return tuple(sorted(entries, key=lambda entry: entry[0]))


def _grade_entries(first_threshold: float) -> list[Tuple[float, ScoreInfo]]:
    """Grades one through twelve, ages 6-7 up to 17-18, one point apart."""
    return [
        (first_threshold + offset, ScoreInfo(6 + offset, 7 + offset, label))
        for offset, label in enumerate(_GRADE_LABELS)
    ]


# ARI starts one band lower at Kindergarten.
ARI_TABLE: ScoreTable = _build_table(
    [(1.0, ScoreInfo(5, 6, "Kindergarten"))]
    + _grade_entries(2.0)
    + [(14.0, COLLEGE), (15.0, PROFESSOR)]
)

# FK, SMOG and CL share the grade-level scale with a 16 sentinel for Professor.
GRADE_LEVEL_TABLE: ScoreTable = _build_table(
    _grade_entries(1.0) + [(13.0, COLLEGE), (16.0, PROFESSOR)]
)

SCORE_TABLES: Mapping[IndexType, ScoreTable] = {
    IndexType.ARI: ARI_TABLE,
    IndexType.FK: GRADE_LEVEL_TABLE,
    IndexType.SMOG: GRADE_LEVEL_TABLE,
    IndexType.CL: GRADE_LEVEL_TABLE,
}

_THRESHOLDS = {
    index_type: tuple(threshold for threshold, _ in table)
    for index_type, table in SCORE_TABLES.items()
}


def resolve(index_type: IndexType, score: float) -> ScoreInfo:
    """Return the age band for ``score`` on the ``index_type`` scale."""
    table = SCORE_TABLES[index_type]
    position = bisect_right(_THRESHOLDS[index_type], score)
    if position == 0:
        return table[0][1]
    return table[position - 1][1]


def approx_age(info: ScoreInfo) -> int:
    """Representative age for a band, used when averaging across indices."""
    return info.approx_age

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class IndexType(str, Enum):
    """Supported readability indices."""

    ARI = "ARI"
    FK = "FK"
    SMOG = "SMOG"
    CL = "CL"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    IndexType.ARI: "Automated Readability Index",
    IndexType.FK: "Flesch–Kincaid readability tests",
    IndexType.SMOG: "Simple Measure of Gobbledygook",
    IndexType.CL: "Coleman–Liau index",
}


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class MetricSet:
    """Raw counts extracted from a normalized text."""

    word_count: int
    sentence_count: int
    character_count: int
    syllable_count: int
    polysyllable_count: int


@dataclass(frozen=True, slots=True)
class ReadabilityScores:
    """The four formula scores computed for a text."""

    ari: float
    fk: float
    smog: float
    cl: float

    def for_index(self, index_type: IndexType) -> float:
        """Return the score belonging to ``index_type``."""
        return getattr(self, index_type.value.lower())


@dataclass(frozen=True, slots=True)
class ScoreInfo:
    """Reader age range and grade label associated with a score band."""

    lower_bound_age: int
    upper_bound_age: int
    grade_level: str

    @property
    def approx_age(self) -> int:
        return self.upper_bound_age


@dataclass(frozen=True, slots=True)
class IndexResult:
    """A single index score together with its resolved age band."""

    index_type: IndexType
    score: float
    info: ScoreInfo


@dataclass(slots=True)
class ScoreReport:
    """Scores selected for reporting; ``average_age`` is only set for ``all``."""

    doc_id: str
    results: list[IndexResult] = field(default_factory=list)
    average_age: float | None = None


@dataclass(frozen=True, slots=True)
class ReadabilityAnalysis:
    """Computed metrics and scores for a full document."""

    doc_id: str
    text: str
    sentences: tuple[str, ...]
    words: tuple[str, ...]
    metrics: MetricSet
    scores: ReadabilityScores

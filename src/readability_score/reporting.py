from __future__ import annotations

from typing import List, TypedDict

from .models import IndexResult, MetricSet, ReadabilityAnalysis, ScoreReport

INVALID_SELECTION_MESSAGE = "Error: Invalid index type specified."


class MetricsPayload(TypedDict):
    words: int
    sentences: int
    characters: int
    syllables: int
    polysyllables: int


class IndexPayload(TypedDict):
    index: str
    name: str
    score: float
    lower_bound_age: int
    upper_bound_age: int
    grade_level: str


class DocumentSummary(TypedDict):
    doc_id: str
    metrics: MetricsPayload
    scores: List[IndexPayload]
    average_age: float | None


def format_stats(analysis: ReadabilityAnalysis, show_text: bool = True) -> List[str]:
    """Render the basic text statistics as console lines."""
    lines: List[str] = []
    if show_text:
        lines.extend(["The text is:", analysis.text, ""])
    metrics = analysis.metrics
    lines.extend(
        [
            f"Words: {metrics.word_count}",
            f"Sentences: {metrics.sentence_count}",
            f"Characters: {metrics.character_count}",
            f"Syllables: {metrics.syllable_count}",
            f"Polysyllables: {metrics.polysyllable_count}",
        ]
    )
    return lines


def format_report(report: ScoreReport, precision: int = 2) -> List[str]:
    """Render one line per selected index plus the average age for ``all``."""
    lines = [_format_result(result, precision) for result in report.results]
    if report.average_age is not None:
        lines.append("")
        lines.append(
            "This text should be understood on average by "
            f"{report.average_age:.{precision}f} year-olds."
        )
    return lines


def _format_result(result: IndexResult, precision: int) -> str:
    return (
        f"{result.index_type.display_name}: {result.score:.{precision}f} "
        f"(about {result.info.approx_age} year-olds)."
    )


def build_summary(analysis: ReadabilityAnalysis, report: ScoreReport) -> DocumentSummary:
    """Create a JSON-serializable summary for a processed document."""
    return {
        "doc_id": analysis.doc_id,
        "metrics": _metrics_dict(analysis.metrics),
        "scores": [_index_dict(result) for result in report.results],
        "average_age": report.average_age,
    }


def _metrics_dict(metrics: MetricSet) -> MetricsPayload:
    return {
        "words": metrics.word_count,
        "sentences": metrics.sentence_count,
        "characters": metrics.character_count,
        "syllables": metrics.syllable_count,
        "polysyllables": metrics.polysyllable_count,
    }


def _index_dict(result: IndexResult) -> IndexPayload:
    return {
        "index": result.index_type.value,
        "name": result.index_type.display_name,
        "score": result.score,
        "lower_bound_age": result.info.lower_bound_age,
        "upper_bound_age": result.info.upper_bound_age,
        "grade_level": result.info.grade_level,
    }

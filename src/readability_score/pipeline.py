from __future__ import annotations

import logging
from statistics import mean
from typing import Dict, List

from .config import ReadabilityConfig
from .models import (
    Document,
    IndexResult,
    MetricSet,
    ReadabilityAnalysis,
    ScoreReport,
)
from .score_tables import approx_age, resolve
from .scoring import compute_scores
from .selection import is_all_selection, parse_selection
from .syllables import aggregate_syllables
from .textutils import count_characters, normalize_text
from .tokenization import segment_sentences, segment_words

logger = logging.getLogger(__name__)


def analyze_text(
    text: str,
    doc_id: str = "<text>",
    config: ReadabilityConfig | None = None,
) -> ReadabilityAnalysis:
    """Run the full metrics pipeline over raw text."""
    cfg = config or ReadabilityConfig()
    normalized = normalize_text(text)
    sentences = segment_sentences(normalized)
    words = segment_words(sentences)
    syllables, polysyllables = aggregate_syllables(words)
    # Characters are counted on tokenized sentences, so boundary punctuation is excluded.
    metrics = MetricSet(
        word_count=len(words),
        sentence_count=len(sentences),
        character_count=count_characters(" ".join(sentences)),
        syllable_count=syllables,
        polysyllable_count=polysyllables,
    )
    logger.debug("Computed metrics for %s: %s", doc_id, metrics)
    if not words:
        logger.debug("%s contains no words; scores are degenerate.", doc_id)

    return ReadabilityAnalysis(
        doc_id=doc_id,
        text=normalized,
        sentences=tuple(sentences),
        words=tuple(words),
        metrics=metrics,
        scores=compute_scores(metrics, smog_zero_sentinel=cfg.smog_zero_sentinel),
    )


def analyze_document(
    doc: Document, config: ReadabilityConfig | None = None
) -> ReadabilityAnalysis:
    """Analyze a single document."""
    return analyze_text(doc.text, doc_id=doc.doc_id, config=config)


def analyze_corpus(
    documents: List[Document], config: ReadabilityConfig | None = None
) -> Dict[str, ReadabilityAnalysis]:
    """Analyze all documents and return the per-document outputs."""
    results: Dict[str, ReadabilityAnalysis] = {}
    for document in documents:
        results[document.doc_id] = analyze_document(document, config)
    return results


def build_report(analysis: ReadabilityAnalysis, selection: str) -> ScoreReport:
    """
    Resolve the selected indices against the score tables.

    Raises InvalidIndexSelectionError before any score is resolved when the
    selection token is unknown.
    """
    index_types = parse_selection(selection)
    report = ScoreReport(doc_id=analysis.doc_id)
    for index_type in index_types:
        score = analysis.scores.for_index(index_type)
        report.results.append(
            IndexResult(index_type=index_type, score=score, info=resolve(index_type, score))
        )

    if is_all_selection(selection):
        report.average_age = float(
            mean(approx_age(result.info) for result in report.results)
        )
    return report

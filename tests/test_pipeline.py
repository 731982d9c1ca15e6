import pytest

from readability_score.config import ReadabilityConfig
from readability_score.models import Document, IndexType
from readability_score.pipeline import (
    analyze_corpus,
    analyze_document,
    analyze_text,
    build_report,
)
from readability_score.selection import InvalidIndexSelectionError


def test_single_word_sentence_metrics():
    analysis = analyze_text("Cat.")
    metrics = analysis.metrics

    assert metrics.sentence_count == 1
    assert metrics.word_count == 1
    assert metrics.character_count == 3
    assert metrics.syllable_count == 1
    assert metrics.polysyllable_count == 0


def test_two_sentence_text_metrics():
    analysis = analyze_text("The cat sat on the mat. It was happy.")
    metrics = analysis.metrics

    assert analysis.sentences == ("The cat sat on the mat", "It was happy")
    assert metrics.sentence_count == 2
    assert metrics.word_count == 9
    assert metrics.syllable_count >= 8
    assert metrics.syllable_count == 10
    assert metrics.polysyllable_count == 0
    assert metrics.character_count == 27
    assert analysis.scores.fk == pytest.approx(0.39 * 4.5 + 11.8 * 10 / 9 - 15.59)


def test_unpunctuated_text_is_one_sentence():
    analysis = analyze_text("just some words without an ending")

    assert analysis.metrics.sentence_count == 1
    assert analysis.metrics.word_count == 6


def test_empty_text_still_scores():
    """Whitespace-only input yields zero counts and finite scores, not an error."""
    analysis = analyze_text("  \n\t ")

    assert analysis.text == ""
    assert analysis.metrics.word_count == 0
    assert analysis.metrics.sentence_count == 0
    assert analysis.scores.ari == pytest.approx(0.5 - 21.43)
    assert analysis.scores.smog == 0.0


def test_pipeline_is_deterministic():
    text = "Readability formulas approximate difficulty. Longer words raise scores!"
    first = analyze_text(text)
    second = analyze_text(text)

    assert first == second
    assert first.metrics == second.metrics
    assert first.scores == second.scores


def test_multiline_text_is_normalized():
    analysis = analyze_text("First line\nwraps here.\n\nSecond paragraph.")

    assert analysis.text == "First line wraps here. Second paragraph."
    assert analysis.metrics.sentence_count == 2
    assert analysis.metrics.word_count == 6


def test_smog_sentinel_follows_config():
    config = ReadabilityConfig(smog_zero_sentinel=False)
    analysis = analyze_text("The cat sat.", config=config)

    assert analysis.scores.smog == pytest.approx(3.1291)


def test_build_report_all_averages_approx_ages():
    analysis = analyze_text(
        "Communication is beautiful. Education requires patience and dedication."
    )
    report = build_report(analysis, "all")

    assert [r.index_type for r in report.results] == [
        IndexType.ARI,
        IndexType.FK,
        IndexType.SMOG,
        IndexType.CL,
    ]
    ages = [r.info.approx_age for r in report.results]
    assert report.average_age == pytest.approx(sum(ages) / 4)


def test_build_report_all_for_single_word():
    report = build_report(analyze_text("Cat."), "ALL")

    assert len(report.results) == 4
    assert report.average_age == pytest.approx((6 + 7 + 7 + 7) / 4)


def test_build_report_single_index_is_case_insensitive():
    analysis = analyze_text("The cat sat on the mat.")
    report = build_report(analysis, " smog ")

    assert len(report.results) == 1
    assert report.results[0].index_type is IndexType.SMOG
    assert report.results[0].score == analysis.scores.smog
    assert report.average_age is None


def test_build_report_rejects_unknown_selection():
    analysis = analyze_text("The cat sat on the mat.")

    with pytest.raises(InvalidIndexSelectionError) as excinfo:
        build_report(analysis, "XYZ")
    assert excinfo.value.token == "XYZ"


def test_analyze_corpus_keys_by_doc_id():
    documents = [
        Document(doc_id="a.txt", text="Short text."),
        Document(doc_id="b.txt", text="Another short text. With two sentences."),
    ]
    results = analyze_corpus(documents)

    assert set(results) == {"a.txt", "b.txt"}
    assert results["b.txt"].metrics.sentence_count == 2
    assert results["a.txt"] == analyze_document(documents[0])

from readability_score.textutils import count_characters, normalize_text
from readability_score.tokenization import segment_sentences, segment_words


def test_segment_sentences_splits_on_terminal_runs():
    text = "Wait... What?! Yes. Really"
    sentences = segment_sentences(text)

    assert sentences == ["Wait", "What", "Yes", "Really"]


def test_segment_sentences_without_punctuation_is_single_sentence():
    assert segment_sentences("no punctuation here at all") == [
        "no punctuation here at all"
    ]


def test_segment_sentences_keeps_punctuation_only_text():
    """Text consisting solely of terminal marks still yields one sentence."""
    assert segment_sentences("?!") == ["?!"]


def test_segment_sentences_empty_text():
    assert segment_sentences("") == []
    assert segment_sentences("   ") == []


def test_segment_words_keeps_internal_punctuation():
    words = segment_words(["A well-known fact, honestly", "It's  true"])

    assert words == ["A", "well-known", "fact,", "honestly", "It's", "true"]


def test_normalize_text_collapses_whitespace():
    raw = "  First line\nsecond\tline \r\n\n third  "

    assert normalize_text(raw) == "First line second line third"


def test_count_characters_ignores_whitespace():
    assert count_characters("ab c\n d\te ") == 5
    assert count_characters("") == 0

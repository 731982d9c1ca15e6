from __future__ import annotations

import math

from .models import MetricSet, ReadabilityScores


def compute_scores(
    metrics: MetricSet, smog_zero_sentinel: bool = True
) -> ReadabilityScores:
    """
    Compute ARI, Flesch-Kincaid, SMOG and Coleman-Liau scores from raw counts.
    Word and sentence counts are floored to 1 so empty text never divides by zero.
    """
    words = max(1, metrics.word_count)
    sentences = max(1, metrics.sentence_count)
    return ReadabilityScores(
        ari=automated_readability_index(metrics.character_count, words, sentences),
        fk=flesch_kincaid_grade(metrics.syllable_count, words, sentences),
        smog=smog_index(
            metrics.polysyllable_count, sentences, zero_sentinel=smog_zero_sentinel
        ),
        cl=coleman_liau_index(metrics.character_count, words, sentences),
    )


def automated_readability_index(characters: int, words: int, sentences: int) -> float:
    return 4.71 * (characters / words) + 0.5 * (words / sentences) - 21.43


def flesch_kincaid_grade(syllables: int, words: int, sentences: int) -> float:
    return 0.39 * (words / sentences) + 11.8 * (syllables / words) - 15.59


def smog_index(
    polysyllables: int, sentences: int, *, zero_sentinel: bool = True
) -> float:
    """
    SMOG grade normalized to a 30-sentence sample.
    With zero_sentinel the score is 0.0 when no word is polysyllabic.
    """
    if polysyllables <= 0 and zero_sentinel:
        return 0.0
    return 1.043 * math.sqrt(polysyllables * (30.0 / sentences)) + 3.1291


def coleman_liau_index(characters: int, words: int, sentences: int) -> float:
    letters_per_100_words = characters / words * 100.0
    sentences_per_100_words = sentences / words * 100.0
    return 0.0588 * letters_per_100_words - 0.296 * sentences_per_100_words - 15.8

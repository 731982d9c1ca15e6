"""
Heuristic syllable estimation based on vowel-group counting.

No dictionary or phonetic model is consulted; the counts are approximations
that are good enough for the readability formulas, which are approximations
themselves.
"""

from __future__ import annotations

import re
from typing import Iterable, Tuple

VOWELS = frozenset("aeiouy")
TRAILING_NON_LETTER_RE = re.compile(r"[^a-z]\Z")

# Words with more syllables than this are polysyllabic.
POLYSYLLABLE_MIN_EXCLUSIVE = 2


def count_syllables(word: str) -> int:
    """
    Estimate the number of syllables in a single word.

    * Lowercase the word and strip one trailing non-letter (punctuation).
    * Count each contiguous run of vowels (``a e i o u y``) once.
    * Drop a silent final ``e`` unless it is the only nucleus, the word ends
      in ``le``, or the ``e`` follows another vowel.
    * Any non-empty token scores at least one syllable.
    """
    if not word:
        return 0

    cleaned = TRAILING_NON_LETTER_RE.sub("", word.lower())

    count = 0
    last_was_vowel = False
    for ch in cleaned:
        is_vowel = ch in VOWELS
        if is_vowel and not last_was_vowel:
            count += 1
        last_was_vowel = is_vowel

    if (
        cleaned.endswith("e")
        and count > 1
        and not cleaned.endswith("le")
        and cleaned[-2] not in VOWELS
    ):
        count -= 1

    return max(count, 1)


def is_polysyllabic(word: str) -> bool:
    """Return True when the word has three or more estimated syllables."""
    return count_syllables(word) > POLYSYLLABLE_MIN_EXCLUSIVE


def aggregate_syllables(words: Iterable[str]) -> Tuple[int, int]:
    """Return ``(total_syllables, polysyllable_count)`` in a single pass."""
    total = 0
    polysyllables = 0
    for word in words:
        syllables = count_syllables(word)
        total += syllables
        if syllables > POLYSYLLABLE_MIN_EXCLUSIVE:
            polysyllables += 1
    return total, polysyllables

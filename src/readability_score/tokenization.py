from __future__ import annotations

import re
from typing import Iterable, List

SENTENCE_BOUNDARY_RE = re.compile(r"[.!?]+\s*")
WORD_SPLIT_RE = re.compile(r"\s+")


def segment_sentences(text: str) -> List[str]:
    """Split text on runs of terminal punctuation, dropping empty fragments."""
    sentences: List[str] = []
    for fragment in SENTENCE_BOUNDARY_RE.split(text):
        fragment = fragment.strip()
        if fragment:
            sentences.append(fragment)

    # Text made only of punctuation still counts as content when non-empty.
    if not sentences and text.strip():
        sentences.append(text.strip())
    return sentences


def segment_words(sentences: Iterable[str]) -> List[str]:
    """Split each sentence on whitespace runs, keeping punctuation inside tokens."""
    words: List[str] = []
    for sentence in sentences:
        words.extend(word for word in WORD_SPLIT_RE.split(sentence.strip()) if word)
    return words

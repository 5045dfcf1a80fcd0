"""
Vocabulary richness: type-token ratio and its moving-average variant.

MATTR slides a fixed window across the content words, maintaining a
frequency map incrementally so the whole pass stays linear in the number of
tokens.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from narrative_signals.core.exceptions import require_non_negative, require_positive
from narrative_signals.services.text import STOP_WORDS, content_words, tokenize

DEFAULT_MATTR_WINDOW = 50
DEFAULT_TOP_WORDS = 50


@dataclass(frozen=True)
class VocabularyResult:
    ttr: float  # 0.0 to 1.0
    mattr: float  # 0.0 to 1.0
    unique_words: int
    total_words: int
    label: str


EMPTY_VOCABULARY = VocabularyResult(ttr=0.0, mattr=0.0, unique_words=0, total_words=0, label="N/A")


def vocabulary_label(mattr: float) -> str:
    if mattr >= 0.8:
        return "Very High"
    if mattr >= 0.65:
        return "High"
    if mattr >= 0.5:
        return "Moderate"
    if mattr >= 0.35:
        return "Low"
    return "Very Low"


def moving_average_ttr(words: list[str], window: int = DEFAULT_MATTR_WINDOW) -> float:
    """Average unique/window over every window position; plain TTR when too short."""
    require_positive("window", window)
    if not words:
        return 0.0
    if len(words) <= window:
        return len(set(words)) / len(words)

    counts: Counter[str] = Counter(words[:window])
    unique = len(counts)
    total = unique / window
    positions = 1

    for index in range(window, len(words)):
        outgoing = words[index - window]
        counts[outgoing] -= 1
        if counts[outgoing] == 0:
            unique -= 1
            del counts[outgoing]

        incoming = words[index]
        if counts[incoming] == 0:
            unique += 1
        counts[incoming] += 1

        total += unique / window
        positions += 1

    return total / positions


def compute_vocabulary_richness(text: str, window: int = DEFAULT_MATTR_WINDOW) -> VocabularyResult:
    require_positive("window", window)
    words = content_words(tokenize(text))
    if not words:
        return EMPTY_VOCABULARY

    unique_words = len(set(words))
    ttr = unique_words / len(words)
    mattr = moving_average_ttr(words, window)

    return VocabularyResult(
        ttr=round(ttr, 3),
        mattr=round(mattr, 3),
        unique_words=unique_words,
        total_words=len(words),
        label=vocabulary_label(mattr),
    )


@dataclass(frozen=True)
class WordFrequency:
    word: str
    count: int
    percentage: float
    is_stop_word: bool


def word_frequencies(text: str, top_n: int = DEFAULT_TOP_WORDS) -> list[WordFrequency]:
    """Most frequent tokens, stopwords included but flagged. Ties keep first-seen order."""
    require_non_negative("top_n", top_n)
    words = tokenize(text)
    if not words:
        return []
    counts = Counter(words)
    return [
        WordFrequency(
            word=word,
            count=count,
            percentage=round(count / len(words) * 100, 2),
            is_stop_word=word in STOP_WORDS,
        )
        for word, count in counts.most_common(top_n)
    ]

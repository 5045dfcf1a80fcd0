"""
Tokenisation and sentence splitting shared by every analysis.

All helpers are pure: they never mutate the caller's text and return an
empty list for empty input.
"""

from __future__ import annotations

import re
from typing import Iterable

_NON_WORD_CHARS = re.compile(r"[^a-z0-9\s'-]")
_WHITESPACE = re.compile(r"\s+")
_SENTENCE_BREAK = re.compile(r"(?<=[.!?])\s+")

MIN_SENTENCE_CHARS = 5

# Words that are never character names, even when capitalised.
NAME_STOP_WORDS = frozenset(
    [
        "the", "he", "she", "it", "they", "a", "an", "in", "on", "at", "by", "to", "of", "and",
        "but", "or", "not", "so", "as", "if", "up", "no", "go", "my", "we", "you", "his", "her",
        "our", "its", "then", "when", "what", "with", "for", "that", "this", "from", "was",
        "had", "are", "can", "all", "now", "still", "just", "here", "there", "could", "would",
        "should", "some", "into", "over", "before", "after", "more", "even", "chapter", "part",
        "volume", "section", "book", "episode", "page", "one", "two", "three", "four", "five",
        "six", "seven", "eight", "nine", "ten", "first", "second", "third", "last", "next",
        "back", "down", "said", "asked", "replied", "answered", "looked", "turned", "walked",
        "came", "went", "got", "made", "knew", "thought", "felt", "heard", "saw", "told",
    ]
)

KEYWORD_STOP_WORDS = NAME_STOP_WORDS | frozenset(
    [
        "been", "being", "does", "did", "has", "have", "having", "will", "shall",
        "very", "much", "only", "also", "too", "like", "well", "way", "than",
        "each", "every", "such", "both", "own", "same", "about", "through",
        "during", "against", "between", "under", "above", "once", "again",
        "other", "any", "many", "few", "most", "along", "around", "upon",
        "while", "until", "since", "though", "because", "enough", "almost",
        "already", "often", "perhaps", "really", "quite", "might", "must",
        "may", "let", "yet", "seem", "seemed", "seems",
    ]
)

STOP_WORDS = KEYWORD_STOP_WORDS | frozenset(
    [
        "is", "were", "be", "do", "i", "me", "him", "us", "them", "your", "their",
        "which", "who", "whom", "where", "why", "how", "these", "those", "nor",
    ]
)


def tokenize(text: str) -> list[str]:
    """Lowercase ``text``, strip everything but letters, digits, apostrophes and hyphens."""
    if not text:
        return []
    cleaned = _NON_WORD_CHARS.sub("", text.lower())
    return [word for word in _WHITESPACE.split(cleaned) if word]


def split_sentences(text: str) -> list[str]:
    """Split on terminal punctuation followed by whitespace, dropping short fragments."""
    if not text:
        return []
    fragments = (fragment.strip() for fragment in _SENTENCE_BREAK.split(text))
    return [fragment for fragment in fragments if len(fragment) > MIN_SENTENCE_CHARS]


def split_words(text: str) -> list[str]:
    """Whitespace split with empties removed; punctuation is kept on the words."""
    return [word for word in _WHITESPACE.split(text or "") if word]


def content_words(tokens: Iterable[str]) -> list[str]:
    """Drop stopwords and tokens of two characters or fewer."""
    return [token for token in tokens if len(token) > 2 and token not in STOP_WORDS]


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0

"""
TF-IDF keyword extraction.

The text is cut into pseudo-documents of roughly 500 tokens so that inverse
document frequency has something to discriminate between.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass

from narrative_signals.core.exceptions import require_non_negative
from narrative_signals.services.text import KEYWORD_STOP_WORDS, tokenize

DOCUMENT_SIZE = 500
MIN_TOKENS = 10
MIN_TERM_LENGTH = 3
DEFAULT_MAX_KEYWORDS = 12


@dataclass(frozen=True)
class Keyword:
    term: str
    score: float  # normalised so the top keyword scores 1.0
    count: int


def _pseudo_documents(words: list[str]) -> list[list[str]]:
    documents = [words[start : start + DOCUMENT_SIZE] for start in range(0, len(words), DOCUMENT_SIZE)]
    if len(documents) < 2:
        documents.append(words[len(words) // 2 :])
    return documents


def extract_keywords(text: str, max_keywords: int = DEFAULT_MAX_KEYWORDS) -> list[Keyword]:
    """
    Rank the most distinctive terms of ``text``.

    Args:
        text: Prose to analyse; fewer than ten tokens yields an empty list.
        max_keywords: Maximum number of keywords to return.

    Returns:
        Keywords sorted by descending score, rescaled so the first scores 1.0.
    """
    require_non_negative("max_keywords", max_keywords)
    words = tokenize(text)
    if len(words) < MIN_TOKENS or max_keywords == 0:
        return []

    term_counts: Counter[str] = Counter(
        word for word in words if len(word) >= MIN_TERM_LENGTH and word not in KEYWORD_STOP_WORDS
    )
    if not term_counts:
        return []

    documents = _pseudo_documents(words)
    document_counts: Counter[str] = Counter()
    for document in documents:
        document_counts.update(term for term in set(document) if term in term_counts)

    total = len(words)
    num_documents = len(documents)
    scored: list[tuple[str, float, int]] = []
    for term, frequency in term_counts.items():
        idf = math.log((num_documents + 1) / (document_counts.get(term, 1) + 1)) + 1
        scored.append((term, (frequency / total) * idf, frequency))

    # sorted() is stable, so ties keep first-occurrence order
    top = sorted(scored, key=lambda item: item[1], reverse=True)[:max_keywords]
    best = top[0][1] or 1.0

    return [Keyword(term=term, score=round(score / best, 3), count=count) for term, score, count in top]

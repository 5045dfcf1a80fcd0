"""
Extractive summarisation.

``textrank_summarize`` ranks sentences with PageRank over a cosine
similarity graph. ``generate_extractive_recap`` is the cheaper heuristic
recap that scores sentences on position, keywords and character mentions.
"""

from __future__ import annotations

import logging
import math
from collections import Counter

from narrative_signals.core.exceptions import PreconditionError, require_non_negative, require_positive
from narrative_signals.services.characters import extract_characters
from narrative_signals.services.keywords import extract_keywords
from narrative_signals.services.text import content_words, split_sentences, tokenize

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY_SENTENCES = 4
DEFAULT_ITERATIONS = 30
DEFAULT_DAMPING = 0.85
DEFAULT_TOLERANCE = 1e-5
MIN_NODE_WORDS = 5

RECAP_MIN_SENTENCES = 5
RECAP_KEYWORDS = 20
RECAP_CHARACTERS = 8


def _term_vector(sentence: str) -> Counter[str]:
    return Counter(content_words(tokenize(sentence)))


def _cosine(a: Counter[str], b: Counter[str], norm_a: float, norm_b: float) -> float:
    if not norm_a or not norm_b:
        return 0.0
    if len(a) > len(b):
        a, b = b, a
    dot = sum(weight * b[term] for term, weight in a.items() if term in b)
    return dot / (norm_a * norm_b)


def similarity_matrix(sentences: list[str]) -> list[list[float]]:
    """Symmetric cosine similarity of term-frequency vectors, zero on the diagonal."""
    vectors = [_term_vector(sentence) for sentence in sentences]
    norms = [math.sqrt(sum(weight * weight for weight in vector.values())) for vector in vectors]
    size = len(sentences)
    matrix = [[0.0] * size for _ in range(size)]
    for i in range(size):
        for j in range(i + 1, size):
            value = _cosine(vectors[i], vectors[j], norms[i], norms[j])
            matrix[i][j] = value
            matrix[j][i] = value
    return matrix


def pagerank(
    matrix: list[list[float]],
    iterations: int = DEFAULT_ITERATIONS,
    damping: float = DEFAULT_DAMPING,
    tolerance: float = DEFAULT_TOLERANCE,
) -> list[float]:
    """Weighted PageRank; row sums are computed once so each iteration is O(n²)."""
    size = len(matrix)
    if size == 0:
        return []
    out_sums = [sum(row) for row in matrix]
    scores = [1.0 / size] * size
    base = (1.0 - damping) / size

    for iteration in range(iterations):
        updated = []
        for i in range(size):
            incoming = 0.0
            for j in range(size):
                weight = matrix[j][i]
                if weight and out_sums[j]:
                    incoming += scores[j] * weight / out_sums[j]
            updated.append(base + damping * incoming)
        delta = sum(abs(new - old) for new, old in zip(updated, scores))
        scores = updated
        if delta < tolerance:
            logger.debug("pagerank converged after %d iterations", iteration + 1)
            break

    return scores


def textrank_summarize(
    text: str,
    top_n: int = DEFAULT_SUMMARY_SENTENCES,
    *,
    iterations: int = DEFAULT_ITERATIONS,
    damping: float = DEFAULT_DAMPING,
    tolerance: float = DEFAULT_TOLERANCE,
) -> str:
    """
    Summarise ``text`` with the ``top_n`` highest-ranked sentences.

    Short texts come back whole. Otherwise only sentences of more than five
    words take part. The summary keeps document order and joins sentences
    with a single space.
    """
    require_non_negative("top_n", top_n)
    require_positive("iterations", iterations)
    if not 0.0 < damping < 1.0:
        raise PreconditionError("damping", damping, "between 0 and 1")

    sentences = split_sentences(text)
    if len(sentences) <= top_n:
        return " ".join(sentences)

    nodes = [sentence for sentence in sentences if len(sentence.split()) > MIN_NODE_WORDS]
    if len(nodes) <= top_n:
        return " ".join(nodes)

    scores = pagerank(similarity_matrix(nodes), iterations=iterations, damping=damping, tolerance=tolerance)
    ranked = sorted(range(len(nodes)), key=lambda index: scores[index], reverse=True)[:top_n]
    return " ".join(nodes[index] for index in sorted(ranked))


def _recap_score(
    sentence: str,
    index: int,
    total: int,
    keywords: set[str],
    names: set[str],
) -> float:
    words = tokenize(sentence)
    score = 0.0

    position = index / total
    if position < 0.1:
        score += 0.3
    elif position > 0.9:
        score += 0.2

    score += min(0.5, sum(1 for word in words if word in keywords) * 0.08)
    score += min(0.3, sum(1 for word in words if word in names) * 0.15)

    if 10 <= len(words) <= 30:
        score += 0.15
    elif len(words) < 5 or len(words) > 50:
        score -= 0.1

    if ":" in sentence or "—" in sentence:
        score += 0.05
    return score


def generate_extractive_recap(text: str, max_sentences: int = DEFAULT_SUMMARY_SENTENCES) -> str:
    """Heuristic recap; short inputs come back as their sentences joined by spaces."""
    require_non_negative("max_sentences", max_sentences)
    sentences = split_sentences(text)
    if len(sentences) < RECAP_MIN_SENTENCES:
        return " ".join(sentences)

    keywords = {keyword.term for keyword in extract_keywords(text, RECAP_KEYWORDS)}
    names = {character.name.lower() for character in extract_characters(text, RECAP_CHARACTERS)}

    scores = [
        _recap_score(sentence, index, len(sentences), keywords, names)
        for index, sentence in enumerate(sentences)
    ]
    ranked = sorted(range(len(sentences)), key=lambda index: scores[index], reverse=True)[:max_sentences]
    return " ".join(sentences[index] for index in sorted(ranked))

"""Composite dramatic-tension heuristic for a sentence or panel."""

from __future__ import annotations

from narrative_signals.services.sentiment import SentimentLabel, SentimentResult, analyse_sentiment
from narrative_signals.services.text import clamp, split_words

EXCLAMATION_WEIGHT = 0.2
QUESTION_WEIGHT = 0.1
CAPS_WEIGHT = 0.5
ELLIPSIS_BONUS = 0.15
NEGATIVE_SENTIMENT_WEIGHT = 0.4


def _is_shouted(word: str) -> bool:
    return len(word) > 2 and word.isupper()


def _brevity_bonus(word_count: int) -> float:
    if word_count < 6:
        return 0.3
    if word_count < 12:
        return 0.15
    return 0.0


def score_tension(sentence: str, sentiment: SentimentResult | None = None) -> float:
    """
    Score the tension of ``sentence`` in [0, 1].

    Combines punctuation density, shouted (all-caps) words, brevity, ellipses
    and negative sentiment. Pass ``sentiment`` when it is already known to
    avoid re-scoring the sentence.
    """
    words = split_words(sentence)
    word_count = len(words)
    if word_count == 0:
        return 0.0

    punct = sentence.count("!") * EXCLAMATION_WEIGHT + sentence.count("?") * QUESTION_WEIGHT
    caps_ratio = sum(1 for word in words if _is_shouted(word)) / word_count
    ellipsis = ELLIPSIS_BONUS if "..." in sentence else 0.0

    if sentiment is None:
        sentiment = analyse_sentiment(sentence)
    negative = sentiment.magnitude * NEGATIVE_SENTIMENT_WEIGHT if sentiment.label == SentimentLabel.NEGATIVE else 0.0

    raw = punct + caps_ratio * CAPS_WEIGHT + _brevity_bonus(word_count) + ellipsis + negative
    return clamp(raw, 0.0, 1.0)

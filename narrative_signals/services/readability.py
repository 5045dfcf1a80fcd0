"""
Flesch readability metrics.

Syllables are estimated with a vowel-group heuristic, so results track the
published formulas only approximately.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from narrative_signals.core.exceptions import require_positive
from narrative_signals.services.text import clamp, split_sentences, tokenize

_NON_LETTERS = re.compile(r"[^a-z]")
_VOWELS = frozenset("aeiouy")

NOT_APPLICABLE = "N/A"
DEFAULT_WORDS_PER_MINUTE = 200

# (minimum grade, reading speed multiplier), hardest first
_GRADE_SLOWDOWN = ((13.0, 0.8), (12.0, 0.85), (11.0, 0.9), (10.0, 0.92), (9.0, 0.95))


@dataclass(frozen=True)
class ReadabilityResult:
    """Flesch reading ease and Flesch-Kincaid grade for a text."""

    flesch_grade: float  # 0 to 20
    reading_ease: float  # 0 to 100
    avg_words_per_sentence: float
    avg_syllables_per_word: float
    label: str


EMPTY_READABILITY = ReadabilityResult(
    flesch_grade=0.0,
    reading_ease=100.0,
    avg_words_per_sentence=0.0,
    avg_syllables_per_word=0.0,
    label=NOT_APPLICABLE,
)


def count_syllables(word: str) -> int:
    letters = _NON_LETTERS.sub("", word.lower())
    if len(letters) <= 2:
        return 1
    count = 0
    previous_vowel = False
    for char in letters:
        is_vowel = char in _VOWELS
        if is_vowel and not previous_vowel:
            count += 1
        previous_vowel = is_vowel
    if letters.endswith("e") and count > 1:
        count -= 1
    return max(1, count)


def readability_label(ease: float) -> str:
    if ease >= 90:
        return "Very Easy"
    if ease >= 70:
        return "Easy"
    if ease >= 50:
        return "Moderate"
    if ease >= 30:
        return "Difficult"
    return "Very Difficult"


def compute_readability(text: str) -> ReadabilityResult:
    sentences = split_sentences(text)
    words = tokenize(text)
    if not sentences or not words:
        return EMPTY_READABILITY

    syllables = sum(count_syllables(word) for word in words)
    words_per_sentence = len(words) / len(sentences)
    syllables_per_word = syllables / len(words)

    ease = clamp(206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word, 0.0, 100.0)
    grade = clamp(0.39 * words_per_sentence + 11.8 * syllables_per_word - 15.59, 0.0, 20.0)

    return ReadabilityResult(
        flesch_grade=round(grade, 1),
        reading_ease=round(ease, 1),
        avg_words_per_sentence=round(words_per_sentence, 1),
        avg_syllables_per_word=round(syllables_per_word, 2),
        label=readability_label(ease),
    )


@dataclass(frozen=True)
class ReadingTime:
    minutes: int
    seconds: int
    words_per_minute: float
    complexity_multiplier: float


def complexity_multiplier(grade: float) -> float:
    for minimum, multiplier in _GRADE_SLOWDOWN:
        if grade >= minimum:
            return multiplier
    return 1.0


def estimate_reading_time(text: str, wpm: int = DEFAULT_WORDS_PER_MINUTE) -> ReadingTime:
    """
    Estimate how long ``text`` takes to read at ``wpm`` words per minute.

    Texts above a ninth-grade Flesch-Kincaid level are read more slowly.
    Words are whitespace-separated runs, so punctuation-only tokens count.
    """
    require_positive("wpm", wpm)
    word_count = len(text.split())
    multiplier = complexity_multiplier(compute_readability(text).flesch_grade)
    adjusted = wpm * multiplier
    total_minutes = word_count / adjusted
    minutes = int(total_minutes)

    return ReadingTime(
        minutes=minutes,
        seconds=round((total_minutes - minutes) * 60),
        words_per_minute=round(adjusted, 1),
        complexity_multiplier=multiplier,
    )

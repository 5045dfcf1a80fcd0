"""
TextTiling-style scene boundary detection.

Lexical cohesion is measured at every gap between sentences by comparing the
content words of the window before the gap with the window after it. Deep
valleys in that cohesion curve mark topic or scene shifts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from narrative_signals.core.exceptions import require_positive
from narrative_signals.services.text import content_words, tokenize

DEFAULT_WINDOW_SIZE = 4
DEFAULT_THRESHOLD = 0.2


@dataclass(frozen=True)
class SceneBoundary:
    sentence_index: int  # first sentence of the new scene
    depth: float


def _jaccard(left: set[str], right: set[str]) -> float:
    union = left | right
    if not union:
        return 0.0
    return len(left & right) / len(union)


def _window_words(word_sets: list[set[str]], start: int, stop: int) -> set[str]:
    merged: set[str] = set()
    for words in word_sets[start:stop]:
        merged |= words
    return merged


def cohesion_curve(sentences: Sequence[str], window_size: int = DEFAULT_WINDOW_SIZE) -> list[float]:
    """Cohesion at each gap ``i`` in ``[window_size, len(sentences) - window_size]``."""
    require_positive("window_size", window_size)
    word_sets = [set(content_words(tokenize(sentence))) for sentence in sentences]
    return [
        _jaccard(
            _window_words(word_sets, gap - window_size, gap),
            _window_words(word_sets, gap, gap + window_size),
        )
        for gap in range(window_size, len(sentences) - window_size + 1)
    ]


def _is_valley(curve: list[float], k: int) -> bool:
    neighbours = []
    if k > 0:
        neighbours.append(curve[k - 1])
    if k < len(curve) - 1:
        neighbours.append(curve[k + 1])
    if not neighbours:
        return False
    return all(curve[k] <= value for value in neighbours) and any(curve[k] < value for value in neighbours)


def _valley_depth(curve: list[float], k: int) -> float:
    slopes = []
    if k > 0:
        left = k
        while left > 0 and curve[left - 1] >= curve[left]:
            left -= 1
        slopes.append(curve[left] - curve[k])
    if k < len(curve) - 1:
        right = k
        while right < len(curve) - 1 and curve[right + 1] >= curve[right]:
            right += 1
        slopes.append(curve[right] - curve[k])
    return sum(slopes) / len(slopes)


def detect_scene_boundaries(
    sentences: Sequence[str],
    window_size: int = DEFAULT_WINDOW_SIZE,
    threshold: float = DEFAULT_THRESHOLD,
) -> list[SceneBoundary]:
    """
    Find cohesion valleys deeper than ``threshold``.

    Args:
        sentences: Pre-split sentences in document order.
        window_size: Sentences compared on each side of a gap.
        threshold: Minimum valley depth for a boundary.

    Returns:
        Boundaries in document order, at least ``window_size`` sentences apart.
    """
    require_positive("window_size", window_size)
    if len(sentences) < 2 * window_size:
        return []

    curve = cohesion_curve(sentences, window_size)
    boundaries: list[SceneBoundary] = []
    for k in range(len(curve)):
        if not _is_valley(curve, k):
            continue
        depth = _valley_depth(curve, k)
        if depth <= threshold:
            continue
        sentence_index = k + window_size
        if boundaries and sentence_index - boundaries[-1].sentence_index < window_size:
            continue
        boundaries.append(SceneBoundary(sentence_index=sentence_index, depth=round(depth, 4)))
    return boundaries

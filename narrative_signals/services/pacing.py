"""Pacing classification and the sentiment/tension trajectory of a chapter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from narrative_signals.services.panels import PanelLike, coerce_panels
from narrative_signals.services.scene_boundaries import (
    DEFAULT_THRESHOLD,
    DEFAULT_WINDOW_SIZE,
    detect_scene_boundaries,
)
from narrative_signals.services.text import mean, split_sentences, split_words

SHORT_SENTENCE_WORDS = 8
LONG_SENTENCE_WORDS = 25
MAX_ARC_POINTS = 20
MIN_ARC_PANELS = 5


@dataclass(frozen=True)
class PacingResult:
    avg_sentence_length: float
    short_sentence_ratio: float
    long_sentence_ratio: float
    dialogue_ratio: float
    scene_count: int
    label: str


@dataclass(frozen=True)
class EmotionalArcPoint:
    position: float  # 0 to 100 through the chapter
    sentiment: float
    tension: float


EMPTY_PACING = PacingResult(
    avg_sentence_length=0.0,
    short_sentence_ratio=0.0,
    long_sentence_ratio=0.0,
    dialogue_ratio=0.0,
    scene_count=0,
    label="Moderate",
)


def pacing_label(score: float) -> str:
    if score > 0.45:
        return "Fast"
    if score > 0.25:
        return "Moderate"
    return "Slow"


def analyse_pacing(
    text: str,
    panels: Iterable[PanelLike] = (),
    *,
    window_size: int = DEFAULT_WINDOW_SIZE,
    threshold: float = DEFAULT_THRESHOLD,
) -> PacingResult:
    """Short sentences, dialogue and frequent scene changes all read as fast."""
    sentences = split_sentences(text)
    if not sentences:
        return EMPTY_PACING

    validated = coerce_panels(panels)
    lengths = [len(split_words(sentence)) for sentence in sentences]
    short = sum(1 for length in lengths if length < SHORT_SENTENCE_WORDS) / len(lengths)
    long = sum(1 for length in lengths if length > LONG_SENTENCE_WORDS) / len(lengths)
    dialogue = sum(1 for panel in validated if panel.is_dialogue) / len(validated) if validated else 0.0
    boundaries = detect_scene_boundaries(sentences, window_size, threshold)

    score = short * 0.4 + dialogue * 0.3 + min(1.0, len(boundaries) / 10) * 0.3
    return PacingResult(
        avg_sentence_length=round(mean([float(length) for length in lengths]), 1),
        short_sentence_ratio=round(short, 3),
        long_sentence_ratio=round(long, 3),
        dialogue_ratio=round(dialogue, 3),
        scene_count=len(boundaries) + 1,
        label=pacing_label(score),
    )


def compute_emotional_arc(panels: Iterable[PanelLike]) -> list[EmotionalArcPoint]:
    """
    Average sentiment and tension over evenly sized chunks of panels.

    Returns at most twenty points; the last chunk absorbs any remainder.
    Fewer than five panels give no arc.
    """
    validated = coerce_panels(panels)
    if len(validated) < MIN_ARC_PANELS:
        return []

    num_points = min(MAX_ARC_POINTS, len(validated))
    chunk_size = len(validated) // num_points
    points = []
    for i in range(num_points):
        start = i * chunk_size
        end = len(validated) if i == num_points - 1 else start + chunk_size
        chunk = validated[start:end]
        points.append(
            EmotionalArcPoint(
                position=round(i / (num_points - 1) * 100, 1),
                sentiment=round(mean([panel.resolved_sentiment() for panel in chunk]), 3),
                tension=round(mean([panel.resolved_tension() for panel in chunk]), 3),
            )
        )
    return points

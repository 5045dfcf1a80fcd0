"""
Five-act narrative arc detection from a panel tension curve.

The curve is smoothed with a centred moving average, the climax is the first
peak of the smoothed curve, and the five stage boundaries are placed relative
to where that climax falls in the chapter.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from narrative_signals.services.panels import PanelLike, coerce_panels
from narrative_signals.services.text import mean

logger = logging.getLogger(__name__)

MIN_PANELS = 5
MIN_SMOOTHING_RADIUS = 3
SMOOTHING_FRACTION = 0.08
FLAT_SPREAD = 0.08
PLATEAU_TENSION = 0.4


class NarrativeStage(str, Enum):
    EXPOSITION = "exposition"
    RISING_ACTION = "rising_action"
    CLIMAX = "climax"
    FALLING_ACTION = "falling_action"
    RESOLUTION = "resolution"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class ArcShape(str, Enum):
    MOUNTAIN = "mountain"
    PLATEAU = "plateau"
    RISING = "rising"
    FALLING = "falling"
    FLAT = "flat"


@dataclass(frozen=True)
class StageSegment:
    stage: NarrativeStage
    start_percent: float
    end_percent: float
    avg_tension: float
    label: str


@dataclass(frozen=True)
class NarrativeArcResult:
    stages: tuple[StageSegment, ...]
    climax_index: int
    climax_percent: float
    arc_shape: ArcShape


SHORT_ARC = NarrativeArcResult(
    stages=(
        StageSegment(
            stage=NarrativeStage.EXPOSITION,
            start_percent=0.0,
            end_percent=100.0,
            avg_tension=0.0,
            label=NarrativeStage.EXPOSITION.label,
        ),
    ),
    climax_index=0,
    climax_percent=50.0,
    arc_shape=ArcShape.FLAT,
)


def smooth_tension(tensions: list[float]) -> list[float]:
    """Centred moving average with radius ``max(3, round(8% of n))``."""
    radius = max(MIN_SMOOTHING_RADIUS, round(len(tensions) * SMOOTHING_FRACTION))
    return [
        mean(tensions[max(0, i - radius) : i + radius + 1])
        for i in range(len(tensions))
    ]


def _stage_boundaries(climax_percent: float) -> list[float]:
    raw = [
        0.0,
        min(15.0, climax_percent * 0.3),
        climax_percent - 5.0,
        climax_percent + 5.0,
        climax_percent + min(20.0, (100.0 - climax_percent) * 0.5),
        100.0,
    ]
    # each boundary is held in [previous, 100] so stages never overlap
    boundaries = [raw[0]]
    for value in raw[1:]:
        boundaries.append(min(100.0, max(boundaries[-1], value)))
    boundaries[-1] = 100.0
    return boundaries


def _classify_shape(smoothed: list[float], climax_percent: float) -> ArcShape:
    if max(smoothed) - min(smoothed) < FLAT_SPREAD:
        return ArcShape.FLAT
    if climax_percent > 75:
        return ArcShape.RISING
    if climax_percent < 25:
        return ArcShape.FALLING
    half = len(smoothed) // 2
    if mean(smoothed[:half]) > PLATEAU_TENSION and mean(smoothed[half:]) > PLATEAU_TENSION:
        return ArcShape.PLATEAU
    return ArcShape.MOUNTAIN


def detect_narrative_arc(panels: Iterable[PanelLike]) -> NarrativeArcResult:
    """
    Partition a chapter into exposition, rising action, climax, falling action
    and resolution.

    Args:
        panels: ``Panel`` objects, dicts or plain strings in reading order.
            Panels without a tension value are scored from their content.

    Returns:
        Five contiguous stages covering 0 to 100 percent, or a single
        exposition stage when fewer than five panels are given.
    """
    validated = coerce_panels(panels)
    if len(validated) < MIN_PANELS:
        logger.debug("narrative arc needs %d panels, got %d", MIN_PANELS, len(validated))
        return SHORT_ARC

    tensions = [panel.resolved_tension() for panel in validated]
    smoothed = smooth_tension(tensions)
    last = len(smoothed) - 1

    climax_index = smoothed.index(max(smoothed))
    climax_percent = climax_index / last * 100
    boundaries = _stage_boundaries(climax_percent)

    stages = []
    for stage, start, end in zip(NarrativeStage, boundaries, boundaries[1:]):
        first = math.floor(start / 100 * last)
        final = math.ceil(end / 100 * last)
        stages.append(
            StageSegment(
                stage=stage,
                start_percent=round(start, 1),
                end_percent=round(end, 1),
                avg_tension=round(mean(smoothed[first : final + 1]), 3),
                label=stage.label,
            )
        )

    return NarrativeArcResult(
        stages=tuple(stages),
        climax_index=climax_index,
        climax_percent=round(climax_percent, 1),
        arc_shape=_classify_shape(smoothed, climax_percent),
    )

"""
Full narrative analysis of a single text.

Every analysis runs inside a named stage so its duration lands in the
stage histogram and its log records carry the stage name.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass

from narrative_signals.core.analysis_context import log_context, new_analysis_id
from narrative_signals.core.metrics import track_analysis, track_stage
from narrative_signals.core.settings import EngineSettings, settings as default_settings
from narrative_signals.services.character_graph import CharacterGraph, build_character_graph
from narrative_signals.services.characters import NamedCharacter, extract_characters
from narrative_signals.services.dialogue import (
    DialogueLine,
    DialogueStats,
    analyse_dialogue_stats,
    extract_dialogue_lines,
)
from narrative_signals.services.keywords import Keyword, extract_keywords
from narrative_signals.services.narrative_arc import NarrativeArcResult, detect_narrative_arc
from narrative_signals.services.pacing import EmotionalArcPoint, PacingResult, analyse_pacing, compute_emotional_arc
from narrative_signals.services.panels import Panel
from narrative_signals.services.readability import (
    ReadabilityResult,
    ReadingTime,
    compute_readability,
    estimate_reading_time,
)
from narrative_signals.services.scene_boundaries import SceneBoundary, detect_scene_boundaries
from narrative_signals.services.script_detection import detect_script
from narrative_signals.services.sentiment import SentimentResult, analyse_sentiment
from narrative_signals.services.summarizer import generate_extractive_recap, textrank_summarize
from narrative_signals.services.symbolism import SymbolicDensityResult, compute_symbolic_density
from narrative_signals.services.tension import score_tension
from narrative_signals.services.text import mean, split_sentences
from narrative_signals.services.vocabulary import VocabularyResult, compute_vocabulary_richness

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FullAnalysis:
    analysis_id: str
    script: str
    sentence_count: int
    sentiment: SentimentResult
    tension: float  # mean sentence tension
    tension_curve: tuple[float, ...]
    readability: ReadabilityResult
    reading_time: ReadingTime
    vocabulary: VocabularyResult
    keywords: tuple[Keyword, ...]
    summary: str
    recap: str
    scene_boundaries: tuple[SceneBoundary, ...]
    characters: tuple[NamedCharacter, ...]
    narrative_arc: NarrativeArcResult
    character_graph: CharacterGraph
    symbolic_density: SymbolicDensityResult
    dialogue_lines: tuple[DialogueLine, ...]
    dialogue_stats: DialogueStats
    pacing: PacingResult
    emotional_arc: tuple[EmotionalArcPoint, ...]


@contextmanager
def _stage(name: str):
    with log_context(stage=name), track_stage(name):
        yield


def analyze_text(text: str, settings: EngineSettings | None = None) -> FullAnalysis:
    """
    Run every analysis over ``text``.

    Sentences double as panels for the arc, dialogue and pacing analyses.
    Limits and windows come from ``settings`` (the environment-backed
    defaults when omitted).
    """
    cfg = settings or default_settings
    analysis_id = new_analysis_id()
    text = text or ""
    start = time.perf_counter()

    with log_context(analysis_id=analysis_id), track_analysis():
        try:
            with _stage("tokenize"):
                sentences = split_sentences(text)
            with _stage("script"):
                script = detect_script(text)
            with _stage("sentiment"):
                sentiment = analyse_sentiment(text)
                sentence_sentiments = [analyse_sentiment(sentence) for sentence in sentences]
            with _stage("tension"):
                tension_curve = tuple(
                    score_tension(sentence, result) for sentence, result in zip(sentences, sentence_sentiments)
                )
            panels = [
                Panel(content=sentence, tension=tension, sentiment=result.score)
                for sentence, tension, result in zip(sentences, tension_curve, sentence_sentiments)
            ]
            with _stage("readability"):
                readability = compute_readability(text)
                reading_time = estimate_reading_time(text)
            with _stage("vocabulary"):
                vocabulary = compute_vocabulary_richness(text, cfg.mattr_window)
            with _stage("keywords"):
                keywords = tuple(extract_keywords(text, cfg.max_keywords))
            with _stage("summary"):
                summary = textrank_summarize(
                    text,
                    cfg.summary_sentences,
                    iterations=cfg.textrank_iterations,
                    damping=cfg.textrank_damping,
                )
                recap = generate_extractive_recap(text, cfg.summary_sentences)
            with _stage("scene_boundaries"):
                boundaries = tuple(detect_scene_boundaries(sentences, cfg.scene_window, cfg.scene_threshold))
            with _stage("characters"):
                characters = tuple(extract_characters(text, cfg.max_characters))
            with _stage("narrative_arc"):
                arc = detect_narrative_arc(panels)
            with _stage("character_graph"):
                graph = build_character_graph(text, characters)
            with _stage("symbolic_density"):
                symbolic = compute_symbolic_density(text)
            with _stage("dialogue"):
                dialogue = tuple(extract_dialogue_lines(panels, cfg.max_dialogue_lines))
                dialogue_stats = analyse_dialogue_stats(text)
            with _stage("pacing"):
                pacing = analyse_pacing(
                    text, panels, window_size=cfg.scene_window, threshold=cfg.scene_threshold
                )
                emotional_arc = tuple(compute_emotional_arc(panels))
        except Exception:
            logger.exception("analysis_failed", extra={"text_chars": len(text)})
            raise

        logger.info(
            "analysis_complete",
            extra={
                "text_chars": len(text),
                "sentences": len(sentences),
                "characters": len(characters),
                "scenes": len(boundaries) + 1,
                "duration_ms": (time.perf_counter() - start) * 1000,
            },
        )

    return FullAnalysis(
        analysis_id=analysis_id,
        script=script,
        sentence_count=len(sentences),
        sentiment=sentiment,
        tension=round(mean(list(tension_curve)), 4),
        tension_curve=tension_curve,
        readability=readability,
        reading_time=reading_time,
        vocabulary=vocabulary,
        keywords=keywords,
        summary=summary,
        recap=recap,
        scene_boundaries=boundaries,
        characters=characters,
        narrative_arc=arc,
        character_graph=graph,
        symbolic_density=symbolic,
        dialogue_lines=dialogue,
        dialogue_stats=dialogue_stats,
        pacing=pacing,
        emotional_arc=emotional_arc,
    )

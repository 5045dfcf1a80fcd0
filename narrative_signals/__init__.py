from narrative_signals.core.exceptions import (
    ConfigurationError,
    InvalidPanelError,
    NarrativeEngineError,
    PreconditionError,
)
from narrative_signals.core.logging import configure_logging
from narrative_signals.core.settings import EngineSettings, load_settings
from narrative_signals.pipeline import FullAnalysis, analyze_text
from narrative_signals.services.character_graph import (
    CharacterEdge,
    CharacterGraph,
    CharacterNode,
    build_character_graph,
)
from narrative_signals.services.characters import NamedCharacter, extract_characters
from narrative_signals.services.dialogue import (
    DialogueLine,
    DialogueStats,
    analyse_dialogue_stats,
    extract_dialogue_lines,
)
from narrative_signals.services.keywords import Keyword, extract_keywords
from narrative_signals.services.narrative_arc import (
    ArcShape,
    NarrativeArcResult,
    NarrativeStage,
    StageSegment,
    detect_narrative_arc,
)
from narrative_signals.services.pacing import EmotionalArcPoint, PacingResult, analyse_pacing, compute_emotional_arc
from narrative_signals.services.panels import Panel, coerce_panels
from narrative_signals.services.readability import (
    ReadabilityResult,
    ReadingTime,
    compute_readability,
    estimate_reading_time,
)
from narrative_signals.services.scene_boundaries import SceneBoundary, detect_scene_boundaries
from narrative_signals.services.script_detection import detect_script
from narrative_signals.services.sentiment import SentimentLabel, SentimentResult, analyse_sentiment
from narrative_signals.services.summarizer import generate_extractive_recap, textrank_summarize
from narrative_signals.services.symbolism import SymbolicDensityResult, compute_symbolic_density
from narrative_signals.services.tension import score_tension
from narrative_signals.services.text import split_sentences, tokenize
from narrative_signals.services.vocabulary import (
    VocabularyResult,
    WordFrequency,
    compute_vocabulary_richness,
    word_frequencies,
)

__all__ = [
    "ArcShape",
    "CharacterEdge",
    "CharacterGraph",
    "CharacterNode",
    "ConfigurationError",
    "DialogueLine",
    "DialogueStats",
    "EmotionalArcPoint",
    "EngineSettings",
    "FullAnalysis",
    "InvalidPanelError",
    "Keyword",
    "NamedCharacter",
    "NarrativeArcResult",
    "NarrativeEngineError",
    "NarrativeStage",
    "PacingResult",
    "Panel",
    "PreconditionError",
    "ReadabilityResult",
    "ReadingTime",
    "SceneBoundary",
    "SentimentLabel",
    "SentimentResult",
    "StageSegment",
    "SymbolicDensityResult",
    "VocabularyResult",
    "WordFrequency",
    "analyse_dialogue_stats",
    "analyse_pacing",
    "analyse_sentiment",
    "analyze_text",
    "build_character_graph",
    "coerce_panels",
    "compute_emotional_arc",
    "compute_readability",
    "compute_symbolic_density",
    "compute_vocabulary_richness",
    "configure_logging",
    "detect_narrative_arc",
    "detect_scene_boundaries",
    "detect_script",
    "estimate_reading_time",
    "extract_characters",
    "extract_dialogue_lines",
    "extract_keywords",
    "generate_extractive_recap",
    "load_settings",
    "score_tension",
    "split_sentences",
    "textrank_summarize",
    "tokenize",
    "word_frequencies",
]

"""Literary density: similes, metaphor indicators and recurring symbolic motifs."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass

from narrative_signals.services.text import tokenize

_FLAGS = re.IGNORECASE | re.ASCII

SIMILE_PATTERNS = (
    re.compile(r"\blike\s+an?\s+\w+", _FLAGS),
    re.compile(r"\bas\s+\w+\s+as\b", _FLAGS),
    re.compile(r"\bas\s+if\b", _FLAGS),
    re.compile(r"\bas\s+though\b", _FLAGS),
    re.compile(r"\bjust\s+as\b", _FLAGS),
)

METAPHOR_PATTERNS = (
    re.compile(r"\bwas\s+an?\s+[A-Z][a-z]+", _FLAGS),
    re.compile(r"\bbecame?\s+an?\s+\w+", _FLAGS),
    re.compile(r"\bis\s+an?\s+(sea|storm|fire|shadow|ghost|blade|wall|river|light|darkness)\b", _FLAGS),
    re.compile(r"\bthe\s+(storm|fire|shadow|silence|darkness|void)\s+(of|inside|within)\b", _FLAGS),
)

SYMBOLIC_WORDS = frozenset(
    [
        "shadow", "darkness", "light", "storm", "silence", "void", "fire", "blood",
        "chains", "crown", "sword", "mirror", "mask", "bridge", "door", "gate",
        "moon", "sun", "star", "dawn", "dusk", "echo", "ghost", "dust",
        "heart", "soul", "fate", "curse", "serpent", "lion", "wolf", "raven",
        "flame", "thorn", "rose",
    ]
)

MIN_MOTIF_COUNT = 2
MAX_MOTIFS = 5


@dataclass(frozen=True)
class SymbolicDensityResult:
    similes: int
    metaphors: int
    motif_score: float
    overall_score: float
    top_motifs: tuple[str, ...]
    label: str


def _count_matches(patterns: tuple[re.Pattern[str], ...], text: str) -> int:
    return sum(len(pattern.findall(text)) for pattern in patterns)


def symbolic_label(score: float) -> str:
    if score > 0.55:
        return "Highly Symbolic"
    if score > 0.3:
        return "Moderately Symbolic"
    if score > 0.1:
        return "Literal"
    return "Sparse"


def compute_symbolic_density(text: str) -> SymbolicDensityResult:
    """
    Score how figurative ``text`` is.

    Simile and metaphor counts are turned into rates per hundred words; the
    motif score rewards symbolic nouns that recur at least twice.
    """
    text = text or ""
    similes = _count_matches(SIMILE_PATTERNS, text)
    metaphors = _count_matches(METAPHOR_PATTERNS, text)

    tokens = tokenize(text)
    symbols = Counter(token for token in tokens if token in SYMBOLIC_WORDS)
    motifs = tuple(word for word, count in symbols.most_common() if count >= MIN_MOTIF_COUNT)[:MAX_MOTIFS]

    motif_score = min(1.0, len(motifs) * 0.15 + min(0.4, len(symbols) / 20))
    hundreds = max(1, len(tokens)) / 100
    overall = min(1.0, (similes / hundreds) * 0.3 + (metaphors / hundreds) * 0.4 + motif_score * 0.3)

    return SymbolicDensityResult(
        similes=similes,
        metaphors=metaphors,
        motif_score=round(motif_score, 3),
        overall_score=round(overall, 3),
        top_motifs=motifs,
        label=symbolic_label(overall),
    )

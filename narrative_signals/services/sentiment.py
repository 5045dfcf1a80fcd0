"""
Lexicon-based sentiment scoring with negation handling.

An AFINN-style hand-authored lexicon assigns integer weights in [-5, 5].
Negation words flip the sign of the next sentiment-bearing token.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from narrative_signals.services.text import clamp, tokenize


class SentimentLabel(str, Enum):
    """Polarity bucket of a sentiment score."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class SentimentResult:
    """Normalised sentiment of a text fragment."""

    score: float  # -1.0 to 1.0
    label: SentimentLabel
    magnitude: float  # 0.0 to 1.0
    token_count: int


NEUTRAL_SENTIMENT = SentimentResult(score=0.0, label=SentimentLabel.NEUTRAL, magnitude=0.0, token_count=0)

SENTIMENT_LEXICON: dict[str, int] = {
    # Positive
    "love": 3, "amazing": 4, "wonderful": 4, "beautiful": 3, "excellent": 4, "great": 3,
    "happy": 3, "joy": 3, "joyful": 3, "good": 2, "kind": 2, "bright": 2, "hope": 2,
    "hopeful": 3, "peace": 3, "peaceful": 3, "smile": 2, "laugh": 2, "warm": 2,
    "gentle": 2, "free": 2, "freedom": 3, "courage": 3, "brave": 3, "strong": 2,
    "triumph": 4, "victory": 4, "succeed": 3, "success": 3, "safe": 2, "saved": 3,
    "alive": 2, "light": 2, "glow": 2, "shine": 2, "brilliant": 4, "perfect": 3,
    "trust": 2, "true": 1, "loyal": 2, "care": 2, "cherish": 3, "proud": 2,
    "hero": 3, "protect": 2, "rescue": 3, "survive": 2, "grateful": 3,
    # Negative
    "hate": -3, "terrible": -4, "awful": -4, "horrible": -4, "bad": -2, "dark": -1,
    "evil": -4, "kill": -4, "killed": -4, "murder": -5, "death": -3, "dead": -3,
    "die": -3, "dying": -3, "blood": -2, "pain": -3, "suffer": -3, "suffering": -3,
    "cruel": -4, "monster": -4, "fear": -3, "afraid": -3, "terror": -4, "horror": -4,
    "scream": -2, "cry": -2, "sad": -2, "grief": -3, "loss": -2, "lost": -2,
    "alone": -2, "betrayal": -4, "betray": -4, "lie": -2, "liar": -3,
    "weak": -2, "fail": -2, "failure": -3, "broken": -3, "destroy": -4, "chaos": -3,
    "war": -3, "attack": -3, "violence": -3, "trapped": -3, "helpless": -3,
    "despair": -4, "rage": -3, "fury": -3, "anger": -2, "angry": -2,
    "enemy": -2, "danger": -3, "threat": -3, "corrupt": -3, "bleed": -3, "wound": -2,
    "curse": -3, "poison": -3, "shadow": -2, "cold": -1, "bitter": -2,
    "guilty": -3, "shame": -3, "regret": -3, "misery": -4, "disaster": -4,
}

NEGATIONS = frozenset(["not", "no", "never", "neither", "nor", "n't", "without", "hardly", "barely"])

# Neutral tokens a negation may skip before it lapses ("not very good").
_NEGATION_REACH = 1

POSITIVE_THRESHOLD = 0.05


def _is_negation(token: str) -> bool:
    return token in NEGATIONS or token.endswith("n't")


def _label_for(score: float) -> SentimentLabel:
    if score > POSITIVE_THRESHOLD:
        return SentimentLabel.POSITIVE
    if score < -POSITIVE_THRESHOLD:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


def analyse_sentiment(text: str) -> SentimentResult:
    """Score ``text`` against the lexicon.

    Args:
        text: Any prose fragment; empty text yields a neutral result.

    Returns:
        SentimentResult with score clamped to [-1, 1] and magnitude to [0, 1].
    """
    words = tokenize(text)
    if not words:
        return NEUTRAL_SENTIMENT

    raw = 0
    absolute = 0
    negated = False
    skipped = 0

    for word in words:
        if _is_negation(word):
            negated = True
            skipped = 0
            continue

        weight = SENTIMENT_LEXICON.get(word, 0)
        if weight:
            adjusted = -weight if negated else weight
            raw += adjusted
            absolute += abs(adjusted)
            negated = False
        elif negated:
            skipped += 1
            if skipped > _NEGATION_REACH:
                negated = False

    count = len(words)
    score = clamp(raw / (count * 0.5), -1.0, 1.0)
    magnitude = clamp(absolute / (count * 0.3), 0.0, 1.0)

    return SentimentResult(
        score=round(score, 4),
        label=_label_for(score),
        magnitude=round(magnitude, 4),
        token_count=count,
    )

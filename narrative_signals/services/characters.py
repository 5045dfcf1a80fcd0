"""
Named-character extraction without an NER model.

Two signals are combined per sentence: honorific-prefixed names
("Captain Rogers") and capitalised words that are not sentence-initial.
Names need at least two registrations to survive.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from narrative_signals.core.exceptions import require_non_negative
from narrative_signals.services.sentiment import analyse_sentiment
from narrative_signals.services.text import NAME_STOP_WORDS, split_sentences

logger = logging.getLogger(__name__)

HONORIFICS = frozenset(
    [
        "mr", "mrs", "miss", "ms", "dr", "prof", "lord", "lady",
        "sir", "master", "captain", "general", "king", "queen", "prince", "princess",
    ]
)

_HONORIFIC_PATTERN = re.compile(
    r"\b(Mr|Mrs|Miss|Ms|Dr|Prof|Lord|Lady|Sir|Master|Captain|General|King|Queen|Prince|Princess)"
    r"\.?\s+([A-Z][a-z]+(?:\s[A-Z][a-z]+)?)",
    re.ASCII,
)
_NAME_PATTERN = re.compile(r"\b([A-Z][a-z]+(?:['-][A-Z][a-z]+)?)\b", re.ASCII)

DEFAULT_MAX_CHARACTERS = 10
MIN_FREQUENCY = 2
MIN_NAME_LENGTH = 3
MAX_CONTEXTS = 2
CONTEXT_PREVIEW_CHARS = 120


@dataclass(frozen=True)
class NamedCharacter:
    name: str
    frequency: int
    avg_sentiment: float
    first_context: str
    honorific: str | None = None


@dataclass
class _Registration:
    count: int = 0
    sentiment_sum: float = 0.0
    contexts: list[str] = field(default_factory=list)
    honorific: str | None = None


class _CharacterRegistry:
    """Call-local accumulator keyed by name, in first-registration order."""

    def __init__(self) -> None:
        self._entries: dict[str, _Registration] = {}

    def register(self, name: str, sentence: str, sentiment: float, honorific: str | None = None) -> None:
        entry = self._entries.get(name)
        if entry is None:
            entry = _Registration(honorific=honorific)
            self._entries[name] = entry
        entry.count += 1
        entry.sentiment_sum += sentiment
        if len(entry.contexts) < MAX_CONTEXTS:
            entry.contexts.append(sentence)

    def ranked(self, limit: int) -> list[NamedCharacter]:
        survivors = [(name, entry) for name, entry in self._entries.items() if entry.count >= MIN_FREQUENCY]
        survivors.sort(key=lambda item: item[1].count, reverse=True)
        return [_to_character(name, entry) for name, entry in survivors[:limit]]


def _preview(context: str) -> str:
    if len(context) > CONTEXT_PREVIEW_CHARS:
        return context[:CONTEXT_PREVIEW_CHARS] + "…"
    return context


def _to_character(name: str, entry: _Registration) -> NamedCharacter:
    return NamedCharacter(
        name=name,
        frequency=entry.count,
        avg_sentiment=round(entry.sentiment_sum / entry.count, 3),
        first_context=_preview(entry.contexts[0]) if entry.contexts else "",
        honorific=entry.honorific,
    )


def _is_name_candidate(token: str) -> bool:
    lowered = token.lower()
    if lowered in NAME_STOP_WORDS or lowered in HONORIFICS:
        return False
    return len(token) >= MIN_NAME_LENGTH


def extract_characters(text: str, max_chars: int = DEFAULT_MAX_CHARACTERS) -> list[NamedCharacter]:
    """
    Extract recurring character names from ``text``.

    Args:
        text: Prose to scan.
        max_chars: Maximum number of characters to return.

    Returns:
        Characters mentioned at least twice, most frequent first.
    """
    require_non_negative("max_chars", max_chars)
    sentences = split_sentences(text)
    if not sentences:
        return []

    sentiments = [analyse_sentiment(sentence).score for sentence in sentences]
    registry = _CharacterRegistry()

    for sentence, sentiment in zip(sentences, sentiments):
        honorific_names: set[str] = set()
        for match in _HONORIFIC_PATTERN.finditer(sentence):
            name = match.group(2).strip()
            registry.register(name, sentence, sentiment, honorific=match.group(1).lower())
            honorific_names.add(name)

        opening_at = len(sentence) - len(sentence.lstrip())
        for match in _NAME_PATTERN.finditer(sentence):
            name = match.group(1)
            if not _is_name_candidate(name):
                continue
            # sentence-initial capitals are rarely proper nouns
            if match.start() == opening_at and name not in honorific_names:
                continue
            registry.register(name, sentence, sentiment)

    characters = registry.ranked(max_chars)
    logger.debug("extracted %d characters from %d sentences", len(characters), len(sentences))
    return characters

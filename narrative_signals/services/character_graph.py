"""Character co-occurrence graph built from sentence positions."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Sequence

from narrative_signals.services.characters import NamedCharacter
from narrative_signals.services.text import split_sentences

MAX_EDGES = 12


@dataclass(frozen=True)
class CharacterNode:
    id: str
    name: str
    weight: float  # frequency relative to the most frequent character
    sentiment: float


@dataclass(frozen=True)
class CharacterEdge:
    source: str
    target: str
    weight: float  # co-occurrence count relative to the strongest pair


@dataclass(frozen=True)
class CharacterGraph:
    nodes: tuple[CharacterNode, ...]
    edges: tuple[CharacterEdge, ...]


def _mention_indices(name: str, sentences: list[str]) -> set[int]:
    first_name = name.split(" ")[0]
    multi_word = " " in name
    return {
        index
        for index, sentence in enumerate(sentences)
        if name in sentence or (multi_word and first_name in sentence)
    }


def _co_occurrences(left: set[int], right: set[int]) -> int:
    return sum(1 for i in left if i in right or i - 1 in right or i + 1 in right)


def build_character_graph(text: str, characters: Sequence[NamedCharacter]) -> CharacterGraph:
    """
    Link characters mentioned in the same or adjacent sentences.

    Node weight is frequency over the highest frequency; edge weight is the
    pair's co-occurrence count over the highest count. Only the twelve
    heaviest edges are kept.
    """
    if len(characters) < 2:
        nodes = tuple(
            CharacterNode(id=c.name, name=c.name, weight=1.0, sentiment=c.avg_sentiment) for c in characters
        )
        return CharacterGraph(nodes=nodes, edges=())

    sentences = split_sentences(text)
    mentions = {c.name: _mention_indices(c.name, sentences) for c in characters}

    counts: dict[tuple[str, str], int] = {}
    for a, b in combinations(characters, 2):
        count = _co_occurrences(mentions[a.name], mentions[b.name])
        if count > 0:
            counts[tuple(sorted((a.name, b.name)))] = count

    max_frequency = max(c.frequency for c in characters)
    max_count = max(counts.values(), default=1)

    nodes = tuple(
        CharacterNode(
            id=c.name,
            name=c.name,
            weight=round(c.frequency / max_frequency, 3),
            sentiment=c.avg_sentiment,
        )
        for c in characters
    )
    edges = [
        CharacterEdge(source=source, target=target, weight=round(count / max_count, 3))
        for (source, target), count in counts.items()
    ]
    edges.sort(key=lambda edge: edge.weight, reverse=True)
    return CharacterGraph(nodes=nodes, edges=tuple(edges[:MAX_EDGES]))

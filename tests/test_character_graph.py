"""Tests for the character co-occurrence graph."""

from narrative_signals.services.character_graph import MAX_EDGES, CharacterEdge, build_character_graph
from narrative_signals.services.characters import NamedCharacter


def _character(name, frequency, sentiment=0.0):
    return NamedCharacter(name=name, frequency=frequency, avg_sentiment=sentiment, first_context="")


GRAPH_TEXT = (
    "Smith met Alice at dawn. "
    "The road was long and dusty. "
    "Jones waited far away in the north. "
    "Alice wrote to Smith again."
)


class TestBuildCharacterGraph:
    def test_single_character_has_no_edges(self):
        graph = build_character_graph(GRAPH_TEXT, [_character("Smith", 4, 0.2)])
        assert graph.edges == ()
        assert len(graph.nodes) == 1
        assert graph.nodes[0].weight == 1.0
        assert graph.nodes[0].sentiment == 0.2

    def test_no_characters(self):
        graph = build_character_graph(GRAPH_TEXT, [])
        assert graph.nodes == ()
        assert graph.edges == ()

    def test_adjacent_sentences_count_as_co_occurrence(self):
        characters = [_character("Smith", 4), _character("Alice", 2), _character("Jones", 2)]
        graph = build_character_graph(GRAPH_TEXT, characters)

        assert graph.edges == (
            CharacterEdge(source="Alice", target="Smith", weight=1.0),
            CharacterEdge(source="Jones", target="Smith", weight=0.5),
            CharacterEdge(source="Alice", target="Jones", weight=0.5),
        )

    def test_node_weight_is_relative_frequency(self):
        characters = [_character("Smith", 4), _character("Alice", 2), _character("Jones", 3)]
        graph = build_character_graph(GRAPH_TEXT, characters)
        weights = {node.name: node.weight for node in graph.nodes}
        assert weights == {"Smith": 1.0, "Alice": 0.5, "Jones": 0.75}

    def test_first_name_matches_multi_word_character(self):
        text = "John Carter drew his sword. Then John spoke with Dejah at length."
        characters = [_character("John Carter", 3), _character("Dejah", 2)]
        graph = build_character_graph(text, characters)
        assert len(graph.edges) == 1
        assert graph.edges[0].weight == 1.0

    def test_distant_characters_are_not_linked(self):
        text = (
            "Smith walked alone. The hills were quiet. The river ran on. "
            "Nothing changed for days. Alice sang by the fire."
        )
        graph = build_character_graph(text, [_character("Smith", 2), _character("Alice", 2)])
        assert graph.edges == ()

    def test_edges_are_capped(self):
        names = ["Anna", "Boris", "Clara", "Dmitri", "Elena", "Fyodor", "Galina"]
        text = "At the ball " + ", ".join(names) + " danced together."
        graph = build_character_graph(text, [_character(name, 2) for name in names])
        assert len(graph.edges) == MAX_EDGES

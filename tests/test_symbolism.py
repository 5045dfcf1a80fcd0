"""Tests for simile, metaphor and motif density."""

from narrative_signals.services.symbolism import compute_symbolic_density, symbolic_label

FIGURATIVE_TEXT = (
    "Her voice was like a blade. He stood as still as stone. "
    "It felt as if the shadow of fear had returned. "
    "The shadow moved and the fire burned, fire and shadow everywhere."
)


class TestComputeSymbolicDensity:
    def test_empty_text_is_sparse(self):
        result = compute_symbolic_density("")
        assert result.similes == 0
        assert result.metaphors == 0
        assert result.overall_score == 0.0
        assert result.top_motifs == ()
        assert result.label == "Sparse"

    def test_figurative_text(self):
        result = compute_symbolic_density(FIGURATIVE_TEXT)
        assert result.similes == 3
        assert result.metaphors == 1
        assert result.top_motifs == ("shadow", "fire")
        assert result.motif_score == 0.4
        assert result.overall_score == 1.0
        assert result.label == "Highly Symbolic"

    def test_literal_text(self):
        result = compute_symbolic_density("The man bought bread at the market and walked home.")
        assert result.label == "Sparse"
        assert result.motif_score == 0.0

    def test_metaphor_patterns_ignore_case(self):
        result = compute_symbolic_density("She was a Storm. In the end he became a legend.")
        assert result.metaphors == 2

    def test_single_symbol_is_not_a_motif(self):
        result = compute_symbolic_density("A crown lay in the dust beside the old road.")
        assert result.top_motifs == ()
        assert result.motif_score == 0.1


class TestSymbolicLabel:
    def test_buckets(self):
        assert symbolic_label(0.6) == "Highly Symbolic"
        assert symbolic_label(0.4) == "Moderately Symbolic"
        assert symbolic_label(0.2) == "Literal"
        assert symbolic_label(0.05) == "Sparse"

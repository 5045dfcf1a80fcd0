"""Tests for TTR and MATTR vocabulary richness."""

import pytest

from narrative_signals.core.exceptions import PreconditionError
from narrative_signals.services.vocabulary import (
    EMPTY_VOCABULARY,
    compute_vocabulary_richness,
    moving_average_ttr,
    vocabulary_label,
    word_frequencies,
)


class TestMovingAverageTtr:
    def test_all_windows_unique(self):
        assert moving_average_ttr(["a", "b", "a", "b"], window=2) == 1.0

    def test_repeated_window(self):
        assert moving_average_ttr(["a", "a", "a", "b"], window=2) == pytest.approx(2 / 3)

    def test_short_input_falls_back_to_ttr(self):
        assert moving_average_ttr(["a", "a", "b", "c"], window=50) == 0.75

    def test_empty(self):
        assert moving_average_ttr([], window=5) == 0.0

    def test_window_must_be_positive(self):
        with pytest.raises(PreconditionError):
            moving_average_ttr(["a"], window=0)


class TestComputeVocabularyRichness:
    def test_empty_text(self):
        result = compute_vocabulary_richness("")
        assert result == EMPTY_VOCABULARY
        assert result.ttr == 0
        assert result.label == "N/A"

    def test_counts_content_words_only(self):
        result = compute_vocabulary_richness("The dragon and the dragon guarded the dragon castle")
        assert result.total_words == 5
        assert result.unique_words == 3
        assert result.ttr == 0.6

    def test_repetitive_text_has_low_mattr(self):
        text = " ".join(["dragon castle"] * 60)
        result = compute_vocabulary_richness(text, window=10)
        assert result.mattr == 0.2
        assert result.label == "Very Low"


class TestVocabularyLabel:
    @pytest.mark.parametrize(
        ("mattr", "label"),
        [(0.9, "Very High"), (0.7, "High"), (0.5, "Moderate"), (0.4, "Low"), (0.1, "Very Low")],
    )
    def test_buckets(self, mattr, label):
        assert vocabulary_label(mattr) == label


class TestWordFrequencies:
    def test_counts_and_percentages(self):
        frequencies = word_frequencies("the dragon and the dragon flew the sky", top_n=3)
        assert [(entry.word, entry.count) for entry in frequencies] == [("the", 3), ("dragon", 2), ("and", 1)]
        assert frequencies[0].percentage == 37.5
        assert frequencies[1].percentage == 25.0

    def test_stopwords_are_flagged_not_dropped(self):
        frequencies = {entry.word: entry for entry in word_frequencies("the dragon and the dragon")}
        assert frequencies["the"].is_stop_word
        assert not frequencies["dragon"].is_stop_word

    def test_empty_and_zero_limit(self):
        assert word_frequencies("") == []
        assert word_frequencies("dragon castle", top_n=0) == []

    def test_negative_limit_is_rejected(self):
        with pytest.raises(PreconditionError):
            word_frequencies("dragon", top_n=-1)

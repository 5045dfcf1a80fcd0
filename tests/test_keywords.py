"""Tests for TF-IDF keyword extraction."""

import pytest

from narrative_signals.core.exceptions import PreconditionError
from narrative_signals.services.keywords import extract_keywords

DRAGON_TEXT = (
    "The dragon guarded the gold. The dragon slept on the gold. "
    "Knights feared the dragon and its gold hoard."
)


class TestExtractKeywords:
    def test_short_text_yields_nothing(self):
        assert extract_keywords("Too short to rank anything.") == []

    def test_top_keyword_scores_one(self):
        keywords = extract_keywords(DRAGON_TEXT)
        assert keywords[0].term == "dragon"
        assert keywords[0].score == 1.0
        assert keywords[0].count == 3

    def test_ties_keep_first_occurrence_order(self):
        terms = [keyword.term for keyword in extract_keywords(DRAGON_TEXT, max_keywords=2)]
        assert terms == ["dragon", "gold"]

    def test_rarer_terms_score_lower(self):
        keywords = {keyword.term: keyword for keyword in extract_keywords(DRAGON_TEXT)}
        assert keywords["guarded"].score == 0.468
        assert keywords["knights"].score < keywords["guarded"].score

    def test_stopwords_are_excluded(self):
        terms = {keyword.term for keyword in extract_keywords(DRAGON_TEXT)}
        assert "the" not in terms
        assert "and" not in terms

    def test_scores_are_sorted(self):
        scores = [keyword.score for keyword in extract_keywords(DRAGON_TEXT)]
        assert scores == sorted(scores, reverse=True)

    def test_zero_limit(self):
        assert extract_keywords(DRAGON_TEXT, max_keywords=0) == []

    def test_negative_limit_is_rejected(self):
        with pytest.raises(PreconditionError):
            extract_keywords(DRAGON_TEXT, max_keywords=-1)

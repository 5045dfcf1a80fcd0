"""
Tests for the full-text analysis pipeline.
"""

import logging

import pytest

from narrative_signals import pipeline
from narrative_signals.core.metrics import registry
from narrative_signals.core.settings import load_settings
from narrative_signals.services.narrative_arc import SHORT_ARC
from narrative_signals.pipeline import analyze_text


def _sample(name, labels):
    return registry.get_sample_value(name, labels) or 0.0


class TestAnalyzeText:
    def test_story_analysis(self, story_text):
        result = analyze_text(story_text)

        assert result.sentence_count == 10
        assert result.script == "latin"
        assert len(result.tension_curve) == 10
        assert 0.0 <= result.tension <= 1.0
        assert len(result.analysis_id) == 12
        assert len(result.narrative_arc.stages) == 5
        assert len(result.emotional_arc) == 10
        assert len(result.keywords) <= 12
        assert result.summary
        assert result.recap
        assert result.symbolic_density.similes >= 1
        assert result.reading_time.minutes == 0
        assert result.reading_time.seconds > 0
        assert result.dialogue_stats.total_lines == 0

    def test_characters_and_graph(self, story_text):
        result = analyze_text(story_text)
        names = [character.name for character in result.characters]
        assert names == ["Rogers", "Mira"]
        assert result.characters[0].honorific == "captain"
        assert len(result.character_graph.edges) == 1

    def test_empty_text(self):
        result = analyze_text("")
        assert result.sentence_count == 0
        assert result.readability.label == "N/A"
        assert result.narrative_arc == SHORT_ARC
        assert result.pacing.label == "Moderate"
        assert result.keywords == ()
        assert result.tension == 0.0

    def test_settings_limit_results(self, story_text, monkeypatch):
        monkeypatch.setenv("NARRATIVE_MAX_KEYWORDS", "2")
        monkeypatch.setenv("NARRATIVE_SUMMARY_SENTENCES", "1")
        result = analyze_text(story_text, load_settings())
        assert len(result.keywords) == 2
        assert result.summary.count(".") + result.summary.count("!") == 1

    def test_result_is_frozen(self, story_text):
        result = analyze_text(story_text)
        with pytest.raises(AttributeError):
            result.summary = "changed"


class TestPipelineObservability:
    def test_success_is_counted(self, story_text):
        before = _sample("narrative_analyses_total", {"status": "success"})
        analyze_text(story_text)
        assert _sample("narrative_analyses_total", {"status": "success"}) == before + 1

    def test_stages_are_timed(self, story_text):
        before = _sample("narrative_stage_duration_seconds_count", {"stage": "keywords"})
        analyze_text(story_text)
        assert _sample("narrative_stage_duration_seconds_count", {"stage": "keywords"}) == before + 1

    def test_failure_is_counted_and_raised(self, story_text, monkeypatch):
        def _boom(*args, **kwargs):
            raise RuntimeError("keyword stage exploded")

        monkeypatch.setattr(pipeline, "extract_keywords", _boom)
        before = _sample("narrative_analyses_total", {"status": "error"})
        with pytest.raises(RuntimeError):
            analyze_text(story_text)
        assert _sample("narrative_analyses_total", {"status": "error"}) == before + 1

    def test_completion_is_logged(self, story_text, caplog):
        caplog.set_level(logging.INFO, logger="narrative_signals.pipeline")
        analyze_text(story_text)
        records = [record for record in caplog.records if record.getMessage() == "analysis_complete"]
        assert len(records) == 1
        assert records[0].sentences == 10

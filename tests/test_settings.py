"""Tests for environment-backed engine settings."""

import pytest

from narrative_signals.core.exceptions import ConfigurationError
from narrative_signals.core.settings import EngineSettings, load_settings


class TestEngineSettings:
    def test_defaults(self):
        cfg = load_settings()
        assert cfg.max_keywords == 12
        assert cfg.max_characters == 10
        assert cfg.summary_sentences == 4
        assert cfg.max_dialogue_lines == 8
        assert cfg.scene_window == 4
        assert cfg.scene_threshold == 0.2
        assert cfg.mattr_window == 50
        assert cfg.textrank_damping == 0.85

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("NARRATIVE_MAX_KEYWORDS", "5")
        monkeypatch.setenv("NARRATIVE_SCENE_THRESHOLD", "0.35")
        cfg = load_settings()
        assert cfg.max_keywords == 5
        assert cfg.scene_threshold == 0.35

    def test_unprefixed_variables_are_ignored(self, monkeypatch):
        monkeypatch.setenv("MAX_KEYWORDS", "99")
        assert load_settings().max_keywords == 12

    def test_host_log_level_does_not_leak_in(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert load_settings().log_level == "INFO"

    def test_invalid_unprefixed_value_does_not_break_loading(self, monkeypatch):
        monkeypatch.setenv("SCENE_WINDOW", "0")
        assert load_settings().scene_window == 4

    def test_overrides_by_alias(self):
        cfg = load_settings(NARRATIVE_MATTR_WINDOW=25)
        assert cfg.mattr_window == 25

    @pytest.mark.parametrize(
        ("key", "value"),
        [
            ("NARRATIVE_SCENE_WINDOW", "0"),
            ("NARRATIVE_MAX_KEYWORDS", "-1"),
            ("NARRATIVE_TEXTRANK_DAMPING", "1.0"),
            ("NARRATIVE_MAX_CHARACTERS", "many"),
        ],
    )
    def test_invalid_values_raise_configuration_error(self, monkeypatch, key, value):
        monkeypatch.setenv(key, value)
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings()
        assert key in exc_info.value.detail or key.removeprefix("NARRATIVE_").lower() in exc_info.value.detail

    def test_is_base_settings(self):
        assert isinstance(load_settings(), EngineSettings)

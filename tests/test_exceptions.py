"""Tests for engine-level exception types."""

import pytest

from narrative_signals.core.exceptions import (
    ConfigurationError,
    InvalidPanelError,
    NarrativeEngineError,
    PreconditionError,
    require_non_negative,
    require_positive,
)


class TestNarrativeEngineError:
    def test_message_and_detail(self):
        err = NarrativeEngineError("something broke", detail="user-friendly msg")
        assert str(err) == "something broke"
        assert err.detail == "user-friendly msg"

    def test_detail_defaults_to_message(self):
        err = NarrativeEngineError("fallback message")
        assert err.detail == "fallback message"

    @pytest.mark.parametrize("exc_class", [PreconditionError, InvalidPanelError, ConfigurationError])
    def test_inherits_base(self, exc_class):
        assert issubclass(exc_class, NarrativeEngineError)


class TestPreconditionError:
    def test_includes_parameter_and_value(self):
        err = PreconditionError("max_chars", -1, "non-negative")
        assert "max_chars" in str(err)
        assert "-1" in str(err)
        assert err.parameter == "max_chars"
        assert err.value == -1
        assert err.detail == "invalid max_chars"

    def test_is_value_error(self):
        """Callers catching ValueError also see contract violations."""
        with pytest.raises(ValueError):
            raise PreconditionError("top_n", -3, "non-negative")


class TestInvalidPanelError:
    def test_carries_index(self):
        err = InvalidPanelError(3, "tension out of range")
        assert err.index == 3
        assert "panel 3" in str(err)
        assert err.detail == "invalid panel"


class TestRequireHelpers:
    def test_non_negative_accepts_zero(self):
        require_non_negative("max_lines", 0)

    def test_non_negative_rejects_negative(self):
        with pytest.raises(PreconditionError) as exc_info:
            require_non_negative("max_lines", -1)
        assert exc_info.value.parameter == "max_lines"

    def test_positive_rejects_zero(self):
        with pytest.raises(PreconditionError):
            require_positive("window_size", 0)

    def test_positive_accepts_one(self):
        require_positive("window_size", 1)

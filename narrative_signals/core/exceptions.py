"""
Engine-level exception types.

Degenerate input never raises; these types are reserved for contract
violations by the caller and for broken configuration.
"""

from __future__ import annotations


class NarrativeEngineError(Exception):
    """Base exception for all engine errors."""

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        self.detail = detail or message
        super().__init__(message)


class PreconditionError(NarrativeEngineError, ValueError):
    """Raised when an argument violates an operation's contract."""

    def __init__(self, parameter: str, value: object, requirement: str) -> None:
        super().__init__(
            f"{parameter} must be {requirement}, got {value!r}",
            detail=f"invalid {parameter}",
        )
        self.parameter = parameter
        self.value = value


class InvalidPanelError(NarrativeEngineError):
    """Raised when a panel payload cannot be validated."""

    def __init__(self, index: int, reason: str) -> None:
        super().__init__(f"panel {index} is invalid: {reason}", detail="invalid panel")
        self.index = index


class ConfigurationError(NarrativeEngineError):
    """Raised when engine configuration is missing or invalid."""


def require_non_negative(parameter: str, value: int) -> None:
    if value < 0:
        raise PreconditionError(parameter, value, "non-negative")


def require_positive(parameter: str, value: int) -> None:
    if value < 1:
        raise PreconditionError(parameter, value, "at least 1")

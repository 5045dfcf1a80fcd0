"""Panel input model shared by the panel-oriented analyses."""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from narrative_signals.core.exceptions import InvalidPanelError
from narrative_signals.services.sentiment import analyse_sentiment
from narrative_signals.services.tension import score_tension

DIALOGUE = "dialogue"
NARRATION = "narration"


class Panel(BaseModel):
    """One unit of a chapter: a narration block, a dialogue line, a sentence."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    content: str
    type: str = NARRATION
    speaker: str | None = None
    tension: float | None = Field(default=None, ge=0.0, le=1.0)
    sentiment: float | None = Field(default=None, ge=-1.0, le=1.0)

    @field_validator("type")
    @classmethod
    def normalise_type(cls, value: str) -> str:
        return value.strip().lower() or NARRATION

    @field_validator("speaker")
    @classmethod
    def blank_speaker_is_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    @property
    def is_dialogue(self) -> bool:
        return self.type == DIALOGUE

    def resolved_tension(self) -> float:
        return self.tension if self.tension is not None else score_tension(self.content)

    def resolved_sentiment(self) -> float:
        return self.sentiment if self.sentiment is not None else analyse_sentiment(self.content).score


PanelLike = Panel | dict[str, Any] | str


def coerce_panel(index: int, raw: PanelLike) -> Panel:
    if isinstance(raw, Panel):
        return raw
    if isinstance(raw, str):
        return Panel(content=raw)
    try:
        return Panel.model_validate(raw)
    except ValidationError as exc:
        raise InvalidPanelError(index, str(exc)) from exc


def coerce_panels(panels: Iterable[PanelLike]) -> list[Panel]:
    """Validate ``Panel`` objects, dicts or plain strings into panels."""
    return [coerce_panel(index, raw) for index, raw in enumerate(panels)]

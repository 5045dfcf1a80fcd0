from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from narrative_signals.core.exceptions import ConfigurationError


class EngineSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", validation_alias="NARRATIVE_LOG_LEVEL")
    log_json: bool = Field(default=True, validation_alias="NARRATIVE_LOG_JSON")

    max_keywords: int = Field(default=12, ge=0, validation_alias="NARRATIVE_MAX_KEYWORDS")
    max_characters: int = Field(default=10, ge=0, validation_alias="NARRATIVE_MAX_CHARACTERS")
    summary_sentences: int = Field(default=4, ge=0, validation_alias="NARRATIVE_SUMMARY_SENTENCES")
    max_dialogue_lines: int = Field(default=8, ge=0, validation_alias="NARRATIVE_MAX_DIALOGUE_LINES")

    scene_window: int = Field(default=4, ge=1, validation_alias="NARRATIVE_SCENE_WINDOW")
    scene_threshold: float = Field(default=0.2, ge=0.0, le=1.0, validation_alias="NARRATIVE_SCENE_THRESHOLD")
    mattr_window: int = Field(default=50, ge=1, validation_alias="NARRATIVE_MATTR_WINDOW")

    textrank_iterations: int = Field(default=30, ge=1, validation_alias="NARRATIVE_TEXTRANK_ITERATIONS")
    textrank_damping: float = Field(default=0.85, gt=0.0, lt=1.0, validation_alias="NARRATIVE_TEXTRANK_DAMPING")


def load_settings(**overrides) -> EngineSettings:
    """Build settings from the environment, surfacing bad values as ConfigurationError."""
    try:
        return EngineSettings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError("invalid engine configuration", detail=str(exc)) from exc


settings = load_settings()

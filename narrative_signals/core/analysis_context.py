import contextvars
from contextlib import contextmanager
import uuid

analysis_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar("analysis_id", default=None)
stage_var: contextvars.ContextVar[str | None] = contextvars.ContextVar("stage", default=None)


def new_analysis_id() -> str:
    """Short hex id, unique per analyze_text call."""
    return uuid.uuid4().hex[:12]


def get_analysis_id() -> str | None:
    return analysis_id_var.get()


def get_stage() -> str | None:
    """Name of the pipeline stage currently running, if any."""
    return stage_var.get()


@contextmanager
def log_context(analysis_id: str | None = None, stage: str | None = None):
    """Scope the analysis id and/or stage seen by AnalysisContextFilter.

    Nested scopes only override what they pass, so a stage block inside an
    analysis keeps the outer analysis id.
    """
    tokens: list[tuple[contextvars.ContextVar[str | None], contextvars.Token]] = []
    if analysis_id is not None:
        tokens.append((analysis_id_var, analysis_id_var.set(analysis_id)))
    if stage is not None:
        tokens.append((stage_var, stage_var.set(stage)))
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)

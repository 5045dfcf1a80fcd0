import json
import logging

from narrative_signals.core.analysis_context import get_analysis_id, get_stage


class AnalysisContextFilter(logging.Filter):
    """Populate structured log records with the active analysis ID and stage."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.analysis_id = get_analysis_id() or "none"
        record.stage = get_stage() or ""
        return True


class StructuredJsonFormatter(logging.Formatter):
    """Emit log records as JSON with consistent fields."""

    # attributes every LogRecord carries; anything else arrived through extra=
    _RECORD_FIELDS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}
    _CONTEXT_FIELDS = frozenset({"analysis_id", "stage"})

    def format(self, record: logging.LogRecord) -> str:
        log_payload: dict[str, object | None] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "analysis_id": getattr(record, "analysis_id", "none"),
        }
        stage = getattr(record, "stage", None)
        if stage:
            log_payload["stage"] = stage
        log_payload.update(self._extract_extra(record))
        if record.exc_info:
            log_payload["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            log_payload["stack_info"] = record.stack_info
        try:
            return json.dumps(log_payload, default=str)
        except (TypeError, ValueError):
            return super().format(record)

    def _extract_extra(self, record: logging.LogRecord) -> dict[str, object]:
        extras: dict[str, object] = {}
        for key, value in record.__dict__.items():
            if key in self._RECORD_FIELDS or key in self._CONTEXT_FIELDS or key.startswith("_"):
                continue
            if value is None:
                continue
            extras[key] = value
        return extras


def configure_logging(level: str | None = None, *, json_output: bool | None = None) -> None:
    """Install the structured handler on the root logger.

    Host applications call this once at startup; importing the engine never
    touches logging configuration.
    """
    from narrative_signals.core.settings import settings

    resolved = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    use_json = settings.log_json if json_output is None else json_output

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if use_json:
        formatter: logging.Formatter = StructuredJsonFormatter(datefmt="%Y-%m-%dT%H:%M:%S%z")
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s [%(analysis_id)s] %(message)s")

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    stream_handler.addFilter(AnalysisContextFilter())
    root_logger.addHandler(stream_handler)

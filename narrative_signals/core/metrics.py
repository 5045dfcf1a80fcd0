from __future__ import annotations

from contextlib import contextmanager

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest

registry = CollectorRegistry(auto_describe=True)

STAGE_DURATION = Histogram(
    "narrative_stage_duration_seconds",
    "Duration (seconds) of each analysis stage.",
    ["stage"],
    registry=registry,
)

ANALYSES_TOTAL = Counter(
    "narrative_analyses_total",
    "Full-text analyses partitioned by outcome.",
    ["status"],
    registry=registry,
)


@contextmanager
def track_stage(stage: str):
    with STAGE_DURATION.labels(stage=stage).time():
        yield


@contextmanager
def track_analysis():
    try:
        yield
        ANALYSES_TOTAL.labels(status="success").inc()
    except Exception:
        ANALYSES_TOTAL.labels(status="error").inc()
        raise


def get_metrics_payload() -> bytes:
    return generate_latest(registry)

from __future__ import annotations

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

pipeline_runs_total = Counter(
    "ocrs_pipeline_runs_total",
    "Pipeline runs by final outcome",
    labelnames=("outcome",),
)
pipeline_attempts_total = Counter(
    "ocrs_pipeline_attempts_total",
    "Extraction attempts by outcome",
    labelnames=("outcome",),
)
pipeline_duration_seconds = Histogram(
    "ocrs_pipeline_duration_seconds",
    "End-to-end pipeline duration in seconds",
    buckets=(0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 20.0, 60.0, 120.0),
)


def record_run(outcome: str, seconds: float | None = None) -> None:
    pipeline_runs_total.labels(outcome=outcome).inc()
    if seconds is not None:
        pipeline_duration_seconds.observe(seconds)


def record_attempt(outcome: str) -> None:
    pipeline_attempts_total.labels(outcome=outcome).inc()


# Router to expose /metrics
router = APIRouter()


@router.get("/metrics")
async def metrics_endpoint():
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
